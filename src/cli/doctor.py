"""Doctor command for configuration and store diagnostics."""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from adapters.clock import SystemClock
from adapters.json_store import JsonOutageStore
from cli.ui_components import build_outages_table
from core.config import AppSettings, get_user_env_file
from core.domain.errors import StoreError
from core.domain.models import Outage

app = typer.Typer(no_args_is_help=True, help="Configuration and outage store checks.")

_console = Console()


def _check_store(path: Path) -> tuple[bool, str, list[Outage]]:
    try:
        outages = JsonOutageStore(path).all()
    except StoreError as exc:
        return False, exc.message, []
    return True, f"{len(outages)} outage(s)", outages


@app.command()
def run(
    store: Path | None = typer.Option(
        None,
        "--store",
        help="Outage store JSON file to check instead of the configured one.",
        show_default=False,
    ),
) -> None:
    """Show the resolved configuration and whether the outage store loads."""

    settings = AppSettings()
    store_path = store or settings.store_path
    now = SystemClock().now()

    table = Table(title="outage-wait doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    # Config
    user_env = get_user_env_file()
    table.add_row("User config", "OK" if user_env.exists() else "OPTIONAL", str(user_env))
    table.add_row("Sleep ceiling", "OK", f"{settings.sleep_seconds:g} s")
    table.add_row("Language", "OK", settings.default_language.label())
    table.add_row("Log level", "OK", settings.log_level)

    # Store
    ok_store, detail_store, outages = _check_store(store_path)
    table.add_row("Store path", "OK" if store_path.exists() else "FAIL", str(store_path))
    table.add_row("Outage store", "OK" if ok_store else "FAIL", detail_store)

    if ok_store:
        active = JsonOutageStore(store_path).find_active(now)
        table.add_row(
            "Active outage",
            "YES" if active else "NONE",
            f"#{active.id}: {active.title}" if active else "-",
        )

    _console.print(table)

    if outages:
        _console.print(build_outages_table(outages, now))

    if not ok_store:
        raise typer.Exit(code=1)
