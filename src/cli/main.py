"""outage-wait command line (Typer + Rich).

Only this layer prints or picks exit codes; the core raises
`OutageWaitError` subclasses and reports progress through `WaiterHooks`.
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from adapters.clock import SystemClock
from adapters.json_store import JsonOutageStore
from cli import doctor
from core.config import AppSettings
from core.domain.errors import OutageWaitError
from core.domain.target import parse_language, parse_sleep_seconds, resolve_target
from core.log import setup_logging
from core.services.outage_waiter import OutageWaiter, WaiterHooks, WaitRequest

app = typer.Typer(
    no_args_is_help=True,
    help="Block until a scheduled outage starts.",
    context_settings={"help_option_names": ["-h", "--help"]},
)
app.add_typer(doctor.app, name="doctor")

_console = Console()
_err_console = Console(stderr=True)


def _print_info(message: str) -> None:
    _console.print(message, markup=False, highlight=False, soft_wrap=True)


def _print_verbose(message: str) -> None:
    stamp = datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S %Z")
    _console.print(f"[{stamp}] {message}", markup=False, highlight=False, soft_wrap=True)


def _fail(message: str, code: int) -> typer.Exit:
    _err_console.print(f"[bold red]Error:[/bold red] {escape(message)}", soft_wrap=True)
    return typer.Exit(code=code)


@app.command()
def wait(
    outage_id: str | None = typer.Option(
        None,
        "--outageid",
        "-id",
        help="Wait for the outage with this id.",
        show_default=False,
    ),
    active: bool = typer.Option(
        False,
        "--active",
        "-a",
        help="Wait for the currently active outage.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Print timestamped diagnostics.",
    ),
    sleep: str | None = typer.Option(
        None,
        "--sleep",
        "-s",
        help="Maximum seconds to sleep between checks [default: 300 or OUTAGE_WAIT_SLEEP_SECONDS].",
        show_default=False,
    ),
    store: Path | None = typer.Option(
        None,
        "--store",
        help="Outage store JSON file [default: OUTAGE_WAIT_STORE_PATH or ./outages.json].",
        show_default=False,
    ),
    language: str | None = typer.Option(
        None,
        "--language",
        "-l",
        help="Message language (en/es).",
        show_default=False,
    ),
) -> None:
    """Wait until an outage starts, polling the outage store."""

    settings = AppSettings()
    setup_logging(settings.log_level)

    try:
        lang = parse_language(language, settings.default_language)
        target = resolve_target(outage_id, active, lang)
        request = WaitRequest(
            target=target,
            sleep_ceiling=settings.sleep_seconds if sleep is None else parse_sleep_seconds(sleep, lang),
            verbose=verbose,
        )
        waiter = OutageWaiter(
            store=JsonOutageStore(store or settings.store_path, lang),
            clock=SystemClock(),
            hooks=WaiterHooks(info=_print_info, verbose=_print_verbose),
            language=lang,
        )
        waiter.run(request)
    except OutageWaitError as exc:
        raise _fail(exc.message, exc.exit_code) from exc
    except KeyboardInterrupt:
        raise _fail("Interrupted.", 130) from None


def run() -> None:
    app()


if __name__ == "__main__":
    run()
