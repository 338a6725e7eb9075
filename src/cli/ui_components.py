"""Rich components for the CLI.

Kept apart from the commands so tables can be reused (doctor, future
listing commands) without mixing layout into command logic.
"""

from __future__ import annotations

from datetime import datetime

from rich.table import Table

from core.domain.countdown import format_countdown
from core.domain.models import Outage


def outage_status(outage: Outage, now: datetime) -> str:
    if outage.has_ended(now):
        return "ended"
    if outage.is_ongoing(now):
        return "ongoing"
    if outage.is_active(now):
        return f"warning (starts in {format_countdown(outage.countdown(now))})"
    return f"scheduled (starts in {format_countdown(outage.countdown(now))})"


def build_outages_table(outages: list[Outage], now: datetime) -> Table:
    """Table of outages with their status relative to `now`."""

    table = Table(title="Outages")
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Title", style="white")
    table.add_column("Start", style="green")
    table.add_column("Stop", style="magenta")
    table.add_column("Status", style="yellow")
    for outage in sorted(outages, key=lambda o: (o.start_time, o.id)):
        table.add_row(
            str(outage.id),
            outage.title,
            outage.start_time.isoformat(),
            outage.stop_time.isoformat() if outage.stop_time else "-",
            outage_status(outage, now),
        )
    return table
