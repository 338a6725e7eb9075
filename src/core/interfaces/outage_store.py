"""Outage store contract.

Read-only from the waiter's point of view. Implementations must return a
fresh view on every call so that edits made while waiting can be detected.
"""

from __future__ import annotations

from datetime import datetime
from typing import Protocol, runtime_checkable

from core.domain.models import Outage


@runtime_checkable
class OutageStore(Protocol):
    """Lookup interface over the outage records."""

    def find_active(self, now: datetime) -> Outage | None:
        """Return the outage in effect at `now` (warning or ongoing), if any."""

        ...

    def find_by_id(self, outage_id: int) -> Outage | None:
        """Return the outage with `outage_id`, or `None` when it does not exist."""

        ...
