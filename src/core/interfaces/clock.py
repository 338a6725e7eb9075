"""Clock contract.

`sleep` returns the new reference time so a test clock can advance time
deterministically instead of blocking.
"""

from __future__ import annotations

from datetime import datetime
from typing import Protocol, runtime_checkable


@runtime_checkable
class Clock(Protocol):
    def now(self) -> datetime:
        ...

    def sleep(self, seconds: float) -> datetime:
        """Suspend for `seconds` and return the reference time afterwards."""

        ...
