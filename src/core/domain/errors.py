"""Error kinds raised by the waiter.

Every error is terminal: the core raises, the CLI prints the message and
exits with `exit_code`. Nothing here is retried.
"""

from __future__ import annotations


class OutageWaitError(Exception):
    """Base class for fatal waiter failures."""

    exit_code = 1

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class UsageError(OutageWaitError):
    """Missing, conflicting or malformed options."""

    exit_code = 2

    def __init__(self, message: str, param: str | None = None) -> None:
        super().__init__(message)
        self.param = param


class NotFoundError(OutageWaitError):
    """No outage matched the requested target."""


class ConsistencyError(OutageWaitError):
    """The outage record changed (or vanished) while waiting for it."""

    def __init__(self, message: str, outage_id: int | None = None) -> None:
        super().__init__(message)
        self.outage_id = outage_id


class AlreadyEndedError(OutageWaitError):
    """The outage end boundary has already passed."""

    def __init__(self, message: str, outage_id: int | None = None) -> None:
        super().__init__(message)
        self.outage_id = outage_id


class StoreError(OutageWaitError):
    """The backing store could not be read or parsed."""

    def __init__(self, message: str, target: str | None = None) -> None:
        super().__init__(message)
        self.target = target
