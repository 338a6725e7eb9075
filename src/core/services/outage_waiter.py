"""Blocking wait until an outage starts.

The waiter resolves a target outage, then loops: re-fetch and compare with
the first snapshot, fail if the outage already ended, return if it is
ongoing, otherwise announce the countdown and sleep (bounded by the sleep
ceiling). Printing is delegated to `WaiterHooks` so the loop stays free of
console details; failures are raised as `OutageWaitError` subclasses.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable

from core.domain.countdown import format_countdown
from core.domain.errors import AlreadyEndedError, ConsistencyError, NotFoundError, UsageError
from core.domain.language import Language
from core.domain.models import Outage
from core.domain.target import WaitById, WaitForActive, WaitTarget
from core.interfaces.clock import Clock
from core.interfaces.outage_store import OutageStore
from core.messages import get_message

logger = logging.getLogger(__name__)

DEFAULT_SLEEP_SECONDS = 300.0


@dataclass
class WaitRequest:
    """Parameters of a single wait invocation."""

    target: WaitTarget
    sleep_ceiling: float = DEFAULT_SLEEP_SECONDS
    verbose: bool = False


@dataclass
class WaiterHooks:
    """Output callbacks for the UI layer.

    `info` receives the lines that are always shown (countdown, start).
    `verbose` receives diagnostics, only when the request asks for them.
    """

    info: Callable[[str], None] | None = None
    verbose: Callable[[str], None] | None = None


@dataclass
class WaitResult:
    outage: Outage
    started_at: datetime
    sleeps: list[float] = field(default_factory=list)


class OutageWaiter:
    """Polls an `OutageStore` until the target outage begins."""

    def __init__(
        self,
        store: OutageStore,
        clock: Clock,
        hooks: WaiterHooks | None = None,
        language: Language = Language.ENGLISH,
    ) -> None:
        self._store = store
        self._clock = clock
        self._hooks = hooks or WaiterHooks()
        self._language = language
        self._verbose_enabled = False

    def run(self, request: WaitRequest) -> WaitResult:
        if not math.isfinite(request.sleep_ceiling) or request.sleep_ceiling <= 0:
            raise UsageError(get_message("error_invalid_sleep", self._language), param="sleep")

        self._verbose_enabled = request.verbose
        self._verbose("Verbose mode activated.")

        now = self._clock.now()
        outage = self._resolve(request.target, now)
        sleeps: list[float] = []

        while True:
            sleep_for = self._check(outage, now, request.sleep_ceiling)
            if sleep_for is None:
                return WaitResult(outage=outage, started_at=now, sleeps=sleeps)
            self._verbose(f"Sleeping for {_format_seconds(sleep_for)} second(s).")
            logger.debug("outage #%s: sleeping %.3fs", outage.id, sleep_for)
            now = self._clock.sleep(sleep_for)
            sleeps.append(sleep_for)

    def _resolve(self, target: WaitTarget, now: datetime) -> Outage:
        if isinstance(target, WaitForActive):
            self._verbose("Querying store for active outage...")
            outage = self._store.find_active(now)
        elif isinstance(target, WaitById):
            self._verbose(f"Querying store for outage #{target.outage_id}...")
            outage = self._store.find_by_id(target.outage_id)
        else:
            raise TypeError(f"unsupported wait target: {target!r}")

        if outage is None:
            logger.debug("no outage for target %r", target)
            raise NotFoundError(get_message("error_not_found", self._language))

        self._verbose(f"Found outage #{outage.id}: {outage.title}")
        logger.debug("resolved target %r to outage #%s", target, outage.id)
        return outage

    def _check(self, outage: Outage, now: datetime, ceiling: float) -> float | None:
        """One loop iteration. Returns seconds to sleep, or `None` once started."""

        self._verbose("Checking outage status...")
        current = self._store.find_by_id(outage.id)
        if not outage.same_as(current):
            logger.debug("outage #%s changed: %r -> %r", outage.id, outage, current)
            raise ConsistencyError(
                get_message("error_changed", self._language, id=outage.id),
                outage_id=outage.id,
            )

        if outage.has_ended(now):
            raise AlreadyEndedError(
                get_message("error_ended", self._language, id=outage.id),
                outage_id=outage.id,
            )

        if outage.is_ongoing(now):
            self._info(get_message("outage_started", self._language))
            logger.debug("outage #%s started at %s", outage.id, now.isoformat())
            return None

        countdown = outage.countdown(now)
        self._info(
            get_message(
                "outage_starting_in",
                self._language,
                countdown=format_countdown(countdown, self._language),
            )
        )
        return min(countdown, ceiling)

    def _info(self, message: str) -> None:
        if self._hooks.info:
            self._hooks.info(message)

    def _verbose(self, message: str) -> None:
        if self._verbose_enabled and self._hooks.verbose:
            self._hooks.verbose(message)


def _format_seconds(seconds: float) -> str:
    return str(int(seconds)) if float(seconds).is_integer() else f"{seconds:.3f}"
