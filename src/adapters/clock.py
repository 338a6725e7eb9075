"""Wall clock used outside of tests."""

from __future__ import annotations

import time
from datetime import datetime, timezone

from core.interfaces.clock import Clock


class SystemClock(Clock):
    """Real time: `sleep` blocks the calling thread."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)

    def sleep(self, seconds: float) -> datetime:
        time.sleep(seconds)
        return self.now()
