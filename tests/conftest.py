from __future__ import annotations

import json
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Any, Callable

import pytest

from core.domain.models import Outage

NOW = datetime(2026, 10, 17, 12, 0, 0, tzinfo=timezone.utc)


class MemoryStore:
    """In-memory store; `on_lookup` lets a test edit records between lookups."""

    def __init__(self, outages: list[Outage] | None = None) -> None:
        self.outages: dict[int, Outage] = {o.id: o for o in outages or []}
        self.lookups: list[tuple[str, Any]] = []
        self.on_lookup: Callable[[int], None] | None = None

    def find_active(self, now: datetime) -> Outage | None:
        self.lookups.append(("active", now))
        active = [o for o in self.outages.values() if o.is_active(now)]
        return min(active, key=lambda o: (o.start_time, o.id)) if active else None

    def find_by_id(self, outage_id: int) -> Outage | None:
        self.lookups.append(("id", outage_id))
        if self.on_lookup:
            self.on_lookup(len(self.lookups))
        return self.outages.get(outage_id)


class SteppingClock:
    """Clock whose `sleep` advances time instantly and records the request."""

    def __init__(self, start: datetime = NOW) -> None:
        self.current = start
        self.sleeps: list[float] = []

    def now(self) -> datetime:
        return self.current

    def sleep(self, seconds: float) -> datetime:
        self.sleeps.append(seconds)
        self.current = self.current + timedelta(seconds=seconds)
        return self.current


@pytest.fixture
def make_outage() -> Callable[..., Outage]:
    def _make(
        outage_id: int = 1,
        *,
        starts_in: float = 1000,
        lasts: float | None = 3600,
        warns_before: float | None = None,
        title: str = "Database upgrade",
        **extra: Any,
    ) -> Outage:
        start = NOW + timedelta(seconds=starts_in)
        return Outage(
            id=outage_id,
            title=title,
            start_time=start,
            stop_time=start + timedelta(seconds=lasts) if lasts is not None else None,
            warn_time=start - timedelta(seconds=warns_before) if warns_before is not None else None,
            **extra,
        )

    return _make


@pytest.fixture
def clock() -> SteppingClock:
    return SteppingClock()


@pytest.fixture
def write_store(tmp_path: Path) -> Callable[[list[Outage]], Path]:
    def _write(outages: list[Outage]) -> Path:
        path = tmp_path / "outages.json"
        payload = {"outages": [o.model_dump(mode="json") for o in outages]}
        path.write_text(json.dumps(payload, indent=2) + "\n", encoding="utf-8")
        return path

    return _write
