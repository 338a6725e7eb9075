"""Domain models (Pydantic v2).

The `Outage` model describes a scheduled maintenance window exactly as the
store hands it out. The waiter never mutates it: every predicate takes the
reference time explicitly so the same snapshot can be evaluated against an
advancing clock.

Boundaries:
- start is inclusive (`start_time <= now` means the outage is ongoing).
- stop is exclusive (`now >= stop_time` means the outage has ended).
"""

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, Field, field_validator, model_validator
from pydantic.config import ConfigDict


def as_utc(value: datetime) -> datetime:
    """Attach UTC to naive timestamps, normalize aware ones to UTC."""

    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class Outage(BaseModel):
    """A scheduled maintenance window."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: int = Field(
        ...,
        gt=0,
        description="Store identifier of the outage.",
    )
    title: str = Field(
        ...,
        min_length=1,
        description="Short human readable title.",
    )
    description: str = Field(
        default="",
        description="Longer description shown to users during the warning period.",
    )
    warn_time: datetime | None = Field(
        default=None,
        description="When users start being warned. Defaults to `start_time`.",
    )
    start_time: datetime = Field(
        ...,
        description="When the outage begins.",
    )
    stop_time: datetime | None = Field(
        default=None,
        description="When the outage ends. `None` means no defined end.",
    )
    finished: datetime | None = Field(
        default=None,
        description="Set when the outage was finished manually before `stop_time`.",
    )

    @field_validator("warn_time", "start_time", "stop_time", "finished")
    @classmethod
    def _normalize_timezone(cls, value: datetime | None) -> datetime | None:
        if value is None:
            return None
        return as_utc(value)

    @model_validator(mode="after")
    def _check_boundaries(self) -> "Outage":
        if self.stop_time is not None and self.stop_time < self.start_time:
            raise ValueError("stop_time must not be before start_time")
        if self.warn_time is not None and self.warn_time > self.start_time:
            raise ValueError("warn_time must not be after start_time")
        return self

    @property
    def effective_warn_time(self) -> datetime:
        return self.warn_time if self.warn_time is not None else self.start_time

    def has_ended(self, now: datetime) -> bool:
        now = as_utc(now)
        if self.finished is not None and self.finished <= now:
            return True
        return self.stop_time is not None and now >= self.stop_time

    def is_ongoing(self, now: datetime) -> bool:
        return self.start_time <= as_utc(now) and not self.has_ended(now)

    def is_active(self, now: datetime) -> bool:
        """True while the outage is being announced or is in progress."""

        return self.effective_warn_time <= as_utc(now) and not self.has_ended(now)

    def countdown(self, now: datetime) -> float:
        """Seconds from `now` until the outage starts (negative once started)."""

        return (self.start_time - as_utc(now)).total_seconds()

    def same_as(self, other: Outage | None) -> bool:
        """Field-by-field comparison used to detect edits while waiting."""

        if other is None:
            return False
        return self.model_dump() == other.model_dump()


class OutagesFile(BaseModel):
    """On-disk layout of the JSON outage store."""

    outages: list[Outage] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_unique_ids(self) -> "OutagesFile":
        seen: set[int] = set()
        for outage in self.outages:
            if outage.id in seen:
                raise ValueError(f"duplicate outage id: {outage.id}")
            seen.add(outage.id)
        return self
