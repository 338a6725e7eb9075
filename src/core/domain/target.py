"""What the waiter waits for, and the other raw option values it needs.

The CLI flags `--outageid` and `--active` are mutually exclusive; they are
turned into one of two target variants here, once, so the waiter never sees
the raw flag pair. Sleep and language values arrive as strings and are
validated here as well.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Union

from core.domain.errors import UsageError
from core.domain.language import Language
from core.messages import get_message


@dataclass(frozen=True)
class WaitById:
    outage_id: int


@dataclass(frozen=True)
class WaitForActive:
    pass


WaitTarget = Union[WaitById, WaitForActive]


def parse_outage_id(raw: str | int, language: Language = Language.ENGLISH) -> int:
    """Validate a raw `--outageid` value as a positive integer."""

    error = UsageError(get_message("error_invalid_value", language, param="outageid"), param="outageid")
    if isinstance(raw, bool):
        raise error
    try:
        value = int(str(raw).strip())
    except ValueError:
        raise error from None
    if value <= 0:
        raise error
    return value


def resolve_target(
    outage_id: str | int | None,
    active: bool,
    language: Language = Language.ENGLISH,
) -> WaitTarget:
    """Build the wait target from the CLI option pair.

    Raises:
        UsageError: both or neither option given, or an invalid id.
    """

    by_id = outage_id is not None
    if by_id == bool(active):
        raise UsageError(get_message("error_id_or_active", language))
    if active:
        return WaitForActive()
    return WaitById(outage_id=parse_outage_id(outage_id, language))


def parse_sleep_seconds(raw: str | float, language: Language = Language.ENGLISH) -> float:
    """Validate a raw `--sleep` value as a finite, positive number of seconds.

    Accepts `=300` as well: click hands `-s=300` over with the `=` attached.
    """

    error = UsageError(get_message("error_invalid_sleep", language), param="sleep")
    text = str(raw).strip()
    if text.startswith("="):
        text = text[1:].strip()
    try:
        value = float(text)
    except ValueError:
        raise error from None
    if not math.isfinite(value) or value <= 0:
        raise error
    return value


def parse_language(raw: str | None, fallback: Language) -> Language:
    """Resolve `--language`, keeping `fallback` when the option is absent."""

    if raw is None:
        return fallback
    try:
        return Language.from_code(raw.lstrip("="))
    except ValueError:
        raise UsageError(
            get_message("error_invalid_value", fallback, param="language"), param="language"
        ) from None
