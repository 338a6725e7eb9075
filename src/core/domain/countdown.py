"""Human readable countdowns.

Only the two most significant non-zero units are shown, e.g. `1 day 2 hours`
or `16 mins 40 secs`. Minutes and seconds beyond the second unit are dropped.
"""

from __future__ import annotations

import math

from core.domain.language import Language
from core.messages import get_message

_UNITS: tuple[tuple[str, str, int], ...] = (
    ("year", "years", 365 * 24 * 60 * 60),
    ("day", "days", 24 * 60 * 60),
    ("hour", "hours", 60 * 60),
    ("min", "mins", 60),
    ("sec", "secs", 1),
)


def split_seconds(seconds: float) -> list[tuple[int, str, str]]:
    """Break `seconds` into `(amount, singular_key, plural_key)` parts, largest first."""

    remaining = max(0, math.ceil(seconds))
    parts: list[tuple[int, str, str]] = []
    for singular, plural, size in _UNITS:
        amount, remaining = divmod(remaining, size)
        parts.append((amount, singular, plural))
    return parts


def format_countdown(seconds: float, language: Language = Language.ENGLISH) -> str:
    parts = split_seconds(seconds)
    for index, (leading, _, _) in enumerate(parts):
        if leading:
            shown = [p for p in parts[index : index + 2] if p[0]]
            return " ".join(
                f"{amount} {get_message(singular if amount == 1 else plural, language)}"
                for amount, singular, plural in shown
            )
    return get_message("now", language)
