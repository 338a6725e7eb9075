from __future__ import annotations

import pytest

from core.domain.countdown import format_countdown
from core.domain.language import Language


@pytest.mark.parametrize(
    "seconds, expected",
    [
        (1, "1 sec"),
        (59, "59 secs"),
        (60, "1 min"),
        (1000, "16 mins 40 secs"),
        (3600, "1 hour"),
        (3661, "1 hour 1 min"),
        (90000, "1 day 1 hour"),
        (2 * 86400 + 59, "2 days"),
        (365 * 86400 + 86400, "1 year 1 day"),
        (0.2, "1 sec"),
        (0, "now"),
        (-5, "now"),
    ],
)
def test_two_most_significant_units(seconds, expected):
    assert format_countdown(seconds) == expected


def test_spanish_units():
    assert format_countdown(2 * 86400 + 3600, Language.SPANISH) == "2 días 1 hora"
    assert format_countdown(0, Language.SPANISH) == "ahora"
