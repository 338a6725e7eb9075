from __future__ import annotations

import pytest

from core.domain.errors import UsageError
from core.domain.language import Language
from core.domain.target import (
    WaitById,
    WaitForActive,
    parse_language,
    parse_outage_id,
    parse_sleep_seconds,
    resolve_target,
)


def test_active_flag_builds_active_target():
    assert resolve_target(None, True) == WaitForActive()


def test_outage_id_builds_id_target():
    assert resolve_target("17", False) == WaitById(outage_id=17)
    assert resolve_target(3, False) == WaitById(outage_id=3)


@pytest.mark.parametrize("outage_id, active", [("1", True), (None, False)])
def test_both_or_neither_is_usage_error(outage_id, active):
    with pytest.raises(UsageError) as excinfo:
        resolve_target(outage_id, active)

    assert "--outageid" in excinfo.value.message
    assert excinfo.value.exit_code == 2


@pytest.mark.parametrize("raw", ["0", "-4", "abc", "1.5", "", 0, -1])
def test_invalid_outage_id_is_usage_error(raw):
    with pytest.raises(UsageError) as excinfo:
        resolve_target(raw, False)

    assert excinfo.value.param == "outageid"
    assert excinfo.value.message == "Invalid value for parameter: outageid"


def test_outage_id_whitespace_is_tolerated():
    assert parse_outage_id(" 8 ") == 8


def test_usage_error_is_localized():
    with pytest.raises(UsageError) as excinfo:
        resolve_target(None, False, Language.SPANISH)

    assert excinfo.value.message.startswith("Debe usar")


@pytest.mark.parametrize("raw, expected", [("300", 300.0), ("=300", 300.0), (" 12.5 ", 12.5), (60, 60.0)])
def test_sleep_seconds_accepts_positive_numbers(raw, expected):
    assert parse_sleep_seconds(raw) == expected


@pytest.mark.parametrize("raw", ["0", "-1", "abc", "", "=", "nan", "inf", "-inf"])
def test_sleep_seconds_rejects_non_positive_or_non_finite(raw):
    with pytest.raises(UsageError) as excinfo:
        parse_sleep_seconds(raw)

    assert excinfo.value.param == "sleep"
    assert excinfo.value.exit_code == 2


def test_language_option():
    assert parse_language(None, Language.SPANISH) is Language.SPANISH
    assert parse_language("es_AR.UTF-8", Language.ENGLISH) is Language.SPANISH
    assert parse_language("=en", Language.SPANISH) is Language.ENGLISH


def test_unknown_language_is_usage_error():
    with pytest.raises(UsageError) as excinfo:
        parse_language("fr", Language.ENGLISH)

    assert excinfo.value.param == "language"
    assert excinfo.value.message == "Invalid value for parameter: language"


def test_language_from_code_rejects_unknown_codes():
    assert Language.from_code("") is Language.ENGLISH
    with pytest.raises(ValueError):
        Language.from_code("fr")
