from __future__ import annotations

import json
from datetime import timedelta

import pytest

from conftest import NOW
from adapters.json_store import JsonOutageStore, load_outages
from core.domain.errors import StoreError
from core.interfaces.outage_store import OutageStore


def test_store_implements_protocol(tmp_path):
    assert isinstance(JsonOutageStore(tmp_path / "outages.json"), OutageStore)


def test_find_by_id(make_outage, write_store):
    path = write_store([make_outage(1), make_outage(2, title="Network")])
    store = JsonOutageStore(path)

    assert store.find_by_id(2).title == "Network"
    assert store.find_by_id(3) is None


def test_find_active_prefers_earliest_start(make_outage, write_store):
    path = write_store(
        [
            make_outage(1, starts_in=-30),
            make_outage(2, starts_in=-600),
            make_outage(3, starts_in=-7200, lasts=60),
            make_outage(4, starts_in=500),
        ]
    )

    assert JsonOutageStore(path).find_active(NOW).id == 2


def test_find_active_none(make_outage, write_store):
    path = write_store([make_outage(1, starts_in=500)])

    assert JsonOutageStore(path).find_active(NOW) is None


def test_lookups_see_edits_made_on_disk(make_outage, write_store):
    path = write_store([make_outage(1)])
    store = JsonOutageStore(path)
    before = store.find_by_id(1)

    write_store([make_outage(1, title="Rescheduled")])

    assert not before.same_as(store.find_by_id(1))


def test_store_round_trips_model_dump(make_outage, write_store):
    outage = make_outage(1, warns_before=60, description="Upgrade to 4.5")
    path = write_store([outage])

    assert load_outages(path).outages == [outage]


def test_missing_file_is_store_error(tmp_path):
    store = JsonOutageStore(tmp_path / "missing.json")

    with pytest.raises(StoreError) as excinfo:
        store.find_by_id(1)

    assert excinfo.value.exit_code == 1
    assert "missing.json" in excinfo.value.message


@pytest.mark.parametrize(
    "content",
    [
        "{not json",
        json.dumps({"outages": [{"id": 1, "title": "t"}]}),
        json.dumps(
            {
                "outages": [
                    {"id": 1, "title": "a", "start_time": NOW.isoformat()},
                    {"id": 1, "title": "b", "start_time": (NOW + timedelta(hours=1)).isoformat()},
                ]
            }
        ),
    ],
)
def test_malformed_file_is_store_error(tmp_path, content):
    path = tmp_path / "outages.json"
    path.write_text(content, encoding="utf-8")

    with pytest.raises(StoreError):
        JsonOutageStore(path).find_active(NOW)
