"""Appending, removing and importing entries in a user's collection."""

from __future__ import annotations

import pendulum
import pytest

from conftest import local
from tazita.repository.codec import new_collection
from tazita.repository.entry import EntryStore, EntryValidationError


@pytest.fixture()
def store() -> EntryStore:
    return EntryStore(new_collection("ana"))


def test_append_assigns_id_and_utc_timestamp(store):
    entry = store.append("expresso", timestamp=local(2026, 6, 10, 9))

    assert entry["id"]
    assert entry["timestamp"].timezone_name == "UTC"
    assert entry["date"] == "2026-06-10"
    assert entry["notes"] is None
    assert len(store) == 1
    assert store.is_dirty


def test_append_keeps_explicit_date(store):
    entry = store.append("capsula", date="2026-06-01", notes="con leche")
    assert entry["date"] == "2026-06-01"
    assert entry["notes"] == "con leche"


def test_append_defaults_timestamp_to_now(store):
    before = pendulum.now("UTC")
    entry = store.append("filtrado")
    assert entry["timestamp"] >= before.subtract(seconds=1)


@pytest.mark.parametrize(
    "date", ["2026-6-1", "01-06-2026", "2026-02-30", "yesterday"]
)
def test_append_rejects_bad_dates(store, date):
    with pytest.raises(EntryValidationError):
        store.append("expresso", date=date)
    assert len(store) == 0
    assert not store.is_dirty


def test_append_rejects_unknown_type(store):
    with pytest.raises(EntryValidationError, match="Unknown coffee type"):
        store.append("mocha")


def test_ids_are_unique(store):
    ids = {store.append("expresso")["id"] for _ in range(20)}
    assert len(ids) == 20


def test_remove(store):
    entry = store.append("expresso")
    assert store.remove(entry["id"]) is True
    assert store.remove(entry["id"]) is False
    assert len(store) == 0


def test_get_and_prefix_lookup(store):
    entry = store.append("expresso")
    assert store.get(entry["id"]) == entry
    assert store.get("missing") is None
    assert store.find_by_prefix(entry["id"][:8]) == [entry]


def test_entries_are_copies(store):
    store.append("expresso")
    store.entries[0]["type"] = "capsula"
    assert store.entries[0]["type"] == "expresso"


def test_listeners_notified_on_mutation(store):
    calls = []
    store.add_listener(lambda collection: calls.append(len(collection["entries"])))

    entry = store.append("expresso")
    store.remove(entry["id"])
    store.remove("missing")

    assert calls == [1, 0]


def test_extend_skips_known_ids(store, make_entry):
    existing = store.append("expresso")
    incoming = [make_entry(local(2026, 6, 1)), make_entry(local(2026, 6, 2))]
    incoming.append({**incoming[0]})
    incoming.append(existing)

    assert store.extend(incoming) == 2
    assert len(store) == 3
    assert store.extend(incoming) == 0
