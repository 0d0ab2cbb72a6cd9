"""Remote-first loading with a local fallback copy."""

from __future__ import annotations

from pathlib import Path

import pytest

from conftest import local
from tazita.model.result import Failure, Loaded, Saved
from tazita.repository.codec import new_collection
from tazita.repository.local import LocalStore
from tazita.sync.adapter import SyncAdapter


@pytest.fixture()
def local_store(tmp_path: Path) -> LocalStore:
    return LocalStore(tmp_path)


@pytest.fixture()
def adapter(remote, local_store) -> SyncAdapter:
    return SyncAdapter(remote, local_store)  # type: ignore[arg-type]


def test_save_then_load_round_trip(adapter, make_entry):
    collection = new_collection("ana")
    collection["entries"].append(make_entry(local(2026, 6, 10, 9), date="2026-06-10"))

    assert adapter.save("ana", collection) == Saved()
    loaded, source = adapter.load("ana")

    assert source == "remote"
    assert loaded["entries"] == collection["entries"]


def test_remote_load_refreshes_local_copy(adapter, remote, local_store, make_entry):
    collection = new_collection("ana")
    collection["entries"].append(make_entry(local(2026, 6, 10, 9)))
    remote.collections["ana"] = collection

    adapter.load("Ana")

    cached = local_store.load("ana")
    assert isinstance(cached, Loaded)
    assert cached.collection["entries"] == collection["entries"]


def test_not_found_creates_and_saves_empty_collection(adapter, remote, local_store):
    collection, source = adapter.load("bea")

    assert source == "new"
    assert collection["entries"] == []
    assert collection["username"] == "bea"
    assert "bea" in remote.collections
    assert isinstance(local_store.load("bea"), Loaded)


def test_remote_failure_falls_back_to_local(adapter, remote, local_store, make_entry):
    collection = new_collection("ana")
    collection["entries"].append(make_entry(local(2026, 6, 10, 9)))
    local_store.save("ana", collection)
    remote.online = False

    loaded, source = adapter.load("ana")

    assert source == "local"
    assert loaded["entries"] == collection["entries"]


def test_remote_failure_without_local_copy(adapter, remote):
    remote.online = False
    collection, source = adapter.load("ana")
    assert source == "new"
    assert collection["entries"] == []


def test_save_failure_is_returned_not_raised(adapter, remote, local_store, caplog):
    remote.online = False
    collection = new_collection("ana")

    result = adapter.save("ana", collection)

    assert isinstance(result, Failure)
    assert isinstance(local_store.load("ana"), Loaded)
    assert "locally only" in caplog.text


def test_exists(adapter, remote):
    remote.collections["ana"] = new_collection("ana")
    assert adapter.exists("ANA") is True
    assert adapter.exists("bea") is False
    remote.online = False
    assert adapter.exists("ana") is False


def test_theme_falls_back_to_local(adapter, remote, local_store):
    assert adapter.save_theme("ana", "cinnamoroll") == Saved()
    assert remote.themes["ana"] == "cinnamoroll"

    remote.online = False
    assert adapter.load_theme("ana") == "cinnamoroll"
    assert isinstance(adapter.save_theme("ana", "kuromi"), Failure)
    assert local_store.load_theme("ana") == "kuromi"


def test_migrate_local(adapter, remote, local_store, make_entry):
    collection = new_collection("ana")
    collection["entries"].append(make_entry(local(2026, 6, 10, 9)))
    local_store.save("ana", collection)
    local_store.save_theme("ana", "hellokitty")
    local_store.save_theme("ghost", "kuromi")

    outcomes = adapter.migrate_local()

    assert outcomes["ana"] == Saved()
    assert isinstance(outcomes["ghost"], Failure)
    assert len(remote.collections["ana"]["entries"]) == 1
    assert remote.themes["ana"] == "hellokitty"


def test_migrate_local_offline(adapter, remote, local_store):
    local_store.save("ana", new_collection("ana"))
    remote.online = False
    assert isinstance(adapter.migrate_local(["ana"])["ana"], Failure)


def test_not_found_uploads_entries_logged_offline(
    adapter, remote, local_store, make_entry
):
    collection = new_collection("ana")
    collection["entries"].append(make_entry(local(2026, 6, 10, 9)))
    remote.online = False
    assert isinstance(adapter.save("ana", collection), Failure)

    remote.online = True
    loaded, source = adapter.load("ana")

    assert source == "local"
    assert loaded["entries"] == collection["entries"]
    cached = local_store.load("ana")
    assert isinstance(cached, Loaded)
    assert cached.collection["entries"] == collection["entries"]
    assert remote.collections["ana"]["entries"] == collection["entries"]
