"""Shared fixtures: entries built from local wall-clock times and isolated data dirs."""

from __future__ import annotations

from copy import deepcopy
from pathlib import Path
from typing import Any, Callable, Optional

import pendulum
import pytest

from tazita import configuration
from tazita.model.collection import Collection
from tazita.model.entity_id import generate_entity_id
from tazita.model.result import (
    Failure,
    Loaded,
    LoadResult,
    NotFound,
    Saved,
    SaveResult,
)


def local(
    year: int, month: int, day: int, hour: int = 12, minute: int = 0
) -> pendulum.DateTime:
    return pendulum.datetime(year, month, day, hour, minute, tz="local")


@pytest.fixture()
def make_entry() -> Callable[..., dict[str, Any]]:
    def _make(
        timestamp: pendulum.DateTime,
        date: Optional[str] = None,
        coffee_type: Optional[str] = "expresso",
        notes: Optional[str] = None,
    ) -> dict[str, Any]:
        return {
            "id": generate_entity_id(),
            "type": coffee_type,
            "timestamp": timestamp.in_tz("UTC"),
            "date": date,
            "notes": notes,
        }

    return _make


@pytest.fixture()
def data_path(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point config and data paths at a temporary directory."""
    data = tmp_path / "data"
    monkeypatch.setattr(configuration, "CONFIG_PATH", tmp_path / "config")
    monkeypatch.setattr(
        configuration, "APP_CONFIG_PATH", tmp_path / "config" / "config.yaml"
    )
    monkeypatch.setattr(configuration, "DATA_PATH", data)
    monkeypatch.setattr(configuration, "DATA_USERS_DIR", data / "users")
    monkeypatch.setattr(configuration, "DATA_STATE_PATH", data / "state.yaml")
    monkeypatch.delenv(configuration.SUPABASE_URL_ENV, raising=False)
    monkeypatch.delenv(configuration.SUPABASE_KEY_ENV, raising=False)
    return data


class FakeRemote:
    """In-memory stand-in for RemoteStore; ``online = False`` fails every call."""

    def __init__(self) -> None:
        self.collections: dict[str, Any] = {}
        self.themes: dict[str, str] = {}
        self.online = True
        self.saves = 0

    def __offline(self) -> Failure:
        return Failure("offline")

    def load(self, username: str) -> LoadResult:
        if not self.online:
            return self.__offline()
        if username not in self.collections:
            return NotFound()
        return Loaded(deepcopy(self.collections[username]))

    def save(self, username: str, collection: Collection) -> SaveResult:
        if not self.online:
            return self.__offline()
        self.saves += 1
        self.collections[username] = deepcopy(collection)
        return Saved()

    def exists(self, username: str) -> bool | Failure:
        if not self.online:
            return self.__offline()
        return username in self.collections

    def load_theme(self, username: str) -> Optional[str] | Failure:
        if not self.online:
            return self.__offline()
        return self.themes.get(username)

    def save_theme(self, username: str, theme: str) -> SaveResult:
        if not self.online:
            return self.__offline()
        self.themes[username] = theme
        return Saved()


@pytest.fixture()
def remote() -> FakeRemote:
    return FakeRemote()


class FakeTimer:
    def __init__(self, delay: float, function: Callable[[], None]) -> None:
        self.delay = delay
        self.function = function
        self.started = False
        self.cancelled = False

    def start(self) -> None:
        self.started = True

    def cancel(self) -> None:
        self.cancelled = True

    def fire(self) -> None:
        self.function()


@pytest.fixture()
def timers() -> list[FakeTimer]:
    return []


@pytest.fixture()
def factory(timers):
    def _factory(delay: float, function: Callable[[], None]) -> FakeTimer:
        timer = FakeTimer(delay, function)
        timers.append(timer)
        return timer

    return _factory
