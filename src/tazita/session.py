# SPDX-License-Identifier: MIT

import logging
from dataclasses import dataclass
from types import TracebackType
from typing import Optional

import pendulum

from tazita import time
from tazita.configuration import Configuration
from tazita.model.collection import Collection
from tazita.model.entity_id import EntityId
from tazita.model.entry import Entry
from tazita.model.result import Failure, Loaded, Saved, SaveResult
from tazita.model.theme import DEFAULT_THEME, Theme, is_theme
from tazita.repository.entry import EntryStore
from tazita.repository.local import LocalStore, normalize_username
from tazita.repository.remote import RemoteStore
from tazita.sync.adapter import LoadSource, SyncAdapter
from tazita.sync.debounce import DebouncedTask, TimerFactory, daemon_timer

log = logging.getLogger(__name__)


class NoActiveUserError(Exception):
    """Raised when an operation needs a user and none has been chosen."""

    pass


@dataclass(frozen=True)
class UserLookup:
    exists: bool
    collection: Optional[Collection] = None


class Session:
    """
    Everything one run of the app works with: the chosen user, their entry
    store, the theme and the sync machinery.

    Created at start-up and closed at the end; closing flushes any save that
    is still waiting out its debounce.
    """

    def __init__(
        self,
        config: Configuration,
        local: Optional[LocalStore] = None,
        remote: Optional[RemoteStore] = None,
        timer_factory: TimerFactory = daemon_timer,
    ) -> None:
        self.config = config
        self.local = local or LocalStore()
        self.remote = remote or RemoteStore.from_configuration(config)
        self.sync = SyncAdapter(self.remote, self.local)
        self._saver = DebouncedTask(
            self.sync_now,
            delay=config["sync_debounce_seconds"],
            timer_factory=timer_factory,
        )
        self._store: Optional[EntryStore] = None
        self._theme: Optional[Theme] = None
        self.source: Optional[LoadSource] = None
        self.last_sync: Optional[pendulum.DateTime] = None
        self.username: Optional[str] = self.local.get_current_username()

    def __enter__(self) -> "Session":
        return self

    def __exit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc: Optional[BaseException],
        traceback: Optional[TracebackType],
    ) -> None:
        self.close()

    @property
    def has_pending_save(self) -> bool:
        return self._saver.pending

    @property
    def store(self) -> EntryStore:
        if self.username is None:
            raise NoActiveUserError(
                "No user selected. Run `tazita user set NAME` first."
            )
        if self._store is None:
            self._store = self.__load(self.username)
        return self._store

    def __load(self, username: str) -> EntryStore:
        collection, self.source = self.sync.load(username)
        store = EntryStore(collection)
        store.add_listener(lambda _: self._saver.schedule())
        return store

    @property
    def collection(self) -> Collection:
        return self.store.collection

    @property
    def entries(self) -> list[Entry]:
        return self.store.entries

    def set_user(self, username: str) -> UserLookup:
        """
        Claim a username.

        A name that is already taken is not switched to; the caller decides
        whether to open the existing data or pick a different name.
        """
        username = normalize_username(username)
        if self.sync.exists(username):
            result = self.sync.remote.load(username)
            if isinstance(result, Loaded):
                return UserLookup(exists=True, collection=result.collection)
            return UserLookup(exists=True)

        self.switch_user(username)
        return UserLookup(exists=False)

    def switch_user(self, username: str) -> None:
        username = normalize_username(username)
        if self._store is not None:
            self._saver.flush()
        self.local.set_current_username(username)
        self.username = username
        self._store = None
        self._theme = None
        # Load now so a brand new user gets their empty record written
        self._store = self.__load(username)

    def add_entry(
        self,
        coffee_type: str,
        date: Optional[str] = None,
        notes: Optional[str] = None,
        timestamp: Optional[pendulum.DateTime] = None,
    ) -> Entry:
        return self.store.append(coffee_type, date, notes, timestamp)

    def remove_entry(self, id: EntityId) -> bool:
        return self.store.remove(id)

    def import_entries(self, entries: list[Entry]) -> int:
        return self.store.extend(entries)

    @property
    def theme(self) -> Theme:
        if self._theme is None:
            theme = None
            if self.username is not None:
                theme = self.sync.load_theme(self.username)
            self._theme = theme or DEFAULT_THEME
        return self._theme

    def set_theme(self, theme: str) -> SaveResult:
        if not is_theme(theme):
            raise ValueError(f"Unknown theme: {theme}")
        self._theme = theme  # type: ignore[assignment]
        if self.username is None:
            return Failure("no user selected")
        return self.sync.save_theme(self.username, theme)  # type: ignore[arg-type]

    def sync_now(self) -> SaveResult:
        if self._store is None or self.username is None:
            return Failure("nothing loaded")
        result = self.sync.save(self.username, self._store.collection)
        if isinstance(result, Saved):
            self.last_sync = time.now_utc()
            self._store.is_dirty = False
        return result

    def pull(self) -> LoadSource:
        """Replace the in-memory collection with the stored one."""
        if self.username is None:
            raise NoActiveUserError("No user selected.")
        self._saver.cancel()
        self._store = self.__load(self.username)
        return self.source or "new"

    def close(self) -> None:
        if self._saver.flush():
            log.debug("Flushed pending save on close")
