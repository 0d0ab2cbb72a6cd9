# SPDX-License-Identifier: MIT

import logging
from typing import Literal, Optional

from tazita.model.collection import Collection
from tazita.model.result import Failure, Loaded, NotFound, Saved, SaveResult
from tazita.model.theme import Theme
from tazita.repository.codec import new_collection
from tazita.repository.local import LocalStore, normalize_username
from tazita.repository.remote import RemoteStore

log = logging.getLogger(__name__)

LoadSource = Literal["remote", "local", "new"]


class SyncAdapter:
    """
    Keeps a user's collection durable: the remote record is authoritative
    when reachable, the local copy covers for it when it is not.
    """

    def __init__(self, remote: RemoteStore, local: LocalStore) -> None:
        self.remote = remote
        self.local = local

    def load(self, username: str) -> tuple[Collection, LoadSource]:
        username = normalize_username(username)
        result = self.remote.load(username)

        match result:
            case Loaded(collection=collection):
                self.local.save(username, collection)
                return collection, "remote"
            case NotFound():
                # Entries logged while the remote was unreachable go up first
                local_result = self.local.load(username)
                if isinstance(local_result, Loaded):
                    self.save(username, local_result.collection)
                    return local_result.collection, "local"
                collection = new_collection(username)
                self.save(username, collection)
                return collection, "new"
            case Failure(reason=reason):
                log.warning("Loading %s from local copy: %s", username, reason)

        local_result = self.local.load(username)
        if isinstance(local_result, Loaded):
            return local_result.collection, "local"
        return new_collection(username), "new"

    def save(self, username: str, collection: Collection) -> SaveResult:
        """
        Write the local copy, then the remote record.

        A remote failure is logged and returned, never raised; the local copy
        is already in place by then.
        """
        username = normalize_username(username)
        self.local.save(username, collection)
        result = self.remote.save(username, collection)
        if isinstance(result, Failure):
            log.warning("Saved %s locally only: %s", username, result.reason)
        return result

    def exists(self, username: str) -> bool:
        result = self.remote.exists(normalize_username(username))
        if isinstance(result, Failure):
            return False
        return result

    def load_theme(self, username: str) -> Optional[Theme]:
        username = normalize_username(username)
        theme = self.remote.load_theme(username)
        if isinstance(theme, Failure) or theme is None:
            return self.local.load_theme(username)
        self.local.save_theme(username, theme)
        return theme

    def save_theme(self, username: str, theme: Theme) -> SaveResult:
        username = normalize_username(username)
        self.local.save_theme(username, theme)
        result = self.remote.save_theme(username, theme)
        if isinstance(result, Failure):
            log.warning("Saved theme for %s locally only: %s", username, result.reason)
        return result

    def migrate_local(
        self, usernames: Optional[list[str]] = None
    ) -> dict[str, SaveResult]:
        """Push locally cached collections and themes to the remote store."""
        outcomes: dict[str, SaveResult] = {}
        for username in usernames or self.local.list_usernames():
            local_result = self.local.load(username)
            if not isinstance(local_result, Loaded):
                outcomes[username] = Failure("no local data")
                continue

            collection = local_result.collection
            collection["username"] = normalize_username(username)
            result = self.remote.save(username, collection)
            theme = self.local.load_theme(username)
            if isinstance(result, Saved) and theme is not None:
                result = self.remote.save_theme(username, theme)

            if isinstance(result, Saved):
                log.info(
                    "Migrated %s with %d entries", username, len(collection["entries"])
                )
            outcomes[username] = result
        return outcomes
