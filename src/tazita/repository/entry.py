# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Callable, Optional, TypeAlias

import pendulum

from tazita import time
from tazita.model.coffee_type import COFFEE_TYPE_IDS
from tazita.model.collection import Collection
from tazita.model.entity_id import EntityId, generate_entity_id
from tazita.model.entry import Entry
from tazita.service.bucket import BucketError, parse_logical_date

MutationListener: TypeAlias = Callable[[Collection], None]


class EntryValidationError(Exception):
    """Raised when a new entry is rejected."""

    pass


class EntryStore:
    """One user's collection. Entries are only ever appended or removed."""

    def __init__(self, collection: Collection) -> None:
        self._collection = collection
        self.is_dirty = False
        self._listeners: list[MutationListener] = []

    @property
    def username(self) -> str:
        return self._collection["username"]

    @property
    def collection(self) -> Collection:
        return self._collection

    @property
    def entries(self) -> list[Entry]:
        return deepcopy(self._collection["entries"])

    def __len__(self) -> int:
        return len(self._collection["entries"])

    def add_listener(self, listener: MutationListener) -> None:
        self._listeners.append(listener)

    def __mutated(self) -> None:
        self.is_dirty = True
        for listener in self._listeners:
            listener(self._collection)

    def append(
        self,
        coffee_type: str,
        date: Optional[str] = None,
        notes: Optional[str] = None,
        timestamp: Optional[pendulum.DateTime] = None,
    ) -> Entry:
        if coffee_type not in COFFEE_TYPE_IDS:
            raise EntryValidationError(
                f"Unknown coffee type: {coffee_type}. "
                f"Valid options: {', '.join(COFFEE_TYPE_IDS)}"
            )

        if timestamp is None:
            timestamp = time.now_utc()
        if date is None:
            date = time.datetime_to_local_date_str(timestamp)
        elif not time.is_date_str(date):
            raise EntryValidationError(f"Date must be YYYY-MM-DD, got {date!r}")
        else:
            try:
                parse_logical_date(date)
            except BucketError as e:
                raise EntryValidationError(str(e))

        entry: Entry = {
            "id": generate_entity_id(),
            "type": coffee_type,  # type: ignore[typeddict-item]
            "timestamp": timestamp.in_tz("UTC"),
            "date": date,
            "notes": notes or None,
        }
        self._collection["entries"].append(entry)
        self.__mutated()
        return deepcopy(entry)

    def extend(self, entries: list[Entry]) -> int:
        """Add entries whose id is not present yet. Returns how many were added."""
        known_ids = {entry["id"] for entry in self._collection["entries"]}
        added = 0
        for entry in entries:
            if entry["id"] in known_ids:
                continue
            self._collection["entries"].append(deepcopy(entry))
            known_ids.add(entry["id"])
            added += 1
        if added:
            self.__mutated()
        return added

    def remove(self, id: EntityId) -> bool:
        entries = self._collection["entries"]
        remaining = [entry for entry in entries if entry["id"] != id]
        if len(remaining) == len(entries):
            return False
        self._collection["entries"] = remaining
        self.__mutated()
        return True

    def get(self, id: EntityId) -> Optional[Entry]:
        for entry in self._collection["entries"]:
            if entry["id"] == id:
                return deepcopy(entry)
        return None

    def find_by_prefix(self, prefix: str) -> list[Entry]:
        return deepcopy(
            [
                entry
                for entry in self._collection["entries"]
                if entry["id"].startswith(prefix)
            ]
        )

