# SPDX-License-Identifier: MIT

import logging
from typing import Any, Optional, cast

from tazita import time
from tazita.model.collection import Collection
from tazita.model.entry import Entry

log = logging.getLogger(__name__)


class CodecError(Exception):
    """Raised when a stored collection cannot be decoded."""

    pass


def convert_entry_for_serialization(entry: Entry) -> dict[str, Any]:
    serializable_entry: dict[str, Any] = {
        "id": entry["id"],
        "type": entry["type"],
        "timestamp": time.datetime_to_iso_str(entry["timestamp"]),
    }
    if entry.get("date") is not None:
        serializable_entry["date"] = entry["date"]
    if entry.get("notes") is not None:
        serializable_entry["notes"] = entry["notes"]
    return serializable_entry


def convert_entry_for_deserialization(entry: dict[str, Any]) -> Entry:
    if not isinstance(entry, dict) or "id" not in entry or "timestamp" not in entry:
        raise CodecError(f"Entry is missing id or timestamp: {entry!r}")
    try:
        timestamp = time.datetime_from_str(str(entry["timestamp"]))
    except (ValueError, TypeError) as e:
        raise CodecError(f"Invalid timestamp {entry['timestamp']!r}: {e}")
    return cast(
        Entry,
        {
            "id": str(entry["id"]),
            "type": entry.get("type"),
            "timestamp": timestamp,
            "date": entry.get("date"),
            "notes": entry.get("notes"),
        },
    )


def convert_collection_for_serialization(collection: Collection) -> dict[str, Any]:
    return {
        "entries": [
            convert_entry_for_serialization(entry) for entry in collection["entries"]
        ],
        "username": collection["username"],
        "createdAt": time.datetime_to_iso_str(collection["created_at"]),
    }


def convert_collection_for_deserialization(
    data: Any, username: Optional[str] = None
) -> Collection:
    """
    Decode a stored collection.

    Individual entries that cannot be decoded are logged and dropped; a
    payload that is not a collection at all raises CodecError.
    """
    if not isinstance(data, dict) or not isinstance(data.get("entries", []), list):
        raise CodecError(f"Not a collection: {type(data).__name__}")

    entries: list[Entry] = []
    for raw_entry in data.get("entries") or []:
        try:
            entries.append(convert_entry_for_deserialization(raw_entry))
        except CodecError as e:
            log.warning("Dropping undecodable entry: %s", e)

    created_at_str = data.get("createdAt") or data.get("created_at")
    try:
        created_at = (
            time.datetime_from_str(str(created_at_str))
            if created_at_str
            else time.now_utc()
        )
    except (ValueError, TypeError):
        log.warning("Invalid createdAt %r, using now", created_at_str)
        created_at = time.now_utc()

    return {
        "entries": entries,
        "username": data.get("username") or username or "",
        "created_at": created_at,
    }


def new_collection(username: str) -> Collection:
    return {"entries": [], "username": username, "created_at": time.now_utc()}
