# SPDX-License-Identifier: MIT

import json
from typing import Any

from tazita.model.collection import Collection
from tazita.model.entry import Entry
from tazita.repository.codec import (
    CodecError,
    convert_collection_for_serialization,
    convert_entry_for_deserialization,
)


class BackupError(Exception):
    """Raised when a backup cannot be read."""

    pass


def export_collection(collection: Collection) -> str:
    return json.dumps(
        convert_collection_for_serialization(collection),
        indent=2,
        ensure_ascii=False,
    )


def import_entries(text: str) -> list[Entry]:
    """
    Read the entries out of an exported backup.

    Accepts a full export or the older ``{"code": ..., "entries": [...]}``
    recovery format.
    """
    try:
        data: Any = json.loads(text)
    except json.JSONDecodeError as e:
        raise BackupError(f"Backup is not valid JSON: {e}")

    if not isinstance(data, dict) or not isinstance(data.get("entries"), list):
        raise BackupError("Backup has no entries list")

    try:
        return [convert_entry_for_deserialization(entry) for entry in data["entries"]]
    except CodecError as e:
        raise BackupError(str(e))
