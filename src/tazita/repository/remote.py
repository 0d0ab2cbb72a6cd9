# SPDX-License-Identifier: MIT

import logging
from typing import Any, Optional

import requests

from tazita import time
from tazita.configuration import Configuration
from tazita.model.collection import Collection
from tazita.model.result import Failure, Loaded, LoadResult, NotFound, Saved, SaveResult
from tazita.model.theme import Theme, is_theme
from tazita.repository.codec import (
    CodecError,
    convert_collection_for_deserialization,
    convert_collection_for_serialization,
)
from tazita.repository.local import normalize_username

log = logging.getLogger(__name__)

NOT_CONFIGURED = "remote store not configured"


def _http_failure(error: requests.exceptions.HTTPError) -> Failure:
    status_code = error.response.status_code if error.response is not None else None
    return Failure(str(error), status_code)


class RemoteStore:
    """
    One row per user in a Supabase (PostgREST) table.

    Columns: ``username`` (lowercased, unique), ``coffee_data`` (the
    serialized collection), ``theme`` and ``updated_at``. Writes are upserts
    keyed on ``username``; the last writer wins.
    """

    def __init__(
        self,
        url: Optional[str],
        key: Optional[str],
        table: str = "users",
        timeout: float = 10.0,
        session: Optional[requests.Session] = None,
    ) -> None:
        self._url = url.rstrip("/") if url else None
        self._key = key
        self._table = table
        self._timeout = timeout
        self._session = session or requests.Session()

    @classmethod
    def from_configuration(
        cls, config: Configuration, session: Optional[requests.Session] = None
    ) -> "RemoteStore":
        return cls(
            config["supabase_url"],
            config["supabase_key"],
            table=config["supabase_table"],
            timeout=config["request_timeout"],
            session=session,
        )

    @property
    def is_configured(self) -> bool:
        return bool(self._url and self._key)

    def __endpoint(self) -> str:
        return f"{self._url}/rest/v1/{self._table}"

    def __headers(self, prefer: Optional[str] = None) -> dict[str, str]:
        headers = {
            "apikey": self._key or "",
            "Authorization": f"Bearer {self._key}",
            "Content-Type": "application/json",
            "Accept": "application/json",
        }
        if prefer is not None:
            headers["Prefer"] = prefer
        return headers

    def __select(self, username: str, columns: str) -> list[dict[str, Any]] | Failure:
        if not self.is_configured:
            return Failure(NOT_CONFIGURED)
        try:
            response = self._session.get(
                self.__endpoint(),
                params={
                    "select": columns,
                    "username": f"eq.{normalize_username(username)}",
                },
                headers=self.__headers(),
                timeout=self._timeout,
            )
            response.raise_for_status()
            rows = response.json()
        except requests.exceptions.HTTPError as e:
            log.error("Remote select failed for %s: %s", username, e)
            return _http_failure(e)
        except requests.exceptions.JSONDecodeError as e:
            log.error("Remote store returned invalid JSON: %s", e)
            return Failure(str(e))
        except requests.exceptions.RequestException as e:
            log.error("Remote store unreachable: %s", e)
            return Failure(str(e))
        if not isinstance(rows, list):
            return Failure(f"unexpected response: {type(rows).__name__}")
        return rows

    def __upsert(self, row: dict[str, Any]) -> SaveResult:
        if not self.is_configured:
            log.warning("Remote store not configured, skipping save")
            return Failure(NOT_CONFIGURED)
        row["updated_at"] = time.datetime_to_iso_str(time.now_utc())
        try:
            response = self._session.post(
                self.__endpoint(),
                params={"on_conflict": "username"},
                json=row,
                headers=self.__headers(
                    prefer="resolution=merge-duplicates,return=minimal"
                ),
                timeout=self._timeout,
            )
            response.raise_for_status()
        except requests.exceptions.HTTPError as e:
            log.error("Remote upsert failed for %s: %s", row["username"], e)
            return _http_failure(e)
        except requests.exceptions.RequestException as e:
            log.error("Remote store unreachable: %s", e)
            return Failure(str(e))
        return Saved()

    def exists(self, username: str) -> bool | Failure:
        rows = self.__select(username, "username")
        if isinstance(rows, Failure):
            return rows
        return len(rows) > 0

    def load(self, username: str) -> LoadResult:
        rows = self.__select(username, "coffee_data")
        if isinstance(rows, Failure):
            return rows
        if not rows or rows[0].get("coffee_data") is None:
            return NotFound()
        try:
            collection = convert_collection_for_deserialization(
                rows[0]["coffee_data"], normalize_username(username)
            )
        except CodecError as e:
            log.error("Remote collection for %s is corrupt: %s", username, e)
            return Failure(str(e))
        return Loaded(collection)

    def save(self, username: str, collection: Collection) -> SaveResult:
        return self.__upsert(
            {
                "username": normalize_username(username),
                "coffee_data": convert_collection_for_serialization(collection),
            }
        )

    def load_theme(self, username: str) -> Optional[Theme] | Failure:
        rows = self.__select(username, "theme")
        if isinstance(rows, Failure):
            return rows
        if not rows:
            return None
        theme = rows[0].get("theme")
        return theme if is_theme(theme) else None

    def save_theme(self, username: str, theme: Theme) -> SaveResult:
        return self.__upsert({"username": normalize_username(username), "theme": theme})

    def delete(self, username: str) -> SaveResult:
        if not self.is_configured:
            return Failure(NOT_CONFIGURED)
        try:
            response = self._session.delete(
                self.__endpoint(),
                params={"username": f"eq.{normalize_username(username)}"},
                headers=self.__headers(),
                timeout=self._timeout,
            )
            response.raise_for_status()
        except requests.exceptions.RequestException as e:
            log.error("Remote delete failed for %s: %s", username, e)
            return Failure(str(e))
        return Saved()
