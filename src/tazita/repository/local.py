# SPDX-License-Identifier: MIT

import logging
from pathlib import Path
from typing import Any, Optional
from urllib.parse import quote, unquote

from yaml import YAMLError, dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from tazita import configuration
from tazita.model.collection import Collection
from tazita.model.result import Failure, Loaded, LoadResult, NotFound, Saved, SaveResult
from tazita.model.theme import Theme, is_theme
from tazita.repository.codec import (
    CodecError,
    convert_collection_for_deserialization,
    convert_collection_for_serialization,
)

log = logging.getLogger(__name__)


def normalize_username(username: str) -> str:
    """Usernames are unique regardless of case and surrounding whitespace."""
    return username.strip().lower()


class LocalStore:
    """
    Last-known copy of each user's collection and theme, one YAML file per
    user, plus the name of the user the app last opened.
    """

    def __init__(self, data_path: Optional[Path] = None) -> None:
        self._data_path = data_path

    @property
    def users_dir(self) -> Path:
        if self._data_path is not None:
            return self._data_path / "users"
        return configuration.DATA_USERS_DIR

    @property
    def state_path(self) -> Path:
        if self._data_path is not None:
            return self._data_path / "state.yaml"
        return configuration.DATA_STATE_PATH

    def __user_path(self, username: str) -> Path:
        return self.users_dir / f"{quote(normalize_username(username), safe='')}.yaml"

    def __read_yaml(self, path: Path) -> Optional[dict[str, Any]]:
        if not path.is_file():
            return None
        try:
            raw = load(path.read_text(encoding="utf-8"), Loader=Loader)
        except YAMLError as e:
            log.error("Unreadable local file %s: %s", path, e)
            return None
        if not isinstance(raw, dict):
            return None
        return raw

    def __write_yaml(self, path: Path, data: dict[str, Any]) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        tmp = path.with_name(path.name + ".tmp")
        tmp.write_text(dump(data, Dumper=Dumper, allow_unicode=True), encoding="utf-8")
        tmp.replace(path)

    def load(self, username: str) -> LoadResult:
        raw = self.__read_yaml(self.__user_path(username))
        if raw is None or raw.get("collection") is None:
            return NotFound()
        try:
            collection = convert_collection_for_deserialization(
                raw["collection"], normalize_username(username)
            )
        except CodecError as e:
            log.error("Local copy for %s is corrupt: %s", username, e)
            return Failure(str(e))
        return Loaded(collection)

    def save(self, username: str, collection: Collection) -> SaveResult:
        path = self.__user_path(username)
        raw = self.__read_yaml(path) or {}
        raw["collection"] = convert_collection_for_serialization(collection)
        try:
            self.__write_yaml(path, raw)
        except OSError as e:
            log.error("Could not write local copy for %s: %s", username, e)
            return Failure(str(e))
        return Saved()

    def exists(self, username: str) -> bool:
        return self.__user_path(username).is_file()

    def load_theme(self, username: str) -> Optional[Theme]:
        raw = self.__read_yaml(self.__user_path(username))
        if raw is None:
            return None
        theme = raw.get("theme")
        return theme if is_theme(theme) else None

    def save_theme(self, username: str, theme: Theme) -> SaveResult:
        path = self.__user_path(username)
        raw = self.__read_yaml(path) or {}
        raw["theme"] = theme
        try:
            self.__write_yaml(path, raw)
        except OSError as e:
            log.error("Could not write local theme for %s: %s", username, e)
            return Failure(str(e))
        return Saved()

    def list_usernames(self) -> list[str]:
        if not self.users_dir.is_dir():
            return []
        return sorted(
            unquote(path.stem)
            for path in self.users_dir.iterdir()
            if path.suffix == ".yaml"
        )

    def get_current_username(self) -> Optional[str]:
        raw = self.__read_yaml(self.state_path)
        if raw is None:
            return None
        return raw.get("current_user")

    def set_current_username(self, username: Optional[str]) -> None:
        raw = self.__read_yaml(self.state_path) or {}
        raw["current_user"] = username
        self.__write_yaml(self.state_path, raw)
