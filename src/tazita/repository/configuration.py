# SPDX-License-Identifier: MIT

from copy import deepcopy
from pathlib import Path
from typing import Any, Optional, cast

from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from tazita import configuration


class ConfigurationRepository:
    def __init__(self, path: Optional[Path] = None) -> None:
        self._path = path
        self._config: Optional[configuration.Configuration] = None
        self.is_dirty = False

    @property
    def path(self) -> Path:
        return self._path or configuration.APP_CONFIG_PATH

    @property
    def config(self) -> configuration.Configuration:
        if self._config is None:
            self.__load_data()
        if self._config is None:
            raise ValueError()
        return self._config

    def __load_data(self) -> None:
        raw_config: Optional[dict[str, Any]] = None
        if self.path.is_file():
            raw_config = load(self.path.read_text(), Loader=Loader)

        # Fill in any keys added since the file was written
        defaults = configuration.get_default_configuration()
        if raw_config is None:
            self._config = defaults
            return
        for key, value in defaults.items():
            if key not in raw_config:
                raw_config[key] = value
        self._config = cast(configuration.Configuration, raw_config)

    def __save_data(self, config: configuration.Configuration) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(dump(dict(config), Dumper=Dumper))

    def flush(self) -> None:
        if self._config is not None and self.is_dirty:
            self.__save_data(self._config)
            self.is_dirty = False

    def get_config(self) -> configuration.Configuration:
        return configuration.apply_environment_overrides(deepcopy(self.config))

    def update_config(
        self,
        supabase_url: Optional[str] = None,
        supabase_key: Optional[str] = None,
        supabase_table: Optional[str] = None,
        request_timeout: Optional[float] = None,
        sync_debounce_seconds: Optional[float] = None,
        data_path: Optional[str] = None,
        remove_data_path: bool = False,
        show_header: Optional[bool] = None,
        default_time_range: Optional[str] = None,
    ) -> None:
        self.is_dirty = True

        if supabase_url is not None:
            self.config["supabase_url"] = supabase_url
        if supabase_key is not None:
            self.config["supabase_key"] = supabase_key
        if supabase_table is not None:
            self.config["supabase_table"] = supabase_table
        if request_timeout is not None:
            self.config["request_timeout"] = request_timeout
        if sync_debounce_seconds is not None:
            self.config["sync_debounce_seconds"] = sync_debounce_seconds
        if data_path is not None:
            self.config["data_path"] = data_path
        if remove_data_path:
            self.config["data_path"] = None
        if show_header is not None:
            self.config["show_header"] = show_header
        if default_time_range is not None:
            self.config["default_time_range"] = default_time_range  # type: ignore[typeddict-item]
