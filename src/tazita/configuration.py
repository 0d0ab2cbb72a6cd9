# SPDX-License-Identifier: MIT

import os
from pathlib import Path
from typing import Optional, TypedDict

from yaml import load

try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader  # type: ignore[assignment]
import platformdirs

from tazita.model.stats import TimeRange

APP_NAME = "tazita"

SUPABASE_URL_ENV = "TAZITA_SUPABASE_URL"
SUPABASE_KEY_ENV = "TAZITA_SUPABASE_KEY"

CONFIG_PATH = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"

# These will be set dynamically by load_data_path_configuration()
DATA_PATH: Path = platformdirs.user_data_path(APP_NAME)
DATA_USERS_DIR: Path = DATA_PATH / "users"
DATA_STATE_PATH: Path = DATA_PATH / "state.yaml"


class Configuration(TypedDict):
    supabase_url: Optional[str]
    supabase_key: Optional[str]
    supabase_table: str
    request_timeout: float
    sync_debounce_seconds: float
    data_path: Optional[str]
    show_header: bool
    default_time_range: TimeRange


def get_default_configuration() -> Configuration:
    return {
        "supabase_url": None,
        "supabase_key": None,
        "supabase_table": "users",
        "request_timeout": 10.0,
        "sync_debounce_seconds": 1.0,
        "data_path": None,
        "show_header": True,
        "default_time_range": "all",
    }


def set_data_path(data_path: Path) -> None:
    global DATA_PATH, DATA_USERS_DIR, DATA_STATE_PATH

    DATA_PATH = data_path
    DATA_USERS_DIR = DATA_PATH / "users"
    DATA_STATE_PATH = DATA_PATH / "state.yaml"


def load_data_path_configuration() -> None:
    """
    Load the configuration and set the DATA_PATH variables dynamically.

    This must be called after the config file exists and before any
    stores are instantiated.
    """
    if not APP_CONFIG_PATH.is_file():
        # Config doesn't exist yet, use defaults
        return

    config: Optional[Configuration] = load(APP_CONFIG_PATH.read_text(), Loader=Loader)
    if config is None:
        return

    data_path_setting = config.get("data_path")
    if data_path_setting is not None:
        set_data_path(Path(data_path_setting))


def apply_environment_overrides(config: Configuration) -> Configuration:
    """Credentials from the environment take precedence over the config file."""
    supabase_url = os.environ.get(SUPABASE_URL_ENV)
    if supabase_url:
        config["supabase_url"] = supabase_url
    supabase_key = os.environ.get(SUPABASE_KEY_ENV)
    if supabase_key:
        config["supabase_key"] = supabase_key
    return config
