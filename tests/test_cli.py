"""End-to-end runs of the command line app against a temporary data dir."""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml
from typer.testing import CliRunner

from tazita import configuration
from tazita.model.result import Loaded
from tazita.repository.local import LocalStore
from tazita.terminal.app import app

runner = CliRunner()


def invoke(*args: str):
    return runner.invoke(app, ["--no-header", *args])


def stored_entries(data_path: Path, username: str) -> list:
    result = LocalStore(data_path).load(username)
    assert isinstance(result, Loaded)
    return result.collection["entries"]


@pytest.fixture()
def ana(data_path: Path) -> Path:
    result = invoke("user", "set", "Ana")
    assert result.exit_code == 0, result.output
    return data_path


def test_commands_need_a_user(data_path):
    result = invoke("add", "expresso")
    assert result.exit_code == 1
    assert "No user selected" in result.output


def test_user_set(ana):
    assert LocalStore(ana).get_current_username() == "ana"
    result = invoke("user", "show")
    assert result.exit_code == 0
    assert "user: ana" in result.output


def test_add_is_saved_on_exit(ana):
    result = invoke("add", "expresso", "--date", "2026-06-10", "--notes", "corto")
    assert result.exit_code == 0, result.output

    entries = stored_entries(ana, "ana")
    assert len(entries) == 1
    assert entries[0]["type"] == "expresso"
    assert entries[0]["date"] == "2026-06-10"
    assert entries[0]["notes"] == "corto"


def test_add_aliases_and_default_type(ana):
    assert invoke("a").exit_code == 0
    assert stored_entries(ana, "ana")[0]["type"] == "instantaneo"


def test_add_rejects_unknown_type(ana):
    result = invoke("add", "mocha")
    assert result.exit_code == 1
    assert "Unknown coffee type" in result.output


def test_add_rejects_impossible_date(ana):
    result = invoke("add", "expresso", "--date", "2026-02-30")
    assert result.exit_code != 0
    assert not LocalStore(ana).exists("ana") or stored_entries(ana, "ana") == []


def test_remove_by_prefix(ana):
    invoke("add", "capsula")
    entry_id = stored_entries(ana, "ana")[0]["id"]

    result = invoke("remove", entry_id[:8])

    assert result.exit_code == 0, result.output
    assert f"Removed {entry_id}" in result.output
    assert stored_entries(ana, "ana") == []


def test_remove_unknown_id(ana):
    result = invoke("rm", "nope")
    assert result.exit_code == 1
    assert "No entry with id nope" in result.output


@pytest.mark.parametrize(
    "args",
    [
        ("stats",),
        ("habits",),
        ("habits", "--range", "30days", "--details"),
        ("calendar",),
        ("calendar", "--month", "2026-02"),
        ("day", "yesterday"),
        ("user", "entries"),
    ],
)
def test_reports_render(ana, args):
    invoke("add", "expresso", "--date", "yesterday")
    result = invoke(*args)
    assert result.exit_code == 0, result.output


def test_habits_rejects_unknown_range(ana):
    result = invoke("habits", "--range", "week")
    assert result.exit_code == 1
    assert "Invalid range" in result.output


def test_theme_is_kept_locally_without_remote(ana):
    result = invoke("theme", "kuromi")
    assert result.exit_code == 0, result.output
    assert "device only" in result.output
    assert LocalStore(ana).load_theme("ana") == "kuromi"


def test_theme_rejects_unknown(ana):
    result = invoke("th", "darth")
    assert result.exit_code == 1
    assert "Invalid theme" in result.output


def test_backup_export_and_import(ana, tmp_path):
    invoke("add", "filtrado")
    backup = tmp_path / "backup.json"

    assert invoke("backup", "export", str(backup)).exit_code == 0
    assert invoke("user", "switch", "bea").exit_code == 0
    result = invoke("backup", "import", str(backup))

    assert result.exit_code == 0, result.output
    assert "Imported 1 of 1 entries" in result.output
    assert len(stored_entries(ana, "bea")) == 1


def test_backup_import_rejects_garbage(ana, tmp_path):
    backup = tmp_path / "backup.json"
    backup.write_text("{}", encoding="utf-8")
    result = invoke("b", "i", str(backup))
    assert result.exit_code == 1
    assert "Invalid backup" in result.output


def test_sync_push_without_remote(ana):
    result = invoke("sync", "push")
    assert result.exit_code == 1
    assert "this device only" in result.output


def test_migrate_requires_remote(ana):
    result = invoke("sync", "migrate")
    assert result.exit_code == 1
    assert "not configured" in result.output


def test_config_set(data_path):
    result = invoke(
        "config", "set", "--default-time-range", "30days", "--no-show-header"
    )
    assert result.exit_code == 0, result.output

    saved = yaml.safe_load(configuration.APP_CONFIG_PATH.read_text())
    assert saved["default_time_range"] == "30days"
    assert saved["show_header"] is False
    assert saved["supabase_table"] == "users"


def test_config_set_rejects_unknown_range(data_path):
    result = invoke("config", "set", "--default-time-range", "week")
    assert result.exit_code == 1
    assert not configuration.APP_CONFIG_PATH.exists()


def test_environment_overrides_credentials(data_path, monkeypatch):
    monkeypatch.setenv(configuration.SUPABASE_URL_ENV, "https://db.example")
    monkeypatch.setenv(configuration.SUPABASE_KEY_ENV, "secret")
    result = invoke("config", "view")
    assert result.exit_code == 0
    assert "https://db.example" in result.output
    assert "secret" not in result.output
