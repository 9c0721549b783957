from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from tasktui.config import ApplicationSettings, reset_settings_cache, get_application_settings
from tasktui.bootstrap import build_app_state
from tasktui.core.models import Language, ThemeMode


if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture
def app_data(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    monkeypatch.setenv("TASKTUI_PATHS_APP_DATA_DIR", str(tmp_path))
    return tmp_path


def test_defaults(app_data: Path) -> None:
    settings = ApplicationSettings(_env_file=None)

    assert settings.preferences.default_language is Language.EN
    assert settings.preferences.default_theme is ThemeMode.LIGHT
    assert settings.logging.console_level == "WARNING"
    assert settings.get_storage_file_path() == app_data / "storage.json"
    assert settings.paths.config_dir.is_dir()


def test_nested_environment_overrides(app_data: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TASKTUI_PREFERENCES__DEFAULT_LANGUAGE", "es")
    monkeypatch.setenv("TASKTUI_PREFERENCES__DEFAULT_THEME", "dark")
    monkeypatch.setenv("TASKTUI_STORAGE__FILENAME", "tasks.json")

    settings = ApplicationSettings(_env_file=None)

    assert settings.preferences.default_language is Language.ES
    assert settings.preferences.default_theme is ThemeMode.DARK
    assert settings.get_storage_file_path() == app_data / "tasks.json"


def test_ensure_env_file_writes_template_once(app_data: Path) -> None:
    settings = ApplicationSettings(_env_file=None)
    settings.ensure_env_file()
    env_path = settings.paths.env_file_path
    env_path.write_text("# edited\n", encoding="utf-8")

    settings.ensure_env_file()

    assert env_path.read_text(encoding="utf-8") == "# edited\n"


def test_bootstrap_uses_configured_file_and_defaults(app_data: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TASKTUI_PREFERENCES__DEFAULT_LANGUAGE", "es")
    settings = ApplicationSettings(_env_file=None)

    state = build_app_state(settings)
    state.load()
    state.set_input("Persisted")
    state.submit_new_task()

    assert state.language is Language.ES
    assert "Persisted" in settings.get_storage_file_path().read_text(encoding="utf-8")


def test_settings_are_cached_until_reset(app_data: Path) -> None:
    reset_settings_cache()
    try:
        first = get_application_settings()
        assert get_application_settings() is first
        reset_settings_cache()
        assert get_application_settings() is not first
    finally:
        reset_settings_cache()


def test_invalid_configuration_exits(app_data: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TASKTUI_PREFERENCES__DEFAULT_THEME", "sepia")
    reset_settings_cache()
    try:
        with pytest.raises(SystemExit):
            get_application_settings()
    finally:
        reset_settings_cache()
