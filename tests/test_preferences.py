from __future__ import annotations

import pytest

from tasktui.core import ThemeProvider, InMemoryStorage
from tasktui.core.models import ThemeMode

from .fakes import Recorder, FailingStorage


def test_defaults_to_light_without_stored_value(theme: ThemeProvider) -> None:
    assert theme.load() is ThemeMode.LIGHT
    assert not theme.is_dark


@pytest.mark.parametrize(("raw", "expected"), [("dark", ThemeMode.DARK), ("light", ThemeMode.LIGHT), ("system", ThemeMode.LIGHT)])
def test_load_reads_stored_value(raw: str, expected: ThemeMode) -> None:
    assert ThemeProvider(InMemoryStorage({"theme": raw})).load() is expected


def test_configured_default_is_used_for_unknown_values() -> None:
    theme = ThemeProvider(InMemoryStorage({"theme": "sepia"}), default=ThemeMode.DARK)

    assert theme.load() is ThemeMode.DARK


def test_toggle_persists_and_notifies(theme: ThemeProvider, storage: InMemoryStorage) -> None:
    modes = Recorder[ThemeMode]()
    theme.subscribe(modes)

    assert theme.toggle() is ThemeMode.DARK
    assert theme.toggle() is ThemeMode.LIGHT

    assert storage.get_item("theme") == "light"
    assert modes.events == [ThemeMode.DARK, ThemeMode.LIGHT]


def test_storage_failure_still_switches_mode() -> None:
    theme = ThemeProvider(FailingStorage(fail_reads=True))

    assert theme.load() is ThemeMode.LIGHT
    assert theme.toggle() is ThemeMode.DARK
    assert theme.is_dark
