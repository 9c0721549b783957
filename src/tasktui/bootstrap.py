# ♥♥─── Bootstrap ──────────────────────────────────────────────────────────────
"""Wires storage, stores and preferences into an :class:`AppState`."""

from __future__ import annotations

from typing import TYPE_CHECKING

from tasktui.core import AppState, TaskStore, ThemeProvider, JsonFileStorage, PersistentStore
from tasktui.config import get_settings
from tasktui.custom_logger import log


if TYPE_CHECKING:
    from tasktui.core import KeyValueStorage
    from tasktui.config import ApplicationSettings


def build_app_state(
    settings: ApplicationSettings | None = None,
    storage: KeyValueStorage | None = None,
) -> AppState:
    """Create an unloaded :class:`AppState`.

    :param settings: Settings to use; the cached application settings by default.
    :param storage: Storage backend; a JSON file at the configured path by default.
    :returns: State ready for :meth:`AppState.load`.
    """
    settings = settings or get_settings()
    if storage is None:
        storage_path = settings.get_storage_file_path()
        log.info("Using storage file '{}'", storage_path)
        storage = JsonFileStorage(storage_path)

    persistent = PersistentStore(storage)
    return AppState(
        store=TaskStore(persistent),
        persistent=persistent,
        theme=ThemeProvider(storage, default=settings.preferences.default_theme),
        default_language=settings.preferences.default_language,
    )
