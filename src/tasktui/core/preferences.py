# ♥♥─── Theme Preference ─────────────────────────────────────────────────────────
from __future__ import annotations

from typing import TYPE_CHECKING

from tasktui.custom_logger import log

from .events import Observable
from .errors import StorageError
from .models import ThemeMode


if TYPE_CHECKING:
    from .storage import KeyValueStorage


THEME_KEY = "theme"


class ThemeProvider(Observable[ThemeMode]):
    """Owns the light/dark preference and persists it under ``theme``.

    Stored values other than ``light`` and ``dark`` (for example ``system``)
    resolve to the default mode.
    """

    def __init__(self, storage: KeyValueStorage, default: ThemeMode = ThemeMode.LIGHT) -> None:
        super().__init__()
        self.storage = storage
        self.default = default
        self._mode = default

    @property
    def mode(self) -> ThemeMode:
        return self._mode

    @property
    def is_dark(self) -> bool:
        return self._mode is ThemeMode.DARK

    def load(self) -> ThemeMode:
        """Read the stored mode, falling back to the default."""
        try:
            raw = self.storage.get_item(THEME_KEY)
        except StorageError as e:
            log.warning("Could not read theme preference: {}", e)
            raw = None
        if raw is not None and raw in ThemeMode:
            self._mode = ThemeMode(raw)
        else:
            if raw is not None:
                log.info("Stored theme {!r} not recognised, using {}.", raw, self.default)
            self._mode = self.default
        self.emit(self._mode)
        return self._mode

    def set_mode(self, mode: ThemeMode) -> None:
        """Switch to ``mode`` and persist it."""
        self._mode = ThemeMode(mode)
        try:
            self.storage.set_item(THEME_KEY, self._mode.value)
        except StorageError as e:
            log.warning("Could not persist theme preference: {}", e)
        log.info("Theme set to {}.", self._mode)
        self.emit(self._mode)

    def toggle(self) -> ThemeMode:
        self.set_mode(self._mode.other)
        return self._mode
