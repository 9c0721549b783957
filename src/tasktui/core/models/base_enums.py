# ♥♥─── Model Enums ────────────────────────────────────────────────────
from __future__ import annotations

from enum import StrEnum


class Language(StrEnum):
    """Languages the interface can be displayed in."""

    EN = "en"
    ES = "es"

    @property
    def other(self) -> Language:
        """The language the toggle switches to."""
        return Language.ES if self is Language.EN else Language.EN


class ThemeMode(StrEnum):
    """Colour scheme of the interface."""

    LIGHT = "light"
    DARK = "dark"

    @property
    def other(self) -> ThemeMode:
        """The mode the toggle switches to."""
        return ThemeMode.DARK if self is ThemeMode.LIGHT else ThemeMode.LIGHT


class TaskAction(StrEnum):
    """Kinds of change the task store reports to its subscribers."""

    LOADED = "loaded"
    ADDED = "added"
    TOGGLED = "toggled"
    DELETED = "deleted"


class ChangeKind(StrEnum):
    """Slices of application state that can change."""

    TASKS = "tasks"
    LANGUAGE = "language"
    THEME = "theme"
    INPUT = "input"
