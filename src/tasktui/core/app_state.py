# ♥♥─── Application State ────────────────────────────────────────────────────────
"""View model behind the task screen.

:class:`AppState` owns the language and the text of the new-task input,
routes user actions to the task store and the theme provider, and re-emits
every change as a :class:`StateChanged` event so that any number of views can
subscribe and redraw themselves independently.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from tasktui.i18n import TextKey, lookup
from tasktui.custom_logger import log

from .stats import TaskStats, derive_stats
from .events import Observable, StateChanged
from .models import Task, Language, ThemeMode, ChangeKind


if TYPE_CHECKING:
    from .events import TasksChanged
    from .storage import PersistentStore
    from .task_store import TaskStore
    from .preferences import ThemeProvider


ENTER_KEY = "enter"


class AppState(Observable[StateChanged]):
    """Language, input text and action handlers for the root view."""

    def __init__(
        self,
        store: TaskStore,
        persistent: PersistentStore,
        theme: ThemeProvider,
        default_language: Language = Language.EN,
    ) -> None:
        super().__init__()
        self.store = store
        self.persistent = persistent
        self.theme_provider = theme
        self.default_language = default_language
        self._language = default_language
        self._input_text = ""
        store.subscribe(self._on_tasks_changed)
        theme.subscribe(self._on_theme_changed)

    # ─── Read Access ──────────────────────────────────────────────────────────
    @property
    def tasks(self) -> tuple[Task, ...]:
        return self.store.tasks

    @property
    def stats(self) -> TaskStats:
        return derive_stats(self.store.tasks)

    @property
    def language(self) -> Language:
        return self._language

    @property
    def theme(self) -> ThemeMode:
        return self.theme_provider.mode

    @property
    def input_text(self) -> str:
        return self._input_text

    def text(self, key: TextKey | str) -> str:
        """Return the display string for ``key`` in the current language."""
        return lookup(self._language, key)

    # ─── Startup ──────────────────────────────────────────────────────────────
    def load(self) -> None:
        """Restore tasks, language and theme from storage."""
        self.store.load()
        self._language = self.persistent.load_language() or self.default_language
        self.emit(StateChanged(ChangeKind.LANGUAGE))
        self.theme_provider.load()
        log.info("State restored: {} tasks, language {}, theme {}.", len(self.store), self._language, self.theme)

    # ─── Handlers ─────────────────────────────────────────────────────────────
    def set_input(self, text: str) -> None:
        if text == self._input_text:
            return
        self._input_text = text
        self.emit(StateChanged(ChangeKind.INPUT))

    def submit_new_task(self) -> Task | None:
        """Add the current input as a task and clear the input.

        The input is cleared even when the text was blank and nothing was
        added.
        """
        task = self.store.add(self._input_text)
        self.set_input("")
        return task

    def handle_key(self, key: str) -> Task | None:
        """Submit on Enter; every other key is left to the input widget."""
        if key == ENTER_KEY:
            return self.submit_new_task()
        return None

    def set_language(self, language: Language | str) -> None:
        self._language = Language(language)
        self.persistent.save_language(self._language)
        log.info("Language set to {}.", self._language)
        self.emit(StateChanged(ChangeKind.LANGUAGE))

    def toggle_language(self) -> Language:
        self.set_language(self._language.other)
        return self._language

    def toggle_theme(self) -> ThemeMode:
        return self.theme_provider.toggle()

    def toggle_task(self, task_id: int) -> Task | None:
        return self.store.toggle(task_id)

    def delete_task(self, task_id: int) -> bool:
        return self.store.delete(task_id)

    # ─── Forwarding ───────────────────────────────────────────────────────────
    def _on_tasks_changed(self, _event: TasksChanged) -> None:
        self.emit(StateChanged(ChangeKind.TASKS))

    def _on_theme_changed(self, _mode: ThemeMode) -> None:
        self.emit(StateChanged(ChangeKind.THEME))
