# ♥♥─── Main App ─────────────────────────────────────────────────────────────────
from __future__ import annotations

from typing import TYPE_CHECKING

from textual.app import App
from textual.binding import Binding

from tasktui.bootstrap import build_app_state
from tasktui.core.models import ChangeKind
from tasktui.custom_logger import get_logger

from .chart import PENDING_COLOR, COMPLETED_COLOR
from .screens import TaskListScreen
from .rich_log import LoggingMixin
from .textual_theme import TextualThemeManager


if TYPE_CHECKING:
    from tasktui.core import AppState
    from tasktui.core.events import StateChanged, Unsubscribe


class TaskTUI(App):
    BINDINGS = [Binding("ctrl+q", "quit", "Quit", priority=True)]
    CSS_PATH = "tasktui.tcss"
    TITLE = "TaskTUI"

    def __init__(self, state: AppState | None = None) -> None:
        super().__init__()
        self.logger = get_logger()
        self.logging = LoggingMixin()
        self.theme_manager: TextualThemeManager = TextualThemeManager(self)
        self.app_state: AppState = state if state is not None else build_app_state()
        self._unsubscribe: Unsubscribe | None = None

    def get_theme_variable_defaults(self) -> dict[str, str]:
        return {"task-completed": COMPLETED_COLOR, "task-pending": PENDING_COLOR}

    def on_mount(self) -> None:
        self._unsubscribe = self.app_state.subscribe(self._on_state_changed)
        self.app_state.load()
        self.logger.info("Starting TaskTUI...")
        self.push_screen(TaskListScreen(self.app_state))

    def on_unmount(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None
        self.logging.teardown_logging()

    def _on_state_changed(self, event: StateChanged) -> None:
        if event.kind is ChangeKind.THEME:
            self.theme_manager.apply(self.app_state.theme)
