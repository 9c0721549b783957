# ♥♥─── Task Screen ──────────────────────────────────────────────────────────────
from __future__ import annotations

from typing import TYPE_CHECKING

from textual import on
from textual.screen import Screen
from textual.binding import Binding
from textual.widgets import Input, Label, Button, Footer
from textual.containers import Vertical, Horizontal

from tasktui.ui import icons
from tasktui.i18n import TextKey, translations_for
from tasktui.core.models import ChangeKind
from tasktui.tui.rich_log import TextualLogConsole
from tasktui.custom_logger import log
from tasktui.tui.widgets import StatsPanel, TaskListView


if TYPE_CHECKING:
    from textual.app import ComposeResult

    from tasktui.core.events import StateChanged, Unsubscribe
    from tasktui.core.app_state import AppState


# ─── Task Screen Definition ───────────────────────────────────────────────────


class TaskListScreen(Screen):
    """Task list, new-task input and statistics side by side."""

    BINDINGS = [
        Binding("ctrl+t", "toggle_theme", "Theme"),
        Binding("ctrl+l", "toggle_language", "Language"),
        Binding("ctrl+g", "toggle_log", "Log"),
    ]

    def __init__(self, state: AppState) -> None:
        super().__init__()
        self.app_state = state
        self.show_sidebar: bool = False
        self._unsubscribe: Unsubscribe | None = None

    def compose(self) -> ComposeResult:
        state = self.app_state
        with Horizontal(id="title-bar"):
            yield Label(state.text(TextKey.TITLE), id="title", markup=False)
            yield Button(self._theme_button_label(), id="theme-toggle", classes="header-button")
            yield Button(self._language_button_label(), id="language-toggle", classes="header-button")
        with Horizontal(id="content-area"):
            with Vertical(id="task-card"):
                with Horizontal(id="add-row"):
                    yield Input(value=state.input_text, placeholder=state.text(TextKey.TASK_PLACEHOLDER), id="new-task")
                    yield Button(f"{icons.PLUS} {state.text(TextKey.ADD_TASK)}", id="add-task", variant="primary")
                yield TaskListView(state, id="task-list")
            yield StatsPanel(state, id="stats")
            with Vertical(id="sidebar"):
                yield TextualLogConsole(id="log-console", max_lines=500)
        yield Footer()

    def on_mount(self) -> None:
        self._unsubscribe = self.app_state.subscribe(self._on_state_changed)
        self.query_one("#new-task", Input).focus()

    def on_unmount(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    # ─── Labels ───────────────────────────────────────────────────────────────
    def _theme_button_label(self) -> str:
        """Offer the mode the toggle switches to."""
        if self.app_state.theme_provider.is_dark:
            return f"{icons.SUN} {self.app_state.text(TextKey.LIGHT_MODE)}"
        return f"{icons.MOON} {self.app_state.text(TextKey.DARK_MODE)}"

    def _language_button_label(self) -> str:
        """Name of the language the toggle switches to, in that language."""
        other = self.app_state.language.other
        return f"{icons.GLOBE} {translations_for(other).language_name}"

    # ─── State Sync ───────────────────────────────────────────────────────────
    def _on_state_changed(self, event: StateChanged) -> None:
        if event.kind is ChangeKind.INPUT:
            new_task = self.query_one("#new-task", Input)
            if new_task.value != self.app_state.input_text:
                new_task.value = self.app_state.input_text
        elif event.kind in {ChangeKind.LANGUAGE, ChangeKind.THEME}:
            self._relabel()

    def _relabel(self) -> None:
        state = self.app_state
        self.query_one("#title", Label).update(state.text(TextKey.TITLE))
        self.query_one("#theme-toggle", Button).label = self._theme_button_label()
        self.query_one("#language-toggle", Button).label = self._language_button_label()
        self.query_one("#new-task", Input).placeholder = state.text(TextKey.TASK_PLACEHOLDER)
        self.query_one("#add-task", Button).label = f"{icons.PLUS} {state.text(TextKey.ADD_TASK)}"

    # ─── Event Handlers ───────────────────────────────────────────────────────
    @on(Input.Changed, "#new-task")
    def handle_input_changed(self, event: Input.Changed) -> None:
        self.app_state.set_input(event.value)

    @on(Input.Submitted, "#new-task")
    def handle_input_submitted(self, event: Input.Submitted) -> None:
        self.app_state.set_input(event.value)
        self.app_state.handle_key("enter")

    @on(Button.Pressed, "#add-task")
    def handle_add_pressed(self) -> None:
        self.app_state.submit_new_task()
        self.query_one("#new-task", Input).focus()

    @on(Button.Pressed, "#theme-toggle")
    def handle_theme_pressed(self) -> None:
        self.action_toggle_theme()

    @on(Button.Pressed, "#language-toggle")
    def handle_language_pressed(self) -> None:
        self.action_toggle_language()

    # ─── Actions ──────────────────────────────────────────────────────────────
    def action_toggle_theme(self) -> None:
        self.app_state.toggle_theme()

    def action_toggle_language(self) -> None:
        self.app_state.toggle_language()

    def action_toggle_log(self) -> None:
        """Toggles the visibility of the log sidebar."""
        self.show_sidebar = not self.show_sidebar
        self.query_one("#sidebar").set_class(self.show_sidebar, "visible")
        log.debug("Log sidebar {}", "shown" if self.show_sidebar else "hidden")
