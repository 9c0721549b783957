# ♥♥─── Task List ────────────────────────────────────────────────────────────────
from __future__ import annotations

from typing import TYPE_CHECKING

from rich.text import Text

from textual import on
from textual.widgets import Label, Button, Checkbox
from textual.reactive import reactive
from textual.containers import VerticalScroll, HorizontalGroup

from tasktui.ui import icons
from tasktui.i18n import TextKey, lookup
from tasktui.core.models import Task, Language, ChangeKind
from tasktui.custom_logger import log


if TYPE_CHECKING:
    from textual.app import ComposeResult

    from tasktui.core.events import StateChanged, Unsubscribe
    from tasktui.core.app_state import AppState


TOGGLE_PREFIX = "toggle-"
DELETE_PREFIX = "delete-"


def _task_id_from(widget_id: str | None, prefix: str) -> int | None:
    """Recover the task id encoded in a widget id."""
    if not widget_id or not widget_id.startswith(prefix):
        return None
    try:
        return int(widget_id.removeprefix(prefix))
    except ValueError:
        return None


# ─── Task Row ─────────────────────────────────────────────────────────────────
class TaskRow(HorizontalGroup):
    """Checkbox, text, status badge and delete button for one task."""

    def __init__(self, task: Task, language: Language) -> None:
        self.task_model = task
        self.language = language
        state_class = "-completed" if task.completed else "-pending"
        super().__init__(id=f"task-{task.id}", classes=f"task-row {state_class}")

    def compose(self) -> ComposeResult:
        task = self.task_model
        yield Checkbox(value=task.completed, id=f"{TOGGLE_PREFIX}{task.id}", classes="task-toggle")
        text_style = "strike dim" if task.completed else ""
        yield Label(Text(task.text, style=text_style), classes="task-text")
        badge_key = TextKey.COMPLETED if task.completed else TextKey.PENDING
        yield Label(lookup(self.language, badge_key), classes="task-badge", markup=False)
        yield Button(
            icons.CLOSE,
            id=f"{DELETE_PREFIX}{task.id}",
            classes="delete-button",
            tooltip=lookup(self.language, TextKey.DELETE_TASK),
        )


# ─── Task List View ───────────────────────────────────────────────────────────
class TaskListView(VerticalScroll):
    """Scrollable list of task rows, redrawn whenever tasks or language change."""

    tasks: reactive[tuple[Task, ...]] = reactive(tuple, recompose=True)
    language: reactive[Language] = reactive(Language.EN, recompose=True)

    def __init__(self, state: AppState, **kwargs) -> None:
        super().__init__(**kwargs)
        self.app_state = state
        self._unsubscribe: Unsubscribe | None = None
        self.set_reactive(TaskListView.tasks, state.tasks)
        self.set_reactive(TaskListView.language, state.language)

    def compose(self) -> ComposeResult:
        if not self.tasks:
            yield Label(f"{icons.CHART}  {lookup(self.language, TextKey.NO_TASKS)}", classes="empty-state", markup=False)
            return
        for task in self.tasks:
            yield TaskRow(task, self.language)

    def on_mount(self) -> None:
        self._unsubscribe = self.app_state.subscribe(self._on_state_changed)
        self._sync()

    def on_unmount(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    def _on_state_changed(self, event: StateChanged) -> None:
        if event.kind in {ChangeKind.TASKS, ChangeKind.LANGUAGE}:
            self._sync()

    def _sync(self) -> None:
        self.tasks = self.app_state.tasks
        self.language = self.app_state.language

    # ─── Row Events ───────────────────────────────────────────────────────────
    @on(Checkbox.Changed, ".task-toggle")
    def handle_toggle(self, event: Checkbox.Changed) -> None:
        event.stop()
        task_id = _task_id_from(event.checkbox.id, TOGGLE_PREFIX)
        if task_id is None:
            log.warning(f"Checkbox without task id: {event.checkbox.id}")
            return
        self.app_state.toggle_task(task_id)

    @on(Button.Pressed, ".delete-button")
    def handle_delete(self, event: Button.Pressed) -> None:
        event.stop()
        task_id = _task_id_from(event.button.id, DELETE_PREFIX)
        if task_id is None:
            log.warning(f"Delete button without task id: {event.button.id}")
            return
        self.app_state.delete_task(task_id)
