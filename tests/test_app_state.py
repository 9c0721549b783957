from __future__ import annotations

import pytest

from tasktui.core import AppState, TaskStore, StateChanged, ThemeProvider, InMemoryStorage, PersistentStore
from tasktui.i18n import TextKey
from tasktui.core.models import Language, ThemeMode, ChangeKind

from .fakes import Recorder


def kinds(events: Recorder[StateChanged]) -> list[ChangeKind]:
    return [event.kind for event in events.events]


def test_initial_view(app_state: AppState) -> None:
    app_state.load()

    assert app_state.tasks == ()
    assert app_state.language is Language.EN
    assert app_state.theme is ThemeMode.LIGHT
    assert app_state.input_text == ""
    assert app_state.stats.total == 0
    assert app_state.text(TextKey.TITLE) == "Task List"


def test_load_restores_language_and_theme() -> None:
    storage = InMemoryStorage({
        "tasks": '[{"id":1,"text":"A","completed":true}]',
        "language": '"es"',
        "theme": "dark",
    })
    persistent = PersistentStore(storage)
    state = AppState(TaskStore(persistent), persistent, ThemeProvider(storage))

    state.load()

    assert [t.text for t in state.tasks] == ["A"]
    assert state.language is Language.ES
    assert state.theme is ThemeMode.DARK
    assert state.text(TextKey.TITLE) == "Lista de Tareas"


def test_enter_submits_and_clears_input(app_state: AppState) -> None:
    app_state.set_input("Buy milk")

    task = app_state.handle_key("enter")

    assert task is not None
    assert [t.text for t in app_state.tasks] == ["Buy milk"]
    assert app_state.input_text == ""


def test_other_keys_do_nothing(app_state: AppState) -> None:
    app_state.set_input("Buy milk")

    assert app_state.handle_key("a") is None

    assert app_state.tasks == ()
    assert app_state.input_text == "Buy milk"


def test_blank_submit_still_clears_input(app_state: AppState, storage: InMemoryStorage) -> None:
    app_state.set_input("   ")

    assert app_state.submit_new_task() is None

    assert app_state.tasks == ()
    assert app_state.input_text == ""
    assert storage.get_item("tasks") is None


def test_language_toggle_persists_without_touching_tasks(app_state: AppState, storage: InMemoryStorage) -> None:
    app_state.set_input("A")
    app_state.submit_new_task()
    before = app_state.tasks

    assert app_state.toggle_language() is Language.ES

    assert storage.get_item("language") == "es"
    assert app_state.tasks == before
    assert app_state.text(TextKey.ADD_TASK) == "Agregar Tarea"
    assert app_state.toggle_language() is Language.EN


def test_theme_toggle(app_state: AppState, storage: InMemoryStorage) -> None:
    assert app_state.toggle_theme() is ThemeMode.DARK
    assert storage.get_item("theme") == "dark"


def test_task_handlers_update_stats(app_state: AppState) -> None:
    for text in ["A", "B"]:
        app_state.set_input(text)
        app_state.submit_new_task()
    a, b = app_state.tasks

    app_state.toggle_task(a.id)
    stats = app_state.stats
    assert (stats.completed, stats.pending, stats.total) == (1, 1, 2)
    assert stats.progress_percent == pytest.approx(0.5)

    app_state.delete_task(b.id)
    assert app_state.stats.progress_display == 100


def test_changes_are_forwarded_as_state_events(app_state: AppState) -> None:
    events = Recorder[StateChanged]()
    app_state.subscribe(events)

    app_state.set_input("A")
    app_state.set_input("A")
    app_state.submit_new_task()
    app_state.toggle_language()
    app_state.toggle_theme()

    assert kinds(events) == [
        ChangeKind.INPUT,
        ChangeKind.TASKS,
        ChangeKind.INPUT,
        ChangeKind.LANGUAGE,
        ChangeKind.THEME,
    ]


def test_load_emits_every_slice(app_state: AppState) -> None:
    events = Recorder[StateChanged]()
    app_state.subscribe(events)

    app_state.load()

    assert kinds(events) == [ChangeKind.TASKS, ChangeKind.LANGUAGE, ChangeKind.THEME]


def test_set_language_rejects_unknown_code(app_state: AppState) -> None:
    with pytest.raises(ValueError):
        app_state.set_language("fr")
