from __future__ import annotations

import json
from typing import TYPE_CHECKING

import pytest

from tasktui.core import StorageError, JsonFileStorage, InMemoryStorage, PersistentStore
from tasktui.core.models import Task, Language

from .fakes import FailingStorage


if TYPE_CHECKING:
    from pathlib import Path


# ─── Persistent Store ─────────────────────────────────────────────────────────
def test_tasks_round_trip_in_order(persistent: PersistentStore) -> None:
    tasks = [Task(id=2, text="B", completed=True), Task(id=1, text="A")]

    assert persistent.save_tasks(tasks) is True

    assert persistent.load_tasks() == tasks


def test_missing_tasks_entry_is_absent(persistent: PersistentStore) -> None:
    assert persistent.load_tasks() is None


@pytest.mark.parametrize(
    "raw",
    [
        "not json",
        '{"id": 1}',
        '[{"id": "1", "text": "A", "completed": false}]',
        '[{"id": 1, "text": "   ", "completed": false}]',
        '[{"id": 1, "text": "A", "completed": "yes"}]',
    ],
)
def test_malformed_tasks_entry_is_absent(raw: str) -> None:
    persistent = PersistentStore(InMemoryStorage({"tasks": raw}))

    assert persistent.load_tasks() is None


def test_duplicate_ids_keep_first_occurrence() -> None:
    raw = json.dumps([
        {"id": 1, "text": "first", "completed": False},
        {"id": 1, "text": "second", "completed": True},
        {"id": 2, "text": "third", "completed": False},
    ])
    persistent = PersistentStore(InMemoryStorage({"tasks": raw}))

    loaded = persistent.load_tasks()

    assert loaded is not None
    assert [t.text for t in loaded] == ["first", "third"]


def test_language_is_written_plain(storage: InMemoryStorage, persistent: PersistentStore) -> None:
    persistent.save_language(Language.ES)

    assert storage.snapshot() == {"language": "es"}
    assert persistent.load_language() is Language.ES


@pytest.mark.parametrize(("raw", "expected"), [("es", Language.ES), ('"es"', Language.ES), ('"en"', Language.EN)])
def test_language_accepts_plain_and_quoted(raw: str, expected: Language) -> None:
    assert PersistentStore(InMemoryStorage({"language": raw})).load_language() is expected


@pytest.mark.parametrize("raw", ["fr", '"fr"', '"es', ""])
def test_unknown_language_is_absent(raw: str) -> None:
    assert PersistentStore(InMemoryStorage({"language": raw})).load_language() is None


def test_storage_failures_are_tolerated() -> None:
    persistent = PersistentStore(FailingStorage({"language": "es"}, fail_reads=True))

    assert persistent.load_tasks() is None
    assert persistent.load_language() is None
    assert persistent.save_tasks([Task(id=1, text="A")]) is False
    assert persistent.save_language(Language.EN) is False


# ─── JSON File Storage ────────────────────────────────────────────────────────
def test_file_storage_persists_across_instances(tmp_path: Path) -> None:
    path = tmp_path / "storage.json"
    first = JsonFileStorage(path)
    first.set_item("language", "es")
    first.set_item("theme", "dark")

    second = JsonFileStorage(path)

    assert second.get_item("language") == "es"
    assert second.get_item("theme") == "dark"
    assert json.loads(path.read_text(encoding="utf-8")) == {"language": "es", "theme": "dark"}


def test_file_storage_remove_item(tmp_path: Path) -> None:
    path = tmp_path / "storage.json"
    storage = JsonFileStorage(path)
    storage.set_item("theme", "dark")

    storage.remove_item("theme")
    storage.remove_item("never-set")

    assert JsonFileStorage(path).get_item("theme") is None


@pytest.mark.parametrize(
    "content",
    ["{broken", "[1, 2, 3]", '"just text"', "[" * 200_000 + "]" * 200_000],
    ids=["broken", "array", "string", "deeply-nested"],
)
def test_unreadable_file_starts_empty(tmp_path: Path, content: str) -> None:
    path = tmp_path / "storage.json"
    path.write_text(content, encoding="utf-8")

    storage = JsonFileStorage(path)

    assert storage.get_item("tasks") is None
    storage.set_item("language", "en")
    assert JsonFileStorage(path).get_item("language") == "en"


def test_non_text_values_are_dropped(tmp_path: Path) -> None:
    path = tmp_path / "storage.json"
    path.write_text(json.dumps({"language": "es", "tasks": [1, 2]}), encoding="utf-8")

    storage = JsonFileStorage(path)

    assert storage.get_item("language") == "es"
    assert storage.get_item("tasks") is None


def test_write_failure_raises_storage_error(tmp_path: Path) -> None:
    blocker = tmp_path / "not-a-dir"
    blocker.write_text("", encoding="utf-8")
    storage = JsonFileStorage(blocker / "storage.json")

    with pytest.raises(StorageError):
        storage.set_item("language", "es")

    assert storage.get_item("language") == "es"


def test_store_over_file_storage(tmp_path: Path) -> None:
    path = tmp_path / "storage.json"
    PersistentStore(JsonFileStorage(path)).save_tasks([Task(id=5, text="Persisted", completed=True)])

    loaded = PersistentStore(JsonFileStorage(path)).load_tasks()

    assert loaded == [Task(id=5, text="Persisted", completed=True)]


def test_unserializable_tasks_are_not_saved(storage: InMemoryStorage, persistent: PersistentStore) -> None:
    unencodable = Task.model_construct(id=1, text="bad \udce9 text", completed=False)

    assert persistent.save_tasks([unencodable]) is False

    assert storage.get_item("tasks") is None
