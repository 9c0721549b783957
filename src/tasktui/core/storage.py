# ♥♥─── Persistent Storage ───────────────────────────────────────────────────────
"""Key-value storage port and the adapter that reads and writes app state.

The port mirrors browser local storage: string keys, string values. The
application only ever touches three keys: ``tasks`` and ``language`` through
:class:`PersistentStore`, and ``theme`` through the theme provider.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Protocol
from pathlib import Path

from pydantic import ValidationError
from pydantic_core import PydanticSerializationError

from tasktui.utils import read_json, write_json_atomic
from tasktui.custom_logger import log

from .errors import StorageError
from .models import Task, Language, dump_tasks, parse_tasks


if TYPE_CHECKING:
    from collections.abc import Iterable


TASKS_KEY = "tasks"
LANGUAGE_KEY = "language"


# ─── Storage Port ─────────────────────────────────────────────────────────────
class KeyValueStorage(Protocol):
    """Persistent string-to-string storage."""

    def get_item(self, key: str) -> str | None: ...

    def set_item(self, key: str, value: str) -> None: ...

    def remove_item(self, key: str) -> None: ...


# ─── In-Memory Storage ────────────────────────────────────────────────────────
class InMemoryStorage:
    """Storage that lives for the lifetime of the process."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._items: dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> str | None:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)

    def snapshot(self) -> dict[str, str]:
        """Return a copy of every stored item."""
        return dict(self._items)


# ─── JSON File Storage ────────────────────────────────────────────────────────
class JsonFileStorage:
    """Storage backed by a single JSON object on disk.

    The file is read once on construction and rewritten in full on every
    change. A missing, unreadable or non-object file starts out empty; only
    string values are kept.
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        self._items: dict[str, str] = self._read()

    def _read(self) -> dict[str, str]:
        data = read_json(self.path)
        if data is None:
            return {}
        if not isinstance(data, dict):
            log.warning("Storage file '{}' does not hold a JSON object, starting empty.", self.path)
            return {}
        items = {key: value for key, value in data.items() if isinstance(value, str)}
        if len(items) != len(data):
            log.warning("Ignored {} non-text entries in '{}'.", len(data) - len(items), self.path)
        return items

    def _write(self) -> None:
        if not write_json_atomic(self._items, self.path):
            msg = f"Could not write storage file '{self.path}'"
            raise StorageError(msg)

    def get_item(self, key: str) -> str | None:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        """Store ``value`` under ``key`` and flush the file.

        :raises StorageError: If the file cannot be written. The in-memory
            value is kept so the running session stays consistent.
        """
        self._items[key] = value
        self._write()

    def remove_item(self, key: str) -> None:
        if self._items.pop(key, None) is not None:
            self._write()


# ─── Persistent Store Adapter ─────────────────────────────────────────────────
class PersistentStore:
    """Reads and writes the task collection and language preference."""

    def __init__(self, storage: KeyValueStorage) -> None:
        self.storage = storage

    def _get(self, key: str) -> str | None:
        try:
            return self.storage.get_item(key)
        except StorageError as e:
            log.warning("Could not read '{}' from storage: {}", key, e)
            return None

    def _set(self, key: str, value: str) -> bool:
        try:
            self.storage.set_item(key, value)
        except StorageError as e:
            log.warning("Could not persist '{}': {}", key, e)
            return False
        return True

    # ─── Tasks ────────────────────────────────────────────────────────────────
    def load_tasks(self) -> list[Task] | None:
        """Return the persisted tasks, or ``None`` when absent or malformed.

        Later entries that repeat an earlier id are dropped.
        """
        raw = self._get(TASKS_KEY)
        if raw is None:
            return None
        try:
            tasks = parse_tasks(raw)
        except ValidationError as e:
            log.warning("Discarding malformed '{}' entry ({} errors).", TASKS_KEY, e.error_count())
            return None
        return _unique_by_id(tasks)

    def save_tasks(self, tasks: Iterable[Task]) -> bool:
        """Persist the full collection, returning whether the write succeeded."""
        try:
            payload = dump_tasks(tuple(tasks))
        except PydanticSerializationError as e:
            log.error("Could not serialize '{}': {}", TASKS_KEY, e)
            return False
        return self._set(TASKS_KEY, payload)

    # ─── Language ─────────────────────────────────────────────────────────────
    def load_language(self) -> Language | None:
        """Return the persisted language, or ``None`` when absent or invalid.

        Both the plain form (``es``) and the JSON-quoted form (``"es"``) are
        accepted.
        """
        raw = self._get(LANGUAGE_KEY)
        if raw is None:
            return None
        value = raw.strip()
        if value.startswith('"'):
            try:
                value = json.loads(value)
            except json.JSONDecodeError:
                value = None
        if isinstance(value, str) and value in Language:
            return Language(value)
        log.warning("Ignoring unknown stored language {!r}.", raw)
        return None

    def save_language(self, language: Language) -> bool:
        return self._set(LANGUAGE_KEY, language.value)


def _unique_by_id(tasks: list[Task]) -> list[Task]:
    seen: set[int] = set()
    unique: list[Task] = []
    for task in tasks:
        if task.id in seen:
            log.warning("Dropping duplicate stored task id {}.", task.id)
            continue
        seen.add(task.id)
        unique.append(task)
    return unique
