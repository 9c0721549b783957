# ♥♥─── Task Store ─────────────────────────────────────────────────────────────
"""Owner of the in-memory task collection."""

from __future__ import annotations

import time
from typing import TYPE_CHECKING

from pydantic import ValidationError

from tasktui.custom_logger import log

from .events import Observable, TasksChanged
from .models import Task, TaskAction


if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

    from .storage import PersistentStore


def now_millis() -> int:
    """Current wall-clock time in milliseconds."""
    return time.time_ns() // 1_000_000


# ─── Task Store ───────────────────────────────────────────────────────────────
class TaskStore(Observable[TasksChanged]):
    """Ordered task collection with persistence after every mutation.

    The store is the only writer of the collection. Every mutating call
    saves the whole collection before returning and then notifies
    subscribers with a :class:`TasksChanged` event.
    """

    def __init__(self, persistent: PersistentStore, clock: Callable[[], int] = now_millis) -> None:
        """Initialize an empty store.

        :param persistent: Adapter used to load and save the collection.
        :param clock: Millisecond clock that seeds new task ids.
        """
        super().__init__()
        self.persistent = persistent
        self.clock = clock
        self._tasks: list[Task] = []

    # ─── Read Access ──────────────────────────────────────────────────────────
    @property
    def tasks(self) -> tuple[Task, ...]:
        return tuple(self._tasks)

    def get(self, task_id: int) -> Task | None:
        return next((task for task in self._tasks if task.id == task_id), None)

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(tuple(self._tasks))

    # ─── Operations ───────────────────────────────────────────────────────────
    def load(self) -> None:
        """Replace the collection with the persisted one, or empty it."""
        self._tasks = self.persistent.load_tasks() or []
        log.info("Loaded {} tasks from storage.", len(self._tasks))
        self.emit(TasksChanged(TaskAction.LOADED))

    def add(self, text: str) -> Task | None:
        """Append a new pending task.

        :param text: Task text, stored as given.
        :returns: The new task, or ``None`` if ``text`` is blank or not
            encodable as UTF-8.
        """
        if not text.strip():
            log.debug("Ignoring blank task text.")
            return None
        try:
            task = Task(id=self._next_id(), text=text, completed=False)
        except ValidationError as e:
            log.warning("Ignoring task text that cannot be stored: {}", e.errors()[0]["msg"])
            return None
        self._tasks.append(task)
        self._persist()
        log.info("Added task {}.", task.id)
        self.emit(TasksChanged(TaskAction.ADDED, task.id))
        return task

    def toggle(self, task_id: int) -> Task | None:
        """Flip the completion flag of ``task_id``.

        :returns: The updated task, or ``None`` if no task has that id.
        """
        updated: Task | None = None
        for index, task in enumerate(self._tasks):
            if task.id == task_id:
                updated = task.toggled()
                self._tasks[index] = updated
                break
        self._persist()
        if updated is None:
            log.debug("Toggle ignored, no task {}.", task_id)
            return None
        log.info("Task {} marked {}.", task_id, "completed" if updated.completed else "pending")
        self.emit(TasksChanged(TaskAction.TOGGLED, task_id))
        return updated

    def delete(self, task_id: int) -> bool:
        """Remove ``task_id`` from the collection.

        :returns: Whether a task was removed.
        """
        remaining = [task for task in self._tasks if task.id != task_id]
        removed = len(remaining) != len(self._tasks)
        self._tasks = remaining
        self._persist()
        if not removed:
            log.debug("Delete ignored, no task {}.", task_id)
            return False
        log.info("Deleted task {}.", task_id)
        self.emit(TasksChanged(TaskAction.DELETED, task_id))
        return True

    # ─── Internals ────────────────────────────────────────────────────────────
    def _next_id(self) -> int:
        candidate = self.clock()
        highest = max((task.id for task in self._tasks), default=None)
        if highest is not None and candidate <= highest:
            return highest + 1
        return candidate

    def _persist(self) -> None:
        self.persistent.save_tasks(self._tasks)
