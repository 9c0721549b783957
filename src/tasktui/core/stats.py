# ♥♥─── Task Statistics ──────────────────────────────────────────────────────────
from __future__ import annotations

from typing import TYPE_CHECKING
from dataclasses import dataclass


if TYPE_CHECKING:
    from collections.abc import Iterable

    from .models import Task


@dataclass(frozen=True, slots=True)
class TaskStats:
    """Completed/pending breakdown of a task collection."""

    completed: int
    pending: int
    total: int
    progress_percent: float

    @property
    def progress_display(self) -> int:
        """Progress as a whole percentage between 0 and 100."""
        return round(self.progress_percent * 100)


EMPTY_STATS = TaskStats(completed=0, pending=0, total=0, progress_percent=0.0)


def derive_stats(tasks: Iterable[Task]) -> TaskStats:
    """Count completed and pending tasks.

    :param tasks: The current collection.
    :returns: Counts plus the completed fraction, ``0`` for an empty collection.
    """
    total = 0
    completed = 0
    for task in tasks:
        total += 1
        if task.completed:
            completed += 1
    if total == 0:
        return EMPTY_STATS
    return TaskStats(completed=completed, pending=total - completed, total=total, progress_percent=completed / total)
