from __future__ import annotations

import pytest

from tasktui.core import TaskStats, derive_stats
from tasktui.core.models import Task


def test_empty_collection_has_zero_progress() -> None:
    stats = derive_stats([])

    assert stats == TaskStats(completed=0, pending=0, total=0, progress_percent=0.0)
    assert stats.progress_display == 0


def test_half_completed() -> None:
    tasks = [Task(id=1, text="A", completed=True), Task(id=2, text="B")]

    stats = derive_stats(tasks)

    assert (stats.completed, stats.pending, stats.total) == (1, 1, 2)
    assert stats.progress_percent == pytest.approx(0.5)
    assert stats.progress_display == 50


@pytest.mark.parametrize(("done", "total", "display"), [(1, 3, 33), (2, 3, 67), (3, 3, 100), (0, 4, 0)])
def test_progress_display_rounds(done: int, total: int, display: int) -> None:
    tasks = [Task(id=n, text=f"t{n}", completed=n < done) for n in range(total)]

    stats = derive_stats(tasks)

    assert stats.completed + stats.pending == stats.total == total
    assert stats.progress_display == display
