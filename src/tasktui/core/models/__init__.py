# ♥♥─── Models Init ──────────────────────────────────────────────────────────────
from __future__ import annotations

from .base_enums import Language, TaskAction, ThemeMode, ChangeKind
from .task_model import Task, TaskListAdapter, dump_tasks, parse_tasks


__all__ = [
    "ChangeKind",
    "Language",
    "Task",
    "TaskAction",
    "TaskListAdapter",
    "ThemeMode",
    "dump_tasks",
    "parse_tasks",
]
