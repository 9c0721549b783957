from __future__ import annotations

from .task_screen import TaskListScreen


__all__ = ["TaskListScreen"]
