# ♥♥─── Core Init ──────────────────────────────────────────────────────────────
from __future__ import annotations

from .stats import TaskStats, derive_stats
from .errors import ChartError, StorageError, TaskTUIError
from .events import Observable, StateChanged, TasksChanged
from .storage import InMemoryStorage, JsonFileStorage, KeyValueStorage, PersistentStore
from .app_state import AppState
from .task_store import TaskStore
from .preferences import ThemeProvider


__all__ = [
    "AppState",
    "ChartError",
    "InMemoryStorage",
    "JsonFileStorage",
    "KeyValueStorage",
    "Observable",
    "PersistentStore",
    "StateChanged",
    "StorageError",
    "TaskStats",
    "TaskStore",
    "TaskTUIError",
    "TasksChanged",
    "ThemeProvider",
    "derive_stats",
]
