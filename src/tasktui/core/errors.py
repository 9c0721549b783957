# ♥♥─── Errors ─────────────────────────────────────────────────────────────────
from __future__ import annotations


class TaskTUIError(Exception):
    """Base class for application errors."""


class StorageError(TaskTUIError):
    """Raised by a storage backend when a value cannot be read or written."""


class ChartError(TaskTUIError):
    """Raised when a chart renderer is used outside its lifecycle."""
