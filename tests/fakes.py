# ♥♥─── Test Fakes ───────────────────────────────────────────────────────────────
from __future__ import annotations

from tasktui.core import StorageError, InMemoryStorage


class FailingStorage(InMemoryStorage):
    """Storage whose writes (and optionally reads) always fail."""

    def __init__(self, initial: dict[str, str] | None = None, *, fail_reads: bool = False) -> None:
        super().__init__(initial)
        self.fail_reads = fail_reads
        self.write_attempts = 0

    def get_item(self, key: str) -> str | None:
        if self.fail_reads:
            msg = f"read of {key!r} failed"
            raise StorageError(msg)
        return super().get_item(key)

    def set_item(self, key: str, value: str) -> None:
        self.write_attempts += 1
        msg = f"write of {key!r} failed"
        raise StorageError(msg)


class StepClock:
    """Millisecond clock that returns preset values, repeating the last one."""

    def __init__(self, *values: int) -> None:
        self.values = list(values) or [1_700_000_000_000]
        self.calls = 0

    def __call__(self) -> int:
        value = self.values[min(self.calls, len(self.values) - 1)]
        self.calls += 1
        return value


class Recorder[E]:
    """Subscriber that keeps every event it receives."""

    def __init__(self) -> None:
        self.events: list[E] = []

    def __call__(self, event: E) -> None:
        self.events.append(event)
