# ♥♥─── Change Notifications ─────────────────────────────────────────────────────
"""Minimal observer support shared by the stores and the view model.

Subscribers are plain callables invoked synchronously, in subscription order,
before the mutating call returns.
"""

from __future__ import annotations

from typing import TYPE_CHECKING
from dataclasses import dataclass

from tasktui.custom_logger import log

from .models.base_enums import TaskAction, ChangeKind


if TYPE_CHECKING:
    from collections.abc import Callable


type Subscriber[E] = Callable[[E], None]
type Unsubscribe = Callable[[], None]


# ─── Events ───────────────────────────────────────────────────────────────────
@dataclass(frozen=True, slots=True)
class TasksChanged:
    """The task collection changed."""

    action: TaskAction
    task_id: int | None = None


@dataclass(frozen=True, slots=True)
class StateChanged:
    """Some slice of the application state changed."""

    kind: ChangeKind


# ─── Observable ───────────────────────────────────────────────────────────────
class Observable[E]:
    """Keeps a list of subscribers and broadcasts events to them."""

    def __init__(self) -> None:
        self._subscribers: list[Subscriber[E]] = []

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)

    def subscribe(self, callback: Subscriber[E]) -> Unsubscribe:
        """Register ``callback`` and return a function that removes it.

        :param callback: Called with every event emitted from now on.
        :returns: A no-argument callable that unsubscribes ``callback``.
        """
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            self.unsubscribe(callback)

        return unsubscribe

    def unsubscribe(self, callback: Subscriber[E]) -> None:
        """Remove ``callback``; unknown callbacks are ignored."""
        if callback in self._subscribers:
            self._subscribers.remove(callback)

    def emit(self, event: E) -> None:
        """Deliver ``event`` to every subscriber.

        A failing subscriber is logged and skipped so the others still see
        the event.
        """
        for callback in list(self._subscribers):
            try:
                callback(event)
            except Exception as e:
                log.opt(exception=True).error(f"Subscriber {callback!r} failed on {event!r}: {e}")
