# ♥♥─── Test Fixtures ────────────────────────────────────────────────────────────
from __future__ import annotations

import pytest

from tasktui.core import AppState, TaskStore, ThemeProvider, InMemoryStorage, PersistentStore

from .fakes import StepClock


@pytest.fixture
def storage() -> InMemoryStorage:
    return InMemoryStorage()


@pytest.fixture
def persistent(storage: InMemoryStorage) -> PersistentStore:
    return PersistentStore(storage)


@pytest.fixture
def clock() -> StepClock:
    return StepClock(1_000, 2_000, 3_000, 4_000, 5_000)


@pytest.fixture
def store(persistent: PersistentStore, clock: StepClock) -> TaskStore:
    return TaskStore(persistent, clock=clock)


@pytest.fixture
def theme(storage: InMemoryStorage) -> ThemeProvider:
    return ThemeProvider(storage)


@pytest.fixture
def app_state(store: TaskStore, persistent: PersistentStore, theme: ThemeProvider) -> AppState:
    return AppState(store=store, persistent=persistent, theme=theme)
