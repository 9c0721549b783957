# ♥♥─── Translations ─────────────────────────────────────────────────────────────
"""Display strings for every supported language.

Each language is a frozen :class:`TranslationSet`, so a language that misses
a key fails at import time rather than at render time. Sets are keyed by
language code; a :class:`Language` member works as a key too.
"""

from __future__ import annotations

from enum import StrEnum
from types import MappingProxyType
from typing import TYPE_CHECKING

from pydantic import ConfigDict, BaseModel


if TYPE_CHECKING:
    from tasktui.core.models import Language


class TextKey(StrEnum):
    """Every translatable string in the interface."""

    TITLE = "title"
    ADD_TASK = "add_task"
    TASK_PLACEHOLDER = "task_placeholder"
    DELETE_TASK = "delete_task"
    NO_TASKS = "no_tasks"
    LANGUAGE = "language"
    LANGUAGE_NAME = "language_name"
    COMPLETED = "completed"
    PENDING = "pending"
    DARK_MODE = "dark_mode"
    LIGHT_MODE = "light_mode"
    STATISTICS = "statistics"
    COMPLETED_TASKS = "completed_tasks"
    PENDING_TASKS = "pending_tasks"
    TOTAL_TASKS = "total_tasks"
    PROGRESS = "progress"
    CHART_COMPLETED = "chart_completed"
    CHART_PENDING = "chart_pending"
    CHART_PLACEHOLDER = "chart_placeholder"


class TranslationSet(BaseModel):
    """All display strings of one language."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    title: str
    add_task: str
    task_placeholder: str
    delete_task: str
    no_tasks: str
    language: str
    language_name: str
    completed: str
    pending: str
    dark_mode: str
    light_mode: str
    statistics: str
    completed_tasks: str
    pending_tasks: str
    total_tasks: str
    progress: str
    chart_completed: str
    chart_pending: str
    chart_placeholder: str

    def get(self, key: TextKey | str) -> str:
        return getattr(self, TextKey(key).value)


TRANSLATIONS: MappingProxyType[str, TranslationSet] = MappingProxyType({
    "en": TranslationSet(
        title="Task List",
        add_task="Add Task",
        task_placeholder="Enter a new task...",
        delete_task="Delete",
        no_tasks="No tasks yet. Add one!",
        language="Language",
        language_name="English",
        completed="completed",
        pending="pending",
        dark_mode="Dark Mode",
        light_mode="Light Mode",
        statistics="Task Statistics",
        completed_tasks="Completed Tasks",
        pending_tasks="Pending Tasks",
        total_tasks="Total Tasks",
        progress="Progress",
        chart_completed="Completed",
        chart_pending="Pending",
        chart_placeholder="Add tasks to see statistics",
    ),
    "es": TranslationSet(
        title="Lista de Tareas",
        add_task="Agregar Tarea",
        task_placeholder="Ingresa una nueva tarea...",
        delete_task="Eliminar",
        no_tasks="No hay tareas aún. ¡Agrega una!",
        language="Idioma",
        language_name="Español",
        completed="completada",
        pending="pendiente",
        dark_mode="Modo Oscuro",
        light_mode="Modo Claro",
        statistics="Estadísticas de Tareas",
        completed_tasks="Tareas Completadas",
        pending_tasks="Tareas Pendientes",
        total_tasks="Total de Tareas",
        progress="Progreso",
        chart_completed="Completadas",
        chart_pending="Pendientes",
        chart_placeholder="Agrega tareas para ver estadísticas",
    ),
})


def translations_for(code: Language | str) -> TranslationSet:
    """Return the strings of a language.

    :param code: A :class:`Language` or its code.
    :raises ValueError: If ``code`` is not a supported language.
    """
    try:
        return TRANSLATIONS[code]
    except KeyError:
        msg = f"Unsupported language: {code!r}"
        raise ValueError(msg) from None


def lookup(code: Language | str, key: TextKey | str) -> str:
    """Return one display string.

    :param code: A :class:`Language` or its code.
    :param key: A :class:`TextKey` or its value.
    :raises ValueError: If the language or the key is unknown.
    """
    return translations_for(code).get(key)
