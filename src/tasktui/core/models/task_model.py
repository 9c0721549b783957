# ♥♥─── Task Models ────────────────────────────────────────────────────────────
"""Pydantic models for the persisted task collection."""

from __future__ import annotations

from pydantic import ConfigDict, BaseModel, StrictInt, StrictStr, TypeAdapter, StrictBool, field_validator


# ─── Common Model Configuration ────────────────────────────────────────────────
TASKTUI_MODEL_CONFIG = ConfigDict(
    extra="ignore",
    frozen=True,
    validate_assignment=True,
)


# ─── Task ─────────────────────────────────────────────────────────────────────
class Task(BaseModel):
    """A single to-do item.

    Serialized as ``{"id": int, "text": str, "completed": bool}``, which is
    the shape earlier sessions wrote to storage.
    """

    model_config = TASKTUI_MODEL_CONFIG

    id: StrictInt
    text: StrictStr
    completed: StrictBool = False

    @field_validator("text")
    @classmethod
    def validate_text(cls, v: str) -> str:
        """Reject blank or unencodable text while keeping the text exactly as entered.

        :param v: The input text.
        :returns: The unchanged text.
        """
        if not v.strip():
            msg = "task text must not be blank"
            raise ValueError(msg)
        try:
            v.encode("utf-8")
        except UnicodeEncodeError as e:
            msg = f"task text is not valid UTF-8 text ({e.reason})"
            raise ValueError(msg) from None
        return v

    def toggled(self) -> Task:
        """Return a copy with the completion flag flipped."""
        return self.model_copy(update={"completed": not self.completed})


# ─── Collection Codec ─────────────────────────────────────────────────────────
TaskListAdapter: TypeAdapter[list[Task]] = TypeAdapter(list[Task])


def dump_tasks(tasks: list[Task] | tuple[Task, ...]) -> str:
    """Serialize tasks to compact JSON text.

    :param tasks: Tasks in display order.
    :returns: JSON text of a list of task objects.
    """
    return TaskListAdapter.dump_json(list(tasks)).decode("utf-8")


def parse_tasks(raw: str | bytes) -> list[Task]:
    """Parse JSON text into tasks.

    :param raw: JSON text as written by :func:`dump_tasks`.
    :returns: Tasks in stored order.
    :raises pydantic.ValidationError: If the text is not valid JSON or any entry is malformed.
    """
    return TaskListAdapter.validate_json(raw)
