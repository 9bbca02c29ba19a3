"""Record models shared by the CLI, the repositories and the HTTP backend.

Field names on the wire and in storage are camelCase (``createdAt``,
``byDay``); Python attributes are snake_case.
"""

from __future__ import annotations

import math
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .exceptions import ValidationError

MAX_TASK_LENGTH = 100
MAX_NOTE_LENGTH = 500


def coerce_minutes(value: Any) -> int | float:
    """Turn an incoming minutes value into a non-negative number.

    Missing, non-numeric, negative and non-finite values become 0.
    """
    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, str):
        try:
            value = float(value) if value.strip() else 0
        except ValueError:
            return 0
        if float(value).is_integer():
            value = int(value)
    if not isinstance(value, (int, float)):
        return 0
    if isinstance(value, float) and not math.isfinite(value):
        return 0
    return value if value > 0 else 0


def validate_task_text(text: str | None) -> str:
    """Trim task text and reject empty or over-long descriptions."""
    trimmed = (text or "").strip()
    if not trimmed:
        raise ValidationError("Please enter a task description")
    if len(trimmed) > MAX_TASK_LENGTH:
        raise ValidationError(
            f"Task description must be less than {MAX_TASK_LENGTH} characters"
        )
    return trimmed


def validate_note_text(text: str | None) -> str:
    """Trim note text and reject empty notes."""
    trimmed = (text or "").strip()
    if not trimmed:
        raise ValidationError("Please write something before adding a note")
    if len(trimmed) > MAX_NOTE_LENGTH:
        raise ValidationError(
            f"Note must be at most {MAX_NOTE_LENGTH} characters"
        )
    return trimmed


class _Record(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    def to_dict(self) -> dict:
        """Serialize with wire field names."""
        return self.model_dump(by_alias=True)


class Session(_Record):
    """A logged block of productive time.

    Attributes:
        id: Creation timestamp in milliseconds, unique per log
        type: "focus", "timer" or any other label
        minutes: Non-negative duration
        date: ISO-8601 timestamp of completion
    """

    id: int
    type: str = "focus"
    minutes: int | float = 0
    date: str = ""

    @field_validator("minutes", mode="before")
    @classmethod
    def _minutes(cls, value: Any) -> int | float:
        return coerce_minutes(value)


class SessionCreate(_Record):
    """Model for appending a session; id and date are filled in by the log."""

    type: str = "focus"
    minutes: int | float = 0
    date: str | None = None

    @field_validator("type", mode="before")
    @classmethod
    def _type(cls, value: Any) -> str:
        return value or "focus"

    @field_validator("minutes", mode="before")
    @classmethod
    def _minutes(cls, value: Any) -> int | float:
        return coerce_minutes(value)


class Note(_Record):
    """A quick free-text note."""

    id: int
    text: str = ""
    created_at: str = Field(default="", alias="createdAt")


class Todo(_Record):
    """A task list entry.

    Attributes:
        id: Creation timestamp in milliseconds
        text: Task description (at most 100 characters when entered)
        completed: Whether the task is done
        created_at: ISO-8601 creation timestamp
    """

    id: int
    text: str = ""
    completed: bool = False
    created_at: str = Field(default="", alias="createdAt")


class TodoUpdate(_Record):
    """Partial todo update; only provided fields are merged."""

    text: str | None = None
    completed: bool | None = None


class DayBucket(_Record):
    """Minutes summed over one local calendar day."""

    date: str
    minutes: int | float = 0


class WeeklyStats(_Record):
    """Seven day buckets, oldest first, plus their total."""

    by_day: list[DayBucket] = Field(alias="byDay")
    total_minutes: int | float = Field(default=0, alias="totalMinutes")


class StreakStats(_Record):
    """Current and longest run of consecutive active days."""

    current: int = 0
    longest: int = 0
