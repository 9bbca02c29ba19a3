"""Data models for LifeSync."""

from .core import (
    MAX_NOTE_LENGTH,
    MAX_TASK_LENGTH,
    DayBucket,
    Note,
    Session,
    SessionCreate,
    StreakStats,
    Todo,
    TodoUpdate,
    WeeklyStats,
    coerce_minutes,
    validate_note_text,
    validate_task_text,
)
from .exceptions import AppError, NotFoundError, ValidationError

__all__ = [
    "MAX_NOTE_LENGTH",
    "MAX_TASK_LENGTH",
    "AppError",
    "DayBucket",
    "Note",
    "NotFoundError",
    "Session",
    "SessionCreate",
    "StreakStats",
    "Todo",
    "TodoUpdate",
    "ValidationError",
    "WeeklyStats",
    "coerce_minutes",
    "validate_note_text",
    "validate_task_text",
]
