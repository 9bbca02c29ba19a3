"""Display helpers for clock, timer, stopwatch and dashboard values."""

from __future__ import annotations

from datetime import date, datetime
from typing import Literal

ClockFormat = Literal["24h", "12h"]


def format_timer_time(seconds: int) -> str:
    """Format remaining timer seconds as MM:SS."""
    seconds = max(0, int(seconds))
    mins, secs = divmod(seconds, 60)
    return f"{mins:02d}:{secs:02d}"


def format_stopwatch_time(centiseconds: int) -> str:
    """Format stopwatch centiseconds as MM:SS.cc."""
    centiseconds = max(0, int(centiseconds))
    total_seconds, cs = divmod(centiseconds, 100)
    minutes, seconds = divmod(total_seconds, 60)
    return f"{minutes:02d}:{seconds:02d}.{cs:02d}"


def format_clock_time(moment: datetime, clock_format: ClockFormat = "24h") -> str:
    """Format a wall-clock time with seconds, in 24-hour or 12-hour style."""
    if clock_format == "12h":
        return moment.strftime("%I:%M:%S %p")
    return moment.strftime("%H:%M:%S")


def format_long_date(moment: date) -> str:
    """Format a date as e.g. "Monday, January 1, 2024"."""
    return f"{moment.strftime('%A')}, {moment.strftime('%B')} {moment.day}, {moment.year}"


def format_hours(minutes: float) -> str:
    """Format a minute total as hours with one decimal place."""
    return f"{minutes / 60:.1f}"


def format_duration(minutes: float) -> str:
    """Format minutes as hours and minutes."""
    hours = int(minutes // 60)
    mins = int(minutes % 60)
    if hours > 0:
        return f"{hours}h {mins}m"
    return f"{mins}m"


def day_key(value: str | date | datetime | None) -> str | None:
    """Return the local calendar day (YYYY-MM-DD) a timestamp falls on.

    Aware datetimes are converted to the local timezone of this machine before
    taking the day; naive datetimes and date-only strings are used as they
    are. Malformed values give None.
    """
    if value is None:
        return None

    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            value = datetime.fromisoformat(text.replace("Z", "+00:00"))
        except ValueError:
            try:
                value = date.fromisoformat(text[:10])
            except ValueError:
                return None

    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone()
        return value.date().isoformat()

    if isinstance(value, date):
        return value.isoformat()

    return None
