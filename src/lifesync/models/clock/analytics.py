"""Weekly aggregation and streaks over the session log.

Days are local calendar days of the machine running the code; there is no
timezone normalisation, so a session logged just after midnight UTC may land
on the previous or next day depending on where it is evaluated.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from datetime import date, datetime, timedelta
from typing import Any

from lifesync.models.core import (
    DayBucket,
    Session,
    StreakStats,
    WeeklyStats,
    coerce_minutes,
)

from .formatting import day_key

WINDOW_DAYS = 7

SessionLike = Session | Mapping[str, Any]


def _field(session: SessionLike, name: str) -> Any:
    if isinstance(session, Mapping):
        return session.get(name)
    return getattr(session, name, None)


def _minutes(session: SessionLike) -> int | float:
    return coerce_minutes(_field(session, "minutes"))


def _reference_day(reference: date | datetime | None) -> date:
    if reference is None:
        return date.today()
    if isinstance(reference, datetime):
        if reference.tzinfo is not None:
            reference = reference.astimezone()
        return reference.date()
    return reference


def window_keys(reference: date | datetime | None = None) -> list[str]:
    """The seven day keys ending at *reference*, oldest first."""
    end = _reference_day(reference)
    return [(end - timedelta(days=i)).isoformat() for i in range(WINDOW_DAYS - 1, -1, -1)]


def aggregate_weekly(
    sessions: Iterable[SessionLike], reference: date | datetime | None = None
) -> WeeklyStats:
    """
    Sum session minutes per day over the trailing 7-day window.

    Args:
        sessions: Session models or raw session mappings
        reference: Last day of the window (defaults to today)

    Returns:
        WeeklyStats with exactly seven buckets, oldest first; days without
        sessions have 0 minutes and sessions outside the window are ignored
    """
    buckets: dict[str, int | float] = {key: 0 for key in window_keys(reference)}

    for session in sessions:
        key = day_key(_field(session, "date"))
        if key in buckets:
            buckets[key] += _minutes(session)

    by_day = [DayBucket(date=key, minutes=minutes) for key, minutes in buckets.items()]
    return WeeklyStats(by_day=by_day, total_minutes=sum(b.minutes for b in by_day))


def active_days(sessions: Iterable[SessionLike]) -> set[str]:
    """Distinct local day keys that have at least one session."""
    days = set()
    for session in sessions:
        key = day_key(_field(session, "date"))
        if key is not None:
            days.add(key)
    return days


def current_streak(
    sessions: Iterable[SessionLike], reference: date | datetime | None = None
) -> int:
    """
    Count consecutive active days ending at *reference*.

    The scan walks backwards one day at a time and stops at the first day
    without a session, so the result is 0 when the reference day itself has
    no session.
    """
    days = active_days(sessions)
    day = _reference_day(reference)

    count = 0
    while day.isoformat() in days:
        count += 1
        day -= timedelta(days=1)
    return count


def longest_streak(sessions: Iterable[SessionLike]) -> int:
    """Length of the longest run of consecutive active days anywhere in the log."""
    dates = sorted(date.fromisoformat(key) for key in active_days(sessions))
    if not dates:
        return 0

    longest = 1
    current_run = 1
    for previous, current in zip(dates, dates[1:]):
        if (current - previous).days == 1:
            current_run += 1
            longest = max(longest, current_run)
        else:
            current_run = 1
    return longest


def streak_stats(
    sessions: Iterable[SessionLike], reference: date | datetime | None = None
) -> StreakStats:
    """Current and longest streak in one pass over the log."""
    sessions = list(sessions)
    return StreakStats(
        current=current_streak(sessions, reference),
        longest=longest_streak(sessions),
    )
