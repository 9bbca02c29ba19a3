"""Clock, timer, stopwatch and session analytics."""

from .analytics import aggregate_weekly, current_streak, longest_streak, streak_stats
from .signals import CompletionSignal, ConsoleSignal, NullSignal
from .stopwatch import Stopwatch
from .ticker import ManualTicker, ThreadTicker, Ticker
from .timer import TIMER_PRESETS, CountdownTimer, SessionCompleted, TimerStatus

__all__ = [
    "TIMER_PRESETS",
    "CompletionSignal",
    "ConsoleSignal",
    "CountdownTimer",
    "ManualTicker",
    "NullSignal",
    "SessionCompleted",
    "Stopwatch",
    "ThreadTicker",
    "Ticker",
    "TimerStatus",
    "aggregate_weekly",
    "current_streak",
    "longest_streak",
    "streak_stats",
]
