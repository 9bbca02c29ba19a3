"""Countdown timer state machine."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from .signals import CompletionSignal, NullSignal
from .ticker import ManualTicker, Ticker

logger = logging.getLogger(__name__)

MAX_TIMER_SECONDS = 3600
DEFAULT_TIMER_MINUTES = 25
TIMER_PRESETS = (5, 15, 25, 45)
WARNING_SECONDS = 10


class TimerStatus(str, Enum):
    """Lifecycle of a countdown."""

    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"
    EXPIRED = "expired"


@dataclass(frozen=True)
class SessionCompleted:
    """Emitted once when a countdown reaches zero."""

    minutes: int
    configured_seconds: int
    type: str = "timer"
    date: str = field(default_factory=lambda: datetime.now().astimezone().isoformat())


class CountdownTimer:
    """Countdown timer driven by an injected ticker.

    The ticker is started on ``start()`` and stopped on pause, reset and
    expiry, so a paused or finished timer leaves no periodic callback behind.
    """

    def __init__(
        self,
        ticker: Ticker | None = None,
        signal: CompletionSignal | None = None,
        on_complete: Callable[[SessionCompleted], None] | None = None,
        minutes: int = DEFAULT_TIMER_MINUTES,
        seconds: int = 0,
    ):
        self.ticker = ticker or ManualTicker(interval=1.0)
        self.signal = signal or NullSignal()
        self.on_complete = on_complete
        self.configured_seconds = DEFAULT_TIMER_MINUTES * 60
        self.remaining_seconds = self.configured_seconds
        self.status = TimerStatus.IDLE
        self.configure(minutes, seconds)

    @property
    def running(self) -> bool:
        return self.status == TimerStatus.RUNNING

    @property
    def is_warning(self) -> bool:
        """True in the last few seconds of a running countdown."""
        return self.running and self.remaining_seconds <= WARNING_SECONDS

    def configure(self, minutes: int, seconds: int = 0) -> bool:
        """Set a new duration; ignored while running or when out of range.

        Returns:
            True if the new duration was applied
        """
        total = minutes * 60 + seconds
        if self.running or total <= 0 or total > MAX_TIMER_SECONDS:
            return False
        self.configured_seconds = total
        self.remaining_seconds = total
        self.status = TimerStatus.IDLE
        return True

    def apply_preset(self, minutes: int) -> bool:
        """Apply one of the quick presets (5, 15, 25 or 45 minutes)."""
        if minutes not in TIMER_PRESETS:
            raise ValueError(
                f"Unknown preset {minutes}; choose one of {', '.join(map(str, TIMER_PRESETS))}"
            )
        return self.configure(minutes, 0)

    def start(self) -> None:
        if self.remaining_seconds == 0 or self.running:
            return
        self.status = TimerStatus.RUNNING
        self.ticker.start(self.tick)

    def pause(self) -> None:
        if not self.running:
            return
        self.status = TimerStatus.PAUSED
        self.ticker.stop()

    def reset(self) -> None:
        self.ticker.stop()
        self.status = TimerStatus.IDLE
        self.remaining_seconds = self.configured_seconds

    def close(self) -> None:
        """Stop ticking for good (teardown)."""
        self.ticker.stop()

    def tick(self) -> None:
        """Advance the countdown by one second."""
        if not self.running:
            return

        if self.remaining_seconds > 1:
            self.remaining_seconds -= 1
            return

        # Minutes are taken from the time left before this final tick, not
        # from the configured duration.
        before = self.remaining_seconds
        self.remaining_seconds = 0
        self.status = TimerStatus.EXPIRED
        self.ticker.stop()

        event = SessionCompleted(minutes=before // 60, configured_seconds=self.configured_seconds)
        logger.info(
            "timer expired after %ss, reporting %s minutes",
            self.configured_seconds,
            event.minutes,
        )
        if self.on_complete is not None:
            try:
                self.on_complete(event)
            except Exception as e:  # pylint: disable=broad-except
                logger.warning("completion callback failed: %s", e)
        self._signal()

    def _signal(self) -> None:
        try:
            self.signal.notify("Timer complete", "Great job! Time's up.")
            self.signal.play_tone()
        except Exception as e:  # pylint: disable=broad-except
            logger.warning("completion signal failed: %s", e)
