"""Stopwatch state machine with cumulative laps."""

from __future__ import annotations

from .ticker import ManualTicker, Ticker

STOPWATCH_INTERVAL = 0.01


class Stopwatch:
    """Elapsed-time accumulator counting centiseconds.

    Laps record the cumulative elapsed time at the moment ``lap()`` is called;
    ``splits()`` derives the time between laps.
    """

    def __init__(self, ticker: Ticker | None = None):
        self.ticker = ticker or ManualTicker(interval=STOPWATCH_INTERVAL)
        self.elapsed_centiseconds = 0
        self.running = False
        self._laps: list[int] = []

    @property
    def laps(self) -> list[int]:
        return list(self._laps)

    def start(self) -> None:
        if self.running:
            return
        self.running = True
        self.ticker.start(self.tick)

    def pause(self) -> None:
        if not self.running:
            return
        self.running = False
        self.ticker.stop()

    def tick(self) -> None:
        if self.running:
            self.elapsed_centiseconds += 1

    def lap(self) -> None:
        if self.elapsed_centiseconds == 0:
            return
        self._laps.append(self.elapsed_centiseconds)

    def reset(self) -> None:
        self.ticker.stop()
        self.running = False
        self.elapsed_centiseconds = 0
        self._laps = []

    def close(self) -> None:
        self.ticker.stop()

    def splits(self) -> list[int]:
        """Time between consecutive laps (the first split is the first lap)."""
        previous = 0
        result = []
        for lap in self._laps:
            result.append(lap - previous)
            previous = lap
        return result
