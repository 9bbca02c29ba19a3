"""Tick sources that drive the timer and stopwatch state machines."""

from __future__ import annotations

import threading
from abc import ABC, abstractmethod
from collections.abc import Callable

TickCallback = Callable[[], None]


class Ticker(ABC):
    """Delivers a callback at a fixed interval until stopped.

    ``stop()`` must be safe to call any number of times, including from inside
    the callback itself.
    """

    interval: float

    @abstractmethod
    def start(self, callback: TickCallback) -> None:
        """Begin delivering ticks to *callback*, replacing any previous one."""

    @abstractmethod
    def stop(self) -> None:
        """Stop delivering ticks."""

    @property
    @abstractmethod
    def running(self) -> bool:
        """Whether ticks are currently being delivered."""


class ManualTicker(Ticker):
    """Deterministic ticker: ticks only happen when ``advance()`` is called."""

    def __init__(self, interval: float = 1.0):
        self.interval = interval
        self._callback: TickCallback | None = None
        self.start_count = 0
        self.stop_count = 0

    def start(self, callback: TickCallback) -> None:
        self._callback = callback
        self.start_count += 1

    def stop(self) -> None:
        if self._callback is not None:
            self.stop_count += 1
        self._callback = None

    @property
    def running(self) -> bool:
        return self._callback is not None

    def advance(self, ticks: int = 1) -> int:
        """Deliver up to *ticks* ticks; returns how many were delivered.

        Delivery stops early if a callback stops the ticker.
        """
        delivered = 0
        for _ in range(ticks):
            if self._callback is None:
                break
            self._callback()
            delivered += 1
        return delivered


class ThreadTicker(Ticker):
    """Real-time ticker backed by a daemon thread.

    Callbacks run while holding ``lock``. Code that mutates the same state
    machine from another thread should take the lock too, so ticks and user
    actions never interleave.
    """

    LOCK_POLL_SECONDS = 0.02

    def __init__(self, interval: float = 1.0):
        self.interval = interval
        self.lock = threading.RLock()
        self._stop_event = threading.Event()
        self._thread: threading.Thread | None = None

    def start(self, callback: TickCallback) -> None:
        self.stop()
        self._stop_event = threading.Event()
        stop_event = self._stop_event

        def _run() -> None:
            while not stop_event.wait(self.interval):
                # Poll for the lock so a stop() issued by its holder is seen.
                while not self.lock.acquire(timeout=self.LOCK_POLL_SECONDS):
                    if stop_event.is_set():
                        return
                try:
                    if stop_event.is_set():
                        return
                    callback()
                finally:
                    self.lock.release()

        self._thread = threading.Thread(target=_run, name="lifesync-ticker", daemon=True)
        self._thread.start()

    def stop(self) -> None:
        self._stop_event.set()
        thread = self._thread
        self._thread = None
        if thread is not None and thread is not threading.current_thread():
            thread.join(timeout=max(1.0, self.interval * 2))

    @property
    def running(self) -> bool:
        return self._thread is not None and not self._stop_event.is_set()
