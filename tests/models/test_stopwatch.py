"""Unit tests for lifesync.models.clock.stopwatch."""

from __future__ import annotations

import pytest

from lifesync.models.clock.stopwatch import STOPWATCH_INTERVAL, Stopwatch
from lifesync.models.clock.ticker import ManualTicker


@pytest.fixture()
def ticker() -> ManualTicker:
    return ManualTicker(interval=STOPWATCH_INTERVAL)


@pytest.fixture()
def stopwatch(ticker) -> Stopwatch:
    return Stopwatch(ticker=ticker)


def test_starts_at_zero(stopwatch):
    assert stopwatch.elapsed_centiseconds == 0
    assert stopwatch.laps == []
    assert not stopwatch.running


def test_ticks_count_centiseconds(stopwatch, ticker):
    stopwatch.start()
    ticker.advance(150)
    assert stopwatch.elapsed_centiseconds == 150


def test_pause_stops_counting(stopwatch, ticker):
    stopwatch.start()
    ticker.advance(10)
    stopwatch.pause()
    stopwatch.tick()
    assert stopwatch.elapsed_centiseconds == 10
    assert not ticker.running


def test_start_twice_keeps_one_ticker(stopwatch, ticker):
    stopwatch.start()
    stopwatch.start()
    assert ticker.start_count == 1


def test_lap_at_zero_is_ignored(stopwatch):
    stopwatch.lap()
    assert stopwatch.laps == []


def test_laps_are_cumulative(stopwatch, ticker):
    stopwatch.start()
    ticker.advance(100)
    stopwatch.lap()
    ticker.advance(50)
    stopwatch.lap()
    assert stopwatch.laps == [100, 150]
    assert stopwatch.splits() == [100, 50]


def test_duplicate_laps_allowed_while_paused(stopwatch, ticker):
    stopwatch.start()
    ticker.advance(30)
    stopwatch.pause()
    stopwatch.lap()
    stopwatch.lap()
    assert stopwatch.laps == [30, 30]
    assert stopwatch.splits() == [30, 0]


def test_laps_property_returns_copy(stopwatch, ticker):
    stopwatch.start()
    ticker.advance(5)
    stopwatch.lap()
    stopwatch.laps.append(999)
    assert stopwatch.laps == [5]


def test_reset_clears_everything(stopwatch, ticker):
    stopwatch.start()
    ticker.advance(42)
    stopwatch.lap()
    stopwatch.reset()

    assert stopwatch.elapsed_centiseconds == 0
    assert stopwatch.laps == []
    assert not stopwatch.running
    assert not ticker.running


def test_close_stops_ticker(stopwatch, ticker):
    stopwatch.start()
    stopwatch.close()
    assert not ticker.running


def test_default_ticker_uses_ten_millisecond_interval():
    assert Stopwatch().ticker.interval == 0.01
