"""Countdown timer commands."""

import time
from contextlib import nullcontext
from typing import Optional

import typer
from rich.live import Live
from rich.table import Table
from rich.text import Text

from lifesync.models import SessionCreate, ValidationError
from lifesync.models.clock.formatting import format_timer_time
from lifesync.models.clock.signals import ConsoleSignal
from lifesync.models.clock.ticker import ThreadTicker, Ticker
from lifesync.models.clock.timer import (
    TIMER_PRESETS,
    CountdownTimer,
    SessionCompleted,
    TimerStatus,
)
from lifesync.services.config_service import (
    get_config_service,
    get_storage_strategy_context,
)
from lifesync.utils.logger import get_logger
from lifesync.utils.ui.console import get_console
from lifesync.utils.ui.formatters import format_info, format_warning, render_progress_bar

from .decorators import command_wrapper

console = get_console()
app = typer.Typer(help="Countdown timer for focus sessions")

REFRESH_SECONDS = 0.25


def _make_ticker(interval: float) -> Ticker:
    return ThreadTicker(interval)


def _wait(seconds: float) -> None:
    time.sleep(seconds)


def render_timer(timer: CountdownTimer) -> Text:
    """Remaining time, a progress bar and the timer status."""
    if timer.status == TimerStatus.EXPIRED:
        style = "bold green"
    elif timer.is_warning:
        style = "bold red"
    else:
        style = "bold cyan"

    elapsed = timer.configured_seconds - timer.remaining_seconds
    text = Text()
    text.append(f"⏱️  {format_timer_time(timer.remaining_seconds)}", style=style)
    text.append(f"  {render_progress_bar(elapsed, timer.configured_seconds, width=20)}")
    text.append(f"  {timer.status.value}", style="dim")
    return text


def _configure(timer: CountdownTimer, minutes: int, seconds: int, preset: Optional[int]) -> None:
    if preset is not None:
        try:
            timer.apply_preset(preset)
        except ValueError as e:
            raise ValidationError(str(e)) from e
        return

    if not timer.configure(minutes, seconds):
        raise ValidationError("Timer duration must be between 1 second and 60 minutes")


@app.command("start")
@command_wrapper
def start_timer(
    minutes: Optional[int] = typer.Option(None, "--minutes", "-m", min=0, help="Minutes (defaults to config)"),
    seconds: Optional[int] = typer.Option(None, "--seconds", "-s", min=0, max=59, help="Seconds (defaults to config)"),
    preset: Optional[int] = typer.Option(None, "--preset", "-p", help="Quick preset: 5, 15, 25 or 45 minutes"),
    no_log: bool = typer.Option(False, "--no-log", help="Do not record the session when the timer finishes"),
):
    """Run a countdown and log a session when it finishes."""
    logger = get_logger()
    timer_config = get_config_service().config.timer
    if minutes is None and seconds is None:
        minutes, seconds = timer_config.default_minutes, timer_config.default_seconds
    minutes = minutes or 0
    seconds = seconds or 0

    sessions = get_storage_strategy_context().session_repository
    logged: list[SessionCompleted] = []

    def on_complete(event: SessionCompleted) -> None:
        if no_log:
            return
        sessions.append(SessionCreate(type=event.type, minutes=event.minutes, date=event.date))
        logged.append(event)
        logger.info("timer session logged: %s minutes", event.minutes)

    ticker = _make_ticker(1.0)
    timer = CountdownTimer(ticker=ticker, signal=ConsoleSignal(console), on_complete=on_complete)
    _configure(timer, minutes, seconds, preset)
    lock = getattr(ticker, "lock", None) or nullcontext()

    console.print(f"\n[bold green]Starting {format_timer_time(timer.configured_seconds)} countdown[/bold green]")
    console.print("[dim]Press Ctrl+C to stop[/dim]\n")

    timer.start()
    try:
        with Live(render_timer(timer), console=console, auto_refresh=False) as live:
            while True:
                with lock:
                    live.update(render_timer(timer), refresh=True)
                    if not timer.running:
                        break
                _wait(REFRESH_SECONDS)
    except KeyboardInterrupt:
        with lock:
            timer.pause()
        format_warning(f"Timer stopped with {format_timer_time(timer.remaining_seconds)} left")
        return
    finally:
        timer.close()

    if logged:
        format_info("Session saved")


@app.command("presets")
@command_wrapper
def list_presets():
    """Show the quick timer presets."""
    table = Table(title="Timer Presets", show_header=True)
    table.add_column("Preset", style="cyan")
    table.add_column("Duration", justify="right")
    for preset in TIMER_PRESETS:
        table.add_row(f"--preset {preset}", format_timer_time(preset * 60))
    console.print(table)
