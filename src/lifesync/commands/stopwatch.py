"""Stopwatch command."""

from contextlib import nullcontext

import typer
from rich.table import Table

from lifesync.models.clock.formatting import format_stopwatch_time
from lifesync.models.clock.stopwatch import STOPWATCH_INTERVAL, Stopwatch
from lifesync.models.clock.ticker import ThreadTicker, Ticker
from lifesync.utils.ui.console import get_console

from .decorators import command_wrapper

console = get_console()
app = typer.Typer(help="Stopwatch with laps")


def _make_ticker(interval: float) -> Ticker:
    return ThreadTicker(interval)


def _read_command() -> str:
    return console.input("")


def render_laps(stopwatch: Stopwatch) -> Table:
    """Laps with their split and cumulative times."""
    table = Table(title=f"Laps ({len(stopwatch.laps)})", show_header=True)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Split", justify="right")
    table.add_column("Total", justify="right", style="cyan")
    for number, (split, total) in enumerate(zip(stopwatch.splits(), stopwatch.laps), start=1):
        table.add_row(str(number), format_stopwatch_time(split), format_stopwatch_time(total))
    return table


@app.command("start")
@command_wrapper
def start_stopwatch():
    """Run a stopwatch: Enter records a lap, q stops."""
    ticker = _make_ticker(STOPWATCH_INTERVAL)
    stopwatch = Stopwatch(ticker=ticker)
    lock = getattr(ticker, "lock", None) or nullcontext()

    console.print("\n[bold green]Stopwatch running[/bold green]")
    console.print("[dim]Enter = lap, q = stop[/dim]\n")

    stopwatch.start()
    try:
        while True:
            command = _read_command().strip().lower()
            with lock:
                if command == "q":
                    stopwatch.pause()
                    break
                before = len(stopwatch.laps)
                stopwatch.lap()
                if len(stopwatch.laps) > before:
                    console.print(
                        f"Lap {len(stopwatch.laps)}: "
                        f"[cyan]{format_stopwatch_time(stopwatch.laps[-1])}[/cyan]"
                    )
    except (KeyboardInterrupt, EOFError):
        with lock:
            stopwatch.pause()
    finally:
        stopwatch.close()

    console.print(f"\n⏱️  Total: [bold]{format_stopwatch_time(stopwatch.elapsed_centiseconds)}[/bold]")
    if stopwatch.laps:
        console.print(render_laps(stopwatch))
