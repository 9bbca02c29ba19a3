"""Statistics commands for logged sessions."""

from datetime import date

import typer

from lifesync.models.clock.analytics import aggregate_weekly, streak_stats
from lifesync.models.clock.formatting import format_duration, format_hours
from lifesync.services.config_service import get_storage_strategy_context
from lifesync.utils.ui.console import get_console
from lifesync.utils.ui.formatters import render_progress_bar

from .decorators import command_wrapper

console = get_console()
app = typer.Typer(help="Weekly focus statistics")


@app.command("week")
@command_wrapper
def show_week(
    output: str = typer.Option(None, "--output", "-o", help="Output format (json)"),
):
    """Show minutes per day over the last 7 days."""
    sessions = get_storage_strategy_context().session_repository.list()
    stats = aggregate_weekly(sessions)

    if output == "json":
        console.print_json(data=stats.to_dict())
        return

    console.print("\n[bold cyan]📊 Weekly Report - last 7 days[/bold cyan]\n")

    peak = max((bucket.minutes for bucket in stats.by_day), default=0)
    for bucket in stats.by_day:
        day = date.fromisoformat(bucket.date)
        bar = render_progress_bar(bucket.minutes, peak, width=20)
        console.print(f"  {day.strftime('%a %d')}  {bar}  {format_duration(bucket.minutes)}")

    console.print()
    console.print(f"Total Focus Time: [bold]{format_hours(stats.total_minutes)}h[/bold]")
    console.print(f"Sessions Tracked: [bold]{len(sessions)}[/bold]")
    console.print()


@app.command("streak")
@command_wrapper
def show_streak(
    output: str = typer.Option(None, "--output", "-o", help="Output format (json)"),
):
    """Show the current and longest run of active days."""
    sessions = get_storage_strategy_context().session_repository.list()
    streak = streak_stats(sessions)

    if output == "json":
        console.print_json(data=streak.to_dict())
        return

    day_word = "day" if streak.current == 1 else "days"
    console.print(f"\n🔥 Current streak: [bold]{streak.current}[/bold] {day_word}")
    console.print(f"🏆 Longest streak: [bold]{streak.longest}[/bold]\n")
