"""Main entry point for the LifeSync CLI."""

import httpx
import typer

from lifesync import __version__
from lifesync.api.client import APIError, get_client
from lifesync.commands import (
    clock,
    config,
    notes,
    serve,
    sessions,
    stats,
    stopwatch,
    theme,
    timer,
    todos,
)
from lifesync.services.config_service import get_config_service
from lifesync.utils.ui.console import get_console

app = typer.Typer(
    name="lifesync",
    help="Clock, timer, stopwatch, tasks, notes and focus stats in your terminal",
    no_args_is_help=True,
)

console = get_console()


# Add subcommands
app.add_typer(timer.app, name="timer", help="Countdown timer for focus sessions")
app.add_typer(stopwatch.app, name="stopwatch", help="Stopwatch with laps")
app.add_typer(todos.app, name="todos", help="Task list commands")
app.add_typer(notes.app, name="notes", help="Digital notes")
app.add_typer(sessions.app, name="sessions", help="Focus session log")
app.add_typer(stats.app, name="stats", help="Weekly focus statistics")
app.add_typer(config.app, name="config", help="Configuration management")

# Add top-level commands
app.command("clock")(clock.clock)
app.command("theme")(theme.theme)
app.command("serve")(serve.serve)


@app.command()
def version() -> None:
    """Show version information and, for the remote backend, API health."""
    console.print(f"[bold]LifeSync[/bold] version [cyan]{__version__}[/cyan]")

    config_service = get_config_service()
    backend = config_service.config.storage.backend
    console.print(f"Storage: [cyan]{backend}[/cyan]")
    if backend != "remote":
        return

    client = get_client()
    try:
        client.call("GET", "/api/stats/weekly")
        console.print("[green]✓ API is healthy[/green]")
    except (APIError, httpx.HTTPError, ValueError) as e:
        console.print(f"[red]✗ API health check failed: {e}[/red]")
    finally:
        client.close()


if __name__ == "__main__":
    app()
