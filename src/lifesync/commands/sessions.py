"""Session log commands."""

import typer

from lifesync.models import SessionCreate
from lifesync.services.config_service import (
    get_config_service,
    get_storage_strategy_context,
)
from lifesync.utils.ui.console import get_console
from lifesync.utils.ui.formatters import format_output, format_success

from .decorators import command_wrapper

console = get_console()
app = typer.Typer(help="Focus session log")


@app.command("list")
@command_wrapper
def list_sessions(
    limit: int = typer.Option(20, "--limit", "-n", help="Number of most recent sessions to show"),
    output: str | None = typer.Option(None, "--output", "-o", help="Output format (pretty, table, json, yaml); defaults to config"),
) -> None:
    """Show logged sessions, oldest first."""
    output = output or get_config_service().config.output.format
    sessions = get_storage_strategy_context().session_repository.list()
    if limit > 0:
        sessions = sessions[-limit:]
    if not sessions and output == "pretty":
        console.print("[yellow]No sessions logged yet[/yellow]")
        return
    format_output([session.to_dict() for session in sessions], output)


@app.command("log")
@command_wrapper
def log_session(
    minutes: float = typer.Argument(..., min=0, help="Minutes of focused work"),
    type: str = typer.Option("focus", "--type", "-t", help="Session type (focus, timer, ...)"),
) -> None:
    """Log a session by hand."""
    value = int(minutes) if minutes.is_integer() else minutes
    session = get_storage_strategy_context().session_repository.append(
        SessionCreate(type=type, minutes=value)
    )
    format_success(f"Logged {session.minutes} minute {session.type} session")
