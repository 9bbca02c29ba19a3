"""Quick notes commands."""

import typer
from rich.prompt import Confirm

from lifesync.services.config_service import (
    get_config_service,
    get_storage_strategy_context,
)
from lifesync.utils.ui.console import get_console
from lifesync.utils.ui.formatters import format_output, format_success

from .decorators import command_wrapper

console = get_console()
app = typer.Typer(help="Digital notes")


def _notes():
    return get_storage_strategy_context().note_repository


@app.command("list")
@command_wrapper
def list_notes(
    output: str | None = typer.Option(None, "--output", "-o", help="Output format (pretty, table, json, yaml); defaults to config"),
) -> None:
    """List notes, newest first."""
    output = output or get_config_service().config.output.format
    notes = [note.to_dict() for note in _notes().list()]
    if not notes and output == "pretty":
        console.print("[dim]No notes yet.[/dim]")
        return
    format_output(notes, output)


@app.command("add")
@command_wrapper
def add_note(text: list[str] = typer.Argument(..., help="Note text")) -> None:
    """Write a quick note."""
    note = _notes().add(" ".join(text))
    format_success(f"Note #{note.id} saved")


@app.command("delete")
@command_wrapper
def delete_note(note_id: int = typer.Argument(..., help="Note ID")) -> None:
    """Delete a note."""
    _notes().remove(note_id)
    format_success(f"Note #{note_id} deleted")


@app.command("clear")
@command_wrapper
def clear_notes(
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation prompt"),
) -> None:
    """Delete all notes."""
    notes = _notes()
    if not notes.list():
        console.print("[dim]No notes to clear[/dim]")
        return
    if not yes and not Confirm.ask("Delete all notes?", console=console):
        console.print("[yellow]Cancelled[/yellow]")
        return
    notes.clear()
    format_success("All notes cleared")
