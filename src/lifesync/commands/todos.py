"""Task list commands."""

import typer

from lifesync.models import NotFoundError, TodoUpdate
from lifesync.services.config_service import (
    get_config_service,
    get_storage_strategy_context,
)
from lifesync.utils.ui.console import get_console
from lifesync.utils.ui.formatters import format_output, format_success

from .decorators import command_wrapper

console = get_console()
app = typer.Typer(help="Task list commands")


def _todos():
    return get_storage_strategy_context().todo_repository


@app.command("list")
@command_wrapper
def list_todos(
    output: str | None = typer.Option(None, "--output", "-o", help="Output format (pretty, table, json, yaml); defaults to config"),
) -> None:
    """List tasks in the order they were added."""
    output = output or get_config_service().config.output.format
    todos = [todo.to_dict() for todo in _todos().list()]
    if not todos and output == "pretty":
        console.print("📝 No tasks yet. Add one with [cyan]lifesync todos add[/cyan]!")
        return
    format_output(todos, output)


@app.command("add")
@command_wrapper
def add_todo(
    text: list[str] = typer.Argument(..., help="Task description (max 100 characters)"),
) -> None:
    """Add a new task."""
    todo = _todos().add(" ".join(text))
    format_success(f"Added task #{todo.id}: {todo.text}")


def _set_completed(todo_id: int, completed: bool) -> None:
    todo = _todos().update(todo_id, TodoUpdate(completed=completed))
    if todo is None:
        raise NotFoundError(f"Task #{todo_id} not found")
    state = "done" if completed else "pending"
    format_success(f"Task #{todo.id} marked {state}")


@app.command("done")
@command_wrapper
def complete_todo(todo_id: int = typer.Argument(..., help="Task ID")) -> None:
    """Mark a task as completed."""
    _set_completed(todo_id, True)


@app.command("undo")
@command_wrapper
def reopen_todo(todo_id: int = typer.Argument(..., help="Task ID")) -> None:
    """Mark a completed task as pending again."""
    _set_completed(todo_id, False)


@app.command("toggle")
@command_wrapper
def toggle_todo(todo_id: int = typer.Argument(..., help="Task ID")) -> None:
    """Flip a task between pending and done."""
    todo = _todos().toggle(todo_id)
    if todo is None:
        raise NotFoundError(f"Task #{todo_id} not found")
    format_success(f"Task #{todo.id} marked {'done' if todo.completed else 'pending'}")


@app.command("delete")
@command_wrapper
def delete_todo(todo_id: int = typer.Argument(..., help="Task ID")) -> None:
    """Delete a task."""
    _todos().remove(todo_id)
    format_success(f"Task #{todo_id} deleted")


@app.command("clear-completed")
@command_wrapper
def clear_completed() -> None:
    """Delete every completed task."""
    removed = _todos().clear_completed()
    if removed == 0:
        console.print("[dim]No completed tasks to clear[/dim]")
        return
    format_success(f"Cleared {removed} completed task{'s' if removed != 1 else ''}")
