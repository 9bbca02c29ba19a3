"""Output formatters for different formats."""

import json
from datetime import datetime
from typing import Any

import yaml
from rich.console import Console
from rich.table import Table

console = Console()


def format_output(data: Any, output_format: str = "pretty") -> None:
    """Format and display output based on format."""
    if output_format == "json":
        print(json.dumps(data, indent=2, default=str))
    elif output_format == "yaml":
        print(yaml.dump(data, default_flow_style=False, sort_keys=False))
    elif output_format == "table":
        format_table(data)
    else:
        format_pretty(data)


def format_table(data: Any) -> None:
    """Format data as a table."""
    if not data:
        console.print("[yellow]No data to display[/yellow]")
        return

    if isinstance(data, list):
        if isinstance(data[0], dict):
            format_dict_table(data)
        else:
            for item in data:
                console.print(item)
    elif isinstance(data, dict):
        format_single_item(data)
    else:
        console.print(data)


def format_dict_table(items: list[dict]) -> None:
    """Format a list of dictionaries as a table."""
    if not items:
        console.print("[yellow]No items found[/yellow]")
        return

    columns = list(items[0].keys())
    table = Table(show_header=True, header_style="bold magenta")
    for col in columns:
        table.add_column(col.replace("_", " ").title())

    for item in items:
        table.add_row(*(_cell(item.get(col, "")) for col in columns))

    console.print(table)


def format_single_item(item: dict) -> None:
    """Format a single item as key-value pairs."""
    table = Table(show_header=False, box=None)
    table.add_column("Key", style="cyan")
    table.add_column("Value", style="white")

    for key, value in item.items():
        table.add_row(key.replace("_", " ").title(), _cell(value))

    console.print(table)


def _cell(value: Any) -> str:
    if isinstance(value, bool):
        return "✓" if value else "✗"
    if isinstance(value, list):
        return ", ".join(str(v) for v in value)
    if value is None:
        return "-"
    return str(value)


def format_error(message: str) -> None:
    """Format and display an error message."""
    console.print(f"[bold red]Error:[/bold red] {message}")


def format_success(message: str) -> None:
    """Format and display a success message."""
    console.print(f"[bold green]Success:[/bold green] {message}")


def format_warning(message: str) -> None:
    """Format and display a warning message."""
    console.print(f"[bold yellow]Warning:[/bold yellow] {message}")


def format_info(message: str) -> None:
    """Format and display an info message."""
    console.print(f"[bold blue]Info:[/bold blue] {message}")


# ============================================================================
# Pretty Format Implementation
# ============================================================================

STATUS_ICONS = {
    "open": "⬜",
    "completed": "☑️",
}

SESSION_ICONS = {
    "focus": "🍅",
    "timer": "⏱️",
}


def format_pretty(data: Any) -> None:
    """Format data in pretty format, picking a layout from the record shape."""
    if not data:
        console.print("[dim]Nothing here yet.[/dim]")
        return

    if isinstance(data, dict):
        format_single_item(data)
        return

    first = data[0]
    if "completed" in first:
        format_todos_pretty(data)
    elif "minutes" in first:
        format_sessions_pretty(data)
    elif "text" in first:
        format_notes_pretty(data)
    else:
        format_dict_table(data)


def format_todos_pretty(todos: list[dict]) -> None:
    """Render todos with pending/done counters."""
    completed = sum(1 for t in todos if t.get("completed"))
    pending = len(todos) - completed

    console.print(
        f"\n[bold]Tasks[/bold]  [cyan]{pending}[/cyan] pending · [green]{completed}[/green] done\n"
    )
    for todo in todos:
        if todo.get("completed"):
            icon = STATUS_ICONS["completed"]
            text = f"[dim strike]{todo['text']}[/dim strike]"
        else:
            icon = STATUS_ICONS["open"]
            text = todo["text"]
        console.print(f"  {icon} {text} [dim]#{todo['id']}[/dim]")
    console.print()


def format_notes_pretty(notes: list[dict]) -> None:
    """Render notes newest first, as stored."""
    console.print()
    for note in notes:
        console.print(f"[dim]#{note['id']} · {format_relative_time(note.get('createdAt'))}[/dim]")
        console.print(f"  {note['text']}")
    console.print()


def format_sessions_pretty(sessions: list[dict]) -> None:
    """Render logged sessions as a table."""
    table = Table(title=f"Sessions ({len(sessions)})", show_header=True)
    table.add_column("Date", style="cyan")
    table.add_column("Type")
    table.add_column("Minutes", justify="right")
    table.add_column("ID", style="dim")

    for session in sessions:
        kind = session.get("type") or "focus"
        icon = SESSION_ICONS.get(kind, "•")
        table.add_row(
            _short_timestamp(session.get("date")),
            f"{icon} {kind}",
            str(session.get("minutes", 0)),
            str(session.get("id")),
        )

    console.print(table)


def _short_timestamp(value: str | None) -> str:
    if not value:
        return "-"
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00")).strftime(
            "%Y-%m-%d %H:%M"
        )
    except ValueError:
        return value


def format_relative_time(date_str: str | datetime | None) -> str:
    """Format a timestamp relative to now ("just now", "5m ago", "2d ago")."""
    if not date_str:
        return ""

    if isinstance(date_str, datetime):
        dt = date_str
    else:
        try:
            dt = datetime.fromisoformat(date_str.replace("Z", "+00:00"))
        except ValueError:
            return date_str

    if dt.tzinfo is None:
        dt = dt.astimezone()
    seconds = int((datetime.now().astimezone() - dt).total_seconds())

    if seconds < 60:
        return "just now"
    if seconds < 3600:
        return f"{seconds // 60}m ago"
    if seconds < 86400:
        return f"{seconds // 3600}h ago"
    return f"{seconds // 86400}d ago"


def render_progress_bar(value: float, max_value: float, width: int = 10) -> str:
    """Render a progress bar using block characters."""
    if max_value == 0:
        ratio = 0
    else:
        ratio = min(value / max_value, 1.0)
    filled = int(ratio * width)
    return "█" * filled + "░" * (width - filled)
