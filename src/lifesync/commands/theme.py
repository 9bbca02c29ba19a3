"""Theme preference command."""

import typer

from lifesync.models import ValidationError
from lifesync.services.config_service import get_storage_strategy_context
from lifesync.utils.ui.console import get_console
from lifesync.utils.ui.formatters import format_success

from .decorators import command_wrapper

console = get_console()

THEMES = ("light", "dark")


@command_wrapper
def theme(
    value: str | None = typer.Argument(None, help="light, dark or toggle"),
) -> None:
    """Show or change the theme."""
    preferences = get_storage_strategy_context().preference_repository
    current = preferences.get_theme()

    if value is None:
        console.print(f"Theme: [bold]{current}[/bold]")
        return

    if value == "toggle":
        value = "dark" if current == "light" else "light"
    elif value not in THEMES:
        raise ValidationError(f"Unknown theme '{value}'. Use light, dark or toggle")

    preferences.set_theme(value)
    format_success(f"Theme set to {value}")
