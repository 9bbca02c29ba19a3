"""Live clock command."""

import time
from datetime import datetime

import typer
from rich.live import Live
from rich.text import Text

from lifesync.models import ValidationError
from lifesync.models.clock.formatting import format_clock_time, format_long_date
from lifesync.services.config_service import get_config_service
from lifesync.utils.ui.console import get_console

from .decorators import command_wrapper

console = get_console()


def render_clock(moment: datetime, clock_format: str) -> Text:
    text = Text(justify="center")
    text.append(format_clock_time(moment, clock_format), style="bold cyan")
    text.append("\n")
    text.append(format_long_date(moment), style="dim")
    return text


@command_wrapper
def clock(
    format: str | None = typer.Option(None, "--format", "-f", help="24h or 12h (defaults to config)"),
    watch: bool = typer.Option(False, "--watch", "-w", help="Keep updating every second"),
) -> None:
    """Show the current time and date."""
    clock_format = format or get_config_service().config.clock.format
    if clock_format not in ("24h", "12h"):
        raise ValidationError(f"Unknown clock format '{clock_format}'. Use 24h or 12h")

    if not watch:
        console.print(render_clock(datetime.now(), clock_format))
        return

    try:
        with Live(render_clock(datetime.now(), clock_format), console=console, refresh_per_second=4) as live:
            while True:
                time.sleep(1)
                live.update(render_clock(datetime.now(), clock_format))
    except KeyboardInterrupt:
        console.print()
