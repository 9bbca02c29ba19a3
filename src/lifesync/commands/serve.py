"""Run the LifeSync HTTP backend."""

from typing import Optional

import typer

from lifesync.server import DEFAULT_PORT, create_app
from lifesync.services.config_service import get_config_service
from lifesync.utils.logger import get_logger
from lifesync.utils.ui.console import get_console

from .decorators import command_wrapper

console = get_console()


@command_wrapper
def serve(
    host: Optional[str] = typer.Option(None, "--host", help="Interface to bind (defaults to config)"),
    port: Optional[int] = typer.Option(None, "--port", "-p", envvar="PORT", help="Port to listen on (defaults to config)"),
) -> None:
    """Serve the notes, todos, sessions and stats API."""
    server_config = get_config_service().config.server
    host = host or server_config.host
    port = port or server_config.port or DEFAULT_PORT

    app = create_app()
    get_logger().info("serving LifeSync API on %s:%s", host, port)
    console.print(f"[bold green]LifeSync API[/bold green] listening on [cyan]http://{host}:{port}[/cyan]")
    console.print("[dim]Data is kept in memory and cleared on restart[/dim]")
    app.run(host=host, port=port)
