"""Mini README: Entry point CLI for launching the Tab Ledger web interface.

This script exposes a Typer CLI that starts the FastAPI application with
configurable host, port, and production flags. Defaults come from
``TABLEDGER_*`` environment variables when they are set.
"""

from __future__ import annotations

import typer
import uvicorn

from tabledger.configuration import get_settings
from tabledger.logging_utils import configure_root_logger

cli = typer.Typer(help="Launch the Tab Ledger income and expense tracker.")


def browser_url(host: str, port: int) -> str:
    """Return a URL a browser can open for the bound address."""

    browser_host = "127.0.0.1" if host in {"0.0.0.0", "::"} else host
    return f"http://{browser_host}:{port}"


@cli.command()
def run(
    host: str = typer.Option(None, help="Host interface to bind."),
    port: int = typer.Option(None, help="Port to listen on."),
    production: bool = typer.Option(
        False, help="Use production server settings (disable auto-reload)."
    ),
) -> None:
    """Start the FastAPI application using uvicorn."""

    settings = get_settings()
    effective_host = host or settings.interface_host
    effective_port = port or settings.interface_port
    configure_root_logger(settings.log_level_value)

    # 0.0.0.0 cannot be typed into a browser, so point at localhost instead.
    typer.echo(
        f"Starting Tab Ledger on {effective_host}:{effective_port}.\n"
        f"Open your browser at {browser_url(effective_host, effective_port)}"
    )
    uvicorn.run(
        "tabledger.interface.web_app:create_application",
        host=effective_host,
        port=effective_port,
        factory=True,
        reload=not production,
    )


if __name__ == "__main__":
    cli()
