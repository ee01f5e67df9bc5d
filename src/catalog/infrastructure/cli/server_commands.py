"""CLI command that runs the HTTP API."""

from __future__ import annotations

import click
import uvicorn

from catalog.infrastructure.config import settings


@click.command("serve")
@click.option("--host", default=settings.api_host, show_default=True)
@click.option("--port", type=int, default=settings.api_port, show_default=True)
@click.option("--reload", is_flag=True, help="Restart on code changes.")
def serve(host: str, port: int, reload: bool) -> None:
    """Run the product catalog API server."""
    click.echo(f"Serving catalog from {settings.data_file}")
    click.echo(f"API docs at http://{host}:{port}/docs")
    uvicorn.run(
        "catalog.infrastructure.api.app:app",
        host=host,
        port=port,
        reload=reload,
        log_config=None,
    )
