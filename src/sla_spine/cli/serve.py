"""
CLI: ``sla-spine serve``: start the API server.
"""

from __future__ import annotations

import typer
import uvicorn

from sla_spine.cli.utils import console
from sla_spine.core.settings import SlaSpineBaseSettings

app = typer.Typer(no_args_is_help=True)


@app.command("start")
def start(
    host: str | None = typer.Option(None, "--host", "-h", help="Bind address"),
    port: int | None = typer.Option(None, "--port", "-p", help="Bind port"),
    reload: bool = typer.Option(False, "--reload", help="Auto-reload on changes"),
    workers: int = typer.Option(1, "--workers", "-w", help="Number of workers"),
) -> None:
    """Start the sla-spine REST API server."""
    settings = SlaSpineBaseSettings()
    host = host or settings.host
    port = port or settings.port

    console.print(f"[bold green]Starting sla-spine API[/bold green] on {host}:{port}")
    uvicorn.run(
        "sla_spine.api:create_app",
        factory=True,
        host=host,
        port=port,
        reload=reload,
        workers=workers,
        log_level=settings.log_level.lower(),
    )
