"""
Root Typer application for the sla-spine CLI.
"""

from __future__ import annotations

import typer
from typer import Typer

from sla_spine import __version__
from sla_spine.core.logging import configure_logging

app = Typer(
    name="sla-spine",
    help="sla-spine: SLA compliance queries over scheduled-job records.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


# ── Version callback ─────────────────────────────────────────────────────


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"sla-spine {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool | None = typer.Option(  # noqa: UP007
        None,
        "--version",
        "-V",
        help="Show version and exit.",
        callback=_version_callback,
        is_eager=True,
    ),
    log_level: str = typer.Option("WARNING", "--log-level", help="Structured log level."),
) -> None:
    """sla-spine CLI: query SLA summaries, manage the database, run the API."""
    configure_logging(level=log_level, json_format=False)


# ── Sub-command registration ─────────────────────────────────────────────

from sla_spine.cli.db import app as db_app  # noqa: E402
from sla_spine.cli.serve import app as serve_app  # noqa: E402
from sla_spine.cli.sla import app as sla_app  # noqa: E402

app.add_typer(sla_app, name="sla", help="Query SLA summaries.")
app.add_typer(db_app, name="db", help="Database operations.")
app.add_typer(serve_app, name="serve", help="Start the API server.")
