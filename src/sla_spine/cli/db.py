"""
CLI: ``sla-spine db``: database management commands.
"""

from __future__ import annotations

import typer

from sla_spine.cli.utils import make_context, output_result
from sla_spine.ops.database import initialize_database
from sla_spine.ops.requests import DatabaseInitRequest

app = typer.Typer(no_args_is_help=True)


@app.command()
def init(
    database: str | None = typer.Option(None, "--database", "-d", help="Database path"),
    json_out: bool = typer.Option(False, "--json", help="JSON output"),
) -> None:
    """Initialise database schema (create the sla_summary table)."""
    ctx, conn = make_context(database)
    try:
        result = initialize_database(ctx, DatabaseInitRequest())
    finally:
        conn.close()
    output_result(result, as_json=json_out, title="Database Init")
