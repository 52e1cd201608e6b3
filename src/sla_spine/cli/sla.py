"""
CLI: ``sla-spine sla``: query SLA summaries.
"""

from __future__ import annotations

import json

import typer

from sla_spine.cli.utils import console, fail_on_error, make_context, output_result, print_table
from sla_spine.ops.requests import GetSlaSummaryRequest, ListSlaSummariesRequest
from sla_spine.ops.sla import get_sla_summary as _get
from sla_spine.ops.sla import list_sla_summaries as _list
from sla_spine.sla.renderer import SLA_SUMMARY_LIST

app = typer.Typer(no_args_is_help=True)

_TABLE_COLUMNS = [
    "id",
    "app_name",
    "nominal_time",
    "expected_end",
    "actual_end",
    "job_status",
    "sla_status",
    "event_status",
]


@app.command("list")
def list_summaries(
    sla_filter: str = typer.Option(
        ..., "--filter", "-f", help="e.g. 'app_name=etl;event_status=END_MISS'"
    ),
    timezone: str | None = typer.Option(None, "--timezone", "-z", help="IANA output zone"),
    database: str | None = typer.Option(None, "--database", "-d"),
    json_out: bool = typer.Option(False, "--json"),
) -> None:
    """List SLA summaries matching a filter."""
    ctx, conn = make_context(database)
    try:
        result = _list(ctx, ListSlaSummariesRequest(filter=sla_filter, time_zone=timezone))
    finally:
        conn.close()
    fail_on_error(result)

    if json_out:
        console.print_json(json.dumps(result.data))
        return
    print_table(result.data[SLA_SUMMARY_LIST], _TABLE_COLUMNS, title="SLA Summaries")


@app.command("show")
def show_summary(
    job_id: str = typer.Argument(..., help="Job ID"),
    timezone: str | None = typer.Option(None, "--timezone", "-z", help="IANA output zone"),
    event_status: bool = typer.Option(
        True, "--event-status/--no-event-status", help="Attach evaluated outcomes"
    ),
    database: str | None = typer.Option(None, "--database", "-d"),
    json_out: bool = typer.Option(False, "--json"),
) -> None:
    """Show one SLA summary."""
    ctx, conn = make_context(database)
    try:
        result = _get(
            ctx,
            GetSlaSummaryRequest(id=job_id, time_zone=timezone, include_event_status=event_status),
        )
    finally:
        conn.close()
    output_result(result, as_json=json_out, title=f"SLA: {job_id}")
