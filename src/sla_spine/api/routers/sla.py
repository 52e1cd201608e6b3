"""
SLA router: query compliance records with evaluated outcomes.

Endpoints:
    GET /sla              List records matching a filter string
    GET /sla/{job_id}     Get one record

Successful responses are the rendered summaries themselves, so dashboards
built against the ``sla_summary_list`` format keep working unchanged.
Failures are RFC 7807 problem documents.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Path, Query, Request

from sla_spine.api.deps import OpContext
from sla_spine.api.utils import _handle_error
from sla_spine.ops.requests import GetSlaSummaryRequest, ListSlaSummariesRequest
from sla_spine.ops.sla import get_sla_summary as _get
from sla_spine.ops.sla import list_sla_summaries as _list

router = APIRouter(prefix="/sla")


@router.get("", response_model=dict[str, Any])
def list_sla_summaries(
    request: Request,
    ctx: OpContext,
    sla_filter: str | None = Query(
        None,
        alias="filter",
        description="Clauses like 'app_name=etl;event_status=END_MISS'",
    ),
    timezone: str | None = Query(
        None,
        description="IANA zone for formatted instants; omitted → epoch milliseconds",
    ),
):
    """List compliance records matching a filter.

    Raises:
        400 INVALID_FILTER: Missing, empty or malformed filter.
        400 INVALID_TIME_ZONE: Unknown time zone.
        500 MISSING_REQUIRED_FIELD: A stored record lacks a rendered field.
        500 STORAGE_ERROR: The record store failed.

    Example:
        GET /api/v1/sla?filter=app_name=etl;event_status=END_MISS

        Response:
        {"sla_summary_list": [{"id": "0000001-W", "event_status": "END_MISS", ...}]}
    """
    result = _list(ctx, ListSlaSummariesRequest(filter=sla_filter, time_zone=timezone))
    if not result.success:
        return _handle_error(result, request)
    return result.data


@router.get("/{job_id}", response_model=dict[str, Any])
def get_sla_summary(
    request: Request,
    ctx: OpContext,
    job_id: str = Path(..., description="Job id of the compliance record"),
    timezone: str | None = Query(None, description="IANA zone for formatted instants"),
    event_status: bool = Query(True, description="Attach evaluated outcomes"),
):
    """Get a single compliance record.

    Raises:
        400 INVALID_TIME_ZONE: Unknown time zone.
        404 NOT_FOUND: No record with this job id.
    """
    result = _get(
        ctx,
        GetSlaSummaryRequest(id=job_id, time_zone=timezone, include_event_status=event_status),
    )
    if not result.success:
        return _handle_error(result, request)
    return result.data
