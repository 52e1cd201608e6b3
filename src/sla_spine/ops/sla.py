"""
SLA summary operations.

Read-side operations over compliance records: list by filter, get by id.
Both parse and validate their input before touching storage, evaluate
outcomes against ``ctx.clock`` and return the rendered wire object inside
an :class:`OperationResult`.

Error codes:
    ``INVALID_FILTER``          bad filter string (400)
    ``INVALID_TIME_ZONE``       unknown output zone (400)
    ``VALIDATION_FAILED``       missing id (400)
    ``NOT_FOUND``               no such record (404)
    ``MISSING_REQUIRED_FIELD``  upstream record lacks a rendered field (500)
    ``RECORD_INTEGRITY``        upstream record is otherwise unusable (500)
    ``STORAGE_ERROR``           record source failed, not retried (500)
"""

from __future__ import annotations

from typing import Any

from sla_spine.core.errors import (
    InvalidFilterError,
    InvalidTimeZoneError,
    MissingRequiredFieldError,
    RecordIntegrityError,
    SlaError,
    StorageError,
)
from sla_spine.core.logging import LogContext, get_logger
from sla_spine.core.protocols import RecordLookup, RecordSource
from sla_spine.core.timestamps import resolve_time_zone
from sla_spine.ops.context import OperationContext
from sla_spine.ops.requests import GetSlaSummaryRequest, ListSlaSummariesRequest
from sla_spine.ops.result import OperationResult, start_timer
from sla_spine.sla.evaluator import evaluate
from sla_spine.sla.executor import execute_query
from sla_spine.sla.filters import parse_filter
from sla_spine.sla.renderer import render_summary, render_summary_list
from sla_spine.sla.repository import SlaSummaryRepository

logger = get_logger(__name__)

_ERROR_CODES: tuple[tuple[type[SlaError], str], ...] = (
    (InvalidFilterError, "INVALID_FILTER"),
    (InvalidTimeZoneError, "INVALID_TIME_ZONE"),
    (MissingRequiredFieldError, "MISSING_REQUIRED_FIELD"),
    (RecordIntegrityError, "RECORD_INTEGRITY"),
    (StorageError, "STORAGE_ERROR"),
)


def _sla_repo(ctx: OperationContext) -> SlaSummaryRepository:
    """Create an SlaSummaryRepository from OperationContext."""
    return SlaSummaryRepository(ctx.conn)


def list_sla_summaries(
    ctx: OperationContext,
    request: ListSlaSummariesRequest,
    *,
    source: RecordSource | None = None,
) -> OperationResult[dict[str, Any]]:
    """List compliance records matching ``request.filter``.

    Args:
        ctx: Operation context (connection, clock).
        request: Raw filter string and optional output time zone.
        source: Record source override; defaults to the SQLite repository
            on ``ctx.conn``.

    Returns:
        ``{"sla_summary_list": [...]}`` on success.
    """
    timer = start_timer()

    with LogContext(request_id=ctx.request_id, operation="list_sla_summaries"):
        try:
            sla_filter = parse_filter(request.filter)
            if request.time_zone is not None:
                resolve_time_zone(request.time_zone)
        except SlaError as exc:
            logger.info("sla_request_rejected", error=exc.message)
            return _fail(exc, timer.elapsed_ms)

        try:
            items = execute_query(sla_filter, source or _sla_repo(ctx), clock=ctx.clock)
            payload = render_summary_list(items, request.time_zone)
        except SlaError as exc:
            logger.error("sla_query_failed", **exc.to_dict())
            return _fail(exc, timer.elapsed_ms)

        logger.info(
            "sla_query_completed",
            matched=len(items),
            event_status=sla_filter.attaches_event_status,
            elapsed_ms=round(timer.elapsed_ms, 2),
        )
        return OperationResult.ok(
            payload,
            elapsed_ms=timer.elapsed_ms,
            metadata={"count": len(items)},
        )


def get_sla_summary(
    ctx: OperationContext,
    request: GetSlaSummaryRequest,
    *,
    source: RecordLookup | None = None,
) -> OperationResult[dict[str, Any]]:
    """Return one compliance record, optionally with evaluated outcomes."""
    timer = start_timer()

    if not request.id:
        return OperationResult.fail(
            "VALIDATION_FAILED",
            "id is required",
            elapsed_ms=timer.elapsed_ms,
        )

    with LogContext(request_id=ctx.request_id, operation="get_sla_summary"):
        try:
            if request.time_zone is not None:
                resolve_time_zone(request.time_zone)
            summary = (source or _sla_repo(ctx)).get(request.id)
            if summary is None:
                return OperationResult.fail(
                    "NOT_FOUND",
                    f"SLA summary '{request.id}' not found",
                    elapsed_ms=timer.elapsed_ms,
                )
            outcomes = evaluate(summary, ctx.clock()) if request.include_event_status else None
            payload = render_summary(summary, outcomes, request.time_zone)
        except SlaError as exc:
            if not isinstance(exc, InvalidTimeZoneError):
                logger.error("sla_lookup_failed", job_id=request.id, **exc.to_dict())
            return _fail(exc, timer.elapsed_ms)

        return OperationResult.ok(payload, elapsed_ms=timer.elapsed_ms)


def _fail(exc: SlaError, elapsed_ms: float) -> OperationResult[Any]:
    code = next((code for cls, code in _ERROR_CODES if isinstance(exc, cls)), "INTERNAL")
    details: dict[str, Any] = {}
    if isinstance(exc, InvalidFilterError) and exc.clause is not None:
        details["clause"] = exc.clause
    if isinstance(exc, MissingRequiredFieldError):
        details["field"] = exc.field
        details["job_id"] = exc.context.job_id
    return OperationResult.fail(
        code,
        exc.message,
        category=exc.category,
        details=details,
        retryable=exc.retryable,
        elapsed_ms=elapsed_ms,
    )
