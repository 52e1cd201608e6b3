"""
Error-handling middleware: maps ops-layer errors to RFC 7807 responses.
"""

from __future__ import annotations

from typing import Any

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from sla_spine.api.schemas.common import ErrorDetail, ProblemDetail
from sla_spine.core.logging import get_logger

logger = get_logger(__name__)

# ── Error code → HTTP status mapping ─────────────────────────────────────

ERROR_CODE_TO_STATUS: dict[str, int] = {
    "INVALID_FILTER": 400,
    "INVALID_TIME_ZONE": 400,
    "VALIDATION_FAILED": 400,
    "NOT_FOUND": 404,
    "MISSING_REQUIRED_FIELD": 500,
    "RECORD_INTEGRITY": 500,
    "STORAGE_ERROR": 500,
    "INTERNAL": 500,
}

ERROR_CODE_TO_TITLE: dict[str, str] = {
    "INVALID_FILTER": "Invalid filter",
    "INVALID_TIME_ZONE": "Invalid time zone",
    "VALIDATION_FAILED": "Validation failed",
    "NOT_FOUND": "Not found",
    "MISSING_REQUIRED_FIELD": "Incomplete compliance record",
    "RECORD_INTEGRITY": "Unusable compliance record",
    "STORAGE_ERROR": "Storage error",
}


def status_for_error_code(code: str) -> int:
    """Resolve an ops error code to HTTP status, defaulting to 500."""
    return ERROR_CODE_TO_STATUS.get(code, 500)


def problem_response(
    *,
    status: int,
    title: str,
    detail: str = "",
    instance: str = "",
    errors: list[dict[str, Any]] | None = None,
) -> JSONResponse:
    """Build a RFC 7807 JSON error response."""
    body = ProblemDetail(
        title=title,
        status=status,
        detail=detail,
        instance=instance,
    )
    if errors:
        body.errors = [ErrorDetail(**e) for e in errors]
    return JSONResponse(status_code=status, content=body.model_dump())


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report missing or malformed query parameters as ``VALIDATION_FAILED``."""
    errors = [
        {
            "code": "VALIDATION_FAILED",
            "message": err.get("msg", "invalid value"),
            "field": ".".join(str(part) for part in err.get("loc", ())[1:]) or None,
        }
        for err in exc.errors()
    ]
    return problem_response(
        status=400,
        title="Validation failed",
        detail="; ".join(e["message"] for e in errors),
        instance=str(request.url),
        errors=errors,
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Catch-all for unhandled exceptions: returns 500 with ProblemDetail."""
    logger.exception("unhandled_exception", path=request.url.path)
    return problem_response(
        status=500,
        title="Internal Server Error",
        detail=str(exc) if request.app.state.settings.debug else "An unexpected error occurred.",
        instance=str(request.url),
    )
