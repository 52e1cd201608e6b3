"""
Shared API router utilities.

- ``_handle_error()`` converts a failed OperationResult to a ``problem_response``
"""

from __future__ import annotations

from typing import Any

from fastapi import Request
from fastapi.responses import JSONResponse

from sla_spine.api.middleware.errors import (
    ERROR_CODE_TO_TITLE,
    problem_response,
    status_for_error_code,
)
from sla_spine.ops.result import OperationResult


def _handle_error(result: OperationResult[Any], request: Request) -> JSONResponse:
    """Convert a failed ``OperationResult`` into a Problem Details response.

    The error code picks the HTTP status and title; the offending filter
    clause or record field, when known, is reported in ``errors[].field``.
    """
    error = result.error
    code = error.code if error else "INTERNAL"
    message = error.message if error else "Operation failed"
    details = error.details if error else {}
    return problem_response(
        status=status_for_error_code(code),
        title=ERROR_CODE_TO_TITLE.get(code, "Operation failed"),
        detail=message,
        instance=str(request.url),
        errors=[{
            "code": code,
            "message": message,
            "field": details.get("clause") or details.get("field"),
        }],
    )
