"""
Common API schemas: RFC 7807 error documents.

Successful SLA responses are the rendered summary objects themselves
(``{"sla_summary_list": [...]}`` or a single summary), so only the error
envelope is modelled here.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class ErrorDetail(BaseModel):
    """Structured error detail for a rejected parameter or record field."""

    code: str = Field(description="Machine-readable error code (e.g., 'INVALID_FILTER')")
    message: str = Field(description="Human-readable error description")
    field: str | None = Field(default=None, description="Parameter, clause or field at fault")


class ProblemDetail(BaseModel):
    """RFC 7807 «Problem Details for HTTP APIs».

    Used as the canonical error envelope for all non-2xx responses.

    Error Codes:
        - ``INVALID_FILTER`` (400): Filter string rejected
        - ``INVALID_TIME_ZONE`` (400): Unknown output time zone
        - ``VALIDATION_FAILED`` (400): Missing or malformed parameter
        - ``NOT_FOUND`` (404): No compliance record with that id
        - ``MISSING_REQUIRED_FIELD`` (500): Stored record lacks a rendered field
        - ``RECORD_INTEGRITY`` (500): Stored record is unusable
        - ``STORAGE_ERROR`` (500): Record source failed
        - ``INTERNAL`` (500): Unexpected server error

    Example:
        {
            "type": "about:blank",
            "title": "Invalid filter",
            "status": 400,
            "detail": "Unknown filter key 'color'",
            "instance": "/api/v1/sla?filter=color=red",
            "errors": [{"code": "INVALID_FILTER", "message": "...", "field": "color=red"}]
        }
    """

    type: str = Field(default="about:blank", description="Error type URI (usually 'about:blank')")
    title: str = Field(description="Short human-readable error summary")
    status: int = Field(description="HTTP status code (e.g., 400, 404, 500)")
    detail: str = Field(default="", description="Human-readable explanation of the error")
    instance: str = Field(default="", description="URI of the failing request")
    errors: list[ErrorDetail] = Field(
        default_factory=list,
        description="List of field-level or nested error details",
    )
