"""
Structured error types for sla-spine.

Every failure this service can surface is one of a small, closed set of
typed errors.  Each carries a category for routing, an explicit retry
flag, structured context for logging, and an optional chained cause.

Manifesto:
    - **Typed Error Hierarchy:** Filter, data-integrity and storage
      failures are different problems with different owners
    - **Explicit Retry Semantics:** Nothing here is retried by this
      service; the flag is always ``False`` and says so
    - **Rich Context:** Errors carry the offending clause/field
    - **Error Chaining:** Storage failures keep the driver exception

Architecture:
    ::

        ┌──────────────────────────────────────────────────────────┐
        │                        SlaError                          │
        │      (category, retryable, context, cause)               │
        ├──────────────────────────────────────────────────────────┤
        │  ValidationError        RecordIntegrityError   StorageError│
        │  (VALIDATION)           (INTEGRITY)            (STORAGE) │
        │     │                        │                           │
        │  InvalidFilterError     MissingRequiredFieldError        │
        │  InvalidTimeZoneError                                    │
        └──────────────────────────────────────────────────────────┘

Examples:
    >>> error = InvalidFilterError("unknown filter key 'color'", clause="color=red")
    >>> error.category
    <ErrorCategory.VALIDATION: 'VALIDATION'>
    >>> error.retryable
    False

    >>> try:
    ...     raise sqlite3.OperationalError("no such table")
    ... except sqlite3.Error as e:
    ...     raise StorageError("sla_summary query failed", cause=e)
    Traceback (most recent call last):
    ...
    StorageError: sla_summary query failed

Guardrails:
    ❌ DON'T: Raise ValueError/KeyError out of the sla package
    ✅ DO: Raise the matching SlaError subclass

    ❌ DON'T: Swallow the driver exception
    ✅ DO: Pass it as cause= for error chaining

Tags:
    error-handling, exception-hierarchy, sla, validation, storage
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ErrorCategory(str, Enum):
    """Standard error categories for classification and routing."""

    VALIDATION = "VALIDATION"     # Bad filter, bad output option
    INTEGRITY = "INTEGRITY"       # Upstream produced an unusable record
    STORAGE = "STORAGE"           # Record source failed
    INTERNAL = "INTERNAL"         # Bugs, unexpected state


@dataclass
class ErrorContext:
    """Structured metadata attached to an error for logging.

    Attributes:
        request_id: Correlation id of the request being served
        job_id: Compliance record the error relates to
        operation: Operation name (``list_sla_summaries`` ...)
        metadata: Additional key-value pairs
    """

    request_id: str | None = None
    job_id: str | None = None
    operation: str | None = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging."""
        result = {}
        for key in ["request_id", "job_id", "operation"]:
            value = getattr(self, key)
            if value is not None:
                result[key] = value
        if self.metadata:
            result.update(self.metadata)
        return result


class SlaError(Exception):
    """
    Base exception for all sla-spine errors.

    Subclasses set ``default_category`` and ``default_retryable`` so callers
    only pass a message in the common case.
    """

    default_category: ErrorCategory = ErrorCategory.INTERNAL
    default_retryable: bool = False

    def __init__(
        self,
        message: str,
        *,
        category: ErrorCategory | None = None,
        retryable: bool | None = None,
        context: ErrorContext | None = None,
        cause: Exception | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.category = category or self.default_category
        self.retryable = retryable if retryable is not None else self.default_retryable
        self.context = context or ErrorContext()
        self.cause = cause

        if cause is not None:
            self.__cause__ = cause

    def with_context(self, **kwargs: Any) -> SlaError:
        """
        Add context to this error (fluent API).

        Usage:
            raise StorageError("query failed").with_context(operation="list")
        """
        for key, value in kwargs.items():
            if hasattr(self.context, key) and key != "metadata":
                setattr(self.context, key, value)
            else:
                self.context.metadata[key] = value
        return self

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging/serialization."""
        result = {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "category": self.category.value,
            "retryable": self.retryable,
        }
        context_dict = self.context.to_dict()
        if context_dict:
            result["context"] = context_dict
        if self.cause is not None:
            result["cause"] = str(self.cause)
        return result

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r}, category={self.category.value})"


# =============================================================================
# VALIDATION ERRORS
# =============================================================================


class ValidationError(SlaError):
    """
    Client input could not be accepted.

    Never retryable - the request must be fixed.
    """

    default_category = ErrorCategory.VALIDATION
    default_retryable = False


class InvalidFilterError(ValidationError):
    """The filter string is empty, malformed, or uses an illegal combination."""

    def __init__(self, message: str, *, clause: str | None = None, **kwargs: Any):
        super().__init__(message, **kwargs)
        self.clause = clause

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        if self.clause is not None:
            result["clause"] = self.clause
        return result


class InvalidTimeZoneError(ValidationError):
    """The requested output time zone is not a known IANA zone."""

    def __init__(self, time_zone: str, message: str | None = None, **kwargs: Any):
        super().__init__(message or f"Unknown time zone: {time_zone!r}", **kwargs)
        self.time_zone = time_zone


# =============================================================================
# RECORD INTEGRITY ERRORS
# =============================================================================


class RecordIntegrityError(SlaError):
    """A compliance record handed to us by upstream is unusable."""

    default_category = ErrorCategory.INTEGRITY
    default_retryable = False


class MissingRequiredFieldError(RecordIntegrityError):
    """A field the renderer assumes is always present is unset."""

    def __init__(self, field: str, *, job_id: str | None = None, **kwargs: Any):
        super().__init__(f"Required field {field!r} is unset on record {job_id!r}", **kwargs)
        self.field = field
        self.context.job_id = job_id

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        result["field"] = self.field
        return result


# =============================================================================
# STORAGE ERRORS
# =============================================================================


class StorageError(SlaError):
    """The record source failed.  Not retried here."""

    default_category = ErrorCategory.STORAGE
    default_retryable = False


__all__ = [
    "ErrorCategory",
    "ErrorContext",
    "SlaError",
    "ValidationError",
    "InvalidFilterError",
    "InvalidTimeZoneError",
    "RecordIntegrityError",
    "MissingRequiredFieldError",
    "StorageError",
]
