"""
Closed enumerations shared across sla-spine.

Names are the wire format.  Lookups by name go through explicit tables so
an unknown name becomes a typed error instead of a bare ``ValueError``.

STDLIB ONLY - NO PYDANTIC.
"""

from enum import Enum

from sla_spine.core.errors import InvalidFilterError, RecordIntegrityError


class EventStatus(str, Enum):
    """
    Per-dimension compliance outcome.

    Three temporal dimensions (start, duration, end), each either met or
    missed.  Evaluated by :func:`sla_spine.sla.evaluator.evaluate`.
    """

    START_MET = "START_MET"
    START_MISS = "START_MISS"
    DURATION_MET = "DURATION_MET"
    DURATION_MISS = "DURATION_MISS"
    END_MET = "END_MET"
    END_MISS = "END_MISS"

    @classmethod
    def from_name(cls, name: str) -> "EventStatus":
        """Resolve an outcome name, raising :class:`InvalidFilterError` if unknown."""
        try:
            return _EVENT_STATUS_BY_NAME[name]
        except KeyError:
            raise InvalidFilterError(
                f"Unknown event status {name!r}; expected one of "
                f"{', '.join(_EVENT_STATUS_BY_NAME)} or ALL",
                clause=name,
            ) from None


class SLAStatus(str, Enum):
    """Coarse lifecycle status set by the upstream scheduling engine."""

    NOT_STARTED = "NOT_STARTED"
    IN_PROCESS = "IN_PROCESS"
    MET = "MET"
    MISS = "MISS"

    @classmethod
    def from_name(cls, name: str) -> "SLAStatus":
        try:
            return _SLA_STATUS_BY_NAME[name]
        except KeyError:
            raise RecordIntegrityError(f"Unknown sla_status {name!r}") from None


class AppType(str, Enum):
    """Kind of scheduled job a compliance record describes."""

    WORKFLOW_JOB = "WORKFLOW_JOB"
    WORKFLOW_ACTION = "WORKFLOW_ACTION"
    COORDINATOR_JOB = "COORDINATOR_JOB"
    COORDINATOR_ACTION = "COORDINATOR_ACTION"
    BUNDLE_JOB = "BUNDLE_JOB"

    @classmethod
    def from_name(cls, name: str) -> "AppType":
        try:
            return _APP_TYPE_BY_NAME[name]
        except KeyError:
            raise RecordIntegrityError(f"Unknown app_type {name!r}") from None


_EVENT_STATUS_BY_NAME = {member.value: member for member in EventStatus}
_SLA_STATUS_BY_NAME = {member.value: member for member in SLAStatus}
_APP_TYPE_BY_NAME = {member.value: member for member in AppType}
