"""
Result renderer: compliance records to wire objects.

Instants render as epoch milliseconds, or as RFC 822 strings in the
requested zone when a time zone is given.  Both encode the same instant.

Wire fields (fixed names)::

    id, parent_id (omitted if unset), app_name, app_type, user,
    nominal_time, expected_start, actual_start, expected_end, actual_end,
    expected_duration, actual_duration, job_status, sla_status,
    event_status (only when outcomes were requested), last_modified

``nominal_time``, ``expected_end`` and ``last_modified`` are assumed present;
a record lacking one is an upstream defect and fails with
:class:`MissingRequiredFieldError` rather than rendering a partial object.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from datetime import datetime
from typing import Any

from sla_spine.core.enums import EventStatus
from sla_spine.core.errors import MissingRequiredFieldError
from sla_spine.core.timestamps import format_rfc822, resolve_time_zone, to_epoch_ms
from sla_spine.sla.evaluator import format_event_status
from sla_spine.sla.executor import EvaluatedSummary
from sla_spine.sla.models import DURATION_UNSET, SlaSummary

SLA_SUMMARY_LIST = "sla_summary_list"


def render_summary(
    summary: SlaSummary,
    event_status: Sequence[EventStatus] | None = None,
    time_zone: str | None = None,
) -> dict[str, Any]:
    """Project one record (plus optional outcomes) into its wire object."""
    if time_zone is not None:
        resolve_time_zone(time_zone)

    def instant(value: datetime | None) -> int | str | None:
        if value is None:
            return None
        if time_zone is None:
            return to_epoch_ms(value)
        return format_rfc822(value, time_zone)

    def required(name: str) -> int | str:
        value = getattr(summary, name)
        if value is None:
            raise MissingRequiredFieldError(name, job_id=summary.id)
        return instant(value)

    nominal_time = required("nominal_time")
    expected_end = required("expected_end")
    last_modified = required("last_modified")

    data: dict[str, Any] = {"id": summary.id}
    if summary.parent_id is not None:
        data["parent_id"] = summary.parent_id
    data["app_name"] = summary.app_name
    data["app_type"] = summary.app_type.value
    data["user"] = summary.user
    data["nominal_time"] = nominal_time
    data["expected_start"] = instant(summary.expected_start)
    data["actual_start"] = instant(summary.actual_start)
    data["expected_end"] = expected_end
    data["actual_end"] = instant(summary.actual_end)
    data["expected_duration"] = _duration(summary.expected_duration)
    data["actual_duration"] = _duration(summary.actual_duration)
    data["job_status"] = summary.job_status
    data["sla_status"] = summary.sla_status.value if summary.sla_status else None
    if event_status is not None:
        data["event_status"] = format_event_status(event_status)
    data["last_modified"] = last_modified
    return data


def render_summary_list(
    items: Iterable[EvaluatedSummary],
    time_zone: str | None = None,
    *,
    include_event_status: bool = True,
) -> dict[str, Any]:
    """Wrap rendered records in ``{"sla_summary_list": [...]}``, order preserved.

    With ``include_event_status=False`` outcomes are dropped even if the
    items carry them.
    """
    rendered = [
        render_summary(
            item.summary,
            item.event_status if include_event_status else None,
            time_zone,
        )
        for item in items
    ]
    return {SLA_SUMMARY_LIST: rendered}


def _duration(value: int | None) -> int:
    return DURATION_UNSET if value is None else value
