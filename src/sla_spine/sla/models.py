"""
Compliance record: one monitored job instance.

Immutable value: the upstream scheduler produces a fresh ``SlaSummary`` for
every snapshot; nothing in sla-spine mutates one.  Durations are plain
``int`` milliseconds or ``None`` when not specified.  The legacy ``-1``
sentinel (:data:`DURATION_UNSET`) is accepted on construction and emitted
at the storage and wire boundaries only.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from datetime import datetime
from typing import Any

from sla_spine.core.enums import AppType, SLAStatus
from sla_spine.core.timestamps import ensure_utc

DURATION_UNSET = -1

_INSTANT_FIELDS = (
    "nominal_time",
    "expected_start",
    "expected_end",
    "actual_start",
    "actual_end",
    "last_modified",
    "created_time",
)


@dataclass(frozen=True, slots=True)
class SlaSummary:
    """Expected vs. actual timings plus identity for one job instance.

    Attributes:
        id: Job identity, unique and immutable.
        nominal_time: Logical scheduled instant the job represents.
        app_name: Application name.
        app_type: Kind of job (workflow, coordinator action ...).
        user: Submitting user.
        parent_id: Weak reference to the containing job, if any.
        expected_start / expected_end: Planned instants, optional.
        expected_duration: Planned duration in ms, ``None`` if not specified.
        actual_start / actual_end: Observed instants once they happen.
        actual_duration: Observed duration in ms, ``None`` until known.
        job_status: Free-form scheduler lifecycle label.
        sla_status: Coarse status set upstream.
        last_modified: Instant of the last upstream mutation.
        created_time: Instant the record was first registered.
        event_processed: Upstream processing bitmask.
    """

    id: str
    nominal_time: datetime
    app_name: str = ""
    app_type: AppType = AppType.WORKFLOW_JOB
    user: str = ""
    parent_id: str | None = None
    expected_start: datetime | None = None
    expected_end: datetime | None = None
    expected_duration: int | None = None
    actual_start: datetime | None = None
    actual_end: datetime | None = None
    actual_duration: int | None = None
    job_status: str | None = None
    sla_status: SLAStatus | None = None
    last_modified: datetime | None = None
    created_time: datetime | None = None
    event_processed: int = 0

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("SlaSummary.id is required")
        if self.nominal_time is None:
            raise ValueError("SlaSummary.nominal_time is required")
        for name in ("expected_duration", "actual_duration"):
            if getattr(self, name) == DURATION_UNSET:
                object.__setattr__(self, name, None)
        for name in _INSTANT_FIELDS:
            value = getattr(self, name)
            if value is not None:
                object.__setattr__(self, name, ensure_utc(value))

    def replace(self, **changes: Any) -> SlaSummary:
        """Return a copy with *changes* applied."""
        return dataclasses.replace(self, **changes)
