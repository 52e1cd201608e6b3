"""
Typed request objects for operations.

Each dataclass is the *input* contract for one operation function.
Requests carry only transport-agnostic data: no raw HTTP bodies, no
Typer params.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class DatabaseInitRequest:
    """Request for :func:`sla_spine.ops.database.initialize_database`."""


@dataclass(frozen=True, slots=True)
class ListSlaSummariesRequest:
    """Request for :func:`sla_spine.ops.sla.list_sla_summaries`.

    Attributes:
        filter: Raw filter string, e.g. ``"app_name=etl;event_status=END_MISS"``.
        time_zone: IANA zone for formatted instants; ``None`` → epoch ms.
    """

    filter: str | None = None
    time_zone: str | None = None


@dataclass(frozen=True, slots=True)
class GetSlaSummaryRequest:
    """Request for :func:`sla_spine.ops.sla.get_sla_summary`.

    Attributes:
        id: Job id of the record.
        time_zone: IANA zone for formatted instants; ``None`` → epoch ms.
        include_event_status: Attach evaluated outcomes to the record.
    """

    id: str = ""
    time_zone: str | None = None
    include_event_status: bool = True
