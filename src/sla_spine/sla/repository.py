"""
SQLite-backed :class:`RecordSource` for the ``sla_summary`` table.

The repository is the storage collaborator: it resolves the structural part
of a filter in SQL, orders by ``nominal_time, job_id`` and decodes rows into
:class:`SlaSummary` values.  ``insert`` exists for loading snapshots produced
upstream (seeding, tests); sla-spine itself only reads.
"""

from __future__ import annotations

from typing import Any

from sla_spine.core.enums import AppType, SLAStatus
from sla_spine.core.errors import RecordIntegrityError
from sla_spine.core.repository import BaseRepository
from sla_spine.core.timestamps import from_epoch_ms, to_epoch_ms
from sla_spine.sla.filters import SlaFilter
from sla_spine.sla.models import DURATION_UNSET, SlaSummary
from sla_spine.sla.schema import SLA_SUMMARY_TABLE

_COLUMNS = (
    "job_id",
    "parent_id",
    "app_name",
    "app_type",
    "user_name",
    "created_time",
    "nominal_time",
    "expected_start",
    "expected_end",
    "expected_duration",
    "actual_start",
    "actual_end",
    "actual_duration",
    "job_status",
    "sla_status",
    "event_processed",
    "last_modified",
)

_SELECT = f"SELECT {', '.join(_COLUMNS)} FROM {SLA_SUMMARY_TABLE}"


class SlaSummaryRepository(BaseRepository):
    """Read (and seed) compliance records stored in SQLite."""

    def query(self, sla_filter: SlaFilter) -> list[SlaSummary]:
        """Return records matching the structural part of *sla_filter*."""
        conditions: list[str] = []
        params: list[Any] = []

        if sla_filter.id is not None:
            conditions.append("job_id = ?")
            params.append(sla_filter.id)
        if sla_filter.parent_id is not None:
            conditions.append("parent_id = ?")
            params.append(sla_filter.parent_id)
        if sla_filter.app_name is not None:
            conditions.append("app_name = ?")
            params.append(sla_filter.app_name)
        if sla_filter.nominal_start is not None:
            conditions.append("nominal_time >= ?")
            params.append(to_epoch_ms(sla_filter.nominal_start))
        if sla_filter.nominal_end is not None:
            conditions.append("nominal_time <= ?")
            params.append(to_epoch_ms(sla_filter.nominal_end))

        where = f" WHERE {' AND '.join(conditions)}" if conditions else ""
        sql = f"{_SELECT}{where} ORDER BY nominal_time ASC, job_id ASC"
        rows = self.fetch_rows(sql, tuple(params))
        return [_row_to_summary(row) for row in rows]

    def get(self, job_id: str) -> SlaSummary | None:
        row = self.fetch_row(f"{_SELECT} WHERE job_id = ?", (job_id,))
        return _row_to_summary(row) if row else None

    def insert_summary(self, summary: SlaSummary) -> None:
        """Insert one record (does not commit)."""
        self.insert(SLA_SUMMARY_TABLE, _summary_to_row(summary))

    def count(self) -> int:
        row = self.fetch_row(f"SELECT COUNT(*) AS cnt FROM {SLA_SUMMARY_TABLE}")
        return row["cnt"] if row else 0


# -- Row mapping -----------------------------------------------------------


def _ms(value: Any) -> Any:
    return None if value is None else from_epoch_ms(int(value))


def _row_to_summary(row: dict[str, Any]) -> SlaSummary:
    job_id = row.get("job_id")
    if not job_id:
        raise RecordIntegrityError("sla_summary row without job_id")
    if row.get("nominal_time") is None:
        raise RecordIntegrityError(
            f"sla_summary row {job_id!r} has no nominal_time"
        ).with_context(job_id=job_id)
    if row.get("app_type") is None:
        raise RecordIntegrityError(
            f"sla_summary row {job_id!r} has no app_type"
        ).with_context(job_id=job_id)

    sla_status = row.get("sla_status")
    return SlaSummary(
        id=job_id,
        parent_id=row.get("parent_id"),
        app_name=row.get("app_name") or "",
        app_type=AppType.from_name(row["app_type"]),
        user=row.get("user_name") or "",
        created_time=_ms(row.get("created_time")),
        nominal_time=_ms(row["nominal_time"]),
        expected_start=_ms(row.get("expected_start")),
        expected_end=_ms(row.get("expected_end")),
        expected_duration=row.get("expected_duration", DURATION_UNSET),
        actual_start=_ms(row.get("actual_start")),
        actual_end=_ms(row.get("actual_end")),
        actual_duration=row.get("actual_duration", DURATION_UNSET),
        job_status=row.get("job_status"),
        sla_status=SLAStatus.from_name(sla_status) if sla_status else None,
        event_processed=row.get("event_processed") or 0,
        last_modified=_ms(row.get("last_modified")),
    )


def _summary_to_row(summary: SlaSummary) -> dict[str, Any]:
    def ms(value):
        return None if value is None else to_epoch_ms(value)

    def duration(value):
        return DURATION_UNSET if value is None else value

    return {
        "job_id": summary.id,
        "parent_id": summary.parent_id,
        "app_name": summary.app_name,
        "app_type": summary.app_type.value,
        "user_name": summary.user,
        "created_time": ms(summary.created_time),
        "nominal_time": ms(summary.nominal_time),
        "expected_start": ms(summary.expected_start),
        "expected_end": ms(summary.expected_end),
        "expected_duration": duration(summary.expected_duration),
        "actual_start": ms(summary.actual_start),
        "actual_end": ms(summary.actual_end),
        "actual_duration": duration(summary.actual_duration),
        "job_status": summary.job_status,
        "sla_status": summary.sla_status.value if summary.sla_status else None,
        "event_processed": summary.event_processed,
        "last_modified": ms(summary.last_modified),
    }
