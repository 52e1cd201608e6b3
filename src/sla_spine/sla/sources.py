"""In-memory :class:`RecordSource` over a snapshot of compliance records."""

from __future__ import annotations

from collections.abc import Iterable

from sla_spine.sla.filters import SlaFilter
from sla_spine.sla.models import SlaSummary


class InMemoryRecordSource:
    """Serve structural queries from a fixed list, preserving its order.

    Useful for SDK callers that already hold a snapshot, and for tests.
    """

    def __init__(self, records: Iterable[SlaSummary] = ()) -> None:
        self._records = tuple(records)

    def query(self, sla_filter: SlaFilter) -> list[SlaSummary]:
        return [r for r in self._records if sla_filter.matches_structure(r)]

    def get(self, job_id: str) -> SlaSummary | None:
        return next((r for r in self._records if r.id == job_id), None)

    def __len__(self) -> int:
        return len(self._records)
