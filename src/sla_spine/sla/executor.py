"""
Query executor.

Applies a parsed :class:`SlaFilter` to a :class:`RecordSource`:

1. the source resolves the structural predicate (storage-level query)
2. no ``event_status`` clause → records returned without outcomes
3. ``event_status=ALL`` → every record evaluated, outcomes attached
4. specific statuses → records kept only if their evaluated outcomes
   intersect the requested set; the full outcome tuple is attached

Source ordering is preserved.  Storage failures propagate unchanged.
"""

from __future__ import annotations

from dataclasses import dataclass

from sla_spine.core.enums import EventStatus
from sla_spine.core.logging import get_logger
from sla_spine.core.protocols import Clock, RecordSource
from sla_spine.core.timestamps import utc_now
from sla_spine.sla.evaluator import evaluate
from sla_spine.sla.filters import SlaFilter
from sla_spine.sla.models import SlaSummary

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class EvaluatedSummary:
    """A record plus its outcomes, or ``None`` when none were requested."""

    summary: SlaSummary
    event_status: tuple[EventStatus, ...] | None = None


def execute_query(
    sla_filter: SlaFilter,
    source: RecordSource,
    *,
    clock: Clock = utc_now,
) -> list[EvaluatedSummary]:
    """Run *sla_filter* against *source*.

    *clock* is read once, so all records in one result share the same
    reference instant.
    """
    candidates = source.query(sla_filter.structural())

    selector = sla_filter.event_status
    if selector is None:
        return [EvaluatedSummary(summary) for summary in candidates]

    now = clock()
    results: list[EvaluatedSummary] = []
    for summary in candidates:
        outcomes = evaluate(summary, now)
        if selector.matches(outcomes):
            results.append(EvaluatedSummary(summary, outcomes))

    logger.debug(
        "sla_event_status_applied",
        candidates=len(candidates),
        kept=len(results),
        all_statuses=selector.is_all,
    )
    return results
