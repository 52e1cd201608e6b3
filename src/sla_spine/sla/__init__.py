"""
SLA compliance domain.

Components, leaves first:

- :mod:`~sla_spine.sla.models`: ``SlaSummary`` compliance record
- :mod:`~sla_spine.sla.evaluator`: ``evaluate(summary, now)`` outcomes
- :mod:`~sla_spine.sla.filters`: ``parse_filter(raw)`` → ``SlaFilter``
- :mod:`~sla_spine.sla.executor`: ``execute_query(filter, source)``
- :mod:`~sla_spine.sla.renderer`: wire objects, epoch-ms or zoned strings

Record sources: :class:`~sla_spine.sla.sources.InMemoryRecordSource` and
:class:`~sla_spine.sla.repository.SlaSummaryRepository` (SQLite).
"""

from sla_spine.sla.evaluator import evaluate, format_event_status
from sla_spine.sla.executor import EvaluatedSummary, execute_query
from sla_spine.sla.filters import ALL_EVENT_STATUSES, EventStatusSelector, SlaFilter, parse_filter
from sla_spine.sla.models import DURATION_UNSET, SlaSummary
from sla_spine.sla.renderer import render_summary, render_summary_list
from sla_spine.sla.sources import InMemoryRecordSource

__all__ = [
    "ALL_EVENT_STATUSES",
    "DURATION_UNSET",
    "EvaluatedSummary",
    "EventStatusSelector",
    "InMemoryRecordSource",
    "SlaFilter",
    "SlaSummary",
    "evaluate",
    "execute_query",
    "format_event_status",
    "parse_filter",
    "render_summary",
    "render_summary_list",
]
