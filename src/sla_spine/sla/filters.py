"""
Filter parser for SLA summary queries.

Grammar::

    filter  := clause (";" clause)*
    clause  := key "=" value
    key     := id | parent_id | app_name | nominal_start | nominal_end | event_status

``event_status`` takes ``ALL`` or a comma-joined list of outcome names.
``nominal_start`` / ``nominal_end`` take ``YYYY-MM-DDTHH:MMZ`` (UTC) and are
inclusive bounds on ``nominal_time``.

Rejected with :class:`InvalidFilterError`:
    - empty filter, or no clause at all (never an unfiltered dump)
    - unknown key, repeated key, clause without ``=``, empty value
    - malformed date
    - unknown status token, empty token, or ``ALL`` mixed with other tokens

Examples:
    >>> f = parse_filter("app_name=etl;event_status=START_MISS,END_MISS")
    >>> f.app_name
    'etl'
    >>> sorted(s.value for s in f.event_status.statuses)
    ['END_MISS', 'START_MISS']
"""

from __future__ import annotations

import dataclasses
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime

from sla_spine.core.enums import EventStatus
from sla_spine.core.errors import InvalidFilterError
from sla_spine.core.logging import get_logger
from sla_spine.core.timestamps import UTC_MINUTE_FORMAT, parse_utc_minute
from sla_spine.sla.models import SlaSummary

logger = get_logger(__name__)

CLAUSE_SEPARATOR = ";"
KEY_VALUE_SEPARATOR = "="
VALUE_SEPARATOR = ","
EVENT_STATUS_ALL = "ALL"

FILTER_ID = "id"
FILTER_PARENT_ID = "parent_id"
FILTER_APP_NAME = "app_name"
FILTER_NOMINAL_START = "nominal_start"
FILTER_NOMINAL_END = "nominal_end"
FILTER_EVENT_STATUS = "event_status"

FILTER_KEYS = (
    FILTER_ID,
    FILTER_PARENT_ID,
    FILTER_APP_NAME,
    FILTER_NOMINAL_START,
    FILTER_NOMINAL_END,
    FILTER_EVENT_STATUS,
)


@dataclass(frozen=True, slots=True)
class EventStatusSelector:
    """The ``event_status`` part of a filter.

    An empty ``statuses`` set means ``ALL``: attach outcomes to every record
    without excluding any.  A non-empty set keeps only records whose
    evaluated outcomes intersect it.
    """

    statuses: frozenset[EventStatus] = frozenset()

    @property
    def is_all(self) -> bool:
        return not self.statuses

    def matches(self, outcomes: Iterable[EventStatus]) -> bool:
        if self.is_all:
            return True
        return not self.statuses.isdisjoint(outcomes)


ALL_EVENT_STATUSES = EventStatusSelector()


@dataclass(frozen=True, slots=True)
class SlaFilter:
    """Parsed, validated filter.  ``None`` fields are unconstrained."""

    id: str | None = None
    parent_id: str | None = None
    app_name: str | None = None
    nominal_start: datetime | None = None
    nominal_end: datetime | None = None
    event_status: EventStatusSelector | None = None

    @property
    def attaches_event_status(self) -> bool:
        return self.event_status is not None

    def structural(self) -> SlaFilter:
        """The storage-resolvable part of this filter (no event status)."""
        return dataclasses.replace(self, event_status=None)

    def matches_structure(self, summary: SlaSummary) -> bool:
        """In-memory evaluation of the structural predicate."""
        if self.id is not None and summary.id != self.id:
            return False
        if self.parent_id is not None and summary.parent_id != self.parent_id:
            return False
        if self.app_name is not None and summary.app_name != self.app_name:
            return False
        if self.nominal_start is not None and summary.nominal_time < self.nominal_start:
            return False
        if self.nominal_end is not None and summary.nominal_time > self.nominal_end:
            return False
        return True


def parse_filter(raw: str | None) -> SlaFilter:
    """Parse a raw filter string into a :class:`SlaFilter`.

    Raises:
        InvalidFilterError: on any violation listed in the module docstring.
    """
    if raw is None or not raw.strip():
        raise InvalidFilterError("A filter is required; at least one clause must be given")

    values: dict[str, object] = {}
    for clause in raw.split(CLAUSE_SEPARATOR):
        clause = clause.strip()
        if not clause:
            continue
        key, sep, value = clause.partition(KEY_VALUE_SEPARATOR)
        key = key.strip()
        value = value.strip()
        if not sep:
            raise InvalidFilterError(f"Filter clause {clause!r} is not key=value", clause=clause)
        if key not in FILTER_KEYS:
            raise InvalidFilterError(
                f"Unknown filter key {key!r}; expected one of {', '.join(FILTER_KEYS)}",
                clause=clause,
            )
        if key in values:
            raise InvalidFilterError(f"Filter key {key!r} given more than once", clause=clause)
        if not value:
            raise InvalidFilterError(f"Filter key {key!r} has an empty value", clause=clause)
        values[key] = _parse_value(key, value, clause)

    if not values:
        raise InvalidFilterError("A filter is required; at least one clause must be given")

    sla_filter = SlaFilter(**values)
    logger.debug("sla_filter_parsed", keys=sorted(values))
    return sla_filter


def _parse_value(key: str, value: str, clause: str) -> object:
    if key in (FILTER_NOMINAL_START, FILTER_NOMINAL_END):
        try:
            return parse_utc_minute(value)
        except ValueError:
            raise InvalidFilterError(
                f"Filter key {key!r} expects a UTC date like {UTC_MINUTE_FORMAT!r}, got {value!r}",
                clause=clause,
            ) from None
    if key == FILTER_EVENT_STATUS:
        return _parse_event_status(value, clause)
    return value


def _parse_event_status(value: str, clause: str) -> EventStatusSelector:
    tokens = [token.strip() for token in value.split(VALUE_SEPARATOR)]
    if any(not token for token in tokens):
        raise InvalidFilterError("Empty event_status token", clause=clause)
    if EVENT_STATUS_ALL in tokens:
        if len(tokens) > 1:
            raise InvalidFilterError(
                f"{EVENT_STATUS_ALL} cannot be combined with other event statuses",
                clause=clause,
            )
        return ALL_EVENT_STATUSES
    statuses = []
    for token in tokens:
        try:
            statuses.append(EventStatus.from_name(token))
        except InvalidFilterError as e:
            raise InvalidFilterError(e.message, clause=clause) from None
    return EventStatusSelector(frozenset(statuses))
