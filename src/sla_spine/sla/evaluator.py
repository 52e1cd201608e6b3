"""
Compliance evaluator.

``evaluate(summary, now)`` computes the per-dimension outcomes of one
compliance record.  Pure: no I/O, no hidden clock, no mutation.

Rules:
    Start / end (same rule, different pair):
        expected unset             → nothing
        actual set                 → MISS if whole minutes late > 0, else MET
        actual unset               → MISS if whole minutes past expected > 0,
                                     else nothing (not decidable yet)

    Duration (raw milliseconds, no minute smoothing):
        expected unset             → nothing
        actual set                 → MISS if actual > expected, else MET
        actual unset, started      → MISS if elapsed since start > expected
        otherwise                  → nothing

Start/end compare two wall-clock instants and are smoothed to whole minutes;
duration compares magnitudes directly.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime

from sla_spine.core.enums import EventStatus
from sla_spine.core.timestamps import to_epoch_ms
from sla_spine.sla.models import SlaSummary

EVENT_STATUS_SEPARATOR = ","

_MS_PER_MINUTE = 60_000


def evaluate(summary: SlaSummary, now: datetime) -> tuple[EventStatus, ...]:
    """Return the ordered (start, duration, end) outcomes for *summary* at *now*."""
    now_ms = to_epoch_ms(now)
    outcomes: list[EventStatus] = []

    start = _instant_outcome(
        summary.expected_start,
        summary.actual_start,
        now_ms,
        met=EventStatus.START_MET,
        miss=EventStatus.START_MISS,
    )
    if start is not None:
        outcomes.append(start)

    duration = _duration_outcome(summary, now_ms)
    if duration is not None:
        outcomes.append(duration)

    end = _instant_outcome(
        summary.expected_end,
        summary.actual_end,
        now_ms,
        met=EventStatus.END_MET,
        miss=EventStatus.END_MISS,
    )
    if end is not None:
        outcomes.append(end)

    return tuple(outcomes)


def format_event_status(outcomes: Iterable[EventStatus]) -> str:
    """Join outcome names with ``,``; empty input gives ``""``."""
    return EVENT_STATUS_SEPARATOR.join(outcome.value for outcome in outcomes)


def _instant_outcome(
    expected: datetime | None,
    actual: datetime | None,
    now_ms: int,
    *,
    met: EventStatus,
    miss: EventStatus,
) -> EventStatus | None:
    if expected is None:
        return None
    expected_ms = to_epoch_ms(expected)
    if actual is not None:
        late_minutes = (to_epoch_ms(actual) - expected_ms) // _MS_PER_MINUTE
        return miss if late_minutes > 0 else met
    overdue_minutes = (now_ms - expected_ms) // _MS_PER_MINUTE
    return miss if overdue_minutes > 0 else None


def _duration_outcome(summary: SlaSummary, now_ms: int) -> EventStatus | None:
    expected = summary.expected_duration
    if expected is None:
        return None
    if summary.actual_duration is not None:
        if summary.actual_duration - expected > 0:
            return EventStatus.DURATION_MISS
        return EventStatus.DURATION_MET
    if summary.actual_start is not None:
        elapsed = now_ms - to_epoch_ms(summary.actual_start)
        if expected < elapsed:
            return EventStatus.DURATION_MISS
    return None
