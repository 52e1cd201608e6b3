"""Tests for the compliance evaluator."""

from __future__ import annotations

from datetime import timedelta

import pytest

from sla_spine.core.enums import EventStatus
from sla_spine.sla.evaluator import evaluate, format_event_status


def _at(now, **delta):
    return now + timedelta(**delta)


class TestNothingToEvaluate:
    def test_no_expectations_gives_no_outcomes(self, make_summary, now):
        summary = make_summary(expected_end=None)
        assert evaluate(summary, now) == ()

    def test_future_expectations_not_yet_decidable(self, make_summary, now):
        summary = make_summary(
            expected_start=_at(now, minutes=10),
            expected_end=_at(now, hours=1),
        )
        assert evaluate(summary, now) == ()


class TestStartDimension:
    def test_started_late_by_whole_minute_is_miss(self, make_summary, now):
        expected = _at(now, hours=-1)
        summary = make_summary(expected_start=expected, actual_start=_at(expected, minutes=1))
        assert evaluate(summary, now) == (EventStatus.START_MISS,)

    def test_started_late_under_a_minute_is_met(self, make_summary, now):
        expected = _at(now, hours=-1)
        summary = make_summary(expected_start=expected, actual_start=_at(expected, seconds=59))
        assert evaluate(summary, now) == (EventStatus.START_MET,)

    def test_started_early_is_met(self, make_summary, now):
        expected = _at(now, hours=-1)
        summary = make_summary(expected_start=expected, actual_start=_at(expected, seconds=-30))
        assert evaluate(summary, now) == (EventStatus.START_MET,)

    def test_not_started_and_overdue_is_miss(self, make_summary, now):
        summary = make_summary(expected_start=_at(now, seconds=-90))
        assert evaluate(summary, now) == (EventStatus.START_MISS,)

    def test_not_started_within_grace_minute_is_undecided(self, make_summary, now):
        summary = make_summary(expected_start=_at(now, seconds=-30))
        assert evaluate(summary, now) == ()


class TestEndDimension:
    def test_finished_on_time(self, make_summary, now):
        expected = _at(now, hours=-1)
        summary = make_summary(expected_end=expected, actual_end=expected)
        assert evaluate(summary, now) == (EventStatus.END_MET,)

    def test_finished_late(self, make_summary, now):
        expected = _at(now, hours=-1)
        summary = make_summary(expected_end=expected, actual_end=_at(expected, minutes=5))
        assert evaluate(summary, now) == (EventStatus.END_MISS,)

    def test_still_running_past_expected_end(self, make_summary, now):
        summary = make_summary(expected_end=_at(now, minutes=-2))
        assert evaluate(summary, now) == (EventStatus.END_MISS,)


class TestDurationDimension:
    def test_actual_longer_than_expected_is_miss(self, make_summary, now):
        summary = make_summary(expected_duration=60_000, actual_duration=60_001)
        assert evaluate(summary, now) == (EventStatus.DURATION_MISS,)

    def test_actual_equal_to_expected_is_met(self, make_summary, now):
        summary = make_summary(expected_duration=60_000, actual_duration=60_000)
        assert evaluate(summary, now) == (EventStatus.DURATION_MET,)

    def test_running_longer_than_expected_is_miss(self, make_summary, now):
        summary = make_summary(
            expected_duration=60_000,
            actual_start=_at(now, milliseconds=-60_001),
        )
        assert evaluate(summary, now) == (EventStatus.DURATION_MISS,)

    def test_running_exactly_expected_is_undecided(self, make_summary, now):
        summary = make_summary(
            expected_duration=60_000,
            actual_start=_at(now, milliseconds=-60_000),
        )
        assert evaluate(summary, now) == ()

    def test_not_started_is_undecided(self, make_summary, now):
        summary = make_summary(expected_duration=60_000)
        assert evaluate(summary, now) == ()

    def test_duration_uses_raw_milliseconds(self, make_summary, now):
        # 1 ms over is already a miss; start/end would round this away.
        summary = make_summary(expected_duration=1_000, actual_duration=1_001)
        assert evaluate(summary, now) == (EventStatus.DURATION_MISS,)

    def test_unset_sentinel_means_no_expectation(self, make_summary, now):
        summary = make_summary(expected_duration=-1, actual_duration=5_000)
        assert evaluate(summary, now) == ()


class TestOrdering:
    def test_outcomes_ordered_start_duration_end(self, make_summary, now):
        summary = make_summary(
            expected_start=_at(now, hours=-2),
            actual_start=_at(now, hours=-2, minutes=10),
            expected_duration=3_600_000,
            actual_duration=7_200_000,
            expected_end=_at(now, hours=-1),
            actual_end=_at(now, minutes=-50),
        )
        assert evaluate(summary, now) == (
            EventStatus.START_MISS,
            EventStatus.DURATION_MISS,
            EventStatus.END_MISS,
        )

    def test_evaluation_is_pure(self, make_summary, now):
        summary = make_summary(expected_end=_at(now, minutes=-5))
        assert evaluate(summary, now) == evaluate(summary, now)


class TestFormatEventStatus:
    @pytest.mark.parametrize(
        ("outcomes", "expected"),
        [
            ((), ""),
            ((EventStatus.END_MET,), "END_MET"),
            ((EventStatus.START_MISS, EventStatus.END_MISS), "START_MISS,END_MISS"),
        ],
    )
    def test_joins_names_with_comma(self, outcomes, expected):
        assert format_event_status(outcomes) == expected
