"""Tests for the SlaSummary value type."""

from __future__ import annotations

import dataclasses
from datetime import datetime, timedelta, timezone

import pytest

from sla_spine.sla.models import SlaSummary


class TestSlaSummary:
    def test_is_immutable(self, make_summary):
        summary = make_summary()
        with pytest.raises(dataclasses.FrozenInstanceError):
            summary.app_name = "other"

    def test_replace_returns_new_value(self, make_summary):
        summary = make_summary()
        changed = summary.replace(job_status="SUCCEEDED")
        assert changed.job_status == "SUCCEEDED"
        assert summary.job_status is None

    def test_duration_sentinel_normalised_to_none(self, make_summary):
        summary = make_summary(expected_duration=-1, actual_duration=-1)
        assert summary.expected_duration is None
        assert summary.actual_duration is None

    def test_instants_normalised_to_utc(self, make_summary):
        plus_two = timezone(timedelta(hours=2))
        summary = make_summary(nominal_time=datetime(2012, 6, 3, 18, 0, tzinfo=plus_two))
        assert summary.nominal_time.utcoffset() == timedelta(0)
        assert summary.nominal_time.hour == 16

    def test_naive_instants_taken_as_utc(self, make_summary):
        summary = make_summary(actual_start=datetime(2012, 6, 3, 16, 0))
        assert summary.actual_start.utcoffset() == timedelta(0)

    def test_id_required(self, now):
        with pytest.raises(ValueError):
            SlaSummary(id="", nominal_time=now)

    def test_nominal_time_required(self):
        with pytest.raises(ValueError):
            SlaSummary(id="1-W", nominal_time=None)
