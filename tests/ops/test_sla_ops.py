"""Tests for SLA summary operations."""

from datetime import timedelta

import pytest

from sla_spine.core.errors import ErrorCategory, StorageError
from sla_spine.ops.context import OperationContext
from sla_spine.ops.requests import GetSlaSummaryRequest, ListSlaSummariesRequest
from sla_spine.ops.sla import get_sla_summary, list_sla_summaries
from sla_spine.sla.renderer import SLA_SUMMARY_LIST
from sla_spine.sla.repository import SlaSummaryRepository
from sla_spine.sla.sources import InMemoryRecordSource


@pytest.fixture()
def seeded(ctx, make_summary, now):
    repo = SlaSummaryRepository(ctx.conn)
    repo.insert_summary(make_summary(id="1-W", expected_end=now - timedelta(minutes=5)))
    repo.insert_summary(make_summary(id="2-W", nominal_time=now, app_name="report"))
    repo.commit()
    return ctx


class ExplodingSource:
    def __init__(self):
        self.calls = 0

    def query(self, sla_filter):
        self.calls += 1
        raise StorageError("sla_summary unavailable")


class TestListSlaSummaries:
    def test_returns_rendered_list(self, seeded):
        result = list_sla_summaries(seeded, ListSlaSummariesRequest(filter="app_name=etl"))

        assert result.success
        items = result.data[SLA_SUMMARY_LIST]
        assert [i["id"] for i in items] == ["1-W"]
        assert "event_status" not in items[0]
        assert result.metadata == {"count": 1}

    def test_event_status_uses_context_clock(self, seeded):
        result = list_sla_summaries(seeded, ListSlaSummariesRequest(filter="event_status=END_MISS"))

        assert result.success
        (item,) = result.data[SLA_SUMMARY_LIST]
        assert item["id"] == "1-W"
        assert item["event_status"] == "END_MISS"

    def test_time_zone(self, seeded):
        result = list_sla_summaries(
            seeded, ListSlaSummariesRequest(filter="id=2-W", time_zone="GMT")
        )
        assert result.data[SLA_SUMMARY_LIST][0]["nominal_time"] == "Sun, 03 Jun 2012 16:30:00 GMT"

    def test_explicit_source(self, ctx, make_summary):
        source = InMemoryRecordSource([make_summary(id="mem-1")])
        result = list_sla_summaries(ctx, ListSlaSummariesRequest(filter="id=mem-1"), source=source)
        assert [i["id"] for i in result.data[SLA_SUMMARY_LIST]] == ["mem-1"]

    @pytest.mark.parametrize("raw", [None, "", "color=red", "event_status=ALL,END_MISS"])
    def test_invalid_filter(self, ctx, raw):
        result = list_sla_summaries(ctx, ListSlaSummariesRequest(filter=raw))

        assert not result.success
        assert result.error.code == "INVALID_FILTER"
        assert result.error.category == ErrorCategory.VALIDATION
        assert result.error.retryable is False

    def test_invalid_filter_reports_clause(self, ctx):
        result = list_sla_summaries(ctx, ListSlaSummariesRequest(filter="app_name=etl;color=red"))
        assert result.error.details == {"clause": "color=red"}

    def test_validation_short_circuits_before_storage(self, ctx):
        source = ExplodingSource()
        bad_filter = list_sla_summaries(ctx, ListSlaSummariesRequest(filter="color=red"), source=source)
        bad_zone = list_sla_summaries(
            ctx, ListSlaSummariesRequest(filter="app_name=etl", time_zone="Not/AZone"), source=source
        )

        assert bad_filter.error.code == "INVALID_FILTER"
        assert bad_zone.error.code == "INVALID_TIME_ZONE"
        assert source.calls == 0

    def test_storage_error(self, ctx):
        result = list_sla_summaries(
            ctx, ListSlaSummariesRequest(filter="app_name=etl"), source=ExplodingSource()
        )
        assert result.error.code == "STORAGE_ERROR"
        assert result.error.retryable is False

    def test_missing_required_field(self, ctx, make_summary):
        source = InMemoryRecordSource([make_summary(id="bad", expected_end=None)])
        result = list_sla_summaries(ctx, ListSlaSummariesRequest(filter="id=bad"), source=source)

        assert result.error.code == "MISSING_REQUIRED_FIELD"
        assert result.error.details == {"field": "expected_end", "job_id": "bad"}

    def test_unreadable_row(self, seeded):
        seeded.conn.execute("UPDATE sla_summary SET sla_status = 'LATE' WHERE job_id = '1-W'")
        result = list_sla_summaries(seeded, ListSlaSummariesRequest(filter="id=1-W"))
        assert result.error.code == "RECORD_INTEGRITY"


class TestGetSlaSummary:
    def test_found_with_event_status(self, seeded):
        result = get_sla_summary(seeded, GetSlaSummaryRequest(id="1-W"))

        assert result.success
        assert result.data["id"] == "1-W"
        assert result.data["event_status"] == "END_MISS"

    def test_without_event_status(self, seeded):
        result = get_sla_summary(seeded, GetSlaSummaryRequest(id="1-W", include_event_status=False))
        assert "event_status" not in result.data

    def test_not_found(self, seeded):
        result = get_sla_summary(seeded, GetSlaSummaryRequest(id="nope"))
        assert result.error.code == "NOT_FOUND"

    def test_empty_id(self, ctx):
        result = get_sla_summary(ctx, GetSlaSummaryRequest(id=""))
        assert result.error.code == "VALIDATION_FAILED"

    def test_bad_time_zone(self, seeded):
        result = get_sla_summary(seeded, GetSlaSummaryRequest(id="1-W", time_zone="Not/AZone"))
        assert result.error.code == "INVALID_TIME_ZONE"

    def test_in_memory_source(self, make_summary):
        ctx = OperationContext(conn=None)
        source = InMemoryRecordSource([make_summary(id="m")])
        result = get_sla_summary(ctx, GetSlaSummaryRequest(id="m"), source=source)
        assert result.data["id"] == "m"
