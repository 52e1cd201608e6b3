"""Tests for the sla-spine error hierarchy."""

import sqlite3

import pytest

from sla_spine.core.errors import (
    ErrorCategory,
    InvalidFilterError,
    InvalidTimeZoneError,
    MissingRequiredFieldError,
    RecordIntegrityError,
    SlaError,
    StorageError,
    ValidationError,
)


class TestHierarchy:
    @pytest.mark.parametrize(
        ("error", "parent", "category"),
        [
            (InvalidFilterError("bad"), ValidationError, ErrorCategory.VALIDATION),
            (InvalidTimeZoneError("Nowhere/Land"), ValidationError, ErrorCategory.VALIDATION),
            (MissingRequiredFieldError("expected_end"), RecordIntegrityError, ErrorCategory.INTEGRITY),
            (StorageError("down"), SlaError, ErrorCategory.STORAGE),
        ],
    )
    def test_category_and_parent(self, error, parent, category):
        assert isinstance(error, parent)
        assert error.category == category
        assert error.retryable is False

    def test_base_defaults_to_internal(self):
        assert SlaError("boom").category == ErrorCategory.INTERNAL


class TestErrorDetails:
    def test_invalid_filter_carries_clause(self):
        error = InvalidFilterError("unknown key", clause="color=red")
        assert error.clause == "color=red"
        assert error.to_dict()["clause"] == "color=red"

    def test_invalid_time_zone_message(self):
        error = InvalidTimeZoneError("Nowhere/Land")
        assert error.time_zone == "Nowhere/Land"
        assert "Nowhere/Land" in str(error)

    def test_missing_field_sets_job_id(self):
        error = MissingRequiredFieldError("expected_end", job_id="1-W")
        d = error.to_dict()
        assert d["field"] == "expected_end"
        assert d["context"]["job_id"] == "1-W"
        assert d["error_type"] == "MissingRequiredFieldError"

    def test_cause_is_chained(self):
        driver = sqlite3.OperationalError("no such table")
        error = StorageError("query failed", cause=driver)
        assert error.__cause__ is driver
        assert error.to_dict()["cause"] == "no such table"

    def test_with_context(self):
        error = StorageError("query failed").with_context(operation="list", table="sla_summary")
        assert error.context.operation == "list"
        assert error.context.metadata == {"table": "sla_summary"}
