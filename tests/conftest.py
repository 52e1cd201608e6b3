"""
Shared pytest fixtures and configuration for sla-spine tests.

This module provides:
- A fixed reference instant (``now``) and a clock returning it
- ``make_summary``: factory for complete, renderable compliance records
- Auto-marking of tests as unit / integration by location

Usage:
    def test_something(make_summary, now):
        summary = make_summary(expected_end=now - timedelta(minutes=5))
"""

from datetime import UTC, datetime, timedelta
from pathlib import Path
from typing import Any, Callable

import pytest

from sla_spine.core.enums import AppType
from sla_spine.sla.models import SlaSummary

NOW = datetime(2012, 6, 3, 16, 30, tzinfo=UTC)


# =============================================================================
# Test Markers Configuration
# =============================================================================


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Auto-mark tests based on their location."""
    for item in items:
        test_path = Path(item.fspath).relative_to(Path(__file__).parent)

        # SQLite-backed and HTTP/CLI stacks
        if test_path.parts[0] in {"api", "cli"} or "repository" in test_path.name:
            item.add_marker(pytest.mark.integration)

        markers = {mark.name for mark in item.iter_markers()}
        if not markers.intersection({"unit", "integration"}):
            item.add_marker(pytest.mark.unit)


# =============================================================================
# Clock Fixtures
# =============================================================================


@pytest.fixture
def now() -> datetime:
    """Fixed reference instant: 2012-06-03 16:30 UTC."""
    return NOW


@pytest.fixture
def fixed_clock() -> Callable[[], datetime]:
    """Clock that always returns :func:`now`."""
    return lambda: NOW


# =============================================================================
# Record Fixtures
# =============================================================================


@pytest.fixture
def make_summary() -> Callable[..., SlaSummary]:
    """
    Factory for compliance records.

    Defaults produce a record that renders without error (nominal_time,
    expected_end and last_modified set) and evaluates to nothing.
    Any field can be overridden by keyword.
    """

    def _make(**overrides: Any) -> SlaSummary:
        fields: dict[str, Any] = {
            "id": "0000001-oozie-W",
            "nominal_time": NOW - timedelta(hours=1),
            "app_name": "etl",
            "app_type": AppType.WORKFLOW_JOB,
            "user": "oozie",
            "expected_end": NOW + timedelta(hours=1),
            "last_modified": NOW - timedelta(minutes=1),
        }
        fields.update(overrides)
        return SlaSummary(**fields)

    return _make
