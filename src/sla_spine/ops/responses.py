"""
Typed response objects for operations.

Plain dataclasses, one per operation output.  The API layer converts them
to Pydantic schemas; the CLI prints them directly.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class DatabaseInitResult:
    """Result of :func:`sla_spine.ops.database.initialize_database`."""

    tables_created: list[str] = field(default_factory=list)
