"""
Structural protocols for sla-spine collaborators.

Protocols define contracts without inheritance.  Anything with the right
shape works: a sqlite3 adapter, a psycopg wrapper, a list of records in a
test, a frozen clock.

Architecture:
    ::

        protocols.py
        ├── Connection   : sync DB protocol (execute, fetchone, fetchall, commit)
        ├── RecordSource : structural query over compliance records
        ├── RecordLookup : single record by job id
        └── Clock        : zero-arg callable returning the current instant

Tags:
    protocol, connection, record-source, record-lookup, clock, contracts
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from datetime import datetime
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from sla_spine.sla.filters import SlaFilter
    from sla_spine.sla.models import SlaSummary


Clock = Callable[[], datetime]
"""Returns the current instant as an aware UTC datetime."""


@runtime_checkable
class Connection(Protocol):
    """
    Minimal SYNCHRONOUS connection interface for database operations.

    Examples:
        >>> conn.execute("SELECT * FROM sla_summary WHERE job_id = ?", ("1-W",))
        >>> row = conn.fetchone()
    """

    def execute(self, sql: str, params: tuple = ()) -> Any:
        """Execute SQL statement with optional parameters. SYNC."""
        ...

    def executemany(self, sql: str, params: list[tuple]) -> Any:
        """Execute SQL statement for multiple parameter sets. SYNC."""
        ...

    def fetchone(self) -> Any:
        """Fetch one row from last query. SYNC."""
        ...

    def fetchall(self) -> list:
        """Fetch all rows from last query. SYNC."""
        ...

    def commit(self) -> None:
        """Commit current transaction. SYNC."""
        ...


@runtime_checkable
class RecordSource(Protocol):
    """
    Storage-level query over compliance records.

    Implementations apply only the structural part of a filter (identity,
    parent, app name, nominal-time range) and return records in their own
    order, which callers preserve.  Failures surface as
    :class:`~sla_spine.core.errors.StorageError`.
    """

    def query(self, sla_filter: SlaFilter) -> Sequence[SlaSummary]:
        ...


@runtime_checkable
class RecordLookup(Protocol):
    """Fetch one compliance record by job id; ``None`` when absent."""

    def get(self, job_id: str) -> SlaSummary | None:
        ...
