"""Shared fixtures for sla_spine.ops tests."""

import sqlite3
from typing import Any

import pytest

from sla_spine.ops.context import OperationContext
from sla_spine.sla.schema import SLA_SUMMARY_DDL


class MockConnection:
    """Minimal Connection protocol implementation backed by in-memory SQLite."""

    def __init__(self) -> None:
        self._conn = sqlite3.connect(":memory:")
        self._conn.row_factory = sqlite3.Row
        self._cursor = self._conn.cursor()

    def execute(self, sql: str, params: tuple = ()) -> Any:
        self._cursor.execute(sql, params)
        return self._cursor

    def executemany(self, sql: str, params: list[tuple]) -> Any:
        self._cursor.executemany(sql, params)
        return self._cursor

    def fetchone(self) -> Any:
        return self._cursor.fetchone()

    def fetchall(self) -> list:
        return self._cursor.fetchall()

    def commit(self) -> None:
        self._conn.commit()

    def close(self) -> None:
        self._conn.close()


@pytest.fixture()
def mock_conn() -> MockConnection:
    """In-memory SQLite connection with the sla_summary schema."""
    conn = MockConnection()
    for statement in SLA_SUMMARY_DDL:
        conn.execute(statement)
    conn.commit()
    yield conn
    conn.close()


@pytest.fixture()
def ctx(mock_conn: MockConnection, fixed_clock) -> OperationContext:
    """OperationContext wired to the mock connection and the fixed clock."""
    return OperationContext(conn=mock_conn, caller="test", clock=fixed_clock)
