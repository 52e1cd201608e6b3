"""
Base class for data-access repositories.

Repositories own all SQL for one table.  Operations and domain code talk
to a repository, never to a cursor.  Driver exceptions are translated into
:class:`~sla_spine.core.errors.StorageError` at this boundary so callers
see one failure type regardless of backend.

Guardrails:
    ❌ DON'T: Write raw SQL in ops modules
    ✅ DO: Add a method to the repository for the table

    ❌ DON'T: Let sqlite3.Error leak past the repository
    ✅ DO: Go through execute()/fetch_rows(), which wrap it

Tags:
    repository, sql, data-access, sqlite
"""

from __future__ import annotations

import sqlite3
from typing import Any

from sla_spine.core.errors import StorageError
from sla_spine.core.protocols import Connection


class BaseRepository:
    """Helper methods for building and executing parameterised SQL.

    Parameters:
        conn: Any object satisfying the :class:`Connection` protocol.
    """

    def __init__(self, conn: Connection) -> None:
        self.conn = conn

    @staticmethod
    def ph(count: int) -> str:
        """``?`` placeholders for *count* values, comma-joined."""
        return ", ".join("?" * count)

    # -- Query helpers -----------------------------------------------------

    def execute(self, sql: str, params: tuple = ()) -> Any:
        """Execute a statement and return the raw cursor/result."""
        try:
            return self.conn.execute(sql, params)
        except sqlite3.Error as e:
            raise StorageError(f"Statement failed: {e}", cause=e) from e

    def fetch_rows(self, sql: str, params: tuple = ()) -> list[dict[str, Any]]:
        """Execute a SELECT and return rows as dicts."""
        try:
            cursor = self.conn.execute(sql, params)
            rows = cursor.fetchall()
        except sqlite3.Error as e:
            raise StorageError(f"Query failed: {e}", cause=e) from e
        if not rows:
            return []

        # sqlite3.Row supports dict(row)
        try:
            return [dict(row) for row in rows]
        except (TypeError, ValueError):
            pass

        columns = [desc[0] for desc in cursor.description]
        return [dict(zip(columns, row, strict=False)) for row in rows]

    def fetch_row(self, sql: str, params: tuple = ()) -> dict[str, Any] | None:
        """Execute a SELECT and return the first row as a dict (or None)."""
        results = self.fetch_rows(sql, params)
        return results[0] if results else None

    def insert(self, table: str, data: dict[str, Any]) -> Any:
        """Insert a single row from a dict."""
        columns = list(data.keys())
        sql = f"INSERT INTO {table} ({', '.join(columns)}) VALUES ({self.ph(len(columns))})"
        return self.execute(sql, tuple(data.values()))

    def commit(self) -> None:
        """Commit the current transaction."""
        try:
            self.conn.commit()
        except sqlite3.Error as e:
            raise StorageError(f"Commit failed: {e}", cause=e) from e


__all__ = ["BaseRepository"]
