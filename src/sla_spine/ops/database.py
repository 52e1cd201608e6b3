"""
Database operations.

Thin wrapper around :mod:`sla_spine.sla.schema` for table creation.
"""

from __future__ import annotations

from sla_spine.core.errors import StorageError
from sla_spine.core.logging import get_logger
from sla_spine.core.repository import BaseRepository
from sla_spine.ops.context import OperationContext
from sla_spine.ops.requests import DatabaseInitRequest
from sla_spine.ops.responses import DatabaseInitResult
from sla_spine.ops.result import OperationResult, start_timer
from sla_spine.sla.schema import SLA_SUMMARY_DDL, TABLES

logger = get_logger(__name__)


def initialize_database(
    ctx: OperationContext,
    request: DatabaseInitRequest | None = None,
) -> OperationResult[DatabaseInitResult]:
    """Create the ``sla_summary`` table and its indexes (idempotent)."""
    timer = start_timer()

    repo = BaseRepository(ctx.conn)
    try:
        for statement in SLA_SUMMARY_DDL:
            repo.execute(statement)
        repo.commit()
    except StorageError as exc:
        logger.exception("op_failed", operation="initialize_database", error=str(exc))
        return OperationResult.fail(
            "STORAGE_ERROR",
            f"Failed to create tables: {exc}",
            category=exc.category,
            elapsed_ms=timer.elapsed_ms,
        )

    logger.info("database_initialized", tables=list(TABLES))
    return OperationResult.ok(
        DatabaseInitResult(tables_created=list(TABLES)),
        elapsed_ms=timer.elapsed_ms,
    )
