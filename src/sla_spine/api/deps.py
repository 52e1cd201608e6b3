"""
FastAPI dependency injection: shared singletons and per-request factories.

Usage in routers::

    from sla_spine.api.deps import OpContext

    @router.get("/sla")
    def list_sla(ctx: OpContext):
        ...

Tests swap the clock or settings with ``app.dependency_overrides``.
"""

from __future__ import annotations

import uuid
from collections.abc import Generator
from functools import lru_cache
from typing import Annotated

from fastapi import Depends, Request

from sla_spine.api.settings import SlaSpineAPISettings
from sla_spine.core.protocols import Clock
from sla_spine.core.timestamps import utc_now
from sla_spine.ops.context import OperationContext
from sla_spine.ops.sqlite_conn import SqliteConnection

# ── Settings (singleton) ─────────────────────────────────────────────────


@lru_cache(maxsize=1)
def get_settings() -> SlaSpineAPISettings:
    """Cached settings, loaded once per process."""
    return SlaSpineAPISettings()


# ── Database connection (per-request) ────────────────────────────────────


def get_connection(
    settings: Annotated[SlaSpineAPISettings, Depends(get_settings)],
) -> Generator[SqliteConnection, None, None]:
    """Yield a SQLite connection for the request lifespan."""
    conn = SqliteConnection(settings.database_path)
    try:
        yield conn
    finally:
        conn.close()


# ── Clock ────────────────────────────────────────────────────────────────


def get_clock() -> Clock:
    """Source of "now" used to evaluate jobs still in flight."""
    return utc_now


# ── Operation context (per-request) ──────────────────────────────────────


def get_operation_context(
    request: Request,
    conn: Annotated[SqliteConnection, Depends(get_connection)],
    clock: Annotated[Clock, Depends(get_clock)],
) -> OperationContext:
    """Build an :class:`OperationContext` from the current request."""
    request_id = getattr(request.state, "request_id", str(uuid.uuid4()))
    return OperationContext(
        conn=conn,
        request_id=request_id,
        caller="api",
        clock=clock,
    )


# ── Convenience type aliases ─────────────────────────────────────────────

Settings = Annotated[SlaSpineAPISettings, Depends(get_settings)]
OpContext = Annotated[OperationContext, Depends(get_operation_context)]
