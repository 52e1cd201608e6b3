"""
Operations layer for sla-spine.

Typed request/response functions shared by the API and the CLI:

- All functions accept ``OperationContext`` as first argument
- All functions return ``OperationResult[T]`` (never raise)
- All functions are transport-agnostic (no HTTP, no CLI knowledge)

Usage::

    from sla_spine.ops import OperationContext, SqliteConnection
    from sla_spine.ops.requests import ListSlaSummariesRequest
    from sla_spine.ops.sla import list_sla_summaries

    ctx = OperationContext(conn=SqliteConnection("sla.db"))
    result = list_sla_summaries(ctx, ListSlaSummariesRequest(filter="app_name=etl"))
    assert result.success
"""

from sla_spine.ops.context import OperationContext
from sla_spine.ops.result import OperationError, OperationResult
from sla_spine.ops.sqlite_conn import SqliteConnection

__all__ = [
    "OperationContext",
    "OperationError",
    "OperationResult",
    "SqliteConnection",
]
