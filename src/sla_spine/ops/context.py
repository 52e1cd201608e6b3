"""
Request-scoped context for operations.

Every operation function receives an :class:`OperationContext` as its first
argument.  The context carries the database connection, caller identity,
and the clock used for real-time compliance evaluation.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from typing import Any

from sla_spine.core.protocols import Clock, Connection
from sla_spine.core.timestamps import utc_now


@dataclass
class OperationContext:
    """Context passed to every operation function.

    Attributes:
        conn: Database connection satisfying :class:`sla_spine.core.protocols.Connection`.
        request_id: Unique ID for this operation invocation (auto-generated).
        caller: Origin of the request: ``"api"``, ``"cli"`` or ``"sdk"``.
        user: Optional authenticated user identifier.
        clock: Source of "now" for evaluating jobs still in flight.
        metadata: Arbitrary key/value pairs forwarded to logging.
    """

    conn: Connection
    request_id: str = field(default_factory=lambda: str(uuid.uuid4()))
    caller: str = "sdk"
    user: str | None = None
    clock: Clock = utc_now
    metadata: dict[str, Any] = field(default_factory=dict)
