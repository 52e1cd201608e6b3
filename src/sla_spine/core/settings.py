"""
Base settings for sla-spine processes.

Every value can be overridden through ``SLA_SPINE_*`` environment variables
or a ``.env`` file.  Transport-specific settings extend this class
(see :class:`sla_spine.api.settings.SlaSpineAPISettings`).
"""

from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class SlaSpineBaseSettings(BaseSettings):
    """Common settings shared by the API and the CLI.

    Fields
    ──────
    host          : Bind address for the HTTP transport
    port          : Bind port for the HTTP transport
    debug         : Enable debug mode (error details in responses)
    log_level     : Structlog log level
    json_logs     : Force JSON (True) / console (False) logs; None auto-detects
    database_path : SQLite file holding the ``sla_summary`` table
    """

    model_config = SettingsConfigDict(
        env_prefix="SLA_SPINE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ── Network ──────────────────────────────────────────────────
    host: str = "0.0.0.0"
    port: int = 12100

    # ── Observability ────────────────────────────────────────────
    debug: bool = False
    log_level: str = "INFO"
    json_logs: bool | None = None

    # ── Storage ──────────────────────────────────────────────────
    database_path: str = Field(
        default_factory=lambda: str(Path.home() / ".sla_spine" / "sla_spine.db"),
        description="SQLite database file",
    )
