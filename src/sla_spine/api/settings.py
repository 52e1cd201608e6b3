"""
API-specific settings.

Extends :class:`~sla_spine.core.settings.SlaSpineBaseSettings` with the
parameters that govern the REST transport (prefix, OpenAPI metadata, CORS).
All values can be overridden via ``SLA_SPINE_*`` environment variables.
"""

from __future__ import annotations

from pydantic import Field

from sla_spine import __version__
from sla_spine.core.settings import SlaSpineBaseSettings


class SlaSpineAPISettings(SlaSpineBaseSettings):
    """Settings for the sla-spine REST API.

    Order of precedence (highest → lowest):
        1. Environment variables (``SLA_SPINE_API_PREFIX``, etc.)
        2. ``.env`` file
        3. Defaults below
    """

    # ── API ──────────────────────────────────────────────────────────────
    api_prefix: str = Field(default="/api/v1", description="URL prefix for all endpoints")
    api_title: str = Field(default="sla-spine API", description="OpenAPI title")
    api_version: str = Field(default=__version__, description="OpenAPI version string")

    # ── CORS ─────────────────────────────────────────────────────────────
    cors_origins: list[str] = Field(
        default=["*"],
        description="Allowed CORS origins",
    )
