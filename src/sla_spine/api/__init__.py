"""
REST transport for sla-spine.

Usage::

    uvicorn sla_spine.api:create_app --factory
"""

from sla_spine.api.app import create_app

__all__ = ["create_app"]
