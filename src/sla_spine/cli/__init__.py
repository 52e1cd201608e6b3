"""Command-line interface for sla-spine (``sla-spine``)."""
