"""
Core primitives shared by every sla-spine layer.

Nothing in here knows about HTTP or the CLI.  Import concrete names from
the submodules (``sla_spine.core.errors``, ``sla_spine.core.logging`` ...).
"""
