"""
sla-spine - SLA compliance evaluation and querying for scheduled jobs.

Packages:
- sla_spine.core: errors, logging, timestamps, enums, protocols, settings
- sla_spine.sla: compliance record, evaluator, filter parser, executor, renderer
- sla_spine.ops: transport-agnostic operations (OperationResult envelopes)
- sla_spine.api: FastAPI transport
- sla_spine.cli: Typer command line
"""

__version__ = "0.1.0"
