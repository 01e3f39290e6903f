"""Retention run orchestration."""

from es_retention.orchestrator.runner import run_retention, utc_today
from es_retention.orchestrator.types import DeleteOutcome, DeletionResult, RunReport

__all__ = [
    "run_retention",
    "utc_today",
    "RunReport",
    "DeletionResult",
    "DeleteOutcome",
]
