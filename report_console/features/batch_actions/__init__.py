"""Batch actions over the report selection."""

from report_console.features.batch_actions.handlers import (
    BATCH_ACTION_LABELS,
    BatchAction,
    BatchOutcome,
    run_batch_action,
)

__all__ = [
    "BATCH_ACTION_LABELS",
    "BatchAction",
    "BatchOutcome",
    "run_batch_action",
]
