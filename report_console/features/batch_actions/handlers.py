"""Batch action handlers for the selected reports.

Handlers read the current selection from the coordinator, perform their
effect and clear the selection when done. Reports themselves are never
modified here; status changes are left to whatever system owns the records.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import StrEnum

from report_console.features.report_query.coordinator import ReportViewCoordinator
from report_console.visual.tables import export_reports_csv

logger = logging.getLogger(__name__)


class BatchAction(StrEnum):
    MARK_RESOLVED = "mark-resolved"
    ASSIGN = "assign"
    EXPORT = "export"
    FLAG = "flag"


BATCH_ACTION_LABELS: dict[BatchAction, str] = {
    BatchAction.MARK_RESOLVED: "Mark as Resolved",
    BatchAction.ASSIGN: "Assign to Department",
    BatchAction.EXPORT: "Export Selected",
    BatchAction.FLAG: "Flag for Review",
}


@dataclass(slots=True)
class BatchOutcome:
    action: BatchAction
    report_ids: tuple[str, ...]
    message: str
    export: bytes | None = None
    department: str | None = None


def run_batch_action(
    coordinator: ReportViewCoordinator,
    action: BatchAction | str,
    *,
    department: str | None = None,
) -> BatchOutcome:
    """Run ``action`` over the coordinator's selection, then clear it.

    Raises
    ------
    ValueError
        If ``action`` is not a known batch action, or ``assign`` is requested
        without a department.
    """
    action = BatchAction(action)
    if action is BatchAction.ASSIGN and not department:
        raise ValueError("A department is required to assign reports")

    reports = coordinator.selected_reports()
    ids = tuple(r.id for r in reports)
    label = BATCH_ACTION_LABELS[action]
    export = None
    if action is BatchAction.EXPORT:
        export = export_reports_csv(reports)
        message = f"Exported {len(ids)} report(s)"
    elif action is BatchAction.ASSIGN:
        message = f"Assigned {len(ids)} report(s) to {department}"
    else:
        message = f"{label}: {len(ids)} report(s)"

    logger.info("Batch action %s on %s report(s)", action.value, len(ids))
    coordinator.clear_selection()
    return BatchOutcome(
        action=action,
        report_ids=ids,
        message=message,
        export=export,
        department=department if action is BatchAction.ASSIGN else None,
    )
