from datetime import datetime, timedelta

import pytest
import pytz

from report_console.core.models import Report
from report_console.features.batch_actions import BatchAction, run_batch_action
from report_console.features.report_query import ReportViewCoordinator


def _sample_coordinator():
    base = datetime(2023, 5, 1, tzinfo=pytz.UTC)
    reports = [
        Report(
            id=f"REP-{i}",
            title=f"Report {i}",
            description="",
            location="Rua Augusta",
            region="jardins",
            category="obstruction",
            severity=3,
            status="submitted",
            date=base + timedelta(days=i),
        )
        for i in range(4)
    ]
    coordinator = ReportViewCoordinator(reports)
    coordinator.toggle("REP-2", True)
    coordinator.toggle("REP-0", True)
    return coordinator


def test_export_returns_csv_and_clears_selection():
    coordinator = _sample_coordinator()
    outcome = run_batch_action(coordinator, BatchAction.EXPORT)
    assert outcome.report_ids == ("REP-0", "REP-2")
    assert outcome.export is not None
    assert outcome.export.decode("utf-8").count("\n") == 3
    assert coordinator.selected_ids == frozenset()


def test_mark_resolved_leaves_reports_untouched():
    coordinator = _sample_coordinator()
    outcome = run_batch_action(coordinator, "mark-resolved")
    assert outcome.action is BatchAction.MARK_RESOLVED
    assert outcome.export is None
    assert all(r.status == "submitted" for r in coordinator.reports)
    assert coordinator.selected_ids == frozenset()


def test_assign_requires_department():
    coordinator = _sample_coordinator()
    with pytest.raises(ValueError):
        run_batch_action(coordinator, BatchAction.ASSIGN)
    assert coordinator.selected_ids == frozenset({"REP-0", "REP-2"})

    outcome = run_batch_action(coordinator, BatchAction.ASSIGN, department="Public Works")
    assert outcome.department == "Public Works"
    assert "Public Works" in outcome.message


def test_unknown_action_is_rejected():
    with pytest.raises(ValueError):
        run_batch_action(_sample_coordinator(), "delete")
