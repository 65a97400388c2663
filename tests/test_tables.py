import io
from datetime import datetime, timedelta

import pandas as pd
import pytz

from report_console.core.models import Report
from report_console.visual.tables import export_reports_csv, prepare_report_table


def _sample_reports():
    base = datetime(2023, 5, 1, 15, 0, tzinfo=pytz.UTC)
    return [
        Report(
            id=f"REP-{i}",
            title=f"Report {i}",
            description="Broken sidewalk, hard to pass",
            location="Rua Augusta",
            region="jardins",
            category="broken-sidewalk",
            severity=i + 1,
            status="in-review" if i else "submitted",
            date=base + timedelta(days=i),
            photos=("a.jpg",) if i == 0 else (),
            response_time=4.5 if i == 1 else None,
        )
        for i in range(3)
    ]


def test_prepare_report_table_columns_and_selection():
    reports = _sample_reports()
    table, display_cols, column_config = prepare_report_table(reports, selected_ids={"REP-1"})
    assert display_cols[0] == "selected"
    assert "description" not in display_cols
    assert list(table.index) == ["REP-0", "REP-1", "REP-2"]
    assert table["selected"].tolist() == [False, True, False]
    assert table.loc["REP-0", "status"] == "Submitted"
    assert table.loc["REP-1", "category"] == "Broken Sidewalk"
    assert set(display_cols) <= set(column_config)


def test_prepare_report_table_localizes_dates():
    table, _, _ = prepare_report_table(_sample_reports())
    first = table.loc["REP-0", "date"]
    assert str(first.tz) == "America/Sao_Paulo"
    assert first.hour == 12


def test_prepare_report_table_empty():
    table, display_cols, column_config = prepare_report_table([])
    assert table.empty
    assert display_cols == []
    assert column_config == {}


def test_export_reports_csv():
    data = export_reports_csv(_sample_reports())
    frame = pd.read_csv(io.BytesIO(data))
    assert list(frame["id"]) == ["REP-0", "REP-1", "REP-2"]
    assert "description" in frame.columns
    assert frame.loc[0, "photos"] == "a.jpg"
    assert frame.loc[1, "response_time"] == 4.5


def test_export_empty_selection_has_header_only():
    data = export_reports_csv([])
    lines = data.decode("utf-8").strip().splitlines()
    assert len(lines) == 1
    assert lines[0].startswith("id,title")
