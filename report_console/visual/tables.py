"""Reusable table helpers for report rendering and export."""

from __future__ import annotations

from collections.abc import Collection, Sequence

import pandas as pd
import pytz

from report_console.core.column_config import get_columns
from report_console.core.config import SETTINGS, TIMEZONE
from report_console.core.mappers import reports_to_dataframe
from report_console.core.models import Report
from report_console.core.status import format_category_name, status_label
from report_console.visual.column_metadata import apply_column_metadata


def prepare_report_table(
    reports: Sequence[Report],
    selected_ids: Collection[str] = (),
) -> tuple[pd.DataFrame, list[str], dict[str, object]]:
    """Build the display frame for one page of reports.

    Returns the frame (indexed by report id), the ordered display columns and
    a Streamlit column_config. Row order follows ``reports``.
    """
    if not reports:
        return pd.DataFrame(), [], {}

    table = reports_to_dataframe(reports)
    table.insert(0, "selected", table["id"].isin(set(selected_ids)))
    table["status"] = table["status"].apply(status_label)
    table["category"] = table["category"].apply(format_category_name)
    table["date"] = pd.to_datetime(table["date"], utc=True).dt.tz_convert(pytz.timezone(TIMEZONE))
    table.index = table["id"].tolist()

    display_cols = [col for col in get_columns("table") if col in table.columns]
    if not display_cols:
        display_cols = [col for col in table.columns if col != "description"]
    return table, display_cols, apply_column_metadata(display_cols)


def export_reports_csv(reports: Sequence[Report], encoding: str | None = None) -> bytes:
    """CSV bytes of the given reports using the export column set."""
    frame = reports_to_dataframe(reports)
    cols = [col for col in get_columns("export") if col in frame.columns]
    return frame[cols].to_csv(index=False).encode(encoding or SETTINGS.download_encoding)
