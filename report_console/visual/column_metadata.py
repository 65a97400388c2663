"""Central column metadata and helpers for table rendering."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

import streamlit as st

# Mapping of raw column keys to (label, help text, format key)
# format key: "int" -> integer, "float1" -> 1 decimal float, "bool" -> checkbox,
# "datetime" -> date/time, None -> default text column
COLUMN_METADATA: dict[str, tuple[str, str, str | None]] = {
    "selected": ("Select", "Include the report in the next batch action.", "bool"),
    "id": ("ID", "Report identifier.", None),
    "title": ("Report Title", "Short title given by the citizen.", None),
    "description": ("Description", "Full report description.", None),
    "category": ("Category", "Type of infrastructure or environmental issue.", None),
    "severity": ("Severity", "Reported severity from 1 (low) to 5 (high).", "int"),
    "status": ("Status", "Current review status of the report.", None),
    "location": ("Location", "Street address or landmark of the issue.", None),
    "region": ("Neighborhood", "Neighborhood the report belongs to.", None),
    "date": ("Date", "When the report was submitted.", "datetime"),
    "photos": ("Photos", "Attached photo references.", None),
    "response_time": ("Response Time (hours)", "Hours until the report was actioned.", "float1"),
}


def apply_column_metadata(
    columns: Iterable[str],
    existing: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """Return a column_config dictionary with human labels and hover help."""

    config: dict[str, Any] = dict(existing or {})
    for col in columns:
        if col in config:
            continue
        meta = COLUMN_METADATA.get(col)
        if not meta:
            continue
        label, help_text, fmt = meta
        if fmt == "int":
            config[col] = st.column_config.NumberColumn(label, help=help_text, format="%d")
        elif fmt == "float1":
            config[col] = st.column_config.NumberColumn(label, help=help_text, format="%.1f")
        elif fmt == "bool":
            config[col] = st.column_config.CheckboxColumn(label, help=help_text)
        elif fmt == "datetime":
            config[col] = st.column_config.DatetimeColumn(label, help=help_text, format="YYYY-MM-DD HH:mm")
        else:
            config[col] = st.column_config.Column(label, help=help_text)
    return config
