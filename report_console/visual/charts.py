"""Chart builders (Altair) for the filtered report set."""

from __future__ import annotations

from collections.abc import Sequence

import altair as alt
import pandas as pd

from report_console.core.config import REPORT_STATUSES
from report_console.core.models import Report
from report_console.core.status import status_label


def status_counts(reports: Sequence[Report]) -> pd.DataFrame:
    """Count reports per status, canonical statuses first (zeros included)."""
    counts: dict[str, int] = {status: 0 for status in REPORT_STATUSES}
    for r in reports:
        counts[r.status] = counts.get(r.status, 0) + 1
    rows = [{"status": status_label(s), "count": n} for s, n in counts.items()]
    return pd.DataFrame(rows, columns=["status", "count"])


def status_breakdown_chart(reports: Sequence[Report]):
    if not reports:
        return None, pd.DataFrame(columns=["status", "count"])
    data = status_counts(reports)
    order = data["status"].tolist()
    chart = (
        alt.Chart(data)
        .mark_bar()
        .encode(
            x=alt.X("status:N", sort=order, title="Status"),
            y=alt.Y("count:Q", title="Reports"),
            tooltip=["status", "count"],
        )
        .properties(height=220)
    )
    return chart, data
