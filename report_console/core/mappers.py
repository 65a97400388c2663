"""Mapping raw report records (JSON-like dicts) into Report instances."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime
from typing import Any

import pandas as pd
import pytz

from .config import REPORT_CORE_COLUMNS
from .models import Report
from .status import normalize_report_status


def as_utc(value: datetime) -> datetime:
    """Return an aware UTC datetime; naive values are taken to be UTC."""
    if value.tzinfo is None:
        return pytz.UTC.localize(value)
    return value.astimezone(pytz.UTC)


def parse_dt(val) -> datetime | None:
    """Parse a timestamp-like value into an aware UTC datetime.

    Naive inputs are taken to be UTC. Returns None when the value is empty
    or cannot be parsed.
    """
    if val is None or val == "":
        return None
    ts = pd.to_datetime(val, utc=True, errors="coerce")
    if ts is None or pd.isna(ts):
        return None
    return ts.to_pydatetime()


def map_severity(value: Any) -> int:
    # Out-of-range values are kept; only non-numeric input collapses to 0.
    if value is None or isinstance(value, bool):
        return 0
    try:
        return int(float(value))
    except (TypeError, ValueError):
        return 0


def _map_response_time(value: Any) -> float | None:
    if value is None or value == "":
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def _text(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


def map_report(raw: dict[str, Any]) -> Report:
    """Build a Report from a raw record.

    Accepts the console's camelCase keys (``responseTime``) as well as
    snake_case (``response_time``).

    Raises
    ------
    ValueError
        If the record has no id or no parseable submission date.
    """
    report_id = _text(raw.get("id"))
    if not report_id:
        raise ValueError("Report record is missing an id")
    date = parse_dt(raw.get("date"))
    if date is None:
        raise ValueError(f"Report {report_id!r} has no valid date: {raw.get('date')!r}")

    photos_raw = raw.get("photos") or []
    if isinstance(photos_raw, str):
        photos_raw = [photos_raw]
    photos = tuple(str(p) for p in photos_raw if p)

    response_raw = raw.get("responseTime", raw.get("response_time"))

    return Report(
        id=report_id,
        title=_text(raw.get("title")),
        description=_text(raw.get("description")),
        location=_text(raw.get("location")),
        region=_text(raw.get("region")),
        category=_text(raw.get("category")),
        severity=map_severity(raw.get("severity")),
        status=normalize_report_status(raw.get("status")),
        date=date,
        photos=photos,
        response_time=_map_response_time(response_raw),
    )


def reports_to_dataframe(reports: Iterable[Report]) -> pd.DataFrame:
    rows = []
    for r in reports:
        rows.append(
            {
                "id": r.id,
                "title": r.title,
                "description": r.description,
                "category": r.category,
                "severity": r.severity,
                "status": r.status,
                "location": r.location,
                "region": r.region,
                "date": r.date,
                "photos": list(r.photos),
                "response_time": r.response_time,
            }
        )
    df = pd.DataFrame(rows, columns=list(REPORT_CORE_COLUMNS))
    if "photos" in df.columns:
        df["photos"] = df["photos"].apply(lambda val: ", ".join(val) if val else "")
    return df
