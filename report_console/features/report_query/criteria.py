"""Filter criteria value object for the report table."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Any


@dataclass(slots=True)
class FilterCriteria:
    """User-chosen filter constraints.

    ``None`` (or an empty search string) means the dimension is unconstrained.
    Criteria are plain data; the coordinator stores its own copy.
    """

    search_text: str = ""
    status: str | None = None
    category: str | None = None
    severity: int | None = None
    region: str | None = None
    date_from: datetime | date | None = None
    date_to: datetime | date | None = None
    unread_only: bool = False

    def to_dict(self) -> dict[str, Any]:
        def iso(val):
            return val.isoformat() if val is not None else None

        return {
            "search_text": self.search_text,
            "status": self.status,
            "category": self.category,
            "severity": self.severity,
            "region": self.region,
            "date_from": iso(self.date_from),
            "date_to": iso(self.date_to),
            "unread_only": self.unread_only,
        }


def reset_filters() -> FilterCriteria:
    """Return fully unconstrained criteria."""
    return FilterCriteria()
