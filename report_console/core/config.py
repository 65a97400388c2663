"""Central configuration, constants, and shared column definitions."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

# =============================================================================
# Locale / Timezone
# =============================================================================
TIMEZONE = "America/Sao_Paulo"

# =============================================================================
# Report Status Configuration
# =============================================================================
STATUS_SUBMITTED = "submitted"
STATUS_IN_REVIEW = "in-review"
STATUS_RESOLVED = "resolved"
STATUS_REJECTED = "rejected"

# Canonical workflow order for dropdowns and charts
REPORT_STATUSES: Sequence[str] = (
    STATUS_SUBMITTED,
    STATUS_IN_REVIEW,
    STATUS_RESOLVED,
    STATUS_REJECTED,
)

STATUS_LABELS: dict[str, str] = {
    STATUS_SUBMITTED: "Submitted",
    STATUS_IN_REVIEW: "In Review",
    STATUS_RESOLVED: "Resolved",
    STATUS_REJECTED: "Rejected",
}

# Map legacy/variant status strings to canonical values
# Keys should be lowercase for case-insensitive matching
STATUS_ALIASES: dict[str, str] = {
    # Submitted variants
    "submitted": STATUS_SUBMITTED,
    "pending": STATUS_SUBMITTED,
    "new": STATUS_SUBMITTED,
    "open": STATUS_SUBMITTED,
    # In review variants
    "in-review": STATUS_IN_REVIEW,
    "in review": STATUS_IN_REVIEW,
    "in_review": STATUS_IN_REVIEW,
    "in-progress": STATUS_IN_REVIEW,
    "in progress": STATUS_IN_REVIEW,
    # Terminal
    "resolved": STATUS_RESOLVED,
    "done": STATUS_RESOLVED,
    "closed": STATUS_RESOLVED,
    "rejected": STATUS_REJECTED,
    "declined": STATUS_REJECTED,
}

# Status that the "show only unread" checkbox narrows to
UNREAD_STATUS = STATUS_SUBMITTED

# =============================================================================
# Categories (issue types offered by the citizen reporting form)
# =============================================================================
REPORT_CATEGORIES: Sequence[str] = (
    "missing-ramp",
    "obstruction",
    "uneven-surface",
    "broken-sidewalk",
    "missing-tree",
    "heat-island",
    "flooding",
    "other",
)

# =============================================================================
# Severity
# =============================================================================

SEVERITY_LABELS: dict[int, str] = {
    1: "1 - Low",
    2: "2",
    3: "3 - Medium",
    4: "4",
    5: "5 - High",
}

# =============================================================================
# Table Defaults
# =============================================================================
DEFAULT_PAGE_SIZE: int = 10
DEFAULT_SORT_FIELD = "date"
DEFAULT_SORT_DIRECTION = "desc"

REPORT_CORE_COLUMNS: Sequence[str] = (
    "id",
    "title",
    "description",
    "category",
    "severity",
    "status",
    "location",
    "region",
    "date",
    "photos",
    "response_time",
)

DISPLAY_ORDER_TABLE: Sequence[str] = (
    "selected",
    "id",
    "title",
    "category",
    "severity",
    "status",
    "location",
    "region",
    "date",
)

DISPLAY_ORDER_EXPORT: Sequence[str] = (
    "id",
    "title",
    "description",
    "category",
    "severity",
    "status",
    "location",
    "region",
    "date",
    "photos",
    "response_time",
)


@dataclass(frozen=True, slots=True)
class AppSettings:
    page_size: int = DEFAULT_PAGE_SIZE
    max_table_rows: int = 1000
    download_encoding: str = "utf-8"


SETTINGS = AppSettings()
