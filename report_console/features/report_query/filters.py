"""Filter engine: reduce a report collection to the subset matching criteria.

Every constrained dimension contributes one independent predicate and a
report is kept only when all of them hold. Unconstrained dimensions add no
predicate, so empty criteria return the collection unchanged. Filtering never
reorders; sorting is a separate stage.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from datetime import date, datetime, time

import pytz

from report_console.core.config import TIMEZONE, UNREAD_STATUS
from report_console.core.mappers import as_utc
from report_console.core.models import Report

from .criteria import FilterCriteria

ReportPredicate = Callable[[Report], bool]


@dataclass(slots=True)
class FilterOptions:
    """Distinct values available for the dropdown filters."""

    categories: list[str]
    regions: list[str]


def _lower_bound(value: datetime | date, tz: pytz.BaseTzInfo) -> datetime:
    if isinstance(value, datetime):
        return as_utc(tz.localize(value) if value.tzinfo is None else value)
    return as_utc(tz.localize(datetime.combine(value, time.min)))


def _upper_bound(value: datetime | date, tz: pytz.BaseTzInfo) -> datetime:
    if isinstance(value, datetime):
        return as_utc(tz.localize(value) if value.tzinfo is None else value)
    # A bare calendar day covers the whole day.
    return as_utc(tz.localize(datetime.combine(value, time.max)))


def matches_search(report: Report, needle: str) -> bool:
    """Case-insensitive substring match against id, title and location."""
    needle = needle.lower()
    return (
        needle in report.id.lower()
        or needle in report.title.lower()
        or needle in report.location.lower()
    )


def build_predicates(
    criteria: FilterCriteria,
    tz: pytz.BaseTzInfo | None = None,
) -> dict[str, ReportPredicate]:
    """Translate criteria into named, independent predicates.

    Parameters
    ----------
    criteria : FilterCriteria
        Current filter constraints.
    tz : timezone, optional
        Zone used to interpret naive datetimes and bare dates in the date
        bounds. Defaults to the configured console timezone.

    Returns
    -------
    dict[str, Callable[[Report], bool]]
        One predicate per constrained dimension, keyed by dimension name.
    """
    if tz is None:
        tz = pytz.timezone(TIMEZONE)

    predicates: dict[str, ReportPredicate] = {}

    if criteria.search_text:
        needle = criteria.search_text
        predicates["search"] = lambda r: matches_search(r, needle)

    if criteria.status is not None:
        status = criteria.status
        predicates["status"] = lambda r: r.status == status

    if criteria.category is not None:
        category = criteria.category
        predicates["category"] = lambda r: r.category == category

    if criteria.severity is not None:
        severity = criteria.severity
        predicates["severity"] = lambda r: r.severity == severity

    if criteria.region is not None:
        region = criteria.region
        predicates["region"] = lambda r: r.region == region

    if criteria.date_from is not None:
        start = _lower_bound(criteria.date_from, tz)
        predicates["date_from"] = lambda r: as_utc(r.date) >= start

    if criteria.date_to is not None:
        end = _upper_bound(criteria.date_to, tz)
        predicates["date_to"] = lambda r: as_utc(r.date) <= end

    # "Unread" is approximated by the submitted workflow status and is ANDed
    # with any explicit status choice.
    if criteria.unread_only:
        predicates["unread_only"] = lambda r: r.status == UNREAD_STATUS

    return predicates


def apply(
    reports: Iterable[Report],
    criteria: FilterCriteria,
    tz: pytz.BaseTzInfo | None = None,
) -> list[Report]:
    """Return the reports matching every constrained dimension, in input order."""
    predicates = list(build_predicates(criteria, tz).values())
    if not predicates:
        return list(reports)
    return [r for r in reports if all(pred(r) for pred in predicates)]


def active_filter_count(criteria: FilterCriteria) -> int:
    """Count constrained dimensions for the "More Filters" badge.

    Both date bounds together count as one dimension.
    """
    count = 0
    if criteria.search_text:
        count += 1
    if criteria.status is not None:
        count += 1
    if criteria.category is not None:
        count += 1
    if criteria.severity is not None:
        count += 1
    if criteria.region is not None:
        count += 1
    if criteria.date_from is not None or criteria.date_to is not None:
        count += 1
    if criteria.unread_only:
        count += 1
    return count


def filter_options(reports: Sequence[Report]) -> FilterOptions:
    """Collect distinct categories and regions in first-seen order."""
    categories: list[str] = []
    regions: list[str] = []
    seen_categories: set[str] = set()
    seen_regions: set[str] = set()
    for r in reports:
        if r.category and r.category not in seen_categories:
            seen_categories.add(r.category)
            categories.append(r.category)
        if r.region and r.region not in seen_regions:
            seen_regions.add(r.region)
            regions.append(r.region)
    return FilterOptions(categories=categories, regions=regions)
