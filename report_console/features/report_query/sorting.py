"""Sort engine for the report table."""

from __future__ import annotations

import unicodedata
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from report_console.core.config import DEFAULT_SORT_DIRECTION, DEFAULT_SORT_FIELD
from report_console.core.mappers import as_utc
from report_console.core.models import Report


class SortDirection(StrEnum):
    ASC = "asc"
    DESC = "desc"

    def reversed(self) -> SortDirection:
        return SortDirection.DESC if self is SortDirection.ASC else SortDirection.ASC


class SortField(StrEnum):
    """Sortable table columns."""

    TITLE = "title"
    CATEGORY = "category"
    SEVERITY = "severity"
    STATUS = "status"
    LOCATION = "location"
    DATE = "date"


def _text_key(value: str) -> tuple[str, str]:
    """Collation key for display text.

    Compares accent-stripped casefolded text first, so "Água" sorts with the
    a's and not after "Zebra"; the full casefolded text breaks ties between
    accented and plain spellings.
    """
    folded = value.casefold()
    decomposed = unicodedata.normalize("NFKD", folded)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return base, folded


# One key function per sortable field
_SORT_KEYS: dict[SortField, Callable[[Report], Any]] = {
    SortField.TITLE: lambda r: _text_key(r.title),
    SortField.CATEGORY: lambda r: _text_key(r.category),
    SortField.SEVERITY: lambda r: r.severity,
    SortField.STATUS: lambda r: _text_key(r.status),
    SortField.LOCATION: lambda r: _text_key(r.location),
    SortField.DATE: lambda r: as_utc(r.date),
}


@dataclass(frozen=True, slots=True)
class SortState:
    field: SortField = SortField(DEFAULT_SORT_FIELD)
    direction: SortDirection = SortDirection(DEFAULT_SORT_DIRECTION)


def sort_reports(
    reports: Iterable[Report],
    field: SortField,
    direction: SortDirection = SortDirection.DESC,
) -> list[Report]:
    """Order reports by ``field``.

    The sort is stable in both directions: reports with equal keys keep their
    incoming relative order. No secondary tie-break field is applied.
    """
    field = SortField(field)
    direction = SortDirection(direction)
    return sorted(reports, key=_SORT_KEYS[field], reverse=direction is SortDirection.DESC)


def toggle_sort(state: SortState, field: SortField) -> SortState:
    """Column-header click: flip direction on the same field, else start descending."""
    field = SortField(field)
    if state.field is field:
        return SortState(field=field, direction=state.direction.reversed())
    return SortState(field=field, direction=SortDirection.DESC)
