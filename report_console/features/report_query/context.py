"""Pure helpers to build the report table snapshot (no Streamlit)."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

import pytz

from report_console.core.models import Report

from . import filters as flt
from .criteria import FilterCriteria
from .pagination import PageState, clamp_page, paginate, total_pages
from .selection import EMPTY_SELECTION, SelectionSet, all_selected
from .sorting import SortState, sort_reports


@dataclass(frozen=True, slots=True)
class ViewState:
    """Everything the table view owns besides the report collection."""

    criteria: FilterCriteria = field(default_factory=FilterCriteria)
    sort: SortState = field(default_factory=SortState)
    page: PageState = field(default_factory=PageState)
    selection: SelectionSet = EMPTY_SELECTION


@dataclass(frozen=True, slots=True)
class ViewSnapshot:
    """Ready-to-render state of the report table."""

    visible_reports: tuple[Report, ...]
    total_pages: int
    current_page: int
    selected_ids: SelectionSet
    active_filter_count: int
    total_count: int = 0
    sort: SortState = field(default_factory=SortState)
    all_selected: bool = False
    matching_reports: tuple[Report, ...] = ()

    @property
    def visible_ids(self) -> list[str]:
        return [r.id for r in self.visible_reports]


def build_snapshot(
    reports: Sequence[Report],
    state: ViewState,
    tz: pytz.BaseTzInfo | None = None,
) -> ViewSnapshot:
    """Derive the table snapshot from scratch.

    Parameters
    ----------
    reports : Sequence[Report]
        Full, unfiltered collection.
    state : ViewState
        Criteria, sort, page and selection to apply.
    tz : timezone, optional
        Zone for interpreting naive date bounds in the criteria.

    Returns
    -------
    ViewSnapshot
        Visible page plus pagination and selection info, and every matching
        report in sorted order. A page number past the last page is clamped
        to the last valid page.
    """
    matching = flt.apply(reports, state.criteria, tz)
    ordered = sort_reports(matching, state.sort.field, state.sort.direction)
    page_size = state.page.page_size
    pages = total_pages(len(ordered), page_size)
    current = clamp_page(state.page.current_page, pages)
    visible = tuple(paginate(ordered, current, page_size))
    visible_ids = [r.id for r in visible]

    return ViewSnapshot(
        visible_reports=visible,
        total_pages=pages,
        current_page=current,
        selected_ids=state.selection,
        active_filter_count=flt.active_filter_count(state.criteria),
        total_count=len(ordered),
        sort=state.sort,
        all_selected=all_selected(visible_ids, state.selection),
        matching_reports=tuple(ordered),
    )
