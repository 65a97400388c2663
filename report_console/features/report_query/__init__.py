"""Report query feature: filter, sort, paginate and select reports."""

from report_console.features.report_query.context import ViewSnapshot, ViewState, build_snapshot
from report_console.features.report_query.coordinator import ReportViewCoordinator
from report_console.features.report_query.criteria import FilterCriteria, reset_filters
from report_console.features.report_query.filters import (
    FilterOptions,
    active_filter_count,
    apply,
    build_predicates,
    filter_options,
)
from report_console.features.report_query.pagination import (
    PageState,
    clamp_page,
    needs_pagination,
    page_bounds,
    paginate,
    total_pages,
)
from report_console.features.report_query.selection import (
    SelectionSet,
    all_selected,
    clear,
    deselect_all,
    select_all,
    toggle,
)
from report_console.features.report_query.sorting import (
    SortDirection,
    SortField,
    SortState,
    sort_reports,
    toggle_sort,
)

__all__ = [
    "FilterCriteria",
    "FilterOptions",
    "PageState",
    "ReportViewCoordinator",
    "SelectionSet",
    "SortDirection",
    "SortField",
    "SortState",
    "ViewSnapshot",
    "ViewState",
    "active_filter_count",
    "all_selected",
    "apply",
    "build_predicates",
    "build_snapshot",
    "clamp_page",
    "clear",
    "deselect_all",
    "filter_options",
    "needs_pagination",
    "page_bounds",
    "paginate",
    "reset_filters",
    "select_all",
    "sort_reports",
    "toggle",
    "toggle_sort",
    "total_pages",
]
