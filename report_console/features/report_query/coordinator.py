"""Stateful coordinator behind the Report Management table."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import replace

import pytz

from report_console.core.config import DEFAULT_PAGE_SIZE
from report_console.core.models import Report

from . import selection as sel
from .context import ViewSnapshot, ViewState, build_snapshot
from .criteria import FilterCriteria, reset_filters
from .pagination import PageState
from .sorting import SortField, SortState, toggle_sort

logger = logging.getLogger(__name__)


def _index_reports(reports: Iterable[Report]) -> tuple[tuple[Report, ...], dict[str, Report]]:
    ordered = tuple(reports)
    by_id: dict[str, Report] = {}
    for report in ordered:
        if report.id in by_id:
            raise ValueError(f"Duplicate report id {report.id!r} in collection")
        by_id[report.id] = report
    return ordered, by_id


class ReportViewCoordinator:
    """Own the table's criteria, sort, page and selection.

    Every mutation recomputes the full snapshot from the latest state and
    returns it. Reports are held read-only; the same objects are handed to
    the detail view and batch handlers.
    """

    def __init__(
        self,
        reports: Iterable[Report],
        *,
        page_size: int = DEFAULT_PAGE_SIZE,
        sort: SortState | None = None,
        tz: pytz.BaseTzInfo | None = None,
    ):
        self._reports, self._by_id = _index_reports(reports)
        self._tz = tz
        self._state = ViewState(
            sort=sort or SortState(),
            page=PageState(current_page=1, page_size=page_size),
        )
        self._snapshot = self._recompute()

    # ------------------ Accessors ------------------
    @property
    def reports(self) -> tuple[Report, ...]:
        return self._reports

    @property
    def state(self) -> ViewState:
        return self._state

    @property
    def snapshot(self) -> ViewSnapshot:
        return self._snapshot

    @property
    def criteria(self) -> FilterCriteria:
        return replace(self._state.criteria)

    @property
    def selected_ids(self) -> sel.SelectionSet:
        return self._state.selection

    def get_report(self, report_id: str) -> Report | None:
        """Exact report object for the detail view."""
        return self._by_id.get(report_id)

    def selected_reports(self) -> list[Report]:
        """Selected reports in collection order, for batch action handlers."""
        selected = self._state.selection
        return [r for r in self._reports if r.id in selected]

    # ------------------ Filter / Sort / Page ------------------
    def set_criteria(self, criteria: FilterCriteria) -> ViewSnapshot:
        """Apply new criteria and return to the first page."""
        page = replace(self._state.page, current_page=1)
        return self._update(criteria=replace(criteria), page=page)

    def reset_filters(self) -> ViewSnapshot:
        return self.set_criteria(reset_filters())

    def set_sort(self, field: SortField | str) -> ViewSnapshot:
        """Column-header click on ``field``."""
        return self._update(sort=toggle_sort(self._state.sort, SortField(field)))

    def set_page(self, page: int) -> ViewSnapshot:
        return self._update(page=replace(self._state.page, current_page=page))

    # ------------------ Selection ------------------
    def select_all(self) -> ViewSnapshot:
        """Select exactly the reports on the current page."""
        return self._update(selection=sel.select_all(self._snapshot.visible_ids))

    def deselect_all(self) -> ViewSnapshot:
        return self._update(selection=sel.deselect_all())

    def toggle(self, report_id: str, included: bool) -> ViewSnapshot:
        selection = sel.toggle(self._state.selection, report_id, included, known_ids=self._by_id)
        return self._update(selection=selection)

    def clear_selection(self) -> ViewSnapshot:
        return self._update(selection=sel.clear())

    # ------------------ Source refresh ------------------
    def refresh(self, reports: Iterable[Report]) -> ViewSnapshot:
        """Swap in a new collection from the report source.

        Criteria, sort and page are kept (the page is clamped); selected ids
        that no longer exist are dropped.
        """
        self._reports, self._by_id = _index_reports(reports)
        kept = frozenset(i for i in self._state.selection if i in self._by_id)
        dropped = len(self._state.selection) - len(kept)
        if dropped:
            logger.info("Dropped %s selected id(s) missing from refreshed collection", dropped)
        return self._update(selection=kept)

    # ------------------ Internals ------------------
    def _update(self, **changes) -> ViewSnapshot:
        self._state = replace(self._state, **changes)
        self._snapshot = self._recompute()
        return self._snapshot

    def _recompute(self) -> ViewSnapshot:
        snapshot = build_snapshot(self._reports, self._state, self._tz)
        if snapshot.current_page != self._state.page.current_page:
            logger.debug(
                "Clamped page %s to %s (of %s)",
                self._state.page.current_page,
                snapshot.current_page,
                snapshot.total_pages,
            )
            self._state = replace(
                self._state,
                page=replace(self._state.page, current_page=snapshot.current_page),
            )
        logger.debug(
            "Snapshot: %s matching, page %s/%s, sort %s %s, %s selected",
            snapshot.total_count,
            snapshot.current_page,
            snapshot.total_pages,
            snapshot.sort.field.value,
            snapshot.sort.direction.value,
            len(snapshot.selected_ids),
        )
        return snapshot
