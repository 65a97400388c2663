"""Report Management page - review, filter and batch-process citizen reports.

All table state lives in the ReportViewCoordinator stored in session state;
widgets only translate user input into coordinator calls and render the
snapshot it returns.
"""

from __future__ import annotations

import logging
from datetime import date

import pytz
import streamlit as st

from report_console.app import register_page
from report_console.core.config import REPORT_CATEGORIES, REPORT_STATUSES, SEVERITY_LABELS, TIMEZONE
from report_console.core.models import Report
from report_console.core.status import format_category_name, severity_label, status_label
from report_console.features.batch_actions import BATCH_ACTION_LABELS, BatchAction, run_batch_action
from report_console.features.report_query import (
    FilterCriteria,
    ReportViewCoordinator,
    SortDirection,
    SortField,
    ViewSnapshot,
    filter_options,
    needs_pagination,
    page_bounds,
)
from report_console.visual.charts import status_breakdown_chart
from report_console.visual.tables import export_reports_csv, prepare_report_table

logger = logging.getLogger(__name__)

TZ = pytz.timezone(TIMEZONE)
PAGE_KEY = "reports"
FILTER_KEYS = (
    f"{PAGE_KEY}_search",
    f"{PAGE_KEY}_status",
    f"{PAGE_KEY}_category",
    f"{PAGE_KEY}_severity",
    f"{PAGE_KEY}_region",
    f"{PAGE_KEY}_dates",
    f"{PAGE_KEY}_unread",
)

SORT_COLUMNS: list[tuple[SortField, str]] = [
    (SortField.TITLE, "Report Title"),
    (SortField.CATEGORY, "Category"),
    (SortField.SEVERITY, "Severity"),
    (SortField.STATUS, "Status"),
    (SortField.LOCATION, "Location"),
    (SortField.DATE, "Date"),
]


def _optional_label(formatter):
    def fmt(value):
        return "All" if value is None else formatter(value)

    return fmt


def _date_bounds(value) -> tuple[date | None, date | None]:
    if isinstance(value, date):
        return value, None
    picked = list(value or ())
    start = picked[0] if len(picked) > 0 else None
    end = picked[1] if len(picked) > 1 else None
    return start, end


def _render_filter_bar(coordinator: ReportViewCoordinator, snapshot: ViewSnapshot) -> FilterCriteria:
    options = filter_options(coordinator.reports)
    col_search, col_status, col_category = st.columns([3, 1, 1])
    search = col_search.text_input(
        "Search",
        placeholder="Search by ID, address, or keyword...",
        key=f"{PAGE_KEY}_search",
    )
    status = col_status.selectbox(
        "Status",
        [None, *REPORT_STATUSES],
        format_func=_optional_label(status_label),
        key=f"{PAGE_KEY}_status",
    )
    category = col_category.selectbox(
        "Category",
        # Form categories first, then any extra values present in the data
        [None, *REPORT_CATEGORIES, *(c for c in options.categories if c not in REPORT_CATEGORIES)],
        format_func=_optional_label(format_category_name),
        key=f"{PAGE_KEY}_category",
    )

    badge = f" ({snapshot.active_filter_count})" if snapshot.active_filter_count else ""
    with st.expander(f"More Filters{badge}"):
        severity = st.selectbox(
            "Severity",
            [None, *SEVERITY_LABELS],
            format_func=_optional_label(severity_label),
            key=f"{PAGE_KEY}_severity",
        )
        region = st.selectbox(
            "Neighborhood",
            [None, *options.regions],
            format_func=_optional_label(lambda r: r[:1].upper() + r[1:]),
            key=f"{PAGE_KEY}_region",
        )
        dates = st.date_input("Date Range", value=(), key=f"{PAGE_KEY}_dates")
        unread = st.checkbox("Show only unread", key=f"{PAGE_KEY}_unread")
        if st.button("Reset All Filters", key=f"{PAGE_KEY}_reset"):
            for key in FILTER_KEYS:
                st.session_state.pop(key, None)
            coordinator.reset_filters()
            st.rerun()

    date_from, date_to = _date_bounds(dates)
    return FilterCriteria(
        search_text=search or "",
        status=status,
        category=category,
        severity=severity,
        region=region,
        date_from=date_from,
        date_to=date_to,
        unread_only=bool(unread),
    )


def _render_sort_controls(coordinator: ReportViewCoordinator, snapshot: ViewSnapshot) -> None:
    cols = st.columns(len(SORT_COLUMNS))
    for col, (field, label) in zip(cols, SORT_COLUMNS, strict=True):
        arrow = ""
        if snapshot.sort.field is field:
            arrow = " ▲" if snapshot.sort.direction is SortDirection.ASC else " ▼"
        if col.button(f"{label}{arrow}", key=f"{PAGE_KEY}_sort_{field.value}"):
            coordinator.set_sort(field)
            st.rerun()


def _render_batch_toolbar(coordinator: ReportViewCoordinator, snapshot: ViewSnapshot) -> None:
    count = len(snapshot.selected_ids)
    if count == 0:
        return
    with st.container(border=True):
        head, clear_col = st.columns([5, 1])
        head.markdown(f"**{count} reports selected**")
        if clear_col.button("Clear selection", key=f"{PAGE_KEY}_clear"):
            coordinator.clear_selection()
            st.rerun()

        department = st.text_input("Department", key=f"{PAGE_KEY}_department")
        cols = st.columns(len(BatchAction))
        for col, action in zip(cols, BatchAction, strict=True):
            if action is BatchAction.EXPORT:
                col.download_button(
                    BATCH_ACTION_LABELS[action],
                    data=export_reports_csv(coordinator.selected_reports()),
                    file_name="selected_reports.csv",
                    mime="text/csv",
                    on_click=coordinator.clear_selection,
                )
                continue
            if col.button(BATCH_ACTION_LABELS[action], key=f"{PAGE_KEY}_batch_{action.value}"):
                try:
                    outcome = run_batch_action(coordinator, action, department=department or None)
                except ValueError as exc:
                    st.error(str(exc))
                    return
                st.success(outcome.message)
                st.rerun()


def _render_table(coordinator: ReportViewCoordinator, snapshot: ViewSnapshot) -> None:
    if not snapshot.visible_reports:
        st.subheader("No reports found")
        st.caption("Try adjusting your filters to see more results.")
        return

    select_all = st.checkbox(
        "Select all reports on this page",
        value=snapshot.all_selected,
        key=f"{PAGE_KEY}_select_all_{snapshot.current_page}_{snapshot.all_selected}",
    )
    if select_all != snapshot.all_selected:
        if select_all:
            coordinator.select_all()
        else:
            coordinator.deselect_all()
        st.rerun()

    table, display_cols, column_config = prepare_report_table(snapshot.visible_reports, snapshot.selected_ids)
    edited = st.data_editor(
        table[display_cols],
        hide_index=True,
        width="stretch",
        column_config=column_config,
        disabled=[c for c in display_cols if c != "selected"],
        key=f"{PAGE_KEY}_table_{snapshot.current_page}_{hash(snapshot.selected_ids)}",
    )
    if "selected" not in edited.columns:
        return
    changed = False
    for report_id, included in edited["selected"].items():
        if bool(included) != (report_id in snapshot.selected_ids):
            coordinator.toggle(report_id, bool(included))
            changed = True
    if changed:
        st.rerun()


def _render_pagination(coordinator: ReportViewCoordinator, snapshot: ViewSnapshot) -> None:
    page_size = coordinator.state.page.page_size
    first, last = page_bounds(snapshot.current_page, page_size, snapshot.total_count)
    st.caption(f"Showing {first}-{last} of {snapshot.total_count} report(s).")
    if not needs_pagination(snapshot.total_count, page_size):
        return
    prev_col, label_col, next_col = st.columns([1, 2, 1])
    if prev_col.button("Previous", disabled=snapshot.current_page <= 1, key=f"{PAGE_KEY}_prev"):
        coordinator.set_page(snapshot.current_page - 1)
        st.rerun()
    label_col.markdown(f"Page {snapshot.current_page} of {snapshot.total_pages}")
    if next_col.button(
        "Next",
        disabled=snapshot.current_page >= snapshot.total_pages,
        key=f"{PAGE_KEY}_next",
    ):
        coordinator.set_page(snapshot.current_page + 1)
        st.rerun()


def _render_detail(report: Report) -> None:
    st.subheader(report.title)
    st.caption(f"ID: #{report.id}")
    st.markdown(
        f"**{status_label(report.status)}** · Severity: {report.severity} · "
        f"{format_category_name(report.category)}"
    )
    loc_col, date_col = st.columns(2)
    loc_col.markdown(f"**Location**  \n{report.location}  \n{report.region}")
    date_col.markdown(f"**Date**  \n{report.date.astimezone(TZ).strftime('%B %d, %Y')}")
    st.markdown("**Description**")
    st.write(report.description or "No description provided.")
    if report.photos:
        st.markdown("**Photos**")
        for index, photo in enumerate(report.photos, start=1):
            st.write(f"Photo {index}: {photo}")
    if report.response_time:
        st.markdown(f"**Response Time:** {report.response_time:g} hours")


@register_page("Report Management")
def reports_page():
    st.title("Report Management")
    st.caption("Manage and respond to citizen reports.")
    coordinator: ReportViewCoordinator | None = st.session_state.get("report_coordinator")
    if coordinator is None:
        st.warning("Load a report source on the Setup page first.")
        return

    snapshot = coordinator.snapshot
    criteria = _render_filter_bar(coordinator, snapshot)
    if criteria.to_dict() != coordinator.criteria.to_dict():
        logger.debug("Filter criteria changed: %s", criteria.to_dict())
        snapshot = coordinator.set_criteria(criteria)

    _render_batch_toolbar(coordinator, snapshot)
    _render_sort_controls(coordinator, snapshot)
    _render_table(coordinator, snapshot)
    _render_pagination(coordinator, snapshot)

    if snapshot.visible_reports:
        detail_id = st.selectbox(
            "View details",
            [None, *snapshot.visible_ids],
            format_func=_optional_label(lambda rid: f"#{rid} {coordinator.get_report(rid).title}"),
            key=f"{PAGE_KEY}_detail",
        )
        if detail_id is not None:
            report = coordinator.get_report(detail_id)
            if report is not None:
                with st.container(border=True):
                    _render_detail(report)

    chart, _ = status_breakdown_chart(snapshot.matching_reports)
    if chart is not None:
        st.markdown("---")
        st.caption("Filtered reports by status.")
        st.altair_chart(chart)
