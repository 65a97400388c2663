"""Report source setup page: choose the reports file and initialize ReportService."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import streamlit as st

from report_console.app import register_page
from report_console.core.config import SETTINGS
from report_console.core.service import ProgressCallback, ReportService
from report_console.features.report_query import ReportViewCoordinator

logger = logging.getLogger(__name__)

SAMPLE_REPORTS_PATH = Path(__file__).resolve().parents[1] / "data" / "sample_reports.json"

PAGE_SIZE_KEY = "reports_page_size"


def session_page_size(state: Mapping[str, Any]) -> int:
    """Page size chosen in this browser session, else the configured default."""
    return int(state.get(PAGE_SIZE_KEY) or SETTINGS.page_size)


def connect_source(
    path: str | Path,
    progress: ProgressCallback | None = None,
    *,
    page_size: int | None = None,
) -> ReportService:
    """Load ``path`` and store the service plus a fresh coordinator in session state.

    ``page_size`` defaults to the size stored for this session. Raises
    RuntimeError when the source cannot be read.
    """
    service = ReportService(path)
    reports = service.fetch_reports(progress=progress)
    size = page_size or session_page_size(st.session_state)
    st.session_state["report_service"] = service
    st.session_state["report_coordinator"] = ReportViewCoordinator(reports, page_size=size)
    st.session_state["reports_path"] = str(path)
    return service


def secret_reports_path() -> str | None:
    report_secrets = st.secrets.get("reports", {})
    return report_secrets.get("REPORTS_PATH") or st.secrets.get("REPORTS_PATH")


@register_page("Setup / Report Source")
def setup_page():
    st.title("Report Source Setup")
    st.caption("Point the console at a JSON file of citizen reports.")

    default_path = st.session_state.get("reports_path") or secret_reports_path() or str(SAMPLE_REPORTS_PATH)
    path = st.text_input("Reports file (JSON)", value=default_path)
    page_size = st.number_input(
        "Reports per page",
        min_value=1,
        max_value=SETTINGS.max_table_rows,
        value=session_page_size(st.session_state),
    )
    load_btn = st.button("Load Reports", type="primary")

    if load_btn:
        if not path:
            st.error("A reports file is required.")
            return
        st.session_state[PAGE_SIZE_KEY] = int(page_size)
        with st.status("Loading reports", expanded=False) as status:
            try:
                service = connect_source(
                    path,
                    progress=lambda message, _current, _total: status.write(message),
                    page_size=int(page_size),
                )
            except RuntimeError as exc:
                logger.error("Report source error: %s", exc)
                status.update(label="Loading failed", state="error")
                st.error(f"Failed to load reports: {exc}")
                return
            status.update(label="Reports loaded", state="complete")
        st.success(f"Loaded {len(service.fetch_reports())} report(s).")

    if "report_service" in st.session_state:
        st.info(f"ReportService ready ({st.session_state.get('reports_path')}).")
        if st.button("Reload Reports"):
            service: ReportService = st.session_state["report_service"]
            try:
                reports = service.refresh()
            except RuntimeError as exc:
                logger.error("Report reload failed: %s", exc)
                st.error(f"Failed to reload reports: {exc}")
                return
            # Keep filters, sort and surviving selection across the reload
            st.session_state["report_coordinator"].refresh(reports)
            st.success(f"Reloaded {len(reports)} report(s).")
