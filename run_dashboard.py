"""Convenience launcher for the Streamlit app.

Usage:
  streamlit run run_dashboard.py

Automatically imports every module in ``report_console/pages`` so each page
decorated with ``@register_page`` registers itself without manual edits here.
"""

import logging
from importlib import import_module
from pathlib import Path

import streamlit as st

from report_console.app import main

st.set_page_config(layout="wide")

logger = logging.getLogger(__name__)


def _auto_init_report_service():
    """Load the report source named in Streamlit secrets, if any."""
    if "report_service" in st.session_state:
        return

    from report_console.pages.setup import connect_source, secret_reports_path

    path = secret_reports_path()
    if not path:
        st.sidebar.warning("No report source configured. Please use the Setup page.")
        return
    try:
        connect_source(path)
        st.sidebar.success("Reports loaded from configured source.")
    except RuntimeError as e:
        logger.error("Failed to load configured report source: %s", e)
        st.sidebar.error(f"Report source failed: {e}")
        # Clear any partial state to ensure user is directed to setup
        st.session_state.pop("report_service", None)
        st.session_state.pop("report_coordinator", None)


PAGES_DIR = Path(__file__).parent / "report_console" / "pages"
for py in sorted(PAGES_DIR.glob("[!_]*.py")):
    mod_name = f"report_console.pages.{py.stem}"
    try:
        import_module(mod_name)
    except Exception as e:  # pragma: no cover
        logger.error("Failed importing page %s: %s", mod_name, e)

_auto_init_report_service()

if __name__ == "__main__":
    main()
