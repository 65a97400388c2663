"""Application entry point: page registry and router."""

from __future__ import annotations

import streamlit as st

PAGES = {}

PREFERRED_ORDER = [
    "Report Management",  # main review table
    "Setup / Report Source",  # where reports are loaded from
]


def register_page(label):
    def decorator(func):
        PAGES[label] = func
        return func

    return decorator


def ordered_pages(pages) -> list[str]:
    ordered = [name for name in PREFERRED_ORDER if name in pages]
    trailing = sorted(name for name in pages if name not in PREFERRED_ORDER)
    return ordered + trailing


def main():
    st.sidebar.title("Civic Report Console")
    pages = ordered_pages(PAGES.keys())
    if not pages:
        st.write("No pages registered yet.")
        return
    # Without a loaded source, land on the setup page
    if "Setup / Report Source" in pages and "report_service" not in st.session_state:
        default = pages.index("Setup / Report Source")
    else:
        default = 0
    page = st.sidebar.selectbox("Page", pages, index=default)
    PAGES[page]()


if __name__ == "__main__":
    main()
