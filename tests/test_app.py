from report_console.app import PAGES, ordered_pages, register_page


def test_ordered_pages_puts_preferred_first():
    pages = ["Debug", "Setup / Report Source", "Archive", "Report Management"]
    assert ordered_pages(pages) == ["Report Management", "Setup / Report Source", "Archive", "Debug"]


def test_register_page_adds_to_registry():
    @register_page("Test Page")
    def _page():
        return "rendered"

    try:
        assert PAGES["Test Page"]() == "rendered"
    finally:
        PAGES.pop("Test Page", None)
