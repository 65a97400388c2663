from dataclasses import FrozenInstanceError

import pytest

from report_console.core.config import DEFAULT_PAGE_SIZE, SETTINGS
from report_console.pages import setup


def test_session_page_size_defaults_to_settings():
    assert setup.session_page_size({}) == SETTINGS.page_size
    assert setup.session_page_size({setup.PAGE_SIZE_KEY: 25}) == 25


def test_page_size_stays_within_one_session(monkeypatch):
    first_session = {setup.PAGE_SIZE_KEY: 25}
    monkeypatch.setattr(setup.st, "session_state", first_session)
    setup.connect_source(setup.SAMPLE_REPORTS_PATH)
    assert first_session["report_coordinator"].state.page.page_size == 25

    second_session = {}
    monkeypatch.setattr(setup.st, "session_state", second_session)
    setup.connect_source(setup.SAMPLE_REPORTS_PATH)
    assert second_session["report_coordinator"].state.page.page_size == DEFAULT_PAGE_SIZE
    assert SETTINGS.page_size == DEFAULT_PAGE_SIZE


def test_explicit_page_size_wins(monkeypatch):
    session = {setup.PAGE_SIZE_KEY: 25}
    monkeypatch.setattr(setup.st, "session_state", session)
    setup.connect_source(setup.SAMPLE_REPORTS_PATH, page_size=5)
    coordinator = session["report_coordinator"]
    assert coordinator.state.page.page_size == 5
    assert coordinator.snapshot.total_pages == 3


def test_settings_are_read_only():
    with pytest.raises(FrozenInstanceError):
        SETTINGS.page_size = 50
