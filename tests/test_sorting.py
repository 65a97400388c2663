"""Tests for the report sort engine."""

from datetime import datetime, timedelta, timezone

import pytz

from report_console.core.models import Report
from report_console.features.report_query.sorting import (
    SortDirection,
    SortField,
    SortState,
    sort_reports,
    toggle_sort,
)

BASE = datetime(2023, 5, 1, 12, 0, tzinfo=pytz.UTC)


def _report(report_id, *, title="Report", severity=3, status="submitted", date=None):
    return Report(
        id=report_id,
        title=title,
        description="",
        location="Rua Augusta",
        region="jardins",
        category="obstruction",
        severity=severity,
        status=status,
        date=date or BASE,
    )


def _ids(reports):
    return [r.id for r in reports]


def test_severity_sorts_numerically():
    reports = [_report("a", severity=9), _report("b", severity=10), _report("c", severity=2)]
    assert _ids(sort_reports(reports, SortField.SEVERITY, SortDirection.DESC)) == ["b", "a", "c"]
    assert _ids(sort_reports(reports, SortField.SEVERITY, SortDirection.ASC)) == ["c", "a", "b"]


def test_date_sorts_by_timestamp_across_offsets():
    minus_three = timezone(timedelta(hours=-3))
    later = _report("later", date=datetime(2023, 5, 1, 10, 0, tzinfo=minus_three))  # 13:00 UTC
    earlier = _report("earlier", date=BASE)  # 12:00 UTC
    assert _ids(sort_reports([later, earlier], SortField.DATE, SortDirection.ASC)) == ["earlier", "later"]
    assert _ids(sort_reports([earlier, later], SortField.DATE, SortDirection.DESC)) == ["later", "earlier"]


def test_text_sort_ignores_case():
    reports = [_report("c", title="cherry"), _report("b", title="Banana"), _report("a", title="apple")]
    assert _ids(sort_reports(reports, SortField.TITLE, SortDirection.ASC)) == ["a", "b", "c"]
    assert _ids(sort_reports(reports, SortField.TITLE, SortDirection.DESC)) == ["c", "b", "a"]


def test_sort_is_stable_in_both_directions():
    reports = [
        _report("first", severity=3),
        _report("high", severity=5),
        _report("second", severity=3),
        _report("third", severity=3),
    ]
    asc = sort_reports(reports, SortField.SEVERITY, SortDirection.ASC)
    desc = sort_reports(reports, SortField.SEVERITY, SortDirection.DESC)
    assert _ids(asc) == ["first", "second", "third", "high"]
    assert _ids(desc) == ["high", "first", "second", "third"]


def test_sort_does_not_modify_input():
    reports = [_report("b", severity=1), _report("a", severity=5)]
    sort_reports(reports, SortField.SEVERITY, SortDirection.DESC)
    assert _ids(reports) == ["b", "a"]


def test_unknown_status_values_still_sort():
    reports = [
        _report("r", status="resolved"),
        _report("x", status="archived"),
        _report("s", status="submitted"),
    ]
    assert _ids(sort_reports(reports, SortField.STATUS, SortDirection.ASC)) == ["x", "r", "s"]


def test_string_field_and_direction_are_accepted():
    reports = [_report("b", title="b"), _report("a", title="a")]
    assert _ids(sort_reports(reports, "title", "asc")) == ["a", "b"]


def test_accented_text_sorts_with_its_base_letter():
    reports = [
        _report("z", title="Zebra crossing faded"),
        _report("a", title="Água parada na calçada"),
        _report("b", title="Buraco na Rua Augusta"),
        _report("o", title="Órgão público sem rampa"),
    ]
    assert _ids(sort_reports(reports, SortField.TITLE, SortDirection.ASC)) == ["a", "b", "o", "z"]
    assert _ids(sort_reports(reports, SortField.TITLE, SortDirection.DESC)) == ["z", "o", "b", "a"]


def test_accents_only_break_ties_after_base_letters():
    reports = [_report("accent", title="água"), _report("plain", title="agua"), _report("b", title="agub")]
    assert _ids(sort_reports(reports, SortField.TITLE, SortDirection.ASC)) == ["plain", "accent", "b"]


def test_default_sort_state_is_newest_first():
    state = SortState()
    assert state.field is SortField.DATE
    assert state.direction is SortDirection.DESC


def test_toggle_same_field_flips_and_new_field_starts_descending():
    state = toggle_sort(SortState(), SortField.SEVERITY)
    assert state == SortState(SortField.SEVERITY, SortDirection.DESC)
    state = toggle_sort(state, SortField.SEVERITY)
    assert state == SortState(SortField.SEVERITY, SortDirection.ASC)
    state = toggle_sort(state, "title")
    assert state == SortState(SortField.TITLE, SortDirection.DESC)
