from datetime import datetime

import pytest
import pytz

from report_console.core.models import Report
from report_console.features.report_query.pagination import (
    PageState,
    clamp_page,
    needs_pagination,
    page_bounds,
    paginate,
    total_pages,
)


def _sample_reports(count):
    when = datetime(2023, 5, 1, tzinfo=pytz.UTC)
    return [
        Report(
            id=f"REP-{i}",
            title=f"Report {i}",
            description="",
            location="Rua Augusta",
            region="jardins",
            category="other",
            severity=1,
            status="submitted",
            date=when,
        )
        for i in range(count)
    ]


@pytest.mark.parametrize(
    ("count", "expected"),
    [(0, 1), (1, 1), (9, 1), (10, 1), (11, 2), (23, 3)],
)
def test_total_pages_and_last_page(count, expected):
    assert total_pages(count, 10) == expected
    reports = _sample_reports(count)
    last = paginate(reports, expected, 10)
    if count > 0:
        assert last
        assert last[-1].id == reports[-1].id
    else:
        assert last == []


def test_paginate_slices_fixed_size_pages():
    reports = _sample_reports(23)
    assert [r.id for r in paginate(reports, 2, 10)] == [f"REP-{i}" for i in range(10, 20)]
    assert len(paginate(reports, 3, 10)) == 3


def test_out_of_range_pages_are_empty():
    reports = _sample_reports(5)
    assert paginate(reports, 2, 10) == []
    assert paginate(reports, 0, 10) == []
    assert paginate(reports, -1, 10) == []


def test_page_size_must_be_positive():
    with pytest.raises(ValueError):
        paginate(_sample_reports(3), 1, 0)
    with pytest.raises(ValueError):
        total_pages(3, 0)
    with pytest.raises(ValueError):
        PageState(current_page=1, page_size=0)


def test_clamp_page():
    assert clamp_page(5, 3) == 3
    assert clamp_page(0, 3) == 1
    assert clamp_page(2, 3) == 2
    assert clamp_page(4, 0) == 1


def test_page_bounds():
    assert page_bounds(1, 10, 23) == (1, 10)
    assert page_bounds(3, 10, 23) == (21, 23)
    assert page_bounds(4, 10, 23) == (0, 0)
    assert page_bounds(1, 10, 0) == (0, 0)


def test_needs_pagination_only_when_rows_overflow():
    assert not needs_pagination(0, 10)
    assert not needs_pagination(10, 10)
    assert needs_pagination(11, 10)
