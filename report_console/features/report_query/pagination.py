"""Pagination controller: fixed-size page slicing and page-count logic."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

from report_console.core.config import DEFAULT_PAGE_SIZE
from report_console.core.models import Report


def _check_page_size(page_size: int) -> None:
    if page_size < 1:
        raise ValueError(f"page_size must be a positive integer, got {page_size!r}")


@dataclass(frozen=True, slots=True)
class PageState:
    current_page: int = 1
    page_size: int = DEFAULT_PAGE_SIZE

    def __post_init__(self):
        _check_page_size(self.page_size)


def total_pages(count: int, page_size: int) -> int:
    """Number of pages needed for ``count`` rows; never less than 1."""
    _check_page_size(page_size)
    return max(1, math.ceil(count / page_size))


def paginate(reports: Sequence[Report], page: int, page_size: int) -> list[Report]:
    """Return the rows of 1-based ``page``.

    Pages past the end (or below 1) yield an empty list instead of raising.
    """
    _check_page_size(page_size)
    if page < 1:
        return []
    start = (page - 1) * page_size
    return list(reports[start : start + page_size])


def clamp_page(page: int, pages: int) -> int:
    return min(max(page, 1), max(pages, 1))


def page_bounds(page: int, page_size: int, count: int) -> tuple[int, int]:
    """1-based (first, last) row numbers shown on ``page``; (0, 0) when empty."""
    _check_page_size(page_size)
    if count <= 0 or page < 1:
        return 0, 0
    first = (page - 1) * page_size + 1
    if first > count:
        return 0, 0
    return first, min(page * page_size, count)


def needs_pagination(count: int, page_size: int) -> bool:
    """Page controls are only rendered when rows overflow a single page."""
    return count > page_size
