"""Selection model: ids of reports chosen for a batch action.

A selection is an immutable ``frozenset`` of report ids. Each operation
returns the next selection; nothing here prunes ids when filters or pages
change, so a batch action can span reports that are no longer visible.
"""

from __future__ import annotations

from collections.abc import Collection, Iterable

SelectionSet = frozenset[str]

EMPTY_SELECTION: SelectionSet = frozenset()


def select_all(visible_ids: Iterable[str]) -> SelectionSet:
    """Replace the selection with exactly the ids on the current page."""
    return frozenset(visible_ids)


def deselect_all() -> SelectionSet:
    return EMPTY_SELECTION


def clear() -> SelectionSet:
    """Empty the selection, e.g. after a batch action completes."""
    return EMPTY_SELECTION


def toggle(
    selection: SelectionSet,
    report_id: str,
    included: bool,
    known_ids: Collection[str] | None = None,
) -> SelectionSet:
    """Add or remove one id.

    Adding an id already present, removing an absent one, or adding an id
    outside ``known_ids`` (when given) returns the selection unchanged.
    """
    if included:
        if report_id in selection:
            return selection
        if known_ids is not None and report_id not in known_ids:
            return selection
        return selection | {report_id}
    if report_id not in selection:
        return selection
    return selection - {report_id}


def all_selected(visible_ids: Collection[str], selection: SelectionSet) -> bool:
    """Header checkbox state: a non-empty page whose every row is selected."""
    return len(visible_ids) > 0 and all(report_id in selection for report_id in visible_ids)
