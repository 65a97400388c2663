"""Status normalization and display helpers.

Centralized status handling shared by the mappers, tables and pages. Uses the
workflow configuration from config.py (STATUS_ALIASES, STATUS_LABELS).
"""

from __future__ import annotations

from .config import SEVERITY_LABELS, STATUS_ALIASES, STATUS_LABELS


def normalize_report_status(value: str | None) -> str:
    """Map a raw status string to its canonical report status.

    Known aliases (``pending``, ``in-progress`` ...) resolve to one of the four
    workflow statuses. Anything else is returned stripped but otherwise
    untouched, so unexpected upstream values remain visible and simply fail
    to match status filters.

    Parameters
    ----------
    value : str | None
        Raw status string from the report source.

    Returns
    -------
    str
        Canonical status (e.g. ``"submitted"``) or the cleaned raw value.

    Examples
    --------
    >>> normalize_report_status("pending")
    'submitted'
    >>> normalize_report_status("In Progress")
    'in-review'
    >>> normalize_report_status("archived")
    'archived'
    """
    if value is None:
        return ""
    text = str(value).strip()
    return STATUS_ALIASES.get(text.lower(), text)


def status_label(value: str | None) -> str:
    """Human label for a status; unknown values are shown as-is."""
    if not value:
        return "Unknown"
    return STATUS_LABELS.get(value, str(value))


def severity_label(value) -> str:
    try:
        return SEVERITY_LABELS.get(int(value), str(value))
    except (TypeError, ValueError):
        return str(value)


def format_category_name(category: str | None) -> str:
    """Turn a slug such as ``missing-ramp`` into ``Missing Ramp``."""
    if not category:
        return ""
    words = str(category).replace("-", " ").split(" ")
    return " ".join(w[:1].upper() + w[1:] for w in words)
