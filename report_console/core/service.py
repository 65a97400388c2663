"""ReportService: loads the report collection from a JSON source and maps it."""

from __future__ import annotations

import json
import logging
from collections.abc import Callable
from pathlib import Path
from typing import Any

from .mappers import map_report
from .models import Report

ProgressCallback = Callable[[str, int | None, int | None], None]

logger = logging.getLogger(__name__)


def _extract_records(payload: Any) -> list[dict[str, Any]]:
    if isinstance(payload, dict):
        payload = payload.get("reports", [])
    if not isinstance(payload, list):
        raise RuntimeError(f"Unexpected report payload type: {type(payload)!r}")
    return [item for item in payload if isinstance(item, dict)]


def load_reports(records: list[dict[str, Any]]) -> tuple[Report, ...]:
    """Map raw records, skipping malformed or duplicated ones with a warning."""
    reports: list[Report] = []
    seen: set[str] = set()
    for raw in records:
        try:
            report = map_report(raw)
        except ValueError as exc:
            logger.warning("Skipping report record: %s", exc)
            continue
        if report.id in seen:
            logger.warning("Skipping duplicate report id %s", report.id)
            continue
        seen.add(report.id)
        reports.append(report)
    return tuple(reports)


class ReportService:
    """Read-only report source backed by a JSON file.

    The file holds either a list of report records or ``{"reports": [...]}``.
    """

    def __init__(self, path: str | Path):
        self.path = Path(path)
        self._reports: tuple[Report, ...] | None = None

    def fetch_reports(self, *, progress: ProgressCallback | None = None) -> tuple[Report, ...]:
        """Return the cached collection, loading it on first use."""
        if self._reports is None:
            self._reports = self._load(progress)
        return self._reports

    def refresh(self, *, progress: ProgressCallback | None = None) -> tuple[Report, ...]:
        """Re-read the source file, replacing the cached collection."""
        self._reports = self._load(progress)
        return self._reports

    def _load(self, progress: ProgressCallback | None) -> tuple[Report, ...]:
        if progress:
            progress(f"Reading reports from {self.path.name}", None, None)
        try:
            payload = json.loads(self.path.read_text(encoding="utf-8"))
        except OSError as exc:
            raise RuntimeError(f"Failed to read report source {self.path}: {exc}") from exc
        except json.JSONDecodeError as exc:
            raise RuntimeError(f"Report source {self.path} is not valid JSON: {exc}") from exc
        records = _extract_records(payload)
        if progress:
            progress("Mapping report records", 0, len(records))
        reports = load_reports(records)
        if progress:
            progress("Reports ready", len(records), len(records))
        logger.info("Loaded %s report(s) from %s (%s skipped)", len(reports), self.path, len(records) - len(reports))
        return reports
