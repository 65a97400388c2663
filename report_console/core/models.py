"""Domain data model for citizen-submitted reports."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True, slots=True)
class Report:
    """A single citizen report as supplied by the report source.

    Instances are never mutated once built; the query engine hands the same
    objects back to the presentation layer.
    """

    id: str
    title: str
    description: str
    location: str
    region: str
    category: str
    severity: int
    status: str
    date: datetime
    photos: tuple[str, ...] = field(default_factory=tuple)
    response_time: float | None = None
