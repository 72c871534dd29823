"""Readiness check-in records and derived scores."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class ReadinessEntry:
    """Daily subjective check-in. One entry per calendar date.

    Factors are on a 1-5 scale; ``soreness`` is higher = more sore.
    Missing factors are None and are excluded from scoring.
    """

    entry_date: date
    sleep_quality: int | None = None
    energy_level: int | None = None
    soreness: int | None = None
    motivation: int | None = None
    resting_hr: int | None = None
    hrv: float | None = None
    notes: str = ""


@dataclass(frozen=True)
class ReadinessScore:
    """Composite 0-100 score and its zone label."""

    score: float
    zone: str


@dataclass(frozen=True)
class ReadinessDay:
    """One date of an aggregated readiness series. None = no check-in."""

    day: date
    score: float | None = None
    zone: str | None = None


@dataclass(frozen=True)
class ReadinessSummary:
    """Statistics over a readiness window."""

    average: float | None
    highest: float | None
    lowest: float | None
    check_ins: int
    streak: int
