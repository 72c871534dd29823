"""Composite daily readiness from subjective check-ins.

Each factor is on a 1-5 scale and maps linearly onto 0-100. Soreness is
inverted first (6 - soreness) so that higher always means more ready.
Factors are weighted equally, renormalized over those actually reported.
"""

from __future__ import annotations

import dataclasses
from datetime import date, timedelta
from typing import Iterable, Sequence

from training_engine.errors import ValidationError
from training_engine.math.loads import scale_sets
from training_engine.models.enums import (
    READINESS_ADJUSTING,
    READINESS_FACTOR_MAX,
    READINESS_FACTOR_MIN,
    READINESS_GOOD,
    READINESS_OPTIMAL,
    READINESS_RED_VOLUME_MOD,
    READINESS_STRUGGLING,
    READINESS_YELLOW_VOLUME_MOD,
    READINESS_ZONE_ADJUSTING,
    READINESS_ZONE_CRITICAL,
    READINESS_ZONE_GOOD,
    READINESS_ZONE_OPTIMAL,
    READINESS_ZONE_STRUGGLING,
)
from training_engine.models.program import ExerciseDay
from training_engine.models.readiness import (
    ReadinessDay,
    ReadinessEntry,
    ReadinessScore,
    ReadinessSummary,
)
from training_engine.models.validation import ValidationIssue

FACTOR_WEIGHTS = {
    "sleep_quality": 1.0,
    "energy_level": 1.0,
    "soreness": 1.0,
    "motivation": 1.0,
}


def _factor_to_percent(value: float) -> float:
    span = READINESS_FACTOR_MAX - READINESS_FACTOR_MIN
    return (value - READINESS_FACTOR_MIN) / span * 100.0


def classify_readiness(score: float) -> str:
    """Zone for a 0-100 readiness score."""
    if score >= READINESS_OPTIMAL:
        return READINESS_ZONE_OPTIMAL
    if score >= READINESS_GOOD:
        return READINESS_ZONE_GOOD
    if score >= READINESS_ADJUSTING:
        return READINESS_ZONE_ADJUSTING
    if score >= READINESS_STRUGGLING:
        return READINESS_ZONE_STRUGGLING
    return READINESS_ZONE_CRITICAL


def score(entry: ReadinessEntry) -> ReadinessScore:
    """Composite readiness score for one check-in.

    Raises:
        ValidationError: A factor is outside 1-5, or no factor is present.
            Every out-of-range factor is reported.
    """
    issues = []
    weighted = 0.0
    total_weight = 0.0
    for factor, weight in FACTOR_WEIGHTS.items():
        value = getattr(entry, factor)
        if value is None:
            continue
        if not READINESS_FACTOR_MIN <= value <= READINESS_FACTOR_MAX:
            issues.append(ValidationIssue(
                path=factor,
                message=f"must be between {READINESS_FACTOR_MIN} and "
                        f"{READINESS_FACTOR_MAX}, got {value!r}",
            ))
            continue
        if factor == "soreness":
            value = READINESS_FACTOR_MAX + READINESS_FACTOR_MIN - value
        weighted += _factor_to_percent(value) * weight
        total_weight += weight

    if issues:
        raise ValidationError(f"Invalid readiness entry for {entry.entry_date}", issues=tuple(issues))
    if total_weight == 0:
        raise ValidationError(
            f"Readiness entry for {entry.entry_date} has no factors",
            issues=(ValidationIssue(path="entry", message="at least one factor is required"),),
        )

    value = round(weighted / total_weight, 1)
    return ReadinessScore(score=value, zone=classify_readiness(value))


def upsert_readiness(
    entries: Iterable[ReadinessEntry], entry: ReadinessEntry
) -> tuple[ReadinessEntry, ...]:
    """Insert *entry*, replacing any existing entry for the same date.

    The result is sorted by date; applying the same upsert twice is a no-op.
    """
    kept = [e for e in entries if e.entry_date != entry.entry_date]
    kept.append(entry)
    return tuple(sorted(kept, key=lambda e: e.entry_date))


def aggregate(
    entries: Iterable[ReadinessEntry], range_days: int, as_of: date
) -> tuple[ReadinessDay, ...]:
    """Daily readiness over the *range_days* window ending at *as_of*.

    Args:
        entries: Check-ins in any order (at most one per date).
        range_days: Window length in days, including *as_of*.
        as_of: Last date of the window.

    Returns:
        Exactly *range_days* ReadinessDay items, oldest first. Dates without
        a check-in have ``score=None``.
    """
    if range_days < 1:
        raise ValidationError(
            f"range_days must be positive, got {range_days!r}",
            issues=(ValidationIssue(path="range_days", message="must be positive"),),
        )
    by_date = {e.entry_date: e for e in entries}
    days = []
    for offset in range(range_days - 1, -1, -1):
        day = as_of - timedelta(days=offset)
        entry = by_date.get(day)
        if entry is None:
            days.append(ReadinessDay(day=day))
            continue
        result = score(entry)
        days.append(ReadinessDay(day=day, score=result.score, zone=result.zone))
    return tuple(days)


def summarize(series: Sequence[ReadinessDay]) -> ReadinessSummary:
    """Average / high / low of scored days plus the current check-in streak.

    The streak counts consecutive scored days backward from the most recent.
    """
    scores = [d.score for d in series if d.score is not None]
    streak = 0
    for day in reversed(series):
        if day.score is None:
            break
        streak += 1
    if not scores:
        return ReadinessSummary(average=None, highest=None, lowest=None, check_ins=0, streak=0)
    return ReadinessSummary(
        average=round(sum(scores) / len(scores), 1),
        highest=max(scores),
        lowest=min(scores),
        check_ins=len(scores),
        streak=streak,
    )


def readiness_volume_modifier(score_value: float | None) -> float:
    """Set multiplier for a day given its readiness score (1.0 when unknown)."""
    if score_value is None:
        return 1.0
    if score_value < READINESS_STRUGGLING:
        return READINESS_RED_VOLUME_MOD
    if score_value < READINESS_GOOD:
        return READINESS_YELLOW_VOLUME_MOD
    return 1.0


def apply_readiness(day: ExerciseDay, score_value: float | None) -> ExerciseDay:
    """Scale every prescription's sets by the readiness modifier (minimum 1 set)."""
    modifier = readiness_volume_modifier(score_value)
    if modifier == 1.0:
        return day
    exercises = tuple(
        dataclasses.replace(p, sets=scale_sets(p.sets, modifier)) for p in day.exercises
    )
    return dataclasses.replace(day, exercises=exercises)
