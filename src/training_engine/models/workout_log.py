"""Workout log entries — what the athlete actually performed."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date


@dataclass(frozen=True)
class PerformedExercise:
    """One exercise as logged at the end of a session."""

    name: str
    sets: int
    reps: str
    weight: float | None = None
    rpe: float | None = None
    intensity_percent: float | None = None
    note: str = ""


@dataclass(frozen=True)
class WorkoutLogEntry:
    """A finished session. Corrected in place by the persistence layer only."""

    log_date: date
    session_label: str
    completed: bool = True
    exercises: tuple[PerformedExercise, ...] = field(default_factory=tuple)
