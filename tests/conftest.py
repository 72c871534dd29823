"""Shared test fixtures: athletes, template documents, workout and readiness logs."""

from __future__ import annotations

import copy
from datetime import date, timedelta
from typing import Callable

import pytest

from training_engine.models.athlete_profile import AthleteProfile, BenchmarkValue, PersonalRecord
from training_engine.models.readiness import ReadinessEntry
from training_engine.models.workout_log import PerformedExercise, WorkoutLogEntry


@pytest.fixture
def gym_profile() -> AthleteProfile:
    """Commercial-gym athlete: everything the hybrid template needs, squat 300 / bench 225."""
    return AthleteProfile(
        name="Dana",
        body_weight=200.0,
        available_equipment=frozenset({
            "barbell", "dumbbell", "kettlebell", "bench", "pullupBar",
            "cable", "machine", "bodyweight",
        }),
        personal_records={
            "backSquat": PersonalRecord(300.0, date(2024, 1, 10)),
            "benchPress": PersonalRecord(225.0, date(2024, 1, 12)),
        },
        benchmarks={"maxHR": BenchmarkValue(190.0, date(2024, 1, 5))},
    )


@pytest.fixture
def home_profile() -> AthleteProfile:
    """Garage athlete with dumbbells and kettlebells only: no barbell, no pull-up bar."""
    return AthleteProfile(
        name="Sam",
        available_equipment=frozenset({"dumbbell", "kettlebell", "bodyweight"}),
        personal_records={"backSquat": PersonalRecord(300.0)},
    )


def hybrid_week() -> list[dict]:
    """Seven-day template mixing every session type."""
    return [
        {
            "day": 1, "type": "strength", "session": "Lower A",
            "exercises": [
                {"exercise_id": "backSquat", "sets": 4, "reps": "6-8", "intensity": 75, "rest": 180},
                {"exercise_id": "romanianDeadlift", "sets": 3, "reps": "8-10", "rpe": 7},
            ],
        },
        {"day": 2, "type": "cardio", "session": "Zone 2 Run", "zone": "zone2", "duration": 45, "activity": "run"},
        {
            "day": 3, "type": "strength", "session": "Upper A",
            "exercises": [
                {"exercise_id": "benchPress", "sets": 4, "reps": "5", "intensity": 80},
                {"exercise_id": "pullUp", "sets": 3, "reps": "8-10", "rep_ceiling": 10},
            ],
        },
        {"day": 4, "type": "recovery", "session": "Rest"},
        {
            "day": 5, "type": "muscular_endurance", "session": "Carry Circuit",
            "exercises": [
                {"exercise_id": "farmerCarry", "sets": 3, "reps": "40s"},
                {"exercise_id": "kettlebellSwing", "sets": 3, "reps": "15-20"},
            ],
        },
        {
            "day": 6, "type": "mobility", "session": "Mobility", "duration": 30,
            "exercises": [{"exercise_id": "pigeonPose", "sets": 2, "reps": "60s"}],
        },
        {"day": 7, "type": "recovery", "session": "Easy Walk", "duration": 20},
    ]


@pytest.fixture
def hybrid_template() -> dict:
    """Ten-week template: linear base, weekly-undulating build, block peak."""
    return {
        "meta": {"id": "hybrid-10", "name": "Hybrid 10", "description": "Strength and aerobic base"},
        "phases": [
            {"id": "base", "name": "Base", "weeks": [1, 4], "progression": "linear",
             "weekly_template": hybrid_week()},
            {"id": "build", "name": "Build", "weeks": [5, 8], "progression": "undulating_weekly",
             "weekly_template": hybrid_week()},
            {"id": "peak", "name": "Peak", "weeks": [9, 10], "progression": "block",
             "weekly_template": hybrid_week()},
        ],
    }


@pytest.fixture
def make_template(hybrid_template: dict) -> Callable[..., dict]:
    """Factory: a deep copy of the hybrid template with phase overrides applied."""

    def _make(**phase_overrides: dict) -> dict:
        document = copy.deepcopy(hybrid_template)
        for phase in document["phases"]:
            phase.update(phase_overrides.get(phase["id"], {}))
        return document

    return _make


@pytest.fixture
def squat_session() -> Callable[..., WorkoutLogEntry]:
    """Factory for a single-exercise logged session."""

    def _make(
        day: date,
        sets: int = 5,
        reps: str = "5",
        intensity: float | None = None,
        rpe: float | None = None,
    ) -> WorkoutLogEntry:
        return WorkoutLogEntry(
            log_date=day,
            session_label="Lower",
            exercises=(
                PerformedExercise(
                    name="Back Squat", sets=sets, reps=reps, weight=225.0,
                    rpe=rpe, intensity_percent=intensity,
                ),
            ),
        )

    return _make


@pytest.fixture
def steady_log(squat_session: Callable[..., WorkoutLogEntry]) -> tuple[WorkoutLogEntry, ...]:
    """Six weeks of identical sessions every other day."""
    start = date(2024, 1, 1)
    return tuple(
        squat_session(start + timedelta(days=d), intensity=75)
        for d in range(0, 42, 2)
    )


@pytest.fixture
def readiness_week() -> tuple[ReadinessEntry, ...]:
    """Seven consecutive check-ins ending 2024-03-07, the 4th missing."""
    start = date(2024, 3, 1)
    entries = []
    for offset in range(7):
        if offset == 3:
            continue
        entries.append(
            ReadinessEntry(
                entry_date=start + timedelta(days=offset),
                sleep_quality=4,
                energy_level=4,
                soreness=2,
                motivation=4,
            )
        )
    return tuple(entries)
