"""Parse plain JSON-like documents into frozen engine models.

Documents are what the persistence and import collaborators hand over:
dicts and lists straight out of ``json.load``. Profile and log documents
use the camelCase keys of the stored app data; template documents use the
snake_case keys of the template import format.

All functions are pure (no I/O).
"""

from __future__ import annotations

from datetime import date
from typing import Any, Iterable, Mapping

from training_engine.catalog import ExerciseCatalog
from training_engine.errors import ValidationError
from training_engine.math.zones import parse_zone_id
from training_engine.models.athlete_profile import AthleteProfile, BenchmarkValue, PersonalRecord
from training_engine.models.enums import EXERCISE_SESSION_TYPES, MovementPattern, SessionType
from training_engine.models.exercise import Exercise
from training_engine.models.program import (
    CardioDay,
    DayTemplate,
    ExerciseDay,
    ExercisePrescription,
    Phase,
    ProgramTemplate,
    RecoveryDay,
)
from training_engine.models.readiness import ReadinessEntry
from training_engine.models.validation import ValidationIssue
from training_engine.models.workout_log import PerformedExercise, WorkoutLogEntry


def parse_date(value: Any, path: str = "date") -> date:
    """ISO ``YYYY-MM-DD`` (or a date) -> date.

    Raises:
        ValidationError: For anything else.
    """
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(str(value)[:10])
    except ValueError:
        raise ValidationError(
            f"Invalid date {value!r}",
            issues=(ValidationIssue(path=path, message="must be an ISO date (YYYY-MM-DD)"),),
        ) from None


def _optional_date(value: Any, path: str) -> date | None:
    return None if value in (None, "") else parse_date(value, path)


def _optional_float(value: Any) -> float | None:
    return None if value is None else float(value)


def _reps_text(value: Any) -> str:
    """Reps as text; a missing or null value is the empty string."""
    return "" if value is None else str(value)


# ---------------------------------------------------------------------------
# Athlete profile
# ---------------------------------------------------------------------------


def parse_profile(document: Mapping[str, Any]) -> AthleteProfile:
    """Build an AthleteProfile from the stored profile document.

    Records with a null value (never tested) are left out.
    """
    personal_records = {
        key: PersonalRecord(
            value=float(record["value"]),
            recorded_on=_optional_date(record.get("date"), f"prs.{key}.date"),
            note=record.get("note", "") or "",
        )
        for key, record in (document.get("prs") or {}).items()
        if record and record.get("value") is not None
    }
    benchmarks = {
        key: BenchmarkValue(
            value=float(record["value"]),
            recorded_on=_optional_date(record.get("date"), f"benchmarks.{key}.date"),
        )
        for key, record in (document.get("benchmarks") or {}).items()
        if record and record.get("value") is not None
    }
    return AthleteProfile(
        available_equipment=frozenset(document.get("availableEquipment") or ()),
        body_weight=_optional_float(document.get("weight")),
        personal_records=personal_records,
        benchmarks=benchmarks,
        name=document.get("name") or "",
    )


# ---------------------------------------------------------------------------
# Workout and readiness logs
# ---------------------------------------------------------------------------


def _parse_performed(item: Mapping[str, Any]) -> PerformedExercise:
    return PerformedExercise(
        name=item.get("name", ""),
        sets=int(item.get("sets") or 0),
        reps=_reps_text(item.get("reps")),
        weight=_optional_float(item.get("weight")),
        rpe=_optional_float(item.get("rpe")),
        intensity_percent=_optional_float(item.get("intensity")),
        note=item.get("note", "") or "",
    )


def parse_workout_log(document: Iterable[Mapping[str, Any]]) -> tuple[WorkoutLogEntry, ...]:
    """Workout log entries, in document order."""
    return tuple(
        WorkoutLogEntry(
            log_date=parse_date(item.get("date"), f"[{i}].date"),
            session_label=item.get("session", "") or "",
            completed=bool(item.get("completed", True)),
            exercises=tuple(_parse_performed(ex) for ex in item.get("exercises") or ()),
        )
        for i, item in enumerate(document)
    )


def _optional_int(value: Any) -> int | None:
    return None if value is None else int(value)


def _first_present(item: Mapping[str, Any], *keys: str) -> Any:
    return next((item[k] for k in keys if item.get(k) is not None), None)


def parse_readiness_log(document: Iterable[Mapping[str, Any]]) -> tuple[ReadinessEntry, ...]:
    """Readiness check-ins; a later entry for the same date replaces an earlier one."""
    by_date: dict[date, ReadinessEntry] = {}
    for i, item in enumerate(document):
        entry = ReadinessEntry(
            entry_date=parse_date(item.get("date"), f"[{i}].date"),
            sleep_quality=_optional_int(item.get("sleepQuality")),
            energy_level=_optional_int(item.get("energyLevel")),
            soreness=_optional_int(_first_present(item, "soreness", "muscleSoreness")),
            motivation=_optional_int(item.get("motivation")),
            resting_hr=_optional_int(item.get("restingHR")),
            hrv=_optional_float(item.get("hrv")),
            notes=item.get("notes", "") or "",
        )
        by_date[entry.entry_date] = entry
    return tuple(sorted(by_date.values(), key=lambda e: e.entry_date))


# ---------------------------------------------------------------------------
# Program templates
# ---------------------------------------------------------------------------


def parse_custom_exercises(
    document: Mapping[str, Any], catalog: ExerciseCatalog
) -> tuple[ExerciseCatalog, tuple[Exercise, ...]]:
    """Append the document's custom exercises to *catalog*.

    Returns:
        (extended catalog, the custom Exercises in declaration order)
    """
    customs = []
    for item in document.get("custom_exercises") or ():
        catalog, exercise = catalog.add_custom(
            name=item["name"],
            pattern=MovementPattern(item["pattern"]),
            equipment=item["equipment"],
            muscles=item.get("muscles", ()),
            exercise_id=item.get("id"),
        )
        customs.append(exercise)
    return catalog, tuple(customs)


def _parse_prescription(slot: Mapping[str, Any]) -> ExercisePrescription:
    return ExercisePrescription(
        exercise_id=slot["exercise_id"],
        sets=slot["sets"],
        reps=_reps_text(slot.get("reps")),
        intensity_percent=_optional_float(slot.get("intensity")),
        rpe=_optional_float(slot.get("rpe")),
        rest_seconds=slot.get("rest"),
        rep_ceiling=slot.get("rep_ceiling"),
        note=slot.get("note", "") or "",
    )


def parse_day(day: Mapping[str, Any]) -> DayTemplate:
    """One weekly-template entry -> the matching day variant."""
    session_type = SessionType(day["type"])
    label = day.get("session") or day.get("label") or ""
    duration = _optional_float(day.get("duration"))

    if session_type in EXERCISE_SESSION_TYPES:
        return ExerciseDay(
            day=day["day"],
            session_type=session_type,
            exercises=tuple(_parse_prescription(s) for s in day["exercises"]),
            label=label,
            duration_min=duration,
        )
    if session_type == SessionType.CARDIO:
        return CardioDay(
            day=day["day"],
            hr_zone=parse_zone_id(day["zone"]),
            duration_min=duration or 0.0,
            activity=day.get("activity", "") or "",
            label=label,
        )
    return RecoveryDay(day=day["day"], duration_min=duration or 0.0, label=label)


def parse_template(
    document: Mapping[str, Any], catalog: ExerciseCatalog
) -> tuple[ProgramTemplate, ExerciseCatalog]:
    """Build a ProgramTemplate from an already validated document.

    Returns:
        (template, catalog extended with the template's custom exercises)
    """
    catalog, customs = parse_custom_exercises(document, catalog)
    meta = document["meta"]
    phases = tuple(
        sorted(
            (
                Phase(
                    phase_id=phase["id"],
                    name=phase["name"],
                    start_week=phase["weeks"][0],
                    end_week=phase["weeks"][1],
                    model_id=phase["progression"],
                    weekly_template=tuple(
                        sorted((parse_day(d) for d in phase["weekly_template"]), key=lambda d: d.day)
                    ),
                    description=phase.get("description", "") or "",
                )
                for phase in document["phases"]
            ),
            key=lambda p: p.start_week,
        )
    )
    template = ProgramTemplate(
        program_id=meta["id"],
        name=meta["name"],
        phases=phases,
        description=meta.get("description", "") or "",
        custom_exercises=customs,
    )
    return template, catalog
