"""Render engine outputs as JSON-ready dicts.

All functions are pure (no I/O, no locale or unit formatting).
"""

from __future__ import annotations

import json
from typing import Iterable

from training_engine.math.zones import HeartRateZones
from training_engine.models.program import (
    CardioDay,
    DailyPrescription,
    DayTemplate,
    ExerciseDay,
    ExercisePrescription,
    Program,
)
from training_engine.models.readiness import ReadinessDay, ReadinessSummary
from training_engine.models.training_load import TrainingLoadPoint


def program_to_dict(program: Program) -> dict:
    """Convert a materialized Program to a JSON-compatible dict."""
    return {
        "id": program.program_id,
        "name": program.name,
        "description": program.description,
        "totalWeeks": program.total_weeks,
        "phases": [
            {
                "id": phase.phase_id,
                "name": phase.name,
                "weeks": [phase.start_week, phase.end_week],
                "progression": phase.model_id,
            }
            for phase in program.phases
        ],
        "calendar": [_daily_to_dict(d) for d in program.calendar],
        "substitutions": [
            {
                "week": s.week,
                "day": s.day,
                "original": s.original_exercise_id,
                "substitute": s.substitute_exercise_id,
            }
            for s in program.substitutions
        ],
        "warnings": [
            {"week": w.week, "day": w.day, "exerciseId": w.exercise_id, "reason": w.reason}
            for w in program.warnings
        ],
        "hrZones": _zones_to_dict(program.hr_zones),
    }


def program_to_json_string(program: Program, indent: int = 2) -> str:
    return json.dumps(program_to_dict(program), indent=indent)


def load_points_to_list(points: Iterable[TrainingLoadPoint]) -> list[dict]:
    """ATL / CTL / ACR history rows."""
    return [
        {
            "date": p.load_date.isoformat(),
            "load": round(p.load, 2),
            "atl": round(p.atl, 2),
            "ctl": round(p.ctl, 2),
            "acr": None if p.acr is None else round(p.acr, 3),
            "zone": p.zone,
        }
        for p in points
    ]


def readiness_series_to_list(series: Iterable[ReadinessDay]) -> list[dict]:
    return [
        {"date": d.day.isoformat(), "score": d.score, "zone": d.zone}
        for d in series
    ]


def readiness_summary_to_dict(summary: ReadinessSummary) -> dict:
    return {
        "average": summary.average,
        "highest": summary.highest,
        "lowest": summary.lowest,
        "checkIns": summary.check_ins,
        "streak": summary.streak,
    }


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _daily_to_dict(entry: DailyPrescription) -> dict:
    params = entry.week_params
    return {
        "week": entry.week,
        "day": entry.day,
        "phaseWeek": entry.phase_week,
        "phaseId": entry.phase_id,
        "focus": params.focus,
        "intensity": params.intensity_percent,
        "volume": params.volume_multiplier,
        "deload": params.is_deload,
        "asAuthored": params.as_authored,
        "session": _session_to_dict(entry.session),
    }


def _prescription_to_dict(p: ExercisePrescription) -> dict:
    result = {
        "exerciseId": p.exercise_id,
        "sets": p.sets,
        "reps": p.reps,
        "intensity": p.intensity_percent,
    }
    for key, value in (
        ("rpe", p.rpe),
        ("rest", p.rest_seconds),
        ("weight", p.working_weight),
        ("substitutedFrom", p.substituted_from),
    ):
        if value is not None:
            result[key] = value
    if p.note:
        result["note"] = p.note
    if p.unresolved:
        result["unresolved"] = True
    return result


def _session_to_dict(session: DayTemplate) -> dict:
    result = {"type": session.session_type.value, "label": session.label}
    if isinstance(session, ExerciseDay):
        result["exercises"] = [_prescription_to_dict(p) for p in session.exercises]
        if session.duration_min is not None:
            result["duration"] = session.duration_min
    elif isinstance(session, CardioDay):
        result["zone"] = session.hr_zone.zone_id
        result["duration"] = session.duration_min
        result["activity"] = session.activity
        if session.hr_target is not None:
            result["hrTarget"] = list(session.hr_target)
    else:
        result["duration"] = session.duration_min
    return result


def _zones_to_dict(zones: HeartRateZones | None) -> dict | None:
    if zones is None:
        return None
    return {
        "maxHR": zones.max_hr,
        "aerobicThreshold": zones.aerobic_threshold,
        "anaerobicThreshold": zones.anaerobic_threshold,
        "zones": [
            {"zone": z.zone.zone_id, "lower": z.lower, "upper": z.upper}
            for z in zones.zones
        ],
    }
