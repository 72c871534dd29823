"""Data models for the training engine."""

from training_engine.models.athlete_profile import (
    AthleteProfile,
    BenchmarkValue,
    PersonalRecord,
    apply_progression,
)
from training_engine.models.enums import HRZone, MovementPattern, SessionType
from training_engine.models.exercise import Exercise
from training_engine.models.program import (
    CardioDay,
    DailyPrescription,
    DayTemplate,
    ExerciseDay,
    ExercisePrescription,
    Phase,
    Program,
    ProgramTemplate,
    RecoveryDay,
    SubstitutionRecord,
    UnresolvedSubstitution,
)
from training_engine.models.progression import WeekParams
from training_engine.models.readiness import (
    ReadinessDay,
    ReadinessEntry,
    ReadinessScore,
    ReadinessSummary,
)
from training_engine.models.training_load import TrainingLoadPoint
from training_engine.models.validation import ValidationIssue, ValidationResult
from training_engine.models.workout_log import PerformedExercise, WorkoutLogEntry

__all__ = [
    "AthleteProfile",
    "BenchmarkValue",
    "CardioDay",
    "DailyPrescription",
    "DayTemplate",
    "Exercise",
    "ExerciseDay",
    "ExercisePrescription",
    "HRZone",
    "MovementPattern",
    "PerformedExercise",
    "Phase",
    "PersonalRecord",
    "Program",
    "ProgramTemplate",
    "ReadinessDay",
    "ReadinessEntry",
    "ReadinessScore",
    "ReadinessSummary",
    "RecoveryDay",
    "SessionType",
    "SubstitutionRecord",
    "TrainingLoadPoint",
    "UnresolvedSubstitution",
    "ValidationIssue",
    "ValidationResult",
    "WeekParams",
    "WorkoutLogEntry",
    "apply_progression",
]
