"""Program models: day templates, phases, templates, and the materialized calendar.

Day templates are a tagged union keyed by session type: exercise days carry
prescriptions, cardio days carry an HR zone, recovery days carry only a
duration. Each variant holds just the fields it needs.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Union

from training_engine.models.enums import HRZone, SessionType
from training_engine.models.exercise import Exercise
from training_engine.models.progression import WeekParams

if TYPE_CHECKING:
    from training_engine.math.zones import HeartRateZones


@dataclass(frozen=True)
class ExercisePrescription:
    """A single exercise slot within an exercise day.

    The last three fields are filled in during materialization.
    """

    exercise_id: str
    sets: int
    reps: str  # "5", "8-10", "AMRAP", "30s"
    intensity_percent: float | None = None  # % of 1RM
    rpe: float | None = None
    rest_seconds: int | None = None
    rep_ceiling: int | None = None
    note: str = ""

    working_weight: float | None = None
    substituted_from: str | None = None
    unresolved: bool = False


@dataclass(frozen=True)
class ExerciseDay:
    """Strength, muscular-endurance, or mobility day."""

    day: int  # 1-7
    session_type: SessionType
    exercises: tuple[ExercisePrescription, ...]
    label: str = ""
    duration_min: float | None = None


@dataclass(frozen=True)
class CardioDay:
    """Heart-rate-zone driven cardio session."""

    day: int
    hr_zone: HRZone
    duration_min: float
    activity: str = ""
    label: str = ""
    hr_target: tuple[int, int] | None = None

    @property
    def session_type(self) -> SessionType:
        return SessionType.CARDIO


@dataclass(frozen=True)
class RecoveryDay:
    """Rest or active-recovery day."""

    day: int
    duration_min: float = 0.0
    label: str = ""

    @property
    def session_type(self) -> SessionType:
        return SessionType.RECOVERY


DayTemplate = Union[ExerciseDay, CardioDay, RecoveryDay]


@dataclass(frozen=True)
class Phase:
    """A contiguous block of weeks sharing one weekly template and one model."""

    phase_id: str
    name: str
    start_week: int  # 1-indexed
    end_week: int  # inclusive
    model_id: str
    weekly_template: tuple[DayTemplate, ...]
    description: str = ""

    @property
    def weeks(self) -> int:
        return self.end_week - self.start_week + 1


@dataclass(frozen=True)
class ProgramTemplate:
    """Parsed, validated program document ready for materialization."""

    program_id: str
    name: str
    phases: tuple[Phase, ...]
    description: str = ""
    custom_exercises: tuple[Exercise, ...] = field(default_factory=tuple)

    @property
    def total_weeks(self) -> int:
        return max((p.end_week for p in self.phases), default=0)


@dataclass(frozen=True)
class DailyPrescription:
    """One concrete day of a generated calendar."""

    week: int  # absolute program week
    day: int  # 1-7
    phase_week: int  # 1-indexed week within the phase
    phase_id: str
    phase_name: str
    session: DayTemplate
    week_params: WeekParams

    @property
    def session_type(self) -> SessionType:
        return self.session.session_type

    @property
    def program_day(self) -> int:
        """1-indexed day number across the whole program."""
        return (self.week - 1) * 7 + self.day


@dataclass(frozen=True)
class SubstitutionRecord:
    """Audit entry for an exercise swapped during materialization."""

    week: int
    day: int
    original_exercise_id: str
    substitute_exercise_id: str


@dataclass(frozen=True)
class UnresolvedSubstitution:
    """Soft warning: an exercise the athlete cannot perform has no valid swap."""

    week: int
    day: int
    exercise_id: str
    reason: str = ""


@dataclass(frozen=True)
class Program:
    """Executable program: phases plus their fully expanded calendar."""

    program_id: str
    name: str
    phases: tuple[Phase, ...]
    calendar: tuple[DailyPrescription, ...]
    description: str = ""
    substitutions: tuple[SubstitutionRecord, ...] = field(default_factory=tuple)
    warnings: tuple[UnresolvedSubstitution, ...] = field(default_factory=tuple)
    hr_zones: HeartRateZones | None = None  # set when the athlete has a max HR

    @property
    def total_weeks(self) -> int:
        return max((p.end_week for p in self.phases), default=0)

    @property
    def has_warnings(self) -> bool:
        return len(self.warnings) > 0

    def week(self, week: int) -> tuple[DailyPrescription, ...]:
        """All seven days of an absolute program week."""
        return tuple(d for d in self.calendar if d.week == week)

    def phase_boundaries(self) -> dict[str, tuple[int, int]]:
        """Re-derive each phase's inclusive week range from the calendar."""
        bounds: dict[str, tuple[int, int]] = {}
        for entry in self.calendar:
            lo, hi = bounds.get(entry.phase_id, (entry.week, entry.week))
            bounds[entry.phase_id] = (min(lo, entry.week), max(hi, entry.week))
        return bounds
