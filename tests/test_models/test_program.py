"""Tests for program model helpers."""

from __future__ import annotations

from training_engine.models.enums import HRZone, SessionType
from training_engine.models.program import (
    CardioDay,
    DailyPrescription,
    Phase,
    Program,
    RecoveryDay,
)
from training_engine.models.progression import WeekParams


def _entry(week: int, day: int, phase_id: str) -> DailyPrescription:
    return DailyPrescription(
        week=week,
        day=day,
        phase_week=1,
        phase_id=phase_id,
        phase_name=phase_id.title(),
        session=RecoveryDay(day=day),
        week_params=WeekParams(week=1, intensity_percent=70.0, volume_multiplier=1.0),
    )


class TestDayVariants:
    def test_session_types(self) -> None:
        assert CardioDay(day=2, hr_zone=HRZone.ZONE_2, duration_min=40).session_type == SessionType.CARDIO
        assert RecoveryDay(day=4).session_type == SessionType.RECOVERY

    def test_zone_id(self) -> None:
        assert HRZone.ZONE_4.zone_id == "zone4"


class TestProgram:
    def test_phase_boundaries(self) -> None:
        calendar = tuple(
            _entry(w, d, "base" if w <= 2 else "peak") for w in range(1, 4) for d in range(1, 8)
        )
        program = Program("p", "P", phases=(), calendar=calendar)
        assert program.phase_boundaries() == {"base": (1, 2), "peak": (3, 3)}

    def test_program_day(self) -> None:
        assert _entry(3, 2, "base").program_day == 16

    def test_total_weeks_from_phases(self) -> None:
        phases = (
            Phase("a", "A", 1, 3, "linear", ()),
            Phase("b", "B", 4, 6, "block", ()),
        )
        assert Program("p", "P", phases=phases, calendar=()).total_weeks == 6
        assert phases[1].weeks == 3

    def test_empty_program(self) -> None:
        program = Program("p", "P", phases=(), calendar=())
        assert program.total_weeks == 0
        assert not program.has_warnings
        assert program.week(1) == ()
