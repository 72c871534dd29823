"""Tests for the shipped progression models."""

from __future__ import annotations

import pytest

from training_engine.errors import ValidationError
from training_engine.progression.models.block import BlockTaperProgression
from training_engine.progression.models.custom import CustomProgression
from training_engine.progression.models.linear import LinearProgression
from training_engine.progression.models.maintenance import MaintenanceProgression
from training_engine.progression.models.undulating import (
    ConjugateProgression,
    DailyUndulatingProgression,
    WeeklyUndulatingProgression,
)


class TestLinear:
    def test_eight_weeks(self) -> None:
        weeks = LinearProgression().generate(8)
        assert len(weeks) == 8
        assert weeks[0].intensity_percent == 65.0
        assert weeks[-1].intensity_percent == 82.5

    def test_non_decreasing(self) -> None:
        weeks = LinearProgression().generate(20)
        intensities = [w.intensity_percent for w in weeks]
        assert intensities == sorted(intensities)

    def test_ceiling(self) -> None:
        weeks = LinearProgression().generate(20)
        assert max(w.intensity_percent for w in weeks) == 90.0

    def test_volume_falls_within_bounds(self) -> None:
        weeks = LinearProgression().generate(20)
        volumes = [w.volume_multiplier for w in weeks]
        assert volumes[0] == 1.0
        assert volumes == sorted(volumes, reverse=True)
        assert all(0.6 <= v <= 1.0 for v in volumes)

    def test_rep_shift_per_step(self) -> None:
        weeks = LinearProgression().generate(8)
        # 65, 67.5, 70, 72.5 ... 82.5: one rep fewer per 7.5 % gained
        assert [w.rep_shift for w in weeks] == [0, 0, 0, -1, -1, -1, -2, -2]

    def test_rep_step_is_configurable(self) -> None:
        weeks = LinearProgression(rep_step_percent=2.5).generate(3)
        assert [w.rep_shift for w in weeks] == [0, -1, -2]

    def test_weeks_numbered_in_order(self) -> None:
        assert [w.week for w in LinearProgression().generate(5)] == [1, 2, 3, 4, 5]


class TestWeeklyUndulating:
    def test_cycle(self) -> None:
        weeks = WeeklyUndulatingProgression().generate(4)
        assert [w.intensity_percent for w in weeks] == [65.0, 75.0, 80.0, 55.0]
        assert [w.volume_multiplier for w in weeks] == [1.0, 1.0, 1.25, 0.5]
        assert [w.rep_shift for w in weeks] == [2, 0, -2, 0]
        assert [w.focus for w in weeks] == ["Volume", "Intensity", "Peak", "Deload"]

    def test_periodic(self) -> None:
        weeks = WeeklyUndulatingProgression().generate(12)
        for week in weeks[4:]:
            earlier = weeks[week.week - 5]
            assert week.intensity_percent == earlier.intensity_percent
            assert week.volume_multiplier == earlier.volume_multiplier

    def test_deload_every_fourth(self) -> None:
        weeks = WeeklyUndulatingProgression().generate(8)
        assert [w.week for w in weeks if w.is_deload] == [4, 8]


class TestConjugate:
    def test_waves(self) -> None:
        weeks = ConjugateProgression().generate(4)
        assert [w.intensity_percent for w in weeks] == [70.0, 75.0, 80.0, 60.0]
        assert weeks[3].is_deload


class TestDailyUndulating:
    def test_constant_until_deload(self) -> None:
        weeks = DailyUndulatingProgression().generate(4)
        assert [w.intensity_percent for w in weeks] == [70.0, 70.0, 70.0, 56.0]
        assert [w.volume_multiplier for w in weeks] == [1.0, 1.0, 1.0, 0.6]


class TestBlock:
    def test_ten_weeks(self) -> None:
        weeks = BlockTaperProgression().generate(10)
        focuses = [w.focus for w in weeks]
        assert focuses == ["Accumulation"] * 4 + ["Transmutation"] * 4 + ["Realization"] + ["Taper"]

    def test_final_week_is_lowest_pair(self) -> None:
        for total in (1, 2, 5, 9, 16):
            weeks = BlockTaperProgression().generate(total)
            final = weeks[-1]
            assert final.intensity_percent == min(w.intensity_percent for w in weeks)
            assert final.volume_multiplier == min(w.volume_multiplier for w in weeks)
            assert final.is_deload

    def test_accumulation_parameters(self) -> None:
        first = BlockTaperProgression().generate(6)[0]
        assert (first.intensity_percent, first.volume_multiplier, first.rep_shift) == (70.0, 1.2, 2)


class TestMaintenance:
    def test_constant(self) -> None:
        weeks = MaintenanceProgression().generate(3)
        assert {(w.intensity_percent, w.volume_multiplier) for w in weeks} == {(70.0, 0.5)}


class TestCustom:
    def test_weeks_carry_no_load_parameters(self) -> None:
        weeks = CustomProgression().generate(5)
        assert [w.week for w in weeks] == [1, 2, 3, 4, 5]
        assert all(w.as_authored and w.intensity_percent is None for w in weeks)
        assert {(w.volume_multiplier, w.rep_shift) for w in weeks} == {(1.0, 0)}

    def test_rejects_bad_week_counts(self) -> None:
        with pytest.raises(ValidationError):
            CustomProgression().generate(0)


class TestGenerateContract:
    @pytest.mark.parametrize("total", [0, -3, 2.5, True, "4"])
    def test_rejects_bad_week_counts(self, total: object) -> None:
        with pytest.raises(ValidationError):
            LinearProgression().generate(total)

    def test_deterministic(self) -> None:
        assert BlockTaperProgression().generate(12) == BlockTaperProgression().generate(12)

    def test_intensity_clamped(self) -> None:
        weeks = LinearProgression(base_intensity=95, weekly_increment=5, max_intensity=150).generate(4)
        assert all(w.intensity_percent <= 100.0 for w in weeks)

    def test_negative_increment_rejected(self) -> None:
        with pytest.raises(ValueError):
            LinearProgression(weekly_increment=-1)
