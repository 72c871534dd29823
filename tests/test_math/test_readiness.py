"""Tests for the composite readiness score, window aggregation and volume cuts."""

from __future__ import annotations

from datetime import date

import pytest

from training_engine.errors import ValidationError
from training_engine.math.readiness import (
    aggregate,
    apply_readiness,
    classify_readiness,
    readiness_volume_modifier,
    score,
    summarize,
    upsert_readiness,
)
from training_engine.models.enums import SessionType
from training_engine.models.program import ExerciseDay, ExercisePrescription
from training_engine.models.readiness import ReadinessDay, ReadinessEntry

DAY = date(2024, 3, 1)


class TestScore:
    def test_best_possible_day_is_optimal(self) -> None:
        result = score(ReadinessEntry(DAY, sleep_quality=5, energy_level=5, soreness=1, motivation=5))
        assert result.score == 100.0
        assert result.zone == "optimal"

    def test_worst_possible_day_is_critical(self) -> None:
        result = score(ReadinessEntry(DAY, sleep_quality=1, energy_level=1, soreness=5, motivation=1))
        assert result.score == 0.0
        assert result.zone == "critical"

    def test_soreness_is_inverted(self) -> None:
        fresh = score(ReadinessEntry(DAY, soreness=1))
        wrecked = score(ReadinessEntry(DAY, soreness=5))
        assert fresh.score > wrecked.score

    def test_missing_factor_renormalizes(self) -> None:
        result = score(ReadinessEntry(DAY, sleep_quality=5, energy_level=5, soreness=1))
        assert result.score == 100.0

    def test_mixed_factors(self) -> None:
        # sleep 4 -> 75, energy 3 -> 50, soreness 2 -> 75, motivation 3 -> 50
        result = score(ReadinessEntry(DAY, sleep_quality=4, energy_level=3, soreness=2, motivation=3))
        assert result.score == 62.5
        assert result.zone == "adjusting"

    def test_rounds_to_one_decimal(self) -> None:
        # (75 + 50 + 50) / 3 = 58.333...
        result = score(ReadinessEntry(DAY, sleep_quality=4, energy_level=3, motivation=3))
        assert result.score == 58.3

    def test_out_of_range_factor_rejected(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            score(ReadinessEntry(DAY, sleep_quality=6, energy_level=0, motivation=3))
        paths = {issue.path for issue in exc_info.value.issues}
        assert paths == {"sleep_quality", "energy_level"}

    def test_no_factors_rejected(self) -> None:
        with pytest.raises(ValidationError):
            score(ReadinessEntry(DAY, resting_hr=52, hrv=70.0))


class TestClassifyReadiness:
    @pytest.mark.parametrize(
        ("value", "zone"),
        [
            (100.0, "optimal"),
            (85.0, "optimal"),
            (84.9, "good"),
            (70.0, "good"),
            (55.0, "adjusting"),
            (40.0, "struggling"),
            (39.9, "critical"),
            (0.0, "critical"),
        ],
    )
    def test_zones(self, value: float, zone: str) -> None:
        assert classify_readiness(value) == zone


class TestUpsert:
    def test_replaces_same_date(self) -> None:
        first = ReadinessEntry(DAY, sleep_quality=2)
        second = ReadinessEntry(DAY, sleep_quality=5)
        entries = upsert_readiness([first], second)
        assert entries == (second,)

    def test_idempotent(self) -> None:
        entry = ReadinessEntry(DAY, sleep_quality=3)
        once = upsert_readiness([], entry)
        assert upsert_readiness(once, entry) == once

    def test_sorted_by_date(self) -> None:
        later = ReadinessEntry(date(2024, 3, 5), sleep_quality=3)
        earlier = ReadinessEntry(date(2024, 3, 2), sleep_quality=3)
        assert upsert_readiness([later], earlier) == (earlier, later)


class TestAggregate:
    def test_one_item_per_date(self, readiness_week) -> None:
        series = aggregate(readiness_week, 7, date(2024, 3, 7))
        assert len(series) == 7
        assert series[0].day == date(2024, 3, 1)
        assert series[-1].day == date(2024, 3, 7)

    def test_missing_dates_are_none(self, readiness_week) -> None:
        series = aggregate(readiness_week, 7, date(2024, 3, 7))
        assert series[3] == ReadinessDay(day=date(2024, 3, 4))
        assert series[2].score == 75.0
        assert series[2].zone == "good"

    def test_window_beyond_entries(self, readiness_week) -> None:
        series = aggregate(readiness_week, 10, date(2024, 3, 10))
        assert [d.score for d in series[-3:]] == [None, None, None]

    def test_rejects_empty_window(self, readiness_week) -> None:
        with pytest.raises(ValidationError):
            aggregate(readiness_week, 0, date(2024, 3, 7))


class TestSummarize:
    def test_statistics_and_streak(self, readiness_week) -> None:
        summary = summarize(aggregate(readiness_week, 7, date(2024, 3, 7)))
        assert summary.check_ins == 6
        assert summary.average == 75.0
        assert summary.highest == 75.0
        assert summary.lowest == 75.0
        assert summary.streak == 3

    def test_streak_broken_by_missing_today(self, readiness_week) -> None:
        summary = summarize(aggregate(readiness_week, 8, date(2024, 3, 8)))
        assert summary.streak == 0
        assert summary.check_ins == 6

    def test_empty_series(self) -> None:
        summary = summarize([ReadinessDay(DAY)])
        assert summary.average is None
        assert summary.check_ins == 0
        assert summary.streak == 0


class TestVolumeModifier:
    @pytest.mark.parametrize(
        ("value", "modifier"),
        [(20.0, 0.5), (39.9, 0.5), (40.0, 0.75), (69.9, 0.75), (70.0, 1.0), (None, 1.0)],
    )
    def test_bands(self, value: float | None, modifier: float) -> None:
        assert readiness_volume_modifier(value) == modifier

    def test_apply_scales_sets(self) -> None:
        day = ExerciseDay(
            day=1,
            session_type=SessionType.STRENGTH,
            exercises=(
                ExercisePrescription("backSquat", sets=4, reps="5"),
                ExercisePrescription("plank", sets=1, reps="60s"),
            ),
        )
        adjusted = apply_readiness(day, 30.0)
        assert [p.sets for p in adjusted.exercises] == [2, 1]
        assert [p.sets for p in day.exercises] == [4, 1]

    def test_apply_good_day_unchanged(self) -> None:
        day = ExerciseDay(1, SessionType.STRENGTH, (ExercisePrescription("backSquat", 4, "5"),))
        assert apply_readiness(day, 90.0) is day
