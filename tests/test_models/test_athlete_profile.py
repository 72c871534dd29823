"""Tests for AthleteProfile lookups and PR progression."""

from __future__ import annotations

from datetime import date

from training_engine.models.athlete_profile import AthleteProfile, PersonalRecord, apply_progression


class TestLookups:
    def test_pr_value(self, gym_profile: AthleteProfile) -> None:
        assert gym_profile.pr_value("backSquat") == 300.0
        assert gym_profile.pr_value("overheadPress") is None
        assert gym_profile.pr_value(None) is None

    def test_benchmark_value(self, gym_profile: AthleteProfile) -> None:
        assert gym_profile.benchmark_value("maxHR") == 190.0
        assert gym_profile.benchmark_value("vo2max") is None


class TestApplyProgression:
    def test_raises_pr(self, gym_profile: AthleteProfile) -> None:
        updated = apply_progression(gym_profile, "backSquat", 315.0, date(2024, 4, 1))
        assert updated.pr_value("backSquat") == 315.0
        assert updated.personal_records["backSquat"].recorded_on == date(2024, 4, 1)

    def test_original_untouched(self, gym_profile: AthleteProfile) -> None:
        apply_progression(gym_profile, "backSquat", 315.0, date(2024, 4, 1))
        assert gym_profile.pr_value("backSquat") == 300.0

    def test_never_lowers(self, gym_profile: AthleteProfile) -> None:
        assert apply_progression(gym_profile, "backSquat", 250.0, date(2024, 4, 1)) is gym_profile

    def test_new_lift(self) -> None:
        profile = AthleteProfile(personal_records={"benchPress": PersonalRecord(200.0)})
        updated = apply_progression(profile, "frontSquat", 185.0, date(2024, 4, 1), note="Tested")
        assert updated.personal_records["frontSquat"].note == "Tested"
        assert updated.pr_value("benchPress") == 200.0
