"""Tests for ExerciseSubstitutionResolver ranking and filtering."""

from __future__ import annotations

import pytest

from training_engine.catalog import ExerciseCatalog, default_catalog
from training_engine.errors import UnknownReferenceError
from training_engine.models.enums import MovementPattern
from training_engine.models.exercise import Exercise
from training_engine.substitution import ExerciseSubstitutionResolver


def _ex(exercise_id: str, equipment: set[str], muscles: set[str], **kwargs) -> Exercise:
    return Exercise(
        exercise_id=exercise_id,
        name=exercise_id,
        pattern=kwargs.pop("pattern", MovementPattern.SQUAT),
        equipment=frozenset(equipment),
        muscles=frozenset(muscles),
        **kwargs,
    )


class TestSwapsFor:
    def test_back_squat_with_machines(self) -> None:
        swaps = ExerciseSubstitutionResolver().swaps_for("backSquat", {"machine"})
        ids = [s.exercise_id for s in swaps]
        assert ids[0] == "legPress"
        assert "backSquat" not in ids
        assert all(s.pattern == MovementPattern.SQUAT for s in swaps)
        assert all("machine" in s.equipment for s in swaps)

    def test_ranked_by_shared_muscles(self) -> None:
        swaps = ExerciseSubstitutionResolver().swaps_for("backSquat", {"machine"})
        # hackSquat only shares quads, so it ranks after every quads+glutes machine
        assert swaps[-1].exercise_id == "hackSquat"

    def test_intersection_is_enough(self) -> None:
        swaps = ExerciseSubstitutionResolver().swaps_for("backSquat", {"dumbbell"})
        assert [s.exercise_id for s in swaps] == ["gobletSquat"]

    def test_no_equipment_still_gets_equipment_free_moves(self) -> None:
        swaps = ExerciseSubstitutionResolver().swaps_for("farmerCarry", set())
        assert swaps
        assert all("none" in s.equipment for s in swaps)

    def test_empty_when_nothing_fits(self) -> None:
        assert ExerciseSubstitutionResolver().swaps_for("pullUp", {"dumbbell"}) == ()

    def test_unknown_exercise(self) -> None:
        with pytest.raises(UnknownReferenceError):
            ExerciseSubstitutionResolver().swaps_for("moonSquat", {"barbell"})

    def test_ties_keep_catalog_order(self) -> None:
        catalog = ExerciseCatalog([
            _ex("original", {"barbell"}, {"quads", "glutes"}),
            _ex("zeta", {"machine"}, {"quads"}),
            _ex("alpha", {"machine"}, {"quads"}),
            _ex("best", {"machine"}, {"quads", "glutes"}),
        ])
        swaps = ExerciseSubstitutionResolver(catalog).swaps_for("original", {"machine"})
        assert [s.exercise_id for s in swaps] == ["best", "zeta", "alpha"]

    def test_cardio_flagged_excluded_from_strength_pool(self) -> None:
        catalog = ExerciseCatalog([
            _ex("original", {"barbell"}, {"quads"}),
            _ex("squatJumps", {"none"}, {"quads"}, is_cardio=True),
            _ex("wallSit", {"none"}, {"quads"}, is_mobility=True),
            _ex("airSquat", {"none"}, {"quads"}),
        ])
        swaps = ExerciseSubstitutionResolver(catalog).swaps_for("original", set())
        assert [s.exercise_id for s in swaps] == ["airSquat"]

    def test_cardio_pool_keeps_cardio(self) -> None:
        swaps = ExerciseSubstitutionResolver().swaps_for("treadmill", set())
        assert "run" in [s.exercise_id for s in swaps]

    def test_best_swap(self) -> None:
        resolver = ExerciseSubstitutionResolver(default_catalog())
        assert resolver.best_swap("backSquat", {"machine"}).exercise_id == "legPress"
        assert resolver.best_swap("pullUp", {"dumbbell"}) is None
