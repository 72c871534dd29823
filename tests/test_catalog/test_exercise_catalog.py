"""Tests for the exercise catalog and custom exercises."""

from __future__ import annotations

import pytest

from training_engine.catalog import ExerciseCatalog, default_catalog
from training_engine.errors import UnknownReferenceError
from training_engine.models.enums import MovementPattern
from training_engine.models.exercise import Exercise


class TestDefaultCatalog:
    def test_shared_instance(self) -> None:
        assert default_catalog() is default_catalog()

    def test_unique_ids(self) -> None:
        ids = default_catalog().exercise_ids
        assert len(ids) == len(set(ids)) == len(default_catalog())

    def test_every_exercise_has_equipment(self) -> None:
        assert all(e.equipment for e in default_catalog())

    def test_lookup(self) -> None:
        squat = default_catalog().get("backSquat")
        assert squat.pattern == MovementPattern.SQUAT
        assert squat.pr_key == "backSquat"
        assert "barbell" in squat.equipment

    def test_unknown_id(self) -> None:
        with pytest.raises(UnknownReferenceError):
            default_catalog().get("moonSquat")
        assert default_catalog().find("moonSquat") is None

    def test_cardio_and_mobility_flags(self) -> None:
        catalog = default_catalog()
        assert catalog.get("run").is_cardio
        assert catalog.get("pigeonPose").is_mobility
        assert not catalog.get("run").is_strength

    def test_by_pattern_keeps_order(self) -> None:
        catalog = default_catalog()
        squats = catalog.by_pattern(MovementPattern.SQUAT)
        positions = [catalog.position(e.exercise_id) for e in squats]
        assert positions == sorted(positions)


class TestCustomExercises:
    def test_add_custom_returns_new_catalog(self) -> None:
        base = default_catalog()
        extended, sled = base.add_custom("Sled Push", MovementPattern.CARRY, ["none"], ["quads"])
        assert sled.custom
        assert sled.exercise_id == "custom_sled_push"
        assert sled.exercise_id in extended
        assert sled.exercise_id not in base
        assert len(extended) == len(base) + 1

    def test_generated_ids_are_unique(self) -> None:
        catalog, first = default_catalog().add_custom("Sled Push", MovementPattern.CARRY, ["none"])
        catalog, second = catalog.add_custom("Sled Push", MovementPattern.CARRY, ["none"])
        catalog, third = catalog.add_custom("sled  push!", MovementPattern.CARRY, ["none"])
        assert [first.exercise_id, second.exercise_id, third.exercise_id] == [
            "custom_sled_push",
            "custom_sled_push_2",
            "custom_sled_push_3",
        ]

    def test_custom_cardio_flag(self) -> None:
        _, erg = default_catalog().add_custom("Bike Erg", MovementPattern.CARDIO, ["cardioMachine"])
        assert erg.is_cardio

    def test_duplicate_ids_rejected(self) -> None:
        squat = default_catalog().get("backSquat")
        with pytest.raises(ValueError):
            ExerciseCatalog([squat, squat])

    def test_empty_equipment_rejected(self) -> None:
        with pytest.raises(ValueError):
            Exercise("x", "X", MovementPattern.CORE, frozenset())
