"""Tests for working weights, set scaling and bodyweight load targets."""

from __future__ import annotations

import pytest

from training_engine.math.loads import (
    bodyweight_load_targets,
    round_half_up,
    round_to_increment,
    scale_duration,
    scale_sets,
    working_weight,
)


class TestWorkingWeight:
    def test_rounds_to_nearest_five(self) -> None:
        assert working_weight(75, 315) == 235.0
        assert working_weight(65, 225) == 145.0

    def test_half_rounds_up(self) -> None:
        # 0.75 * 230 = 172.5 -> 175
        assert working_weight(75, 230) == 175.0

    def test_always_a_multiple_of_five(self) -> None:
        for pr in range(100, 400, 7):
            assert working_weight(72.5, pr) % 5 == 0

    def test_missing_inputs(self) -> None:
        assert working_weight(None, 300) is None
        assert working_weight(80, None) is None

    def test_custom_increment(self) -> None:
        assert round_to_increment(101.0, 2.5) == 100.0


class TestScaling:
    @pytest.mark.parametrize(
        ("sets", "multiplier", "expected"),
        [(4, 1.0, 4), (4, 1.25, 5), (3, 0.5, 2), (1, 0.5, 1), (4, 0.897, 4), (2, 0.1, 1)],
    )
    def test_scale_sets(self, sets: int, multiplier: float, expected: int) -> None:
        assert scale_sets(sets, multiplier) == expected

    def test_scale_duration(self) -> None:
        assert scale_duration(45.0, 0.897) == 40.4
        assert scale_duration(None, 0.5) is None

    def test_round_half_up(self) -> None:
        assert round_half_up(2.5) == 3
        assert round_half_up(3.5) == 4


class TestBodyweightTargets:
    def test_targets(self) -> None:
        assert bodyweight_load_targets(200) == {"light": 30, "base": 40, "standard": 50, "peak": 60}

    def test_no_weight(self) -> None:
        assert bodyweight_load_targets(None) is None
