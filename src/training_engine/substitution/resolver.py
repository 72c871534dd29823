"""ExerciseSubstitutionResolver — ranked swaps within a movement pattern.

A candidate must:
    - share the movement pattern of the original exercise
    - not be the original exercise
    - need at least one piece of the athlete's equipment ("none" is free)
    - not be a cardio or mobility exercise when the pool is a strength pattern

Candidates are ranked by how many target muscles they share with the
original, most first; ties keep catalog insertion order.
"""

from __future__ import annotations

from typing import Iterable

from training_engine.catalog import ExerciseCatalog, default_catalog
from training_engine.models.enums import ALWAYS_AVAILABLE_EQUIPMENT, NON_STRENGTH_PATTERNS
from training_engine.models.exercise import Exercise


class ExerciseSubstitutionResolver:
    """Finds valid alternatives for an exercise given available equipment.

    Usage:
        resolver = ExerciseSubstitutionResolver()
        swaps = resolver.swaps_for("backSquat", {"machine"})
    """

    def __init__(self, catalog: ExerciseCatalog | None = None) -> None:
        self.catalog = catalog if catalog is not None else default_catalog()

    def swaps_for(
        self, exercise_id: str, available_equipment: Iterable[str]
    ) -> tuple[Exercise, ...]:
        """Ranked substitutes for *exercise_id*.

        Raises:
            UnknownReferenceError: If *exercise_id* is not in the catalog.
        """
        original = self.catalog.get(exercise_id)
        available = frozenset(available_equipment) | ALWAYS_AVAILABLE_EQUIPMENT
        strength_pool = original.pattern not in NON_STRENGTH_PATTERNS

        candidates = [
            ex
            for ex in self.catalog.by_pattern(original.pattern)
            if ex.exercise_id != original.exercise_id
            and ex.is_performable_with(available)
            and not (strength_pool and (ex.is_cardio or ex.is_mobility))
        ]
        candidates.sort(
            key=lambda ex: (
                -len(ex.muscles & original.muscles),
                self.catalog.position(ex.exercise_id),
            )
        )
        return tuple(candidates)

    def best_swap(
        self, exercise_id: str, available_equipment: Iterable[str]
    ) -> Exercise | None:
        """Top-ranked substitute, or None when nothing qualifies."""
        swaps = self.swaps_for(exercise_id, available_equipment)
        return swaps[0] if swaps else None
