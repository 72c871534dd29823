"""ExerciseCatalog — immutable, shared index of exercise reference data."""

from __future__ import annotations

import functools
import re
from types import MappingProxyType
from typing import Iterable, Iterator

from training_engine.errors import UnknownReferenceError
from training_engine.models.enums import MovementPattern
from training_engine.models.exercise import Exercise

_SLUG_RE = re.compile(r"[^a-z0-9]+")


class ExerciseCatalog:
    """Read-only exercise index preserving insertion order.

    Safe to share between callers without locking: nothing mutates a catalog
    after construction. Adding custom exercises returns a new catalog.

    Usage::

        catalog = default_catalog()
        squat = catalog.get("backSquat")
        catalog, mine = catalog.add_custom("Sled Push", MovementPattern.CARRY, {"none"})
    """

    def __init__(self, exercises: Iterable[Exercise] = ()) -> None:
        ordered = tuple(exercises)
        index: dict[str, Exercise] = {}
        for exercise in ordered:
            if exercise.exercise_id in index:
                raise ValueError(f"Duplicate exercise id {exercise.exercise_id!r}")
            index[exercise.exercise_id] = exercise
        self._exercises = ordered
        self._index = MappingProxyType(index)
        self._order = MappingProxyType({e.exercise_id: i for i, e in enumerate(ordered)})

    def __len__(self) -> int:
        return len(self._exercises)

    def __iter__(self) -> Iterator[Exercise]:
        return iter(self._exercises)

    def __contains__(self, exercise_id: object) -> bool:
        return exercise_id in self._index

    def get(self, exercise_id: str) -> Exercise:
        """Return the exercise for *exercise_id*.

        Raises:
            UnknownReferenceError: If the id is not in the catalog.
        """
        try:
            return self._index[exercise_id]
        except KeyError:
            raise UnknownReferenceError(f"Unknown exercise id {exercise_id!r}") from None

    def find(self, exercise_id: str) -> Exercise | None:
        """Return the exercise for *exercise_id*, or None."""
        return self._index.get(exercise_id)

    def position(self, exercise_id: str) -> int:
        """Insertion index of an exercise (used as a stable tie-breaker)."""
        return self._order[exercise_id]

    def by_pattern(self, pattern: MovementPattern) -> tuple[Exercise, ...]:
        """All exercises of a movement pattern, in catalog order."""
        return tuple(e for e in self._exercises if e.pattern == pattern)

    @property
    def exercise_ids(self) -> list[str]:
        return list(self._index.keys())

    def with_exercises(self, *extra: Exercise) -> ExerciseCatalog:
        """Return a new catalog with *extra* appended after the existing entries."""
        return ExerciseCatalog(self._exercises + tuple(extra))

    def next_custom_id(self, name: str) -> str:
        """Generate a unique ``custom_<slug>`` identity for a user exercise."""
        slug = _SLUG_RE.sub("_", name.strip().lower()).strip("_") or "exercise"
        candidate = f"custom_{slug}"
        suffix = 2
        while candidate in self._index:
            candidate = f"custom_{slug}_{suffix}"
            suffix += 1
        return candidate

    def add_custom(
        self,
        name: str,
        pattern: MovementPattern,
        equipment: Iterable[str],
        muscles: Iterable[str] = (),
        exercise_id: str | None = None,
    ) -> tuple[ExerciseCatalog, Exercise]:
        """Append a user-authored exercise flagged ``custom=True``.

        Args:
            name: Display name.
            pattern: Movement pattern used for substitution.
            equipment: Acceptable equipment options (non-empty).
            muscles: Target muscles.
            exercise_id: Explicit id; generated from the name when omitted.

        Returns:
            A tuple of (new catalog, the created Exercise).
        """
        exercise = Exercise(
            exercise_id=exercise_id or self.next_custom_id(name),
            name=name,
            pattern=pattern,
            equipment=frozenset(equipment),
            muscles=frozenset(muscles),
            is_cardio=pattern == MovementPattern.CARDIO,
            is_mobility=pattern == MovementPattern.MOBILITY,
            custom=True,
        )
        return self.with_exercises(exercise), exercise


@functools.lru_cache(maxsize=1)
def default_catalog() -> ExerciseCatalog:
    """The built-in catalog, built once per process and shared by reference."""
    from training_engine.catalog.exercise_library import EXERCISE_LIBRARY

    return ExerciseCatalog(EXERCISE_LIBRARY)
