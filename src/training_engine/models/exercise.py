"""Exercise reference record — one row of the exercise catalog."""

from __future__ import annotations

from dataclasses import dataclass, field

from training_engine.models.enums import (
    ALWAYS_AVAILABLE_EQUIPMENT,
    NON_STRENGTH_PATTERNS,
    MovementPattern,
)


@dataclass(frozen=True)
class Exercise:
    """Immutable description of a single exercise.

    ``equipment`` lists acceptable equipment options: any one of them is
    enough to perform the movement.
    """

    exercise_id: str
    name: str
    pattern: MovementPattern
    equipment: frozenset[str]
    muscles: frozenset[str] = field(default_factory=frozenset)
    pr_key: str | None = None
    is_cardio: bool = False
    is_mobility: bool = False
    custom: bool = False

    def __post_init__(self) -> None:
        if not self.equipment:
            raise ValueError(f"Exercise {self.exercise_id!r} must list at least one equipment tag")

    @property
    def is_strength(self) -> bool:
        """True for exercises that belong in strength substitution pools."""
        return not (
            self.is_cardio
            or self.is_mobility
            or self.pattern in NON_STRENGTH_PATTERNS
        )

    def is_performable_with(self, available: frozenset[str] | set[str]) -> bool:
        """True if at least one acceptable equipment option is available."""
        usable = set(available) | ALWAYS_AVAILABLE_EQUIPMENT
        return bool(self.equipment & usable)

    def is_fully_equipped(self, available: frozenset[str] | set[str]) -> bool:
        """True if every listed equipment tag is available."""
        usable = set(available) | ALWAYS_AVAILABLE_EQUIPMENT
        return self.equipment <= usable
