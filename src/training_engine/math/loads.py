"""Load arithmetic: working weights, set scaling and bodyweight targets."""

from __future__ import annotations

import math

from training_engine.models.enums import BODYWEIGHT_LOAD_TARGETS, LOAD_ROUNDING_INCREMENT


def round_half_up(value: float) -> int:
    """Round to the nearest integer with .5 going up (not banker's rounding)."""
    return int(math.floor(value + 0.5))


def round_to_increment(value: float, increment: float = LOAD_ROUNDING_INCREMENT) -> float:
    """Round *value* to the nearest multiple of *increment*, halves up."""
    return float(round_half_up(value / increment) * increment)


def working_weight(
    intensity_percent: float | None,
    personal_record: float | None,
    increment: float = LOAD_ROUNDING_INCREMENT,
) -> float | None:
    """Prescribed load: intensity % of the PR, rounded to the plate increment.

    Returns None when either input is missing.

    Example:
        >>> working_weight(75, 315)
        235.0
    """
    if intensity_percent is None or personal_record is None:
        return None
    return round_to_increment(personal_record * intensity_percent / 100.0, increment)


def scale_sets(sets: int, multiplier: float) -> int:
    """Scale a set count, rounding half up, never below one set."""
    return max(1, round_half_up(sets * multiplier))


def scale_duration(duration_min: float | None, multiplier: float) -> float | None:
    """Scale a session duration to one decimal place."""
    if duration_min is None:
        return None
    return round(duration_min * multiplier, 1)


def bodyweight_load_targets(body_weight: float | None) -> dict[str, int] | None:
    """Carry / step-up loads as fixed fractions of body weight.

    Returns:
        {"light", "base", "standard", "peak"} -> load, or None without a weight.
    """
    if not body_weight:
        return None
    return {name: round_half_up(body_weight * pct) for name, pct in BODYWEIGHT_LOAD_TARGETS.items()}
