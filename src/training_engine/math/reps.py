"""Rep-range parsing and bounded rep shifting.

Prescriptions carry reps as free text: a count ("5"), a range ("8-10"),
or something non-numeric ("AMRAP", "30s", "max"). Only the first two are
shifted; everything else passes through untouched.
"""

from __future__ import annotations

import re

from training_engine.models.enums import DEFAULT_REP_CEILING, REP_FLOOR

_RANGE_RE = re.compile(r"^\s*(\d+)\s*(?:[-–]\s*(\d+))?\s*$")


def parse_rep_range(reps: str) -> tuple[int, int] | None:
    """Parse ``"5"`` -> (5, 5) and ``"8-10"`` -> (8, 10).

    Returns:
        (low, high) with low <= high, or None for non-numeric reps.
    """
    match = _RANGE_RE.match(str(reps))
    if match is None:
        return None
    low = int(match.group(1))
    high = int(match.group(2)) if match.group(2) is not None else low
    return (min(low, high), max(low, high))


def shift_reps(reps: str, shift: int, ceiling: int | None = None) -> str:
    """Shift a rep count or range by *shift*, clamped to [1, ceiling].

    Args:
        reps: Prescription reps text.
        shift: Signed number of reps to add to each bound.
        ceiling: Upper clamp; defaults to DEFAULT_REP_CEILING.

    Returns:
        The shifted text, or *reps* unchanged when it is not numeric.
    """
    parsed = parse_rep_range(reps)
    if parsed is None or shift == 0:
        return reps
    upper = ceiling if ceiling is not None else DEFAULT_REP_CEILING
    upper = max(upper, REP_FLOOR)
    low, high = (min(max(bound + shift, REP_FLOOR), upper) for bound in parsed)
    if low == high:
        return str(low)
    return f"{low}-{high}"


def reps_midpoint(reps: str) -> float:
    """Mean of a rep range; 0.0 for reps that are not a count.

    Timed or open-ended sets ("30s", "AMRAP") contribute no countable reps.
    """
    parsed = parse_rep_range(reps)
    if parsed is None:
        return 0.0
    return (parsed[0] + parsed[1]) / 2
