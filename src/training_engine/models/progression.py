"""Per-week load parameters emitted by a progression model."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class WeekParams:
    """Load parameters for one week of a phase.

    ``intensity_percent`` replaces the template's %1RM; ``volume_multiplier``
    scales sets and session durations; ``rep_shift`` moves rep ranges.
    When ``as_authored`` is set the week carries no load parameters of its
    own (``intensity_percent`` is None) and template days are kept verbatim.
    """

    week: int  # 1-indexed within the phase
    intensity_percent: float | None
    volume_multiplier: float
    rep_shift: int = 0
    focus: str = ""
    is_deload: bool = False
    as_authored: bool = False
