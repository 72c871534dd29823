"""Block periodization with a forced final-week taper.

Accumulation -> Transmutation -> Realization sub-blocks hold constant
parameters. The last week of the phase is always the model's lowest
intensity/volume pair, whatever sub-block it would otherwise fall in.

Reference:
    Issurin (2010), New horizons for the methodology and physiology of
    training periodization. Sports Med 40(3):189-206.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from training_engine.models.progression import WeekParams
from training_engine.progression.base import ProgressionModel


@dataclass(frozen=True)
class BlockStep:
    """Constant parameters for one sub-block."""

    focus: str
    intensity_percent: float
    volume_multiplier: float
    rep_shift: int = 0


ACCUMULATION = BlockStep("Accumulation", 70.0, 1.2, rep_shift=2)
TRANSMUTATION = BlockStep("Transmutation", 80.0, 1.0, rep_shift=0)
REALIZATION = BlockStep("Realization", 90.0, 0.75, rep_shift=-2)
TAPER = BlockStep("Taper", 60.0, 0.5, rep_shift=0)


class BlockTaperProgression(ProgressionModel):
    """Step model: ceil(40%) accumulation, ceil(35%) transmutation, rest realization."""

    model_id = "block"
    name = "Block Periodization"
    description = "Accumulation, Transmutation, Realization, final-week taper"
    min_volume = 0.5
    max_volume = 1.2

    def __init__(
        self,
        accumulation_fraction: float = 0.40,
        transmutation_fraction: float = 0.35,
        steps: tuple[BlockStep, BlockStep, BlockStep] = (ACCUMULATION, TRANSMUTATION, REALIZATION),
        taper: BlockStep = TAPER,
    ) -> None:
        self.accumulation_fraction = accumulation_fraction
        self.transmutation_fraction = transmutation_fraction
        self.steps = steps
        self.lowest = min(steps + (taper,), key=lambda s: (s.intensity_percent, s.volume_multiplier))

    def step_for_week(self, week: int, total_weeks: int) -> BlockStep:
        if week == total_weeks:
            return self.lowest
        accumulation_weeks = math.ceil(total_weeks * self.accumulation_fraction)
        transmutation_weeks = math.ceil(total_weeks * self.transmutation_fraction)
        if week <= accumulation_weeks:
            return self.steps[0]
        if week <= accumulation_weeks + transmutation_weeks:
            return self.steps[1]
        return self.steps[2]

    def week_params(self, week: int, total_weeks: int) -> WeekParams:
        step = self.step_for_week(week, total_weeks)
        return WeekParams(
            week=week,
            intensity_percent=step.intensity_percent,
            volume_multiplier=step.volume_multiplier,
            rep_shift=step.rep_shift,
            focus=step.focus,
            is_deload=step is self.lowest,
        )
