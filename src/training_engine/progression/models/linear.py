"""Linear periodization: intensity climbs a fixed step each week up to a ceiling.

Volume falls in inverse proportion to intensity and rep ranges shift down
one rep for every ``rep_step_percent`` of intensity gained over the base,
so heavier weeks prescribe fewer reps.
"""

from __future__ import annotations

import math

from training_engine.models.progression import WeekParams
from training_engine.progression.base import ProgressionModel

LINEAR_BASE_INTENSITY = 65.0
LINEAR_WEEKLY_INCREMENT = 2.5
LINEAR_MAX_INTENSITY = 90.0
LINEAR_REP_STEP_PERCENT = 7.5


class LinearProgression(ProgressionModel):
    """Monotonically non-decreasing intensity, clamped to ``max_intensity``."""

    model_id = "linear"
    name = "Linear Periodization"
    description = "Gradually increase intensity while trimming volume"

    def __init__(
        self,
        base_intensity: float = LINEAR_BASE_INTENSITY,
        weekly_increment: float = LINEAR_WEEKLY_INCREMENT,
        max_intensity: float = LINEAR_MAX_INTENSITY,
        rep_step_percent: float = LINEAR_REP_STEP_PERCENT,
        min_volume: float = 0.6,
        max_volume: float = 1.0,
    ) -> None:
        if weekly_increment < 0:
            raise ValueError("weekly_increment must be non-negative for a linear model")
        self.base_intensity = base_intensity
        self.weekly_increment = weekly_increment
        self.max_intensity = max_intensity
        self.rep_step_percent = rep_step_percent
        self.min_volume = min_volume
        self.max_volume = max_volume

    def week_params(self, week: int, total_weeks: int) -> WeekParams:
        intensity = min(
            self.base_intensity + self.weekly_increment * (week - 1),
            self.max_intensity,
        )
        gained = max(intensity - self.base_intensity, 0.0)
        rep_shift = 0
        if self.rep_step_percent > 0:
            rep_shift = -int(math.floor(gained / self.rep_step_percent))
        return WeekParams(
            week=week,
            intensity_percent=intensity,
            volume_multiplier=self.base_intensity / intensity if intensity > 0 else 1.0,
            rep_shift=rep_shift,
            focus="Linear",
        )
