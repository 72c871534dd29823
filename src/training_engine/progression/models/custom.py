"""Custom: the template's own intensity, sets and reps, every week."""

from __future__ import annotations

from training_engine.models.progression import WeekParams
from training_engine.progression.base import ProgressionModel


class CustomProgression(ProgressionModel):
    """Manually set intensity and volume for each exercise.

    Emits no load parameters; every phase week repeats the weekly template
    exactly as authored.
    """

    model_id = "custom"
    name = "Custom"
    description = "Manually set intensity/volume for each exercise"
    min_volume = 1.0
    max_volume = 1.0

    def week_params(self, week: int, total_weeks: int) -> WeekParams:
        return WeekParams(
            week=week,
            intensity_percent=None,
            volume_multiplier=1.0,
            focus="Custom",
            as_authored=True,
        )
