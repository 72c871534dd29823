"""Maintenance: hold intensity, halve volume."""

from __future__ import annotations

from training_engine.models.progression import WeekParams
from training_engine.progression.base import ProgressionModel


class MaintenanceProgression(ProgressionModel):
    """Preserve fitness with reduced volume."""

    model_id = "maintenance"
    name = "Maintenance"
    description = "Preserve fitness with reduced volume"
    min_volume = 0.5
    max_volume = 1.0

    def __init__(self, intensity: float = 70.0, volume_multiplier: float = 0.5) -> None:
        self.intensity = intensity
        self.volume_multiplier = volume_multiplier

    def week_params(self, week: int, total_weeks: int) -> WeekParams:
        return WeekParams(
            week=week,
            intensity_percent=self.intensity,
            volume_multiplier=self.volume_multiplier,
            focus="Maintenance",
        )
