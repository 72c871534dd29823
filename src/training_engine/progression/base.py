"""Abstract base class for all progression models."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from training_engine.errors import ValidationError
from training_engine.models.enums import MAX_INTENSITY_PERCENT, MIN_INTENSITY_PERCENT
from training_engine.models.progression import WeekParams
from training_engine.models.validation import ValidationIssue


def check_total_weeks(total_weeks: object) -> int:
    """Return *total_weeks* if it is a positive integer.

    Raises:
        ValidationError: For zero, negative, or non-integer week counts.
    """
    if isinstance(total_weeks, bool) or not isinstance(total_weeks, int) or total_weeks < 1:
        raise ValidationError(
            f"total_weeks must be a positive integer, got {total_weeks!r}",
            issues=(ValidationIssue(path="total_weeks", message="must be a positive integer"),),
        )
    return total_weeks


class ProgressionModel(ABC):
    """A named, deterministic rule for varying load week over week.

    Subclasses must define:
        model_id: unique identifier referenced by template phases
        name: display name
        week_params(): parameters for one week given the phase length

    ``generate()`` wraps ``week_params()`` and enforces the output contract:
    exactly ``total_weeks`` entries in week order, intensity within
    [1, 100] and volume within the model's [min_volume, max_volume].
    Models read nothing but their constructor arguments, so repeated calls
    return identical results.
    """

    model_id: str
    name: str
    description: str = ""
    min_volume: float = 0.5
    max_volume: float = 1.0

    @abstractmethod
    def week_params(self, week: int, total_weeks: int) -> WeekParams:
        """Unbounded parameters for 1-indexed *week* of a *total_weeks* phase."""
        ...

    def generate(self, total_weeks: int) -> tuple[WeekParams, ...]:
        """Parameters for every week of a phase, ordered by week index."""
        check_total_weeks(total_weeks)
        return tuple(
            self._bounded(self.week_params(week, total_weeks))
            for week in range(1, total_weeks + 1)
        )

    def _bounded(self, params: WeekParams) -> WeekParams:
        if params.as_authored:
            return params
        intensity = min(max(params.intensity_percent, MIN_INTENSITY_PERCENT), MAX_INTENSITY_PERCENT)
        volume = min(max(params.volume_multiplier, self.min_volume), self.max_volume)
        return WeekParams(
            week=params.week,
            intensity_percent=round(intensity, 2),
            volume_multiplier=round(volume, 3),
            rep_shift=params.rep_shift,
            focus=params.focus,
            is_deload=params.is_deload,
        )


@dataclass(frozen=True)
class CycleStep:
    """One week of a repeating wave pattern, relative to a base intensity."""

    focus: str
    intensity_offset: float
    volume_multiplier: float
    rep_shift: int = 0
    is_deload: bool = False


class CyclicProgression(ProgressionModel):
    """Wave / undulating models: a short pattern repeated across the phase.

    The pattern restarts when the phase is longer than one cycle, so the
    output is periodic in the cycle length.
    """

    cycle: tuple[CycleStep, ...] = ()

    def __init__(self, base_intensity: float = 70.0) -> None:
        self.base_intensity = base_intensity

    def week_params(self, week: int, total_weeks: int) -> WeekParams:
        step = self.cycle[(week - 1) % len(self.cycle)]
        return WeekParams(
            week=week,
            intensity_percent=self.base_intensity + step.intensity_offset,
            volume_multiplier=step.volume_multiplier,
            rep_shift=step.rep_shift,
            focus=step.focus,
            is_deload=step.is_deload,
        )
