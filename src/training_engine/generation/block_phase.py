"""BlockPhaseGenerator — expand one phase's weekly template over its weeks.

For each phase week the progression model's WeekParams are applied to every
day of the 7-day template:

    - exercise prescriptions take the week's intensity (replacing, not
      adding to, the template value), shift their reps and scale their sets
    - cardio and recovery days scale only their duration
    - weeks from the custom model (``as_authored``) keep every day verbatim
"""

from __future__ import annotations

import dataclasses

from training_engine.math.loads import scale_duration, scale_sets
from training_engine.math.reps import shift_reps
from training_engine.models.program import (
    CardioDay,
    DailyPrescription,
    DayTemplate,
    ExerciseDay,
    ExercisePrescription,
    Phase,
    RecoveryDay,
)
from training_engine.models.progression import WeekParams
from training_engine.progression.base import ProgressionModel
from training_engine.progression.resolver import ProgressionModelResolver, default_resolver


class BlockPhaseGenerator:
    """Turns (phase, progression model) into a phase-long calendar.

    Usage:
        generator = BlockPhaseGenerator()
        days = generator.expand(phase)              # model from phase.model_id
        days = generator.expand(phase, my_model)    # explicit model instance
    """

    def __init__(self, resolver: ProgressionModelResolver | None = None) -> None:
        self.resolver = resolver if resolver is not None else default_resolver()

    def expand(
        self,
        phase: Phase,
        model: ProgressionModel | str | None = None,
    ) -> tuple[DailyPrescription, ...]:
        """Expand *phase* into ``7 * phase.weeks`` days ordered by (week, day).

        Args:
            phase: Phase with a 7-day weekly template.
            model: Model instance or id; defaults to ``phase.model_id``.

        Raises:
            UnknownReferenceError: If the model id is not registered.
            ValidationError: If the phase spans no weeks.
        """
        if model is None:
            model = phase.model_id
        if isinstance(model, str):
            model = self.resolver.model(model)
        week_params = model.generate(phase.weeks)

        template = sorted(phase.weekly_template, key=lambda d: d.day)
        calendar = []
        for params in week_params:
            absolute_week = phase.start_week + params.week - 1
            for day in template:
                calendar.append(
                    DailyPrescription(
                        week=absolute_week,
                        day=day.day,
                        phase_week=params.week,
                        phase_id=phase.phase_id,
                        phase_name=phase.name,
                        session=apply_week_params(day, params),
                        week_params=params,
                    )
                )
        return tuple(calendar)


def apply_prescription(prescription: ExercisePrescription, params: WeekParams) -> ExercisePrescription:
    """One exercise slot adjusted for a week."""
    if params.as_authored:
        return prescription
    return dataclasses.replace(
        prescription,
        sets=scale_sets(prescription.sets, params.volume_multiplier),
        reps=shift_reps(prescription.reps, params.rep_shift, prescription.rep_ceiling),
        intensity_percent=params.intensity_percent,
    )


def apply_week_params(day: DayTemplate, params: WeekParams) -> DayTemplate:
    """A template day adjusted for a week. The template itself is untouched."""
    if params.as_authored:
        return day
    if isinstance(day, ExerciseDay):
        return dataclasses.replace(
            day,
            exercises=tuple(apply_prescription(p, params) for p in day.exercises),
        )
    if isinstance(day, (CardioDay, RecoveryDay)):
        return dataclasses.replace(
            day, duration_min=scale_duration(day.duration_min, params.volume_multiplier)
        )
    raise TypeError(f"Unsupported day template {type(day).__name__}")
