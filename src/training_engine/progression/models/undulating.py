"""Wave / undulating models: weekly undulation, daily undulation, conjugate waves."""

from __future__ import annotations

from training_engine.progression.base import CycleStep, CyclicProgression


class WeeklyUndulatingProgression(CyclicProgression):
    """Volume -> Intensity -> Peak -> Deload, repeated every four weeks."""

    model_id = "undulating_weekly"
    name = "Weekly Undulating"
    description = "Vary intensity each week (Volume, Intensity, Peak, Deload)"
    min_volume = 0.5
    max_volume = 1.25
    cycle = (
        CycleStep("Volume", -5.0, 1.0, rep_shift=2),
        CycleStep("Intensity", 5.0, 1.0, rep_shift=0),
        CycleStep("Peak", 10.0, 1.25, rep_shift=-2),
        CycleStep("Deload", -15.0, 0.5, rep_shift=0, is_deload=True),
    )


class DailyUndulatingProgression(CyclicProgression):
    """Day-to-day variation lives in the template; weeks hold steady until the deload."""

    model_id = "undulating_daily"
    name = "Daily Undulating (DUP)"
    description = "Vary intensity and volume each training day"
    min_volume = 0.6
    max_volume = 1.0
    cycle = (
        CycleStep("Daily Undulating", 0.0, 1.0),
        CycleStep("Daily Undulating", 0.0, 1.0),
        CycleStep("Daily Undulating", 0.0, 1.0),
        CycleStep("Deload", -14.0, 0.6, is_deload=True),
    )


class ConjugateProgression(CyclicProgression):
    """Max-effort waves climbing for three weeks, then a deload."""

    model_id = "conjugate"
    name = "Conjugate/Westside"
    description = "Max Effort and Dynamic Effort waves with weekly variation"
    min_volume = 0.5
    max_volume = 1.0
    cycle = (
        CycleStep("Wave 1", 0.0, 1.0, rep_shift=0),
        CycleStep("Wave 2", 5.0, 1.0, rep_shift=-1),
        CycleStep("Wave 3", 10.0, 1.0, rep_shift=-2),
        CycleStep("Deload", -10.0, 0.5, rep_shift=0, is_deload=True),
    )
