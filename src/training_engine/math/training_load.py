"""Training load: session load, ATL / CTL EWMAs and the acute:chronic ratio.

Loads are aggregated per calendar date and reindexed onto a continuous
daily range before smoothing, so rest days decay both averages. Each EWMA
uses ``alpha = 1 - exp(-1 / tau)`` and is seeded with the first day's load.

References:
    - Banister et al. (1975): impulse-response fitness/fatigue model
    - Williams et al. (2017): EWMA-based ACWR
    - Gabbett (2016): ACWR injury risk thresholds
"""

from __future__ import annotations

import math
from datetime import date
from typing import Iterable

import numpy as np
import pandas as pd

from training_engine.math.reps import reps_midpoint
from training_engine.models.enums import (
    ACR_CAUTION_THRESHOLD,
    ACR_OPTIMAL_LOW,
    ACR_OVERREACHING_THRESHOLD,
    ACR_ZONE_CAUTION,
    ACR_ZONE_DETRAINING,
    ACR_ZONE_OPTIMAL,
    ACR_ZONE_OVERREACHING,
    ATL_TIME_CONSTANT_DAYS,
    CTL_TIME_CONSTANT_DAYS,
    DEFAULT_INTENSITY_PROXY,
)
from training_engine.models.training_load import TrainingLoadPoint
from training_engine.models.workout_log import PerformedExercise, WorkoutLogEntry


def ewma_alpha(time_constant_days: float) -> float:
    """Smoothing factor for an EWMA with the given time constant."""
    return 1.0 - math.exp(-1.0 / time_constant_days)


def intensity_proxy(exercise: PerformedExercise) -> float:
    """%1RM / 100 when logged, else RPE / 10, else DEFAULT_INTENSITY_PROXY."""
    if exercise.intensity_percent is not None:
        return exercise.intensity_percent / 100.0
    if exercise.rpe is not None:
        return exercise.rpe / 10.0
    return DEFAULT_INTENSITY_PROXY


def session_load(entry: WorkoutLogEntry) -> float:
    """Load of one logged session: sum(sets x reps midpoint x intensity proxy)."""
    return float(
        sum(
            ex.sets * reps_midpoint(ex.reps) * intensity_proxy(ex)
            for ex in entry.exercises
        )
    )


def daily_load_series(entries: Iterable[WorkoutLogEntry]) -> pd.Series:
    """Per-date load summed over sessions, on a continuous daily index.

    Days between the first and last logged date with no session get 0.0.
    Returns an empty float Series when there are no entries.
    """
    totals: dict[date, float] = {}
    for entry in entries:
        totals[entry.log_date] = totals.get(entry.log_date, 0.0) + session_load(entry)
    if not totals:
        return pd.Series(dtype=np.float64)

    series = pd.Series(totals, dtype=np.float64)
    series.index = pd.to_datetime(series.index)
    series = series.sort_index()
    full_range = pd.date_range(series.index[0], series.index[-1], freq="D")
    return series.reindex(full_range, fill_value=0.0)


def classify_acr(acr: float | None) -> str | None:
    """Classify an acute:chronic ratio. Bands are inclusive on their lower bound.

    Returns:
        "detraining" (< 0.8), "optimal" [0.8, 1.3), "caution" [1.3, 1.5),
        "overreaching" (>= 1.5), or None when the ratio is undefined.

    Reference:
        Gabbett (2016), Br J Sports Med 50(5):273-280.
    """
    if acr is None:
        return None
    if acr >= ACR_OVERREACHING_THRESHOLD:
        return ACR_ZONE_OVERREACHING
    if acr >= ACR_CAUTION_THRESHOLD:
        return ACR_ZONE_CAUTION
    if acr >= ACR_OPTIMAL_LOW:
        return ACR_ZONE_OPTIMAL
    return ACR_ZONE_DETRAINING


def compute(entries: Iterable[WorkoutLogEntry]) -> tuple[TrainingLoadPoint, ...]:
    """Rebuild the ATL / CTL / ACR history from a workout log.

    Args:
        entries: Logged sessions in any order; several per date are summed.

    Returns:
        One TrainingLoadPoint per distinct logged date, ascending. An empty
        log gives an empty tuple.
    """
    entries = tuple(entries)
    daily = daily_load_series(entries)
    if daily.empty:
        return ()

    atl = daily.ewm(alpha=ewma_alpha(ATL_TIME_CONSTANT_DAYS), adjust=False).mean()
    ctl = daily.ewm(alpha=ewma_alpha(CTL_TIME_CONSTANT_DAYS), adjust=False).mean()

    logged = pd.to_datetime(sorted({e.log_date for e in entries}))
    points = []
    for ts in logged:
        atl_value = float(atl.loc[ts])
        ctl_value = float(ctl.loc[ts])
        acr = atl_value / ctl_value if ctl_value > 0 else None
        points.append(
            TrainingLoadPoint(
                load_date=ts.date(),
                load=float(daily.loc[ts]),
                atl=atl_value,
                ctl=ctl_value,
                acr=acr,
                zone=classify_acr(acr),
            )
        )
    return tuple(points)


def latest_point(entries: Iterable[WorkoutLogEntry]) -> TrainingLoadPoint | None:
    """Most recent point of the load history, or None for an empty log."""
    points = compute(entries)
    return points[-1] if points else None
