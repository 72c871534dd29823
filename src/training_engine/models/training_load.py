"""Training load point — one row of the rebuilt ATL/CTL history."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class TrainingLoadPoint:
    """Derived load metrics for one logged date.

    ``acr`` and ``zone`` are None when CTL is zero (ratio undefined).
    """

    load_date: date
    load: float
    atl: float
    ctl: float
    acr: float | None
    zone: str | None
