"""Heart rate zones as a percentage of max HR.

Zone model: five equal 10 %-of-max bands from 50 % to 100 %.
Aerobic / anaerobic thresholds default to 75 % / 85 % of max HR when no
benchmark test result exists.
"""

from __future__ import annotations

from dataclasses import dataclass

from training_engine.errors import ValidationError
from training_engine.math.loads import round_half_up
from training_engine.models.enums import (
    AEROBIC_THRESHOLD_PCT_MAX,
    ANAEROBIC_THRESHOLD_PCT_MAX,
    HR_ZONE_PCT_MAX,
    HRZone,
)
from training_engine.models.validation import ValidationIssue


@dataclass(frozen=True)
class ZoneBoundary:
    """A single HR zone with lower and upper bounds in BPM."""

    zone: HRZone
    lower: int
    upper: int


@dataclass(frozen=True)
class HeartRateZones:
    """All five zones plus the athlete's aerobic and anaerobic thresholds."""

    max_hr: int
    zones: tuple[ZoneBoundary, ...]
    aerobic_threshold: int
    anaerobic_threshold: int

    def zone(self, zone: HRZone) -> ZoneBoundary:
        return next(z for z in self.zones if z.zone == zone)


def _check_max_hr(max_hr: float) -> None:
    if max_hr is None or max_hr <= 0:
        raise ValidationError(
            f"max_hr must be positive, got {max_hr!r}",
            issues=(ValidationIssue(path="max_hr", message="must be positive"),),
        )


def hr_target_for_zone(zone: HRZone, max_hr: float) -> tuple[int, int]:
    """(lower, upper) BPM for *zone*. Zone 5 tops out at max HR itself."""
    _check_max_hr(max_hr)
    lower_pct, upper_pct = HR_ZONE_PCT_MAX[zone]
    lower = round_half_up(max_hr * lower_pct)
    upper = round_half_up(max_hr) if zone == HRZone.ZONE_5 else round_half_up(max_hr * upper_pct)
    return (lower, upper)


def calculate_hr_zones(
    max_hr: float,
    aerobic_threshold: float | None = None,
    anaerobic_threshold: float | None = None,
) -> HeartRateZones:
    """Calculate HR zones from max HR.

    Args:
        max_hr: Maximum heart rate in BPM.
        aerobic_threshold: Tested AeT in BPM, if any.
        anaerobic_threshold: Tested AnT in BPM, if any.

    Returns:
        HeartRateZones with BPM values (not percentages).

    Raises:
        ValidationError: If max_hr is missing or not positive.
    """
    _check_max_hr(max_hr)
    zones = tuple(
        ZoneBoundary(zone, *hr_target_for_zone(zone, max_hr)) for zone in HRZone
    )
    return HeartRateZones(
        max_hr=round_half_up(max_hr),
        zones=zones,
        aerobic_threshold=round_half_up(aerobic_threshold or max_hr * AEROBIC_THRESHOLD_PCT_MAX),
        anaerobic_threshold=round_half_up(anaerobic_threshold or max_hr * ANAEROBIC_THRESHOLD_PCT_MAX),
    )


def parse_zone_id(zone_id: str) -> HRZone | None:
    """``"zone2"`` -> HRZone.ZONE_2; None for anything else."""
    for zone in HRZone:
        if zone.zone_id == zone_id:
            return zone
    return None
