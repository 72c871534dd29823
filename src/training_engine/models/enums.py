"""Enumerations and training constants for the training engine.

Thresholds that come from sports-science convention cite their source.
"""

from enum import Enum, IntEnum, auto


class MovementPattern(str, Enum):
    """Biomechanical grouping used for exercise substitution.

    Values are the identifiers used in exercise and template documents.
    """

    HIP_HINGE = "hipHinge"
    SQUAT = "squat"
    HORIZONTAL_PUSH = "horizontalPush"
    VERTICAL_PUSH = "verticalPush"
    HORIZONTAL_PULL = "horizontalPull"
    VERTICAL_PULL = "verticalPull"
    LUNGE = "lunge"
    CARRY = "carry"
    CORE = "core"
    ACCESSORY = "accessory"
    CARDIO = "cardio"
    MOBILITY = "mobility"


class SessionType(str, Enum):
    """Kind of session scheduled on a template day."""

    STRENGTH = "strength"
    CARDIO = "cardio"
    MUSCULAR_ENDURANCE = "muscular_endurance"
    MOBILITY = "mobility"
    RECOVERY = "recovery"


class HRZone(IntEnum):
    """Canonical five heart rate zones (% of max HR model)."""

    ZONE_1 = 1
    ZONE_2 = 2
    ZONE_3 = 3
    ZONE_4 = 4
    ZONE_5 = 5

    @property
    def zone_id(self) -> str:
        return f"zone{self.value}"


class IssueKind(IntEnum):
    """Whether a template problem is structural or an unresolved reference."""

    STRUCTURAL = auto()
    REFERENCE = auto()


# Session types whose days carry a list of exercise prescriptions.
EXERCISE_SESSION_TYPES = frozenset({
    SessionType.STRENGTH,
    SessionType.MUSCULAR_ENDURANCE,
    SessionType.MOBILITY,
})

# Patterns that never mix with strength substitution pools.
NON_STRENGTH_PATTERNS = frozenset({MovementPattern.CARDIO, MovementPattern.MOBILITY})

# Equipment tags that need nothing from the athlete.
ALWAYS_AVAILABLE_EQUIPMENT = frozenset({"none"})

# ---------------------------------------------------------------------------
# Acute:Chronic ratio — Gabbett (2016), Br J Sports Med 50(5):273-280
# Bands are inclusive on their lower bound.
# ---------------------------------------------------------------------------
ACR_OVERREACHING_THRESHOLD = 1.5
ACR_CAUTION_THRESHOLD = 1.3
ACR_OPTIMAL_LOW = 0.8

ACR_ZONE_DETRAINING = "detraining"
ACR_ZONE_OPTIMAL = "optimal"
ACR_ZONE_CAUTION = "caution"
ACR_ZONE_OVERREACHING = "overreaching"

# EWMA time constants in days — Banister impulse-response convention
ATL_TIME_CONSTANT_DAYS = 7
CTL_TIME_CONSTANT_DAYS = 28

# Intensity proxy used when a logged set has neither %1RM nor RPE
DEFAULT_INTENSITY_PROXY = 0.6

# ---------------------------------------------------------------------------
# Readiness zones (0-100 composite score)
# ---------------------------------------------------------------------------
READINESS_OPTIMAL = 85
READINESS_GOOD = 70
READINESS_ADJUSTING = 55
READINESS_STRUGGLING = 40

READINESS_ZONE_OPTIMAL = "optimal"
READINESS_ZONE_GOOD = "good"
READINESS_ZONE_ADJUSTING = "adjusting"
READINESS_ZONE_STRUGGLING = "struggling"
READINESS_ZONE_CRITICAL = "critical"

READINESS_FACTOR_MIN = 1
READINESS_FACTOR_MAX = 5

# Volume cuts applied to a day's sets by readiness score
READINESS_RED_VOLUME_MOD = 0.5     # score < READINESS_STRUGGLING
READINESS_YELLOW_VOLUME_MOD = 0.75  # score < READINESS_GOOD

# ---------------------------------------------------------------------------
# Prescription bounds
# ---------------------------------------------------------------------------
MIN_INTENSITY_PERCENT = 1.0
MAX_INTENSITY_PERCENT = 100.0
MIN_RPE = 1.0
MAX_RPE = 10.0
REP_FLOOR = 1
DEFAULT_REP_CEILING = 30
DAYS_PER_WEEK = 7

# Working weights round to the nearest plate increment
LOAD_ROUNDING_INCREMENT = 5

# Heart rate zones as % of max HR
HR_ZONE_PCT_MAX = {
    HRZone.ZONE_1: (0.50, 0.60),
    HRZone.ZONE_2: (0.60, 0.70),
    HRZone.ZONE_3: (0.70, 0.80),
    HRZone.ZONE_4: (0.80, 0.90),
    HRZone.ZONE_5: (0.90, 1.00),
}

# Default AeT / AnT estimates when no benchmark test exists
AEROBIC_THRESHOLD_PCT_MAX = 0.75
ANAEROBIC_THRESHOLD_PCT_MAX = 0.85

# Bodyweight load targets for loaded carries / step-ups (fraction of BW)
BODYWEIGHT_LOAD_TARGETS = {
    "light": 0.15,
    "base": 0.20,
    "standard": 0.25,
    "peak": 0.30,
}

# Benchmark keys read from the athlete profile
BENCHMARK_MAX_HR = "maxHR"
BENCHMARK_AEROBIC_THRESHOLD_HR = "aerobicThresholdHR"
BENCHMARK_ANAEROBIC_THRESHOLD_HR = "anaerobicThresholdHR"
