"""Enumerations and policy constants for the coaching engine.

Thresholds and deductions are hand-tuned coaching policy. They are the
defaults of the policy tables in ``models/policy.py`` and can be overridden
per engine instance.
"""

from enum import IntEnum, auto


class GoalType(IntEnum):
    """Discriminator for the Goal variants."""

    RACE = auto()
    PERFORMANCE = auto()
    FITNESS = auto()
    HEALTH = auto()


class GoalPriority(IntEnum):
    """Goal priority: lower value = more important.

    A = key goal, B = supporting goal, C = nice-to-have.
    """

    A = auto()
    B = auto()
    C = auto()


class GoalStatus(IntEnum):
    ACTIVE = auto()
    COMPLETED = auto()
    CANCELLED = auto()


class ConstraintType(IntEnum):
    """Discriminator for the Constraint variants."""

    INJURY = auto()
    TRAVEL = auto()
    AVAILABILITY = auto()


class ConstraintStatus(IntEnum):
    ACTIVE = auto()
    RESOLVED = auto()


class InjurySeverity(IntEnum):
    MILD = auto()
    MODERATE = auto()
    SEVERE = auto()


class TravelStatus(IntEnum):
    HOME = auto()
    TRAVELING = auto()
    RETURNING = auto()


class PlanStatus(IntEnum):
    DRAFT = auto()
    ACTIVE = auto()
    PAUSED = auto()
    COMPLETED = auto()
    CANCELLED = auto()


class Sport(IntEnum):
    """Sports a proposed workout can target."""

    SWIM = auto()
    BIKE = auto()
    RUN = auto()
    STRENGTH = auto()


class WorkoutIntensity(IntEnum):
    """Workout intensity labels ordered from easiest to hardest."""

    RECOVERY = auto()
    EASY = auto()
    MODERATE = auto()
    TEMPO = auto()
    THRESHOLD = auto()
    VO2MAX = auto()
    SPRINT = auto()


class ReadinessLevel(IntEnum):
    """Traffic-light training readiness from the daily check-in."""

    GREEN = auto()
    YELLOW = auto()
    RED = auto()


class FatigueLevel(IntEnum):
    """Fatigue classification from TSB (form), ordered by severity."""

    LOW = auto()
    MODERATE = auto()
    HIGH = auto()
    CRITICAL = auto()


class FormStatus(IntEnum):
    """Coarse form label for a TSB value."""

    RACE_READY = auto()
    FRESH = auto()
    OPTIMAL = auto()
    TIRED = auto()
    OVERTRAINED = auto()


class TrendDirection(IntEnum):
    IMPROVING = auto()
    STABLE = auto()
    DECLINING = auto()


class RecoveryLevel(IntEnum):
    """Accumulated fatigue read from ATL alone."""

    LOW = auto()
    MODERATE = auto()
    HIGH = auto()
    VERY_HIGH = auto()


class Confidence(IntEnum):
    LOW = auto()
    MEDIUM = auto()
    HIGH = auto()


# ---------------------------------------------------------------------------
# Readiness scoring: deductions from a 100-point start
# ---------------------------------------------------------------------------
READINESS_START_SCORE = 100
READINESS_GREEN_MIN = 70   # score >= 70 → GREEN
READINESS_YELLOW_MIN = 40  # 40..69 → YELLOW, below → RED

SLEEP_HOURS_VERY_LOW = 5.0
SLEEP_HOURS_LOW = 6.0
SLEEP_HOURS_SHORT = 7.0
SLEEP_HOURS_VERY_LOW_PENALTY = 30
SLEEP_HOURS_LOW_PENALTY = 15
SLEEP_HOURS_SHORT_PENALTY = 5

SLEEP_QUALITY_POOR = 4     # <= 4
SLEEP_QUALITY_FAIR = 6     # <= 6
SLEEP_QUALITY_POOR_PENALTY = 20
SLEEP_QUALITY_FAIR_PENALTY = 10

ENERGY_VERY_LOW = 3        # <= 3
ENERGY_LOW = 5             # <= 5
ENERGY_VERY_LOW_PENALTY = 25
ENERGY_LOW_PENALTY = 10

STRESS_EXTREME = 9         # >= 9
STRESS_ELEVATED = 7        # >= 7
STRESS_EXTREME_PENALTY = 25
STRESS_ELEVATED_PENALTY = 10

SORENESS_HIGH = 8          # >= 8
SORENESS_MODERATE = 6      # >= 6
SORENESS_HIGH_PENALTY = 20
SORENESS_MODERATE_PENALTY = 10

RESTING_HR_HIGH_DELTA_BPM = 10      # > 10 bpm above baseline
RESTING_HR_ELEVATED_DELTA_BPM = 5   # > 5 bpm above baseline
RESTING_HR_HIGH_PENALTY = 25
RESTING_HR_ELEVATED_PENALTY = 10

HRV_HIGH_DROP_PCT = 20.0   # > 20% below baseline
HRV_DROP_PCT = 10.0        # > 10% below baseline
HRV_HIGH_DROP_PENALTY = 20
HRV_DROP_PENALTY = 10

# ---------------------------------------------------------------------------
# Fatigue interpretation - TSB (form) and CTL ramp rate
# ---------------------------------------------------------------------------
TSB_CRITICAL = -40.0   # TSB < -40 → CRITICAL
TSB_HIGH = -25.0       # TSB < -25 → HIGH
TSB_MODERATE = -10.0   # TSB < -10 → MODERATE
TSB_VERY_FRESH = 10.0  # TSB > 10 while LOW → losing-fitness concern

RAMP_RATE_TOO_HIGH = 8.0   # TSS/week
RAMP_RATE_ELEVATED = 5.0   # TSS/week, flagged only when level != LOW

# Form status line rendered in the prompt context
FORM_STATUS_HIGH_FATIGUE_TSB = -20.0
FORM_STATUS_FATIGUED_TSB = -10.0
FORM_STATUS_FRESH_TSB = 10.0

# Coarse form labels
FORM_RACE_READY_TSB = 15.0   # > 15
FORM_FRESH_TSB = 5.0         # > 5
FORM_OPTIMAL_TSB = -10.0     # >= -10
FORM_TIRED_TSB = -25.0       # >= -25

# Form trend: TSB change over the window
FORM_TREND_THRESHOLD = 3.0

# Recovery: ATL bands (strictly above) and suggested rest days
RECOVERY_ATL_VERY_HIGH = 90.0
RECOVERY_ATL_HIGH = 70.0
RECOVERY_ATL_MODERATE = 40.0
RECOVERY_DAYS_VERY_HIGH = 3
RECOVERY_DAYS_HIGH = 2
RECOVERY_DAYS_MODERATE = 1
OVERREACHING_RAMP = 7.0          # CTL gain across the 7-point window
ANALYSIS_MIN_POINTS = 7

# Race readiness: days-to-race windows (inclusive)
RACE_WEEK_DAYS = 2
TAPER_WINDOW_DAYS = 14
FINAL_BUILD_DAYS = 28
RACE_HIGH_CONFIDENCE_DAYS = 7    # and at least 14 points of history
RACE_HIGH_CONFIDENCE_POINTS = 14
RACE_MEDIUM_CONFIDENCE_DAYS = 21

# ---------------------------------------------------------------------------
# Performance Management Chart spans (days)
# ---------------------------------------------------------------------------
CTL_SPAN_DAYS = 42
ATL_SPAN_DAYS = 7
RAMP_RATE_WINDOW_DAYS = 7
WELLNESS_BASELINE_DAYS = 7

# ---------------------------------------------------------------------------
# Constraint compatibility
# ---------------------------------------------------------------------------
# Minimal equipment tokens by sport; one substring match is enough.
EQUIPMENT_BY_SPORT: dict[Sport, tuple[str, ...]] = {
    Sport.SWIM: ("pool", "goggles"),
    Sport.BIKE: ("bike", "trainer"),
    Sport.RUN: ("shoes",),
    Sport.STRENGTH: ("gym", "weights"),
}

# Facility the athlete must confirm while traveling.
TRAVEL_FACILITY_BY_SPORT: dict[Sport, str] = {
    Sport.SWIM: "pool",
    Sport.BIKE: "bike",
}

HIGH_INTENSITY_LEVELS = frozenset({
    WorkoutIntensity.THRESHOLD,
    WorkoutIntensity.VO2MAX,
    WorkoutIntensity.SPRINT,
})

RESTRICTION_HIGH_INTENSITY = "high_intensity"
RESTRICTION_IMPACT = "impact"

# ---------------------------------------------------------------------------
# Prompt context bounds
# ---------------------------------------------------------------------------
MAX_TEXT_LENGTH = 100
MAX_CONTEXT_ACTIVITIES = 10
MAX_CONTEXT_WELLNESS_DAYS = 7
