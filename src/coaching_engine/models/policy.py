"""Policy tables: the thresholds and weights the leaf evaluators apply.

Defaults mirror the constants in ``models/enums.py``. Pass a modified
policy to ``CoachingEngine`` (or directly to the rule functions) to tune a
single threshold without touching the rules.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from coaching_engine.models.enums import (
    ENERGY_LOW,
    ENERGY_LOW_PENALTY,
    ENERGY_VERY_LOW,
    ENERGY_VERY_LOW_PENALTY,
    HRV_DROP_PCT,
    HRV_DROP_PENALTY,
    HRV_HIGH_DROP_PCT,
    HRV_HIGH_DROP_PENALTY,
    MAX_CONTEXT_ACTIVITIES,
    MAX_CONTEXT_WELLNESS_DAYS,
    MAX_TEXT_LENGTH,
    RAMP_RATE_ELEVATED,
    RAMP_RATE_TOO_HIGH,
    READINESS_GREEN_MIN,
    READINESS_START_SCORE,
    READINESS_YELLOW_MIN,
    RESTING_HR_ELEVATED_DELTA_BPM,
    RESTING_HR_ELEVATED_PENALTY,
    RESTING_HR_HIGH_DELTA_BPM,
    RESTING_HR_HIGH_PENALTY,
    SLEEP_HOURS_LOW,
    SLEEP_HOURS_LOW_PENALTY,
    SLEEP_HOURS_SHORT,
    SLEEP_HOURS_SHORT_PENALTY,
    SLEEP_HOURS_VERY_LOW,
    SLEEP_HOURS_VERY_LOW_PENALTY,
    SLEEP_QUALITY_FAIR,
    SLEEP_QUALITY_FAIR_PENALTY,
    SLEEP_QUALITY_POOR,
    SLEEP_QUALITY_POOR_PENALTY,
    SORENESS_HIGH,
    SORENESS_HIGH_PENALTY,
    SORENESS_MODERATE,
    SORENESS_MODERATE_PENALTY,
    STRESS_ELEVATED,
    STRESS_ELEVATED_PENALTY,
    STRESS_EXTREME,
    STRESS_EXTREME_PENALTY,
    TSB_CRITICAL,
    TSB_HIGH,
    TSB_MODERATE,
    TSB_VERY_FRESH,
)


@dataclass(frozen=True)
class ReadinessPolicy:
    """Deduction table for the daily readiness score."""

    start_score: int = READINESS_START_SCORE
    green_min: int = READINESS_GREEN_MIN
    yellow_min: int = READINESS_YELLOW_MIN

    sleep_hours_very_low: float = SLEEP_HOURS_VERY_LOW
    sleep_hours_low: float = SLEEP_HOURS_LOW
    sleep_hours_short: float = SLEEP_HOURS_SHORT
    sleep_hours_very_low_penalty: int = SLEEP_HOURS_VERY_LOW_PENALTY
    sleep_hours_low_penalty: int = SLEEP_HOURS_LOW_PENALTY
    sleep_hours_short_penalty: int = SLEEP_HOURS_SHORT_PENALTY

    sleep_quality_poor: float = SLEEP_QUALITY_POOR
    sleep_quality_fair: float = SLEEP_QUALITY_FAIR
    sleep_quality_poor_penalty: int = SLEEP_QUALITY_POOR_PENALTY
    sleep_quality_fair_penalty: int = SLEEP_QUALITY_FAIR_PENALTY

    energy_very_low: float = ENERGY_VERY_LOW
    energy_low: float = ENERGY_LOW
    energy_very_low_penalty: int = ENERGY_VERY_LOW_PENALTY
    energy_low_penalty: int = ENERGY_LOW_PENALTY

    stress_extreme: float = STRESS_EXTREME
    stress_elevated: float = STRESS_ELEVATED
    stress_extreme_penalty: int = STRESS_EXTREME_PENALTY
    stress_elevated_penalty: int = STRESS_ELEVATED_PENALTY

    soreness_high: float = SORENESS_HIGH
    soreness_moderate: float = SORENESS_MODERATE
    soreness_high_penalty: int = SORENESS_HIGH_PENALTY
    soreness_moderate_penalty: int = SORENESS_MODERATE_PENALTY

    resting_hr_high_delta: float = RESTING_HR_HIGH_DELTA_BPM
    resting_hr_elevated_delta: float = RESTING_HR_ELEVATED_DELTA_BPM
    resting_hr_high_penalty: int = RESTING_HR_HIGH_PENALTY
    resting_hr_elevated_penalty: int = RESTING_HR_ELEVATED_PENALTY

    hrv_high_drop_pct: float = HRV_HIGH_DROP_PCT
    hrv_drop_pct: float = HRV_DROP_PCT
    hrv_high_drop_penalty: int = HRV_HIGH_DROP_PENALTY
    hrv_drop_penalty: int = HRV_DROP_PENALTY


@dataclass(frozen=True)
class FatiguePolicy:
    """TSB and ramp-rate thresholds for the fatigue assessment."""

    tsb_critical: float = TSB_CRITICAL
    tsb_high: float = TSB_HIGH
    tsb_moderate: float = TSB_MODERATE
    tsb_very_fresh: float = TSB_VERY_FRESH
    ramp_rate_too_high: float = RAMP_RATE_TOO_HIGH
    ramp_rate_elevated: float = RAMP_RATE_ELEVATED


DEFAULT_READINESS_POLICY = ReadinessPolicy()
DEFAULT_FATIGUE_POLICY = FatiguePolicy()


@dataclass(frozen=True)
class ContextLimits:
    """Bounds applied when the context is rendered for a prompt."""

    max_text_length: int = MAX_TEXT_LENGTH
    max_activities: int = MAX_CONTEXT_ACTIVITIES
    max_wellness_days: int = MAX_CONTEXT_WELLNESS_DAYS

    @classmethod
    def from_env(cls) -> ContextLimits:
        """Build limits from ``COACH_*`` environment variables, with defaults."""
        return cls(
            max_text_length=int(os.environ.get("COACH_MAX_TEXT_LENGTH", str(MAX_TEXT_LENGTH))),
            max_activities=int(os.environ.get("COACH_MAX_ACTIVITIES", str(MAX_CONTEXT_ACTIVITIES))),
            max_wellness_days=int(
                os.environ.get("COACH_MAX_WELLNESS_DAYS", str(MAX_CONTEXT_WELLNESS_DAYS))
            ),
        )


DEFAULT_CONTEXT_LIMITS = ContextLimits()
