"""Training load math: Performance Management Chart, form and wellness baselines.

CTL and ATL are exponentially weighted averages of daily training stress
with a decay constant of 42 and 7 days respectively. TSB (form) is their
difference; ramp rate is the weekly change in CTL. On top of a daily
series of metrics sit the form label and trend, recovery need, a race-day
form projection and weekly load totals.

References:
    - Banister et al. (1975): impulse-response fitness/fatigue model
    - Coggan & Allen (2010): Performance Manager (CTL/ATL/TSB)
    - Plews et al. (2012): rolling baselines for HRV-guided training
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from typing import Sequence

import numpy as np
import pandas as pd

from coaching_engine.models.enums import (
    ANALYSIS_MIN_POINTS,
    ATL_SPAN_DAYS,
    CTL_SPAN_DAYS,
    FINAL_BUILD_DAYS,
    FORM_FRESH_TSB,
    FORM_OPTIMAL_TSB,
    FORM_RACE_READY_TSB,
    FORM_TIRED_TSB,
    FORM_TREND_THRESHOLD,
    OVERREACHING_RAMP,
    RACE_HIGH_CONFIDENCE_DAYS,
    RACE_HIGH_CONFIDENCE_POINTS,
    RACE_MEDIUM_CONFIDENCE_DAYS,
    RACE_WEEK_DAYS,
    RAMP_RATE_WINDOW_DAYS,
    RECOVERY_ATL_HIGH,
    RECOVERY_ATL_MODERATE,
    RECOVERY_ATL_VERY_HIGH,
    RECOVERY_DAYS_HIGH,
    RECOVERY_DAYS_MODERATE,
    RECOVERY_DAYS_VERY_HIGH,
    TAPER_WINDOW_DAYS,
    WELLNESS_BASELINE_DAYS,
    Confidence,
    FormStatus,
    RecoveryLevel,
    TrendDirection,
)
from coaching_engine.models.training import Activity, FitnessMetrics
from coaching_engine.models.wellness import WellnessData


def calculate_load_average(daily_loads: Sequence[float], span_days: int) -> pd.Series:
    """Exponentially weighted load average for every day of the series.

    Uses ``alpha = 1 / span_days`` (the PMC time constant), not pandas'
    ``span`` parameterisation.

    Args:
        daily_loads: Daily training stress values (oldest first).
        span_days: Time constant in days (42 for CTL, 7 for ATL).

    Returns:
        Series of the running average, one value per input day.
    """
    if span_days <= 0:
        raise ValueError(f"span_days must be positive, got {span_days}")
    series = pd.Series(list(daily_loads), dtype=np.float64).fillna(0.0)
    return series.ewm(alpha=1.0 / span_days, adjust=False).mean()


def compute_fitness_metrics(
    daily_loads: Sequence[float],
    as_of: date,
) -> FitnessMetrics:
    """Compute CTL, ATL, TSB and ramp rate from a daily load series.

    Args:
        daily_loads: One training-stress value per day, oldest first; the
            last value belongs to *as_of*. Rest days are 0.
        as_of: Day the final value belongs to.

    Returns:
        FitnessMetrics for *as_of*. ``ramp_rate`` is None when fewer than
        eight days are supplied.

    Raises:
        ValueError: If *daily_loads* is empty.
    """
    if len(daily_loads) == 0:
        raise ValueError("daily_loads must contain at least one day")

    ctl_series = calculate_load_average(daily_loads, CTL_SPAN_DAYS)
    atl_series = calculate_load_average(daily_loads, ATL_SPAN_DAYS)

    ctl = float(ctl_series.iloc[-1])
    atl = float(atl_series.iloc[-1])

    ramp_rate: float | None = None
    if len(ctl_series) > RAMP_RATE_WINDOW_DAYS:
        ramp_rate = ctl - float(ctl_series.iloc[-1 - RAMP_RATE_WINDOW_DAYS])

    return FitnessMetrics(
        as_of=as_of,
        ctl=round(ctl, 1),
        atl=round(atl, 1),
        tsb=round(ctl - atl, 1),
        ramp_rate=round(ramp_rate, 1) if ramp_rate is not None else None,
    )


def classify_form(tsb: float) -> FormStatus:
    """Coarse form label for a TSB value.

    > 15 race ready, > 5 fresh, >= -10 optimal, >= -25 tired, else
    overtrained.
    """
    if tsb > FORM_RACE_READY_TSB:
        return FormStatus.RACE_READY
    if tsb > FORM_FRESH_TSB:
        return FormStatus.FRESH
    if tsb >= FORM_OPTIMAL_TSB:
        return FormStatus.OPTIMAL
    if tsb >= FORM_TIRED_TSB:
        return FormStatus.TIRED
    return FormStatus.OVERTRAINED


@dataclass(frozen=True)
class FormTrend:
    """Direction of form across a window of daily metrics."""

    direction: TrendDirection
    tsb_change: float
    ctl_change: float
    atl_change: float
    current_tsb: float
    average_tsb: float


def calculate_form_trend(points: Sequence[FitnessMetrics]) -> FormTrend | None:
    """Analyse form direction over a window of metrics (oldest first).

    TSB rising by more than 3 is improving, falling by more than 3 is
    declining, anything in between is stable.

    Returns:
        FormTrend, or None with fewer than two points.
    """
    if len(points) < 2:
        return None

    first, last = points[0], points[-1]
    tsb_change = last.tsb - first.tsb

    if tsb_change > FORM_TREND_THRESHOLD:
        direction = TrendDirection.IMPROVING
    elif tsb_change < -FORM_TREND_THRESHOLD:
        direction = TrendDirection.DECLINING
    else:
        direction = TrendDirection.STABLE

    return FormTrend(
        direction=direction,
        tsb_change=tsb_change,
        ctl_change=last.ctl - first.ctl,
        atl_change=last.atl - first.atl,
        current_tsb=last.tsb,
        average_tsb=float(np.mean([p.tsb for p in points])),
    )


@dataclass(frozen=True)
class RecoveryAssessment:
    level: RecoveryLevel
    suggested_recovery_days: int
    ramp_rate: float  # CTL change across the window
    is_overreaching: bool


def assess_recovery(points: Sequence[FitnessMetrics]) -> RecoveryAssessment | None:
    """Recovery need from the latest ATL and the recent CTL build.

    ATL above 90 is very high (3 rest days), above 70 high (2), above 40
    moderate (1), otherwise low. A CTL gain of more than 7 from the
    seventh-latest point to the latest flags overreaching.

    Args:
        points: Daily metrics, oldest first.

    Returns:
        RecoveryAssessment, or None with fewer than seven points.
    """
    if len(points) < ANALYSIS_MIN_POINTS:
        return None

    latest = points[-1]
    ramp_rate = latest.ctl - points[-ANALYSIS_MIN_POINTS].ctl

    if latest.atl > RECOVERY_ATL_VERY_HIGH:
        level, days = RecoveryLevel.VERY_HIGH, RECOVERY_DAYS_VERY_HIGH
    elif latest.atl > RECOVERY_ATL_HIGH:
        level, days = RecoveryLevel.HIGH, RECOVERY_DAYS_HIGH
    elif latest.atl > RECOVERY_ATL_MODERATE:
        level, days = RecoveryLevel.MODERATE, RECOVERY_DAYS_MODERATE
    else:
        level, days = RecoveryLevel.LOW, 0

    return RecoveryAssessment(
        level=level,
        suggested_recovery_days=days,
        ramp_rate=ramp_rate,
        is_overreaching=ramp_rate > OVERREACHING_RAMP,
    )


@dataclass(frozen=True)
class RaceReadiness:
    days_until_race: int
    current_form: FormStatus
    projected_tsb: float
    recommendation: str
    confidence: Confidence


def _race_recommendation(days: int) -> str:
    if days <= RACE_WEEK_DAYS:
        return "Race week - rest and stay fresh."
    if days <= TAPER_WINDOW_DAYS:
        return "Taper phase - reduce volume, maintain intensity."
    if days <= FINAL_BUILD_DAYS:
        return "Final build - key workouts then begin taper."
    return "Continue building fitness with progressive overload."


def calculate_race_readiness(
    points: Sequence[FitnessMetrics],
    race_date: date,
    today: date,
) -> RaceReadiness | None:
    """Project race-day form from the last week's TSB trend.

    The TSB change across the last seven points, spread per day, is
    extrapolated linearly to race day.

    Args:
        points: Daily metrics, oldest first.
        race_date: Day of the race.
        today: Day the projection starts from.

    Returns:
        RaceReadiness, or None with fewer than seven points or when the
        race is already past.
    """
    if len(points) < ANALYSIS_MIN_POINTS:
        return None

    days = (race_date - today).days
    if days < 0:
        return None

    latest = points[-1]
    trend = calculate_form_trend(points[-ANALYSIS_MIN_POINTS:])
    daily_change = trend.tsb_change / ANALYSIS_MIN_POINTS if trend is not None else 0.0

    if days <= RACE_HIGH_CONFIDENCE_DAYS and len(points) >= RACE_HIGH_CONFIDENCE_POINTS:
        confidence = Confidence.HIGH
    elif days <= RACE_MEDIUM_CONFIDENCE_DAYS:
        confidence = Confidence.MEDIUM
    else:
        confidence = Confidence.LOW

    return RaceReadiness(
        days_until_race=days,
        current_form=classify_form(latest.tsb),
        projected_tsb=latest.tsb + daily_change * days,
        recommendation=_race_recommendation(days),
        confidence=confidence,
    )


@dataclass(frozen=True)
class WeeklyLoad:
    week_start: date  # Monday
    total_tss: float
    activity_count: int
    average_tss_per_activity: float
    total_duration_s: float


def calculate_weekly_loads(activities: Sequence[Activity]) -> list[WeeklyLoad]:
    """Training stress and duration per Monday-start week, oldest week first.

    Activities without a training load count as 0 TSS. Each activity is
    assigned by the calendar date of its start time.
    """
    if not activities:
        return []

    days = [a.start_time.date() for a in activities]
    frame = pd.DataFrame({
        "week_start": [d - timedelta(days=d.weekday()) for d in days],
        "tss": [a.training_load or 0.0 for a in activities],
        "duration": [a.moving_time_s for a in activities],
    })
    weekly = frame.groupby("week_start", sort=True).agg(
        total_tss=("tss", "sum"),
        activity_count=("tss", "size"),
        total_duration=("duration", "sum"),
    )

    return [
        WeeklyLoad(
            week_start=week_start,
            total_tss=float(row["total_tss"]),
            activity_count=int(row["activity_count"]),
            average_tss_per_activity=float(row["total_tss"]) / int(row["activity_count"]),
            total_duration_s=float(row["total_duration"]),
        )
        for week_start, row in weekly.iterrows()
    ]


def wellness_baselines(
    history: Sequence[WellnessData],
    days: int = WELLNESS_BASELINE_DAYS,
) -> tuple[float | None, float | None]:
    """Mean resting HR and mean HRV over the most recent *days* entries.

    Args:
        history: Wellness entries in any order; sorted by day internally.
        days: Number of most recent entries to average.

    Returns:
        (resting_hr_baseline, hrv_baseline). Each is None when no entry in
        the window reports that metric.
    """
    recent = sorted(history, key=lambda w: w.day, reverse=True)[:days]

    def _mean(values: list[float | None]) -> float | None:
        present = [v for v in values if v is not None]
        if not present:
            return None
        return float(np.mean(np.array(present, dtype=np.float64)))

    return (
        _mean([w.resting_hr for w in recent]),
        _mean([w.hrv for w in recent]),
    )
