"""Daily readiness scoring from the wellness check-in.

Starts from 100 and applies one independent deduction per wellness signal
(sleep duration, sleep quality, energy, stress, soreness, resting HR vs
baseline, HRV vs baseline). Within a signal only the most severe band
applies; across signals deductions add up.

Reference:
    Saw, Main & Gastin (2016). Monitoring the athlete training response:
    subjective self-reported measures trump commonly used objective
    measures. Br J Sports Med 50(5):281-291.

    Plews et al. (2013). Training Adaptation and Heart Rate Variability in
    Elite Endurance Athletes. Int J Sports Physiol Perform 8(6):688-694.
"""

from __future__ import annotations

from dataclasses import dataclass

from coaching_engine.models.assessments import ReadinessAssessment
from coaching_engine.models.enums import ReadinessLevel
from coaching_engine.models.policy import DEFAULT_READINESS_POLICY, ReadinessPolicy
from coaching_engine.models.wellness import DailyCheckIn

_DEFAULT_YELLOW_RECOMMENDATION = "Consider reduced volume or intensity"
_DEFAULT_RED_RECOMMENDATION = "Rest day or very light recovery activity only"


@dataclass(frozen=True)
class _Deduction:
    """Outcome of analysing a single wellness signal."""

    penalty: int = 0
    concern: str | None = None
    recommendation: str | None = None


_NO_DEDUCTION = _Deduction()


# ---------------------------------------------------------------------------
# Per-signal analysis: each handles a missing value as "no deduction"
# ---------------------------------------------------------------------------


def _sleep_duration(hours: float | None, cfg: ReadinessPolicy) -> _Deduction:
    if hours is None:
        return _NO_DEDUCTION
    if hours < cfg.sleep_hours_very_low:
        return _Deduction(
            cfg.sleep_hours_very_low_penalty,
            f"Very low sleep duration (<{cfg.sleep_hours_very_low:g} hours)",
            "Consider rest day or very light activity only",
        )
    if hours < cfg.sleep_hours_low:
        return _Deduction(
            cfg.sleep_hours_low_penalty,
            f"Low sleep duration (<{cfg.sleep_hours_low:g} hours)",
            "Reduce workout intensity",
        )
    if hours < cfg.sleep_hours_short:
        return _Deduction(
            cfg.sleep_hours_short_penalty,
            f"Slightly short sleep (<{cfg.sleep_hours_short:g} hours)",
        )
    return _NO_DEDUCTION


def _sleep_quality(quality: float | None, cfg: ReadinessPolicy) -> _Deduction:
    if quality is None:
        return _NO_DEDUCTION
    if quality <= cfg.sleep_quality_poor:
        return _Deduction(
            cfg.sleep_quality_poor_penalty,
            "Poor sleep quality",
            "Avoid high-intensity training",
        )
    if quality <= cfg.sleep_quality_fair:
        return _Deduction(cfg.sleep_quality_fair_penalty, "Fair sleep quality")
    return _NO_DEDUCTION


def _energy(level: float | None, cfg: ReadinessPolicy) -> _Deduction:
    if level is None:
        return _NO_DEDUCTION
    if level <= cfg.energy_very_low:
        return _Deduction(
            cfg.energy_very_low_penalty,
            "Very low energy",
            "Rest or very light activity recommended",
        )
    if level <= cfg.energy_low:
        return _Deduction(cfg.energy_low_penalty, "Below normal energy")
    return _NO_DEDUCTION


def _stress(level: float | None, cfg: ReadinessPolicy) -> _Deduction:
    if level is None:
        return _NO_DEDUCTION
    if level >= cfg.stress_extreme:
        return _Deduction(
            cfg.stress_extreme_penalty,
            "Extremely high stress",
            "Training may add stress - consider rest or light activity",
        )
    if level >= cfg.stress_elevated:
        return _Deduction(cfg.stress_elevated_penalty, "Elevated stress level")
    return _NO_DEDUCTION


def _soreness(level: float | None, cfg: ReadinessPolicy) -> _Deduction:
    if level is None:
        return _NO_DEDUCTION
    if level >= cfg.soreness_high:
        return _Deduction(
            cfg.soreness_high_penalty,
            "High muscle soreness",
            "Avoid loading sore muscles - consider recovery day",
        )
    if level >= cfg.soreness_moderate:
        return _Deduction(cfg.soreness_moderate_penalty, "Moderate soreness")
    return _NO_DEDUCTION


def _resting_hr(
    current: float | None, baseline: float | None, cfg: ReadinessPolicy
) -> _Deduction:
    if current is None or baseline is None:
        return _NO_DEDUCTION
    delta = current - baseline
    if delta > cfg.resting_hr_high_delta:
        return _Deduction(
            cfg.resting_hr_high_penalty,
            f"Resting HR significantly elevated (+{delta:g} bpm)",
            "Elevated HR may indicate illness, stress, or overtraining",
        )
    if delta > cfg.resting_hr_elevated_delta:
        return _Deduction(
            cfg.resting_hr_elevated_penalty,
            f"Resting HR elevated (+{delta:g} bpm)",
        )
    return _NO_DEDUCTION


def _hrv(current: float | None, baseline: float | None, cfg: ReadinessPolicy) -> _Deduction:
    if current is None or baseline is None or baseline <= 0:
        return _NO_DEDUCTION
    drop_pct = (baseline - current) / baseline * 100.0
    if drop_pct > cfg.hrv_high_drop_pct:
        return _Deduction(
            cfg.hrv_high_drop_penalty,
            f"HRV significantly below baseline (-{drop_pct:.0f}%)",
            "Low HRV suggests recovery deficit",
        )
    if drop_pct > cfg.hrv_drop_pct:
        return _Deduction(cfg.hrv_drop_penalty, f"HRV below baseline (-{drop_pct:.0f}%)")
    return _NO_DEDUCTION


# ---------------------------------------------------------------------------
# Classification
# ---------------------------------------------------------------------------


def classify_readiness(score: float, policy: ReadinessPolicy | None = None) -> ReadinessLevel:
    """Map a readiness score to GREEN / YELLOW / RED."""
    cfg = policy or DEFAULT_READINESS_POLICY
    if score >= cfg.green_min:
        return ReadinessLevel.GREEN
    if score >= cfg.yellow_min:
        return ReadinessLevel.YELLOW
    return ReadinessLevel.RED


def assess_readiness(
    check_in: DailyCheckIn,
    baseline_resting_hr: float | None = None,
    baseline_hrv: float | None = None,
    policy: ReadinessPolicy | None = None,
) -> ReadinessAssessment:
    """Score today's training readiness from the daily check-in.

    Args:
        check_in: Today's check-in. Absent fields contribute nothing.
        baseline_resting_hr: Athlete's normal resting HR (bpm). The HR
            check is skipped without it.
        baseline_hrv: Athlete's normal HRV (ms). The HRV check is skipped
            without it.
        policy: Optional deduction table override.

    Returns:
        ReadinessAssessment. YELLOW and RED always carry at least one
        recommendation.
    """
    cfg = policy or DEFAULT_READINESS_POLICY

    deductions = (
        _sleep_duration(check_in.sleep_hours, cfg),
        _sleep_quality(check_in.sleep_quality, cfg),
        _energy(check_in.energy_level, cfg),
        _stress(check_in.stress_level, cfg),
        _soreness(check_in.overall_soreness, cfg),
        _resting_hr(check_in.resting_hr, baseline_resting_hr, cfg),
        _hrv(check_in.hrv_ms, baseline_hrv, cfg),
    )

    score = cfg.start_score - sum(d.penalty for d in deductions)
    concerns = [d.concern for d in deductions if d.concern]
    recommendations = [d.recommendation for d in deductions if d.recommendation]

    readiness = classify_readiness(score, cfg)
    if readiness == ReadinessLevel.YELLOW and not recommendations:
        recommendations.append(_DEFAULT_YELLOW_RECOMMENDATION)
    elif readiness == ReadinessLevel.RED and not recommendations:
        recommendations.append(_DEFAULT_RED_RECOMMENDATION)

    return ReadinessAssessment(
        readiness=readiness,
        score=max(0, int(score)),
        concerns=tuple(concerns),
        recommendations=tuple(recommendations),
    )
