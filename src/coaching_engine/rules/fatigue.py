"""Fatigue interpretation from Performance Management Chart values.

Classifies training-stress balance (TSB = CTL - ATL) into a fatigue level
and flags an aggressive CTL ramp rate independently of the level.

Reference:
    Coggan & Allen (2010). Training and Racing with a Power Meter, 2nd ed.
    (Performance Manager: CTL/ATL/TSB and ramp rate guidance).
"""

from __future__ import annotations

from coaching_engine.models.assessments import FatigueAssessment
from coaching_engine.models.enums import FatigueLevel
from coaching_engine.models.policy import DEFAULT_FATIGUE_POLICY, FatiguePolicy
from coaching_engine.models.training import FitnessMetrics


def assess_fatigue(
    metrics: FitnessMetrics,
    policy: FatiguePolicy | None = None,
) -> FatigueAssessment:
    """Classify current fatigue from CTL/ATL/TSB.

    The first matching TSB band sets the level (boundary values belong to
    the more severe band). Ramp rate is checked on its own; a missing ramp
    rate is simply not checked.

    Args:
        metrics: Current fitness metrics.
        policy: Optional threshold override.

    Returns:
        FatigueAssessment with level, the originating TSB, concerns and
        recommendations.
    """
    cfg = policy or DEFAULT_FATIGUE_POLICY
    concerns: list[str] = []
    recommendations: list[str] = []
    tsb = metrics.tsb

    if tsb < cfg.tsb_critical:
        level = FatigueLevel.CRITICAL
        concerns.append(f"Extremely high fatigue (TSB < {cfg.tsb_critical:g})")
        recommendations.append("Mandatory rest or very light recovery only")
        recommendations.append("Risk of overtraining syndrome if continued")
    elif tsb < cfg.tsb_high:
        level = FatigueLevel.HIGH
        concerns.append(f"High fatigue (TSB < {cfg.tsb_high:g})")
        recommendations.append("Reduce training load")
        recommendations.append("Prioritize recovery activities")
    elif tsb < cfg.tsb_moderate:
        # Productive training zone
        level = FatigueLevel.MODERATE
        recommendations.append("Good training zone - maintain current approach")
    else:
        level = FatigueLevel.LOW
        if tsb > cfg.tsb_very_fresh:
            concerns.append("Very fresh but may be losing fitness")
            recommendations.append("Can increase training load if desired")

    ramp = metrics.ramp_rate
    if ramp is not None:
        if ramp > cfg.ramp_rate_too_high:
            concerns.append(f"Ramp rate too high ({ramp:.1f} TSS/week)")
            recommendations.append("Slow down fitness build to avoid injury")
        elif ramp > cfg.ramp_rate_elevated and level != FatigueLevel.LOW:
            # Level-specific recommendation already covers it
            concerns.append(f"Elevated ramp rate ({ramp:.1f} TSS/week)")

    return FatigueAssessment(
        level=level,
        tsb=tsb,
        concerns=tuple(concerns),
        recommendations=tuple(recommendations),
    )
