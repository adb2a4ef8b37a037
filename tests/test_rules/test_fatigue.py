"""Tests for fatigue interpretation from CTL/ATL/TSB."""

from __future__ import annotations

from datetime import date

import pytest

from coaching_engine.models.enums import FatigueLevel
from coaching_engine.models.policy import FatiguePolicy
from coaching_engine.models.training import FitnessMetrics
from coaching_engine.rules.fatigue import assess_fatigue


def _metrics(tsb: float, ramp_rate: float | None = None) -> FitnessMetrics:
    return FitnessMetrics(as_of=date(2026, 2, 1), ctl=60.0, atl=60.0 - tsb, tsb=tsb,
                          ramp_rate=ramp_rate)


class TestFatigueLevels:
    @pytest.mark.parametrize(
        "tsb,expected",
        [
            (-40.1, FatigueLevel.CRITICAL),
            (-40.0, FatigueLevel.HIGH),
            (-25.1, FatigueLevel.HIGH),
            (-25.0, FatigueLevel.MODERATE),
            (-10.1, FatigueLevel.MODERATE),
            (-10.0, FatigueLevel.LOW),
            (5.0, FatigueLevel.LOW),
            (25.0, FatigueLevel.LOW),
        ],
    )
    def test_tsb_boundaries(self, tsb: float, expected: FatigueLevel) -> None:
        assert assess_fatigue(_metrics(tsb)).level == expected

    def test_tsb_is_passed_through(self) -> None:
        assert assess_fatigue(_metrics(-17.3)).tsb == -17.3

    def test_critical_flags_overtraining(self) -> None:
        result = assess_fatigue(_metrics(-45.0))
        assert result.concerns == ("Extremely high fatigue (TSB < -40)",)
        assert result.recommendations == (
            "Mandatory rest or very light recovery only",
            "Risk of overtraining syndrome if continued",
        )

    def test_high_recommends_recovery(self) -> None:
        result = assess_fatigue(_metrics(-30.0))
        assert result.concerns == ("High fatigue (TSB < -25)",)
        assert "Prioritize recovery activities" in result.recommendations

    def test_moderate_emits_no_concern(self) -> None:
        result = assess_fatigue(_metrics(-15.0))
        assert result.concerns == ()
        assert result.recommendations == ("Good training zone - maintain current approach",)

    def test_very_fresh_flags_fitness_loss(self) -> None:
        result = assess_fatigue(_metrics(12.0))
        assert result.concerns == ("Very fresh but may be losing fitness",)
        assert result.recommendations == ("Can increase training load if desired",)

    def test_fresh_at_10_is_quiet(self) -> None:
        result = assess_fatigue(_metrics(10.0))
        assert result.concerns == ()
        assert result.recommendations == ()

    def test_policy_override(self) -> None:
        result = assess_fatigue(_metrics(-35.0), FatiguePolicy(tsb_critical=-30.0))
        assert result.level == FatigueLevel.CRITICAL


class TestRampRate:
    def test_too_high_ramp_rate(self) -> None:
        result = assess_fatigue(_metrics(0.0, ramp_rate=9.4))
        assert result.concerns == ("Ramp rate too high (9.4 TSS/week)",)
        assert "Slow down fitness build to avoid injury" in result.recommendations

    def test_elevated_ramp_rate_ignored_when_low(self) -> None:
        result = assess_fatigue(_metrics(0.0, ramp_rate=6.0))
        assert result.concerns == ()

    def test_elevated_ramp_rate_flagged_when_fatigued(self) -> None:
        result = assess_fatigue(_metrics(-15.0, ramp_rate=6.0))
        assert result.concerns == ("Elevated ramp rate (6.0 TSS/week)",)
        # Only the level recommendation, nothing added for the ramp rate
        assert result.recommendations == ("Good training zone - maintain current approach",)

    def test_ramp_rate_at_8_is_elevated_not_too_high(self) -> None:
        result = assess_fatigue(_metrics(-30.0, ramp_rate=8.0))
        assert "Elevated ramp rate (8.0 TSS/week)" in result.concerns

    def test_missing_ramp_rate_not_checked(self) -> None:
        result = assess_fatigue(_metrics(-30.0, ramp_rate=None))
        assert result.concerns == ("High fatigue (TSB < -25)",)
