"""Wellness inputs: today's check-in and the daily wellness history."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

from coaching_engine.models.enums import TravelStatus


@dataclass(frozen=True)
class DailyCheckIn:
    """Today's subjective/objective wellness snapshot.

    Scales are 1-10. Every metric is optional; an absent metric simply
    does not take part in readiness scoring.
    """

    checkin_date: date

    sleep_quality: float | None = None
    sleep_hours: float | None = None
    energy_level: float | None = None
    stress_level: float | None = None
    overall_soreness: float | None = None

    # Objective data
    resting_hr: float | None = None
    hrv_ms: float | None = None

    # Context for today
    available_time_min: float | None = None
    equipment_access: tuple[str, ...] = field(default_factory=tuple)
    travel_status: TravelStatus | None = None
    notes: str | None = None


@dataclass(frozen=True)
class WellnessData:
    """One day of wellness history from the activity platform."""

    day: date
    resting_hr: float | None = None
    hrv: float | None = None
    sleep_quality: float | None = None
    sleep_hours: float | None = None
    fatigue: float | None = None
    soreness: float | None = None
    stress: float | None = None
    mood: float | None = None
    weight_kg: float | None = None
