"""Athlete profile: identity plus optional physiological baselines."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class AthleteProfile:
    """Immutable athlete snapshot for a single engine call.

    Every physiological field is optional; the athlete may not have
    tested (or synced) any of them yet.
    """

    athlete_id: str
    display_name: str | None = None
    weight_kg: float | None = None

    # Thresholds
    ftp_watts: float | None = None
    threshold_pace_s_per_km: float | None = None  # Running threshold pace
    css_s_per_100m: float | None = None  # Critical swim speed

    # Heart rate
    max_hr: int | None = None
    lthr: int | None = None
    resting_hr: int | None = None  # Baseline resting HR
