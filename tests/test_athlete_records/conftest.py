"""Fixtures with realistic stored rows for mapper tests."""

from __future__ import annotations

import pytest


@pytest.fixture
def athlete_row() -> dict:
    return {
        "id": "ath-1",
        "auth_user_id": "user-9",
        "display_name": "Sam",
        "weight_kg": 70.5,
        "ftp_watts": 250,
        "running_threshold_pace_sec_per_km": 270,
        "css_sec_per_100m": 105,
        "resting_heart_rate": 50,
        "max_heart_rate": 185,
        "lthr": 168,
        "preferred_units": "metric",
        "timezone": "Europe/London",
    }


@pytest.fixture
def race_goal_row() -> dict:
    return {
        "id": "g-1",
        "athlete_id": "ath-1",
        "goal_type": "race",
        "title": "Spring Half Marathon",
        "description": None,
        "target_date": "2026-03-01",
        "priority": "A",
        "status": "active",
        "race_event_name": "City Half",
        "race_distance": "21.1 km",
        "race_location": "Leeds",
        "race_target_time_seconds": 5400,
        "perf_metric": None,
    }


@pytest.fixture
def injury_row() -> dict:
    return {
        "id": "c-1",
        "athlete_id": "ath-1",
        "constraint_type": "injury",
        "title": "Sore knee",
        "start_date": "2026-01-20",
        "end_date": None,
        "status": "active",
        "injury_body_part": "knee",
        "injury_severity": "moderate",
        "injury_restrictions": ["impact", "high_intensity"],
    }


@pytest.fixture
def check_in_row() -> dict:
    return {
        "id": "ci-1",
        "athlete_id": "ath-1",
        "checkin_date": "2026-02-01",
        "sleep_quality": 7,
        "sleep_hours": 7.5,
        "energy_level": 6,
        "stress_level": 4,
        "overall_soreness": 3,
        "resting_hr": 52,
        "hrv_ms": 58,
        "available_time_minutes": 60,
        "equipment_access": ["bike", "trainer"],
        "travel_status": "home",
        "notes": None,
        "ai_recommendation": None,
    }


@pytest.fixture
def plan_row() -> dict:
    return {
        "id": "p-1",
        "athlete_id": "ath-1",
        "title": "70.3 Build",
        "description": None,
        "duration_weeks": 16,
        "start_date": "2026-01-05",
        "end_date": "2026-04-26",
        "status": "active",
        "phases": [
            {"name": "Base", "start_week": 1, "end_week": 8, "focus": "aerobic endurance"},
            {"name": "Build", "start_week": 9, "end_week": 16, "focus": "threshold",
             "description": "Race-specific work"},
        ],
        "weekly_template": None,
    }
