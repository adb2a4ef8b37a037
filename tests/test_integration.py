"""End-to-end tests: stored rows → athlete_records → CoachingEngine → prompt text.

Covers a full daily check-in with its assessments, the properties the
rendered context must always hold, and replaying the same inputs.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta

import pytest

from athlete_records import (
    map_activity,
    map_athlete,
    map_check_in,
    map_constraint,
    map_fitness_metrics,
    map_goal,
    map_training_plan,
    map_wellness,
)
from coaching_engine import CoachingEngine, CoachingScenario
from coaching_engine.models.assessments import WorkoutProposal
from coaching_engine.models.enums import (
    FatigueLevel,
    ReadinessLevel,
    Sport,
    WorkoutIntensity,
)

AS_OF = datetime(2026, 2, 1, 8, 0)


@pytest.fixture
def rows() -> dict:
    """One athlete's stored rows, as a database client would return them."""
    return {
        "athlete": {
            "id": "ath-7", "display_name": "Robin", "weight_kg": 64,
            "ftp_watts": 215, "running_threshold_pace_sec_per_km": 290,
            "max_heart_rate": 188, "lthr": 171, "resting_heart_rate": 48,
        },
        "goals": [
            {"id": "g-1", "goal_type": "race", "title": "Half Ironman", "priority": "A",
             "status": "active", "target_date": "2026-06-14", "race_distance": "70.3",
             "race_target_time_seconds": 19800},
            {"id": "g-2", "goal_type": "race", "title": "Tune-up 10k", "priority": "B",
             "status": "active", "target_date": "2026-02-15", "race_distance": "10 km"},
            {"id": "g-3", "goal_type": "performance", "title": "Swim CSS 1:50",
             "priority": "C", "status": "active", "perf_metric": "css"},
            {"id": "g-4", "goal_type": "race", "title": "Winter 5k", "priority": "A",
             "status": "completed", "target_date": "2026-01-10"},
        ],
        "constraints": [
            {"id": "c-1", "constraint_type": "injury", "title": "Achilles niggle",
             "start_date": "2026-01-28", "status": "active", "injury_body_part": "achilles",
             "injury_severity": "mild", "injury_restrictions": ["run", "high_intensity"]},
            {"id": "c-2", "constraint_type": "travel", "title": "Conference",
             "start_date": "2026-01-30", "end_date": "2026-02-03", "status": "active",
             "travel_destination": "Porto", "travel_equipment_available": ["running_shoes"]},
            {"id": "c-3", "constraint_type": "availability", "title": "Busy spring",
             "start_date": "2026-03-01", "status": "active",
             "availability_hours_per_week": 5},
        ],
        "check_in": {
            "checkin_date": "2026-02-01", "sleep_quality": 5, "sleep_hours": 5.5,
            "energy_level": 5, "stress_level": 7, "overall_soreness": 4,
            "resting_hr": 55, "hrv_ms": 50, "available_time_minutes": 45,
            "equipment_access": ["running_shoes", "hotel_gym"], "travel_status": "traveling",
            "notes": "Hotel bed was awful.\nLots of walking yesterday.",
        },
        "activities": [
            {"id": f"a-{i}", "name": f"Session {i}", "type": "Ride",
             "start_date": (datetime(2026, 1, 18, 7, 0) + timedelta(days=i)).isoformat(),
             "moving_time": 2700, "icu_training_load": 50}
            for i in range(14)
        ],
        "wellness": [
            {"date": (date(2026, 1, 22) + timedelta(days=i)).isoformat(),
             "resting_hr": 48, "hrv": 62, "sleep_hours": 7, "fatigue": 5}
            for i in range(10)
        ],
        "fitness": {"date": "2026-02-01", "ctl": 48.0, "atl": 77.5, "ramp_rate": 8.5},
        "plan": {
            "id": "p-1", "title": "Half Ironman Build", "duration_weeks": 20,
            "start_date": "2026-01-26", "end_date": "2026-06-14", "status": "active",
            "phases": [
                {"name": "Base", "start_week": 1, "end_week": 8, "focus": "aerobic"},
                {"name": "Build", "start_week": 9, "end_week": 16, "focus": "threshold"},
                {"name": "Peak", "start_week": 17, "end_week": 20, "focus": "race pace"},
            ],
        },
    }


@pytest.fixture
def engine() -> CoachingEngine:
    return CoachingEngine()


@pytest.fixture
def context(engine, rows):
    return engine.build_context(
        map_athlete(rows["athlete"]),
        goals=[map_goal(r) for r in rows["goals"]],
        constraints=[map_constraint(r) for r in rows["constraints"]],
        check_in=map_check_in(rows["check_in"]),
        recent_activities=[map_activity(r) for r in rows["activities"]],
        wellness_data=[map_wellness(r) for r in rows["wellness"]],
        fitness_metrics=map_fitness_metrics(rows["fitness"]),
        training_plan=map_training_plan(rows["plan"]),
        as_of=AS_OF,
    )


class TestDailyCheckInFlow:
    def test_context_resolution(self, context) -> None:
        assert [g.goal_id for g in context.goals] == ["g-1", "g-2", "g-3"]
        assert [c.constraint_id for c in context.constraints] == ["c-1", "c-2"]
        assert context.next_race is not None
        assert context.next_race.goal_id == "g-2"
        assert context.days_to_race == 14
        assert context.week_in_plan == 1
        assert context.current_phase is not None
        assert context.current_phase.name == "Base"

    def test_readiness(self, engine, context) -> None:
        result = engine.assess_readiness(context)
        assert result is not None
        # sleep 5.5h -15, quality 5 -10, energy 5 -10, stress 7 -10, RHR +7 -10, HRV -19% -10
        assert result.score == 35
        assert result.readiness == ReadinessLevel.RED
        assert result.concerns[0] == "Low sleep duration (<6 hours)"
        assert "HRV below baseline (-19%)" in result.concerns
        assert result.recommendations == ("Reduce workout intensity",)

    def test_fatigue(self, engine, context) -> None:
        result = engine.assess_fatigue(context)
        assert result is not None
        assert result.level == FatigueLevel.HIGH
        assert result.tsb == -29.5
        assert "Ramp rate too high (8.5 TSS/week)" in result.concerns

    def test_bike_workout_while_traveling(self, engine, context) -> None:
        result = engine.check_workout(
            WorkoutProposal(Sport.BIKE, 60, WorkoutIntensity.THRESHOLD), context
        )
        assert not result.compatible
        assert result.issues == (
            "Workout (60 min) exceeds available time (45 min)",
            "Required equipment for bike may not be available",
            "High intensity restricted due to Achilles niggle",
            "Bike access uncertain while traveling",
        )

    def test_model_receives_rendered_context(self, engine, context) -> None:
        seen = []

        class Model:
            def complete(self, request):
                seen.append(request)
                return "Take a rest day."

        reply = engine.ask(Model(), CoachingScenario.DAILY_CHECKIN, context, "How should I train?")
        assert reply == "Take a rest day."
        assert "- Next Race: Tune-up 10k in 14 days" in seen[0].context_text


class TestRenderedContextProperties:
    def test_only_active_goals_and_constraints(self, engine, context) -> None:
        text = engine.render_context(context)
        assert "Winter 5k" not in text
        assert "Busy spring" not in text
        assert "- [TRAVEL] Conference - Destination: Porto" in text

    def test_bounded_lists(self, engine, context) -> None:
        text = engine.render_context(context)
        activity_lines = [l for l in text.splitlines() if ": Ride - Session" in l]
        wellness_lines = [l for l in text.splitlines() if "| Sleep:" in l]
        assert len(activity_lines) == 10
        assert len(wellness_lines) == 7
        assert activity_lines[0].startswith("- 2026-01-31")

    def test_summary_covers_all_activities(self, engine, context) -> None:
        text = engine.render_context(context)
        assert "Period Summary: 10:30:00 total, 700 TSS" in text

    def test_notes_are_one_line(self, engine, context) -> None:
        text = engine.render_context(context)
        assert "- Notes: Hotel bed was awful. Lots of walking yesterday." in text

    def test_mixed_timestamp_formats(self, engine, rows) -> None:
        rows["activities"][0]["start_date"] = "2026-01-31T18:30:00Z"
        context = engine.build_context(
            map_athlete(rows["athlete"]),
            recent_activities=[map_activity(r) for r in rows["activities"]],
            as_of=AS_OF,
        )
        assert context.recent_activities[0].activity_id == "a-0"
        assert "- 2026-01-31: Ride - Session 0" in engine.render_context(context)

    def test_same_inputs_same_text(self, engine, rows, context) -> None:
        again = engine.build_context(
            map_athlete(rows["athlete"]),
            goals=[map_goal(r) for r in reversed(rows["goals"])],
            constraints=[map_constraint(r) for r in rows["constraints"]],
            check_in=map_check_in(rows["check_in"]),
            recent_activities=[map_activity(r) for r in reversed(rows["activities"])],
            wellness_data=[map_wellness(r) for r in rows["wellness"]],
            fitness_metrics=map_fitness_metrics(rows["fitness"]),
            training_plan=map_training_plan(rows["plan"]),
            as_of=AS_OF,
        )
        assert engine.render_context(again) == engine.render_context(context)
