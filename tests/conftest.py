"""Shared test fixtures: athlete, goals, constraints, plan and wellness data."""

from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Callable

import pytest

from coaching_engine.models.athlete import AthleteProfile
from coaching_engine.models.constraints import (
    AvailabilityConstraint,
    InjuryConstraint,
    TravelConstraint,
)
from coaching_engine.models.enums import (
    ConstraintStatus,
    GoalPriority,
    GoalStatus,
    InjurySeverity,
    PlanStatus,
)
from coaching_engine.models.goals import FitnessGoal, PerformanceGoal, RaceGoal
from coaching_engine.models.training import (
    Activity,
    FitnessMetrics,
    PlanPhase,
    TrainingPlan,
)
from coaching_engine.models.wellness import DailyCheckIn, WellnessData


@pytest.fixture
def as_of() -> datetime:
    """Sunday morning, 2026-02-01 08:00 (naive local time)."""
    return datetime(2026, 2, 1, 8, 0)


@pytest.fixture
def athlete() -> AthleteProfile:
    """Age-group triathlete: FTP 250 W, threshold 4:30/km, CSS 1:45/100m."""
    return AthleteProfile(
        athlete_id="ath-1",
        display_name="Sam",
        weight_kg=70.0,
        ftp_watts=250.0,
        threshold_pace_s_per_km=270.0,  # 4:30/km
        css_s_per_100m=105.0,  # 1:45/100m
        max_hr=185,
        lthr=168,
        resting_hr=50,
    )


@pytest.fixture
def spring_race() -> RaceGoal:
    return RaceGoal(
        goal_id="g-race-1",
        title="Spring Half Marathon",
        priority=GoalPriority.A,
        target_date=date(2026, 3, 1),
        distance="21.1 km",
        target_time_s=5400.0,  # 1:30:00
    )


@pytest.fixture
def summer_race() -> RaceGoal:
    return RaceGoal(
        goal_id="g-race-2",
        title="Summer 70.3",
        priority=GoalPriority.A,
        target_date=date(2026, 5, 1),
        distance="70.3",
    )


@pytest.fixture
def goals(spring_race: RaceGoal, summer_race: RaceGoal) -> list:
    """Mixed priorities and statuses, deliberately out of priority order."""
    return [
        FitnessGoal(goal_id="g-fit", title="Consistency", priority=GoalPriority.C),
        summer_race,
        PerformanceGoal(
            goal_id="g-ftp", title="FTP 270", priority=GoalPriority.B,
            metric="ftp", current_value=250.0, target_value=270.0,
        ),
        spring_race,
        FitnessGoal(
            goal_id="g-old", title="Old goal", priority=GoalPriority.A,
            status=GoalStatus.COMPLETED,
        ),
    ]


@pytest.fixture
def knee_injury() -> InjuryConstraint:
    return InjuryConstraint(
        constraint_id="c-knee",
        title="Sore knee",
        start_date=date(2026, 1, 20),
        body_part="knee",
        severity=InjurySeverity.MILD,
        restrictions=("impact", "high_intensity"),
    )


@pytest.fixture
def constraints(knee_injury: InjuryConstraint) -> list:
    return [
        knee_injury,
        AvailabilityConstraint(
            constraint_id="c-busy",
            title="Busy month",
            start_date=date(2026, 1, 1),
            end_date=date(2026, 2, 28),
            hours_per_week=6.0,
        ),
        TravelConstraint(
            constraint_id="c-trip",
            title="Old trip",
            start_date=date(2026, 1, 5),
            end_date=date(2026, 1, 10),
            destination="Lisbon",
        ),
        InjuryConstraint(
            constraint_id="c-ankle",
            title="Ankle sprain",
            start_date=date(2025, 12, 1),
            status=ConstraintStatus.RESOLVED,
            restrictions=("run",),
        ),
    ]


@pytest.fixture
def training_plan() -> TrainingPlan:
    """16-week plan starting 2026-01-05 with a gap at weeks 9-10."""
    return TrainingPlan(
        plan_id="p-1",
        title="70.3 Build",
        start_date=date(2026, 1, 5),
        end_date=date(2026, 4, 26),
        duration_weeks=16,
        status=PlanStatus.ACTIVE,
        phases=(
            PlanPhase(name="Base", start_week=1, end_week=8, focus="aerobic endurance",
                      description="Long steady sessions"),
            PlanPhase(name="Build", start_week=11, end_week=16, focus="threshold"),
        ),
    )


@pytest.fixture
def fitness_metrics() -> FitnessMetrics:
    return FitnessMetrics(as_of=date(2026, 2, 1), ctl=62.4, atl=70.1, tsb=-7.7, ramp_rate=4.2)


@pytest.fixture
def check_in_factory() -> Callable[..., DailyCheckIn]:
    """Factory fixture for DailyCheckIn; unspecified metrics are absent."""

    def factory(**overrides) -> DailyCheckIn:
        fields = {"checkin_date": date(2026, 2, 1)}
        fields.update(overrides)
        return DailyCheckIn(**fields)

    return factory


@pytest.fixture
def wellness_history() -> list[WellnessData]:
    """Seven days ending 2026-01-31, oldest first; resting HR 50, HRV 60."""
    start = date(2026, 1, 25)
    return [
        WellnessData(
            day=start + timedelta(days=i),
            resting_hr=50.0,
            hrv=60.0,
            sleep_hours=7.5,
            fatigue=4.0,
            soreness=3.0,
        )
        for i in range(7)
    ]


@pytest.fixture
def activities() -> list[Activity]:
    """Twelve daily rides, oldest first, one hour and 60 TSS each."""
    start = datetime(2026, 1, 20, 7, 0)
    return [
        Activity(
            activity_id=f"a-{i}",
            name=f"Ride {i}",
            activity_type="Ride",
            start_time=start + timedelta(days=i),
            moving_time_s=3600.0,
            training_load=60.0,
        )
        for i in range(12)
    ]
