"""Coaching context assembly.

Combines the athlete's raw records into one ``CoachingContext``: active
goals in priority order, constraints active at ``as_of``, activities and
wellness history most-recent-first, the next race and the current plan
phase. The readiness, fatigue and compatibility evaluators are not called
here.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Iterable, Sequence

from coaching_engine.models.athlete import AthleteProfile
from coaching_engine.models.constraints import Constraint
from coaching_engine.models.context import CoachingContext
from coaching_engine.models.goals import Goal
from coaching_engine.models.training import Activity, FitnessMetrics, TrainingPlan
from coaching_engine.models.wellness import DailyCheckIn, WellnessData
from coaching_engine.resolver import (
    days_until,
    filter_active_constraints,
    filter_active_goals,
    find_next_race,
    resolve_current_phase,
    sort_activities,
    sort_wellness,
)

logger = logging.getLogger(__name__)


def build_coaching_context(
    athlete: AthleteProfile,
    goals: Iterable[Goal] = (),
    constraints: Iterable[Constraint] = (),
    check_in: DailyCheckIn | None = None,
    recent_activities: Sequence[Activity] = (),
    wellness_data: Sequence[WellnessData] = (),
    fitness_metrics: FitnessMetrics | None = None,
    training_plan: TrainingPlan | None = None,
    as_of: datetime | None = None,
) -> CoachingContext:
    """Build a complete coaching context for one coaching decision.

    Args:
        athlete: Athlete profile.
        goals: All of the athlete's goals, any status.
        constraints: All of the athlete's constraints, any status.
        check_in: Today's check-in, if submitted.
        recent_activities: Recent activities in any order.
        wellness_data: Wellness history in any order.
        fitness_metrics: Current CTL/ATL/TSB, if known.
        training_plan: The athlete's current plan, if any.
        as_of: Moment the context describes. Defaults to now.

    Returns:
        A freshly built CoachingContext.
    """
    now = as_of if as_of is not None else datetime.now()

    active_goals = filter_active_goals(goals)
    active_constraints = filter_active_constraints(constraints, now)

    next_race = find_next_race(active_goals, now)
    days_to_race = days_until(next_race.target_date, now) if next_race is not None else None

    resolution = resolve_current_phase(training_plan, now)

    context = CoachingContext(
        athlete=athlete,
        as_of=now,
        goals=tuple(active_goals),
        constraints=tuple(active_constraints),
        check_in=check_in,
        recent_activities=tuple(sort_activities(recent_activities)),
        wellness_history=tuple(sort_wellness(wellness_data)),
        fitness_metrics=fitness_metrics,
        training_plan=training_plan,
        current_phase=resolution.phase if resolution is not None else None,
        week_in_plan=resolution.week_in_plan if resolution is not None else None,
        next_race=next_race,
        days_to_race=days_to_race,
    )

    logger.info(
        "Built coaching context for %s: %d goals, %d constraints, %d activities",
        athlete.athlete_id, len(context.goals), len(context.constraints),
        len(context.recent_activities),
    )
    return context
