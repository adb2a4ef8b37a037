"""Goal, race, phase and constraint resolution at a point in time.

Every function takes ``as_of`` explicitly; nothing reads the clock.
Inconsistent data (past races left active, plans whose dates do not cover
``as_of``, phase gaps) is excluded from the result rather than rejected.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from datetime import date, datetime, timezone
from typing import Iterable, Sequence

from coaching_engine.math.periodization import days_between, phase_for_week, week_in_plan
from coaching_engine.models.constraints import Constraint
from coaching_engine.models.enums import PlanStatus
from coaching_engine.models.goals import Goal, RaceGoal
from coaching_engine.models.training import Activity, PlanPhase, TrainingPlan
from coaching_engine.models.wellness import WellnessData

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PhaseResolution:
    """The phase a plan is in at ``as_of`` and the 1-indexed plan week."""

    phase: PlanPhase
    week_in_plan: int


def filter_active_goals(goals: Iterable[Goal]) -> list[Goal]:
    """Active goals ordered A, then B, then C; input order kept within a priority."""
    active = [g for g in goals if g.is_active]
    return sorted(active, key=lambda g: g.priority)


def find_next_race(goals: Iterable[Goal], as_of: datetime) -> RaceGoal | None:
    """Earliest active race goal whose target date is today or later."""
    today = as_of.date()
    upcoming = [
        g for g in goals
        if isinstance(g, RaceGoal)
        and g.is_active
        and g.target_date is not None
        and g.target_date >= today
    ]
    if not upcoming:
        return None
    return min(upcoming, key=lambda g: g.target_date)


def days_until(target_date: date | None, as_of: datetime) -> int | None:
    """Whole days until *target_date*, rounded up; None without a date."""
    if target_date is None:
        return None
    return math.ceil(-days_between(target_date, as_of))


def resolve_current_phase(
    plan: TrainingPlan | None,
    as_of: datetime,
) -> PhaseResolution | None:
    """Locate the current phase and week of an active plan.

    Returns:
        PhaseResolution, or None when there is no plan, the plan is not
        active, ``as_of`` is outside [start_date, end_date], or the current
        week falls in a gap between phases.
    """
    if plan is None or plan.status != PlanStatus.ACTIVE:
        return None

    today = as_of.date()
    if not plan.start_date <= today <= plan.end_date:
        logger.debug(
            "Plan %s not in range on %s (%s to %s)",
            plan.plan_id, today, plan.start_date, plan.end_date,
        )
        return None

    week = week_in_plan(plan.start_date, as_of)
    phase = phase_for_week(week, plan.phases)
    if phase is None:
        logger.debug("Plan %s week %d has no phase", plan.plan_id, week)
        return None
    return PhaseResolution(phase=phase, week_in_plan=week)


def filter_active_constraints(
    constraints: Iterable[Constraint],
    as_of: datetime,
) -> list[Constraint]:
    """Constraints that are ACTIVE and whose date range covers *as_of*."""
    kept: list[Constraint] = []
    for constraint in constraints:
        if constraint.is_active_on(as_of):
            kept.append(constraint)
        else:
            logger.debug("Dropping inactive constraint %s", constraint.constraint_id)
    return kept


def _utc_naive(moment: datetime) -> datetime:
    """Comparable form of *moment*: aware values become naive UTC, naive ones are kept."""
    if moment.utcoffset() is None:
        return moment
    return moment.astimezone(timezone.utc).replace(tzinfo=None)


def sort_activities(activities: Sequence[Activity]) -> list[Activity]:
    """Most recent first. Timezone-aware and naive start times may be mixed."""
    return sorted(activities, key=lambda a: _utc_naive(a.start_time), reverse=True)


def sort_wellness(history: Sequence[WellnessData]) -> list[WellnessData]:
    """Most recent first."""
    return sorted(history, key=lambda w: w.day, reverse=True)
