"""Coaching context: the aggregate handed to the language model."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from coaching_engine.models.athlete import AthleteProfile
from coaching_engine.models.constraints import Constraint
from coaching_engine.models.goals import Goal, RaceGoal
from coaching_engine.models.training import (
    Activity,
    FitnessMetrics,
    PlanPhase,
    TrainingPlan,
)
from coaching_engine.models.wellness import DailyCheckIn, WellnessData


@dataclass(frozen=True)
class CoachingContext:
    """Everything the coach knows about the athlete at ``as_of``.

    Built fresh by ``build_coaching_context()`` on every call. Goals and
    constraints are already filtered to the active ones; activities and
    wellness history are sorted most-recent-first.
    """

    athlete: AthleteProfile
    as_of: datetime

    goals: tuple[Goal, ...] = field(default_factory=tuple)
    constraints: tuple[Constraint, ...] = field(default_factory=tuple)

    check_in: DailyCheckIn | None = None
    recent_activities: tuple[Activity, ...] = field(default_factory=tuple)
    wellness_history: tuple[WellnessData, ...] = field(default_factory=tuple)
    fitness_metrics: FitnessMetrics | None = None

    # Plan context
    training_plan: TrainingPlan | None = None
    current_phase: PlanPhase | None = None
    week_in_plan: int | None = None

    # Race context
    next_race: RaceGoal | None = None
    days_to_race: int | None = None
