"""CoachingEngine: the entry point callers use for coaching decisions."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Iterable, Sequence

from coaching_engine.collaborator import CoachingModel, CoachingRequest, CoachingScenario
from coaching_engine.context.builder import build_coaching_context
from coaching_engine.context.serializer import serialize_context_for_prompt
from coaching_engine.math.training_load import (
    FormTrend,
    RaceReadiness,
    RecoveryAssessment,
    WeeklyLoad,
    assess_recovery,
    calculate_form_trend,
    calculate_race_readiness,
    calculate_weekly_loads,
    classify_form,
    wellness_baselines,
)
from coaching_engine.models.assessments import (
    ConstraintCompatibility,
    FatigueAssessment,
    ReadinessAssessment,
    WorkoutProposal,
)
from coaching_engine.models.athlete import AthleteProfile
from coaching_engine.models.constraints import Constraint
from coaching_engine.models.context import CoachingContext
from coaching_engine.models.enums import FormStatus
from coaching_engine.models.goals import Goal
from coaching_engine.models.policy import (
    DEFAULT_CONTEXT_LIMITS,
    DEFAULT_FATIGUE_POLICY,
    DEFAULT_READINESS_POLICY,
    ContextLimits,
    FatiguePolicy,
    ReadinessPolicy,
)
from coaching_engine.models.training import Activity, FitnessMetrics, TrainingPlan
from coaching_engine.models.wellness import DailyCheckIn, WellnessData
from coaching_engine.rules.compatibility import check_constraint_compatibility
from coaching_engine.rules.fatigue import assess_fatigue
from coaching_engine.rules.readiness import assess_readiness

logger = logging.getLogger(__name__)


class CoachingEngine:
    """Builds coaching contexts and runs the leaf evaluators against them.

    The engine holds only its (frozen) policy tables and limits, so one
    instance can serve concurrent requests.

    Usage:
        engine = CoachingEngine()
        context = engine.build_context(athlete, goals=goals, check_in=check_in)
        readiness = engine.assess_readiness(context)
        text = engine.render_context(context)
    """

    def __init__(
        self,
        readiness_policy: ReadinessPolicy | None = None,
        fatigue_policy: FatiguePolicy | None = None,
        limits: ContextLimits | None = None,
    ) -> None:
        self.readiness_policy = readiness_policy or DEFAULT_READINESS_POLICY
        self.fatigue_policy = fatigue_policy or DEFAULT_FATIGUE_POLICY
        self.limits = limits or DEFAULT_CONTEXT_LIMITS

    def build_context(
        self,
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
        """See ``build_coaching_context()``."""
        return build_coaching_context(
            athlete,
            goals=goals,
            constraints=constraints,
            check_in=check_in,
            recent_activities=recent_activities,
            wellness_data=wellness_data,
            fitness_metrics=fitness_metrics,
            training_plan=training_plan,
            as_of=as_of,
        )

    def render_context(self, context: CoachingContext) -> str:
        return serialize_context_for_prompt(context, self.limits)

    def assess_readiness(
        self,
        context: CoachingContext,
        baseline_resting_hr: float | None = None,
        baseline_hrv: float | None = None,
    ) -> ReadinessAssessment | None:
        """Score today's readiness from the context's check-in.

        Baselines not passed explicitly are taken from the athlete profile
        (resting HR) or the mean of the recent wellness history.

        Returns:
            ReadinessAssessment, or None if no check-in was submitted.
        """
        if context.check_in is None:
            return None

        history_rhr, history_hrv = wellness_baselines(context.wellness_history)
        if baseline_resting_hr is None:
            baseline_resting_hr = (
                context.athlete.resting_hr
                if context.athlete.resting_hr is not None
                else history_rhr
            )
        if baseline_hrv is None:
            baseline_hrv = history_hrv

        return assess_readiness(
            context.check_in,
            baseline_resting_hr=baseline_resting_hr,
            baseline_hrv=baseline_hrv,
            policy=self.readiness_policy,
        )

    def assess_fatigue(self, context: CoachingContext) -> FatigueAssessment | None:
        """Fatigue from the context's fitness metrics, or None without them."""
        if context.fitness_metrics is None:
            return None
        return assess_fatigue(context.fitness_metrics, self.fatigue_policy)

    def form_status(self, context: CoachingContext) -> FormStatus | None:
        """Coarse form label for the context's TSB, or None without metrics."""
        if context.fitness_metrics is None:
            return None
        return classify_form(context.fitness_metrics.tsb)

    def form_trend(self, fitness_history: Sequence[FitnessMetrics]) -> FormTrend | None:
        return calculate_form_trend(fitness_history)

    def assess_recovery(
        self, fitness_history: Sequence[FitnessMetrics]
    ) -> RecoveryAssessment | None:
        return assess_recovery(fitness_history)

    def race_readiness(
        self,
        context: CoachingContext,
        fitness_history: Sequence[FitnessMetrics],
    ) -> RaceReadiness | None:
        """Project form for the context's next race.

        Args:
            context: Supplies the next race and the day to project from.
            fitness_history: Daily metrics, oldest first.

        Returns:
            RaceReadiness, or None without an upcoming race or with fewer
            than seven days of history.
        """
        race = context.next_race
        if race is None or race.target_date is None:
            return None
        return calculate_race_readiness(fitness_history, race.target_date, context.as_of.date())

    def weekly_loads(self, context: CoachingContext) -> list[WeeklyLoad]:
        """Weekly totals over every activity in the context."""
        return calculate_weekly_loads(context.recent_activities)

    def check_workout(
        self, workout: WorkoutProposal, context: CoachingContext
    ) -> ConstraintCompatibility:
        return check_constraint_compatibility(workout, context)

    def prepare_request(
        self,
        scenario: CoachingScenario,
        context: CoachingContext,
        user_message: str = "",
    ) -> CoachingRequest:
        """Render *context* and package it for the language-model collaborator."""
        return CoachingRequest(
            scenario=scenario,
            context_text=self.render_context(context),
            user_message=user_message,
        )

    def ask(
        self,
        model: CoachingModel,
        scenario: CoachingScenario,
        context: CoachingContext,
        user_message: str = "",
    ) -> str:
        """Hand a prepared request to *model* and return its reply.

        Errors raised by the model propagate unchanged.
        """
        request = self.prepare_request(scenario, context, user_message)
        logger.info(
            "Handing %s request for %s to coaching model (%d chars of context)",
            scenario.name.lower(), context.athlete.athlete_id, len(request.context_text),
        )
        return model.complete(request)
