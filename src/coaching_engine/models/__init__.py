"""Data models for the coaching engine."""

from coaching_engine.models.assessments import (
    ConstraintCompatibility,
    FatigueAssessment,
    ReadinessAssessment,
    WorkoutProposal,
)
from coaching_engine.models.athlete import AthleteProfile
from coaching_engine.models.constraints import (
    AvailabilityConstraint,
    Constraint,
    InjuryConstraint,
    TravelConstraint,
)
from coaching_engine.models.context import CoachingContext
from coaching_engine.models.enums import (
    ConstraintStatus,
    ConstraintType,
    FatigueLevel,
    FormStatus,
    GoalPriority,
    GoalStatus,
    GoalType,
    InjurySeverity,
    PlanStatus,
    ReadinessLevel,
    Sport,
    TravelStatus,
    TrendDirection,
    WorkoutIntensity,
)
from coaching_engine.models.goals import (
    FitnessGoal,
    Goal,
    HealthGoal,
    PerformanceGoal,
    RaceGoal,
)
from coaching_engine.models.policy import ContextLimits, FatiguePolicy, ReadinessPolicy
from coaching_engine.models.training import (
    Activity,
    FitnessMetrics,
    PlanPhase,
    TrainingPlan,
)
from coaching_engine.models.wellness import DailyCheckIn, WellnessData

__all__ = [
    "Activity",
    "AthleteProfile",
    "AvailabilityConstraint",
    "CoachingContext",
    "Constraint",
    "ConstraintCompatibility",
    "ConstraintStatus",
    "ConstraintType",
    "ContextLimits",
    "DailyCheckIn",
    "FatigueAssessment",
    "FatigueLevel",
    "FatiguePolicy",
    "FitnessGoal",
    "FitnessMetrics",
    "FormStatus",
    "Goal",
    "GoalPriority",
    "GoalStatus",
    "GoalType",
    "HealthGoal",
    "InjuryConstraint",
    "InjurySeverity",
    "PerformanceGoal",
    "PlanPhase",
    "PlanStatus",
    "RaceGoal",
    "ReadinessAssessment",
    "ReadinessLevel",
    "ReadinessPolicy",
    "Sport",
    "TrainingPlan",
    "TravelConstraint",
    "TravelStatus",
    "TrendDirection",
    "WellnessData",
    "WorkoutIntensity",
    "WorkoutProposal",
]
