"""Coaching decision and context engine.

Turns an athlete's wellness check-in, training load, constraints, goals and
plan into readiness and fatigue assessments, workout compatibility checks
and a bounded text context for a language-model coach.
"""

from coaching_engine.collaborator import CoachingModel, CoachingRequest, CoachingScenario
from coaching_engine.context import build_coaching_context, serialize_context_for_prompt
from coaching_engine.engine import CoachingEngine
from coaching_engine.rules import (
    assess_fatigue,
    assess_readiness,
    check_constraint_compatibility,
)

__all__ = [
    "CoachingEngine",
    "CoachingModel",
    "CoachingRequest",
    "CoachingScenario",
    "assess_fatigue",
    "assess_readiness",
    "build_coaching_context",
    "check_constraint_compatibility",
    "serialize_context_for_prompt",
]
