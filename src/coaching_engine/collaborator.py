"""Boundary with the language-model collaborator.

The engine only prepares what the model needs (scenario, rendered context,
the athlete's message). Calling a model, and choosing its name, limits or
streaming, belongs to the ``CoachingModel`` implementation the caller
injects.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, auto
from typing import Protocol


class CoachingScenario(IntEnum):
    """Which coaching conversation the request belongs to."""

    DAILY_CHECKIN = auto()
    WORKOUT_RECOMMENDATION = auto()
    PLAN_ADJUSTMENT = auto()
    GENERAL_COACHING = auto()


@dataclass(frozen=True)
class CoachingRequest:
    scenario: CoachingScenario
    context_text: str
    user_message: str = ""


class CoachingModel(Protocol):
    """Anything that can turn a CoachingRequest into a coach's reply."""

    def complete(self, request: CoachingRequest) -> str:
        ...
