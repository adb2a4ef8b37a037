"""Goal variants: race, performance, fitness and health goals.

``Goal`` is a closed union of four frozen dataclasses. Code that needs the
variant payload narrows with ``isinstance``; ``goal_type`` exposes the
discriminator for rendering.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Union

from coaching_engine.models.enums import GoalPriority, GoalStatus, GoalType


@dataclass(frozen=True)
class _GoalBase:
    goal_id: str
    title: str
    priority: GoalPriority = GoalPriority.B
    status: GoalStatus = GoalStatus.ACTIVE
    target_date: date | None = None
    description: str | None = None

    @property
    def is_active(self) -> bool:
        return self.status == GoalStatus.ACTIVE


@dataclass(frozen=True)
class RaceGoal(_GoalBase):
    """A target event, e.g. a 70.3 on a given date."""

    event_name: str | None = None
    distance: str | None = None
    location: str | None = None
    target_time_s: float | None = None

    @property
    def goal_type(self) -> GoalType:
        return GoalType.RACE


@dataclass(frozen=True)
class PerformanceGoal(_GoalBase):
    """Move a measurable metric (FTP, threshold pace, ...) to a target."""

    metric: str | None = None
    current_value: float | None = None
    target_value: float | None = None

    @property
    def goal_type(self) -> GoalType:
        return GoalType.PERFORMANCE


@dataclass(frozen=True)
class FitnessGoal(_GoalBase):
    """Volume or consistency goal."""

    metric: str | None = None
    target_value: float | None = None

    @property
    def goal_type(self) -> GoalType:
        return GoalType.FITNESS


@dataclass(frozen=True)
class HealthGoal(_GoalBase):
    """Weight or body-composition goal."""

    metric: str | None = None
    current_value: float | None = None
    target_value: float | None = None

    @property
    def goal_type(self) -> GoalType:
        return GoalType.HEALTH


Goal = Union[RaceGoal, PerformanceGoal, FitnessGoal, HealthGoal]
