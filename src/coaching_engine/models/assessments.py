"""Leaf evaluator outputs and the workout proposal they check."""

from __future__ import annotations

from dataclasses import dataclass, field

from coaching_engine.models.enums import (
    FatigueLevel,
    ReadinessLevel,
    Sport,
    WorkoutIntensity,
)


@dataclass(frozen=True)
class ReadinessAssessment:
    readiness: ReadinessLevel
    score: int  # 0-100
    concerns: tuple[str, ...] = field(default_factory=tuple)
    recommendations: tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class FatigueAssessment:
    level: FatigueLevel
    tsb: float
    concerns: tuple[str, ...] = field(default_factory=tuple)
    recommendations: tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class WorkoutProposal:
    """A candidate workout to check against the athlete's constraints."""

    sport: Sport
    duration_min: float
    intensity: WorkoutIntensity


@dataclass(frozen=True)
class ConstraintCompatibility:
    compatible: bool
    issues: tuple[str, ...] = field(default_factory=tuple)
    modifications: tuple[str, ...] = field(default_factory=tuple)
