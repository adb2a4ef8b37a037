"""Boundary mapping from stored athlete rows to coaching_engine models."""

from athlete_records.exceptions import (
    InvalidFieldError,
    MissingFieldError,
    RecordError,
    UnknownVariantError,
)
from athlete_records.mapper import (
    map_activity,
    map_athlete,
    map_check_in,
    map_constraint,
    map_fitness_metrics,
    map_goal,
    map_training_plan,
    map_wellness,
)

__all__ = [
    "InvalidFieldError",
    "MissingFieldError",
    "RecordError",
    "UnknownVariantError",
    "map_activity",
    "map_athlete",
    "map_check_in",
    "map_constraint",
    "map_fitness_metrics",
    "map_goal",
    "map_training_plan",
    "map_wellness",
]
