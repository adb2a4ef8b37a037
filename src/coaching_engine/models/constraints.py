"""Constraint variants: injuries, travel and reduced availability."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Union

from coaching_engine.models.enums import (
    ConstraintStatus,
    ConstraintType,
    InjurySeverity,
)


@dataclass(frozen=True)
class _ConstraintBase:
    constraint_id: str
    title: str
    start_date: date
    status: ConstraintStatus = ConstraintStatus.ACTIVE
    end_date: date | None = None  # None = open-ended
    description: str | None = None

    def is_active_on(self, as_of: date | datetime) -> bool:
        """True if the constraint applies on *as_of*.

        Status must be ACTIVE and the calendar day must fall within
        [start_date, end_date]; an open-ended constraint never expires.
        """
        if self.status != ConstraintStatus.ACTIVE:
            return False
        day = as_of.date() if isinstance(as_of, datetime) else as_of
        if day < self.start_date:
            return False
        if self.end_date is not None and day > self.end_date:
            return False
        return True


@dataclass(frozen=True)
class InjuryConstraint(_ConstraintBase):
    """An injury with the activity categories it rules out.

    ``restrictions`` holds sport names ("run", "swim", ...) or activity
    categories ("high_intensity", "impact").
    """

    body_part: str | None = None
    severity: InjurySeverity | None = None
    restrictions: tuple[str, ...] = field(default_factory=tuple)

    @property
    def constraint_type(self) -> ConstraintType:
        return ConstraintType.INJURY


@dataclass(frozen=True)
class TravelConstraint(_ConstraintBase):
    destination: str | None = None
    equipment_available: tuple[str, ...] = field(default_factory=tuple)
    facilities_available: tuple[str, ...] = field(default_factory=tuple)

    @property
    def constraint_type(self) -> ConstraintType:
        return ConstraintType.TRAVEL


@dataclass(frozen=True)
class AvailabilityConstraint(_ConstraintBase):
    hours_per_week: float | None = None
    days_available: tuple[str, ...] = field(default_factory=tuple)

    @property
    def constraint_type(self) -> ConstraintType:
        return ConstraintType.AVAILABILITY


Constraint = Union[InjuryConstraint, TravelConstraint, AvailabilityConstraint]
