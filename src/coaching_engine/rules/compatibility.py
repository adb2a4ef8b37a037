"""Workout vs. constraint compatibility.

Checks a proposed workout against today's available time, declared
equipment access, active injury restrictions and travel status. Every
check is independent and cumulative; the workout is compatible only when
no check raised an issue. Missing optional data skips the matching check.
"""

from __future__ import annotations

import logging

from coaching_engine.models.assessments import ConstraintCompatibility, WorkoutProposal
from coaching_engine.models.constraints import InjuryConstraint
from coaching_engine.models.context import CoachingContext
from coaching_engine.models.enums import (
    EQUIPMENT_BY_SPORT,
    HIGH_INTENSITY_LEVELS,
    RESTRICTION_HIGH_INTENSITY,
    RESTRICTION_IMPACT,
    TRAVEL_FACILITY_BY_SPORT,
    Sport,
    TravelStatus,
)

logger = logging.getLogger(__name__)

_Findings = tuple[list[str], list[str]]


def _sport_label(sport: Sport) -> str:
    return sport.name.lower()


def _has_token(available: tuple[str, ...], token: str) -> bool:
    """Case-insensitive substring match of *token* in any available item."""
    token = token.lower()
    return any(token in item.lower() for item in available)


def _check_time(workout: WorkoutProposal, available_min: float | None) -> _Findings:
    issues: list[str] = []
    mods: list[str] = []
    if available_min is not None and workout.duration_min > available_min:
        issues.append(
            f"Workout ({workout.duration_min:g} min) exceeds available time "
            f"({available_min:g} min)"
        )
        mods.append(f"Reduce workout to {available_min:g} minutes")
    return issues, mods


def _check_equipment(sport: Sport, available: tuple[str, ...]) -> _Findings:
    issues: list[str] = []
    mods: list[str] = []
    needed = EQUIPMENT_BY_SPORT.get(sport, ())
    if not needed or not available:
        return issues, mods
    if not any(_has_token(available, token) for token in needed):
        issues.append(f"Required equipment for {_sport_label(sport)} may not be available")
        mods.append("Consider alternative sport with available equipment")
    return issues, mods


def _check_injury(workout: WorkoutProposal, injury: InjuryConstraint) -> _Findings:
    issues: list[str] = []
    mods: list[str] = []
    restrictions = {r.strip().lower() for r in injury.restrictions}
    sport = _sport_label(workout.sport)

    if sport in restrictions:
        issues.append(f"{sport} is restricted due to {injury.title}")
        mods.append(f"Avoid {sport} until injury resolves")

    if RESTRICTION_HIGH_INTENSITY in restrictions and workout.intensity in HIGH_INTENSITY_LEVELS:
        issues.append(f"High intensity restricted due to {injury.title}")
        mods.append("Reduce intensity to moderate or below")

    if RESTRICTION_IMPACT in restrictions and workout.sport == Sport.RUN:
        issues.append(f"Running (impact) restricted due to {injury.title}")
        mods.append("Consider swimming or cycling instead")

    return issues, mods


def _check_travel(sport: Sport, available: tuple[str, ...]) -> _Findings:
    issues: list[str] = []
    mods: list[str] = []
    facility = TRAVEL_FACILITY_BY_SPORT.get(sport)
    if facility is None or _has_token(available, facility):
        return issues, mods
    if sport == Sport.SWIM:
        issues.append("Pool access uncertain while traveling")
        mods.append("Confirm pool access or choose alternative")
    else:
        issues.append("Bike access uncertain while traveling")
        mods.append("Consider running or hotel gym workout")
    return issues, mods


def check_constraint_compatibility(
    workout: WorkoutProposal,
    context: CoachingContext,
) -> ConstraintCompatibility:
    """Check whether *workout* fits the athlete's situation in *context*.

    Args:
        workout: Proposed sport, duration (minutes) and intensity.
        context: Coaching context; its check-in supplies time, equipment
            and travel status, its constraints supply injuries.

    Returns:
        ConstraintCompatibility with all issues and suggested
        modifications, in check order.
    """
    issues: list[str] = []
    mods: list[str] = []

    def _merge(findings: _Findings) -> None:
        issues.extend(findings[0])
        mods.extend(findings[1])

    check_in = context.check_in
    equipment = check_in.equipment_access if check_in is not None else ()

    if check_in is not None:
        _merge(_check_time(workout, check_in.available_time_min))
        _merge(_check_equipment(workout.sport, equipment))

    for constraint in context.constraints:
        if isinstance(constraint, InjuryConstraint) and constraint.is_active_on(context.as_of):
            _merge(_check_injury(workout, constraint))

    if check_in is not None and check_in.travel_status == TravelStatus.TRAVELING:
        _merge(_check_travel(workout.sport, equipment))

    if issues:
        logger.debug(
            "Workout %s/%s has %d compatibility issue(s)",
            _sport_label(workout.sport), workout.intensity.name.lower(), len(issues),
        )

    return ConstraintCompatibility(
        compatible=not issues,
        issues=tuple(issues),
        modifications=tuple(mods),
    )
