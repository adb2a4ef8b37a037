"""Periodization math: where in a plan a given moment falls.

Plans are divided into 1-indexed weeks counted from the plan's start
date; each phase covers an inclusive week range. Phases may leave gaps,
in which case no phase is current.
"""

from __future__ import annotations

import math
from datetime import date, datetime, time
from typing import Sequence

from coaching_engine.models.training import PlanPhase

_SECONDS_PER_DAY = 86_400.0


def start_of_day(day: date, like: datetime) -> datetime:
    """Midnight of *day*, carrying the timezone of *like* (if any)."""
    return datetime.combine(day, time.min, tzinfo=like.tzinfo)


def days_between(start: date, as_of: datetime) -> float:
    """Fractional days from midnight of *start* to *as_of*."""
    delta = as_of - start_of_day(start, as_of)
    return delta.total_seconds() / _SECONDS_PER_DAY


def week_in_plan(start_date: date, as_of: datetime) -> int:
    """1-indexed plan week for *as_of*.

    ``ceil(days since start / 7)``, never less than 1: the start day
    itself is week 1, start + 70 days is week 10, and any moment past
    start + 70 days belongs to week 11.

    Args:
        start_date: First day of the plan.
        as_of: Moment to locate.

    Returns:
        Week number (>= 1).
    """
    return max(1, math.ceil(days_between(start_date, as_of) / 7.0))


def phase_for_week(week: int, phases: Sequence[PlanPhase]) -> PlanPhase | None:
    """First phase whose inclusive [start_week, end_week] contains *week*.

    Returns:
        The matching phase, or None if *week* falls in a gap or outside
        every phase.
    """
    for phase in phases:
        if phase.start_week <= week <= phase.end_week:
            return phase
    return None
