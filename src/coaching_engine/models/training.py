"""Training inputs: activities, fitness metrics and the training plan."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime

from coaching_engine.models.enums import PlanStatus


@dataclass(frozen=True)
class Activity:
    """A completed activity summary."""

    activity_id: str
    name: str
    activity_type: str  # As reported by the source, e.g. "Ride", "Run"
    start_time: datetime
    moving_time_s: float = 0.0
    distance_m: float | None = None
    training_load: float | None = None  # TSS or equivalent
    avg_hr: float | None = None
    avg_watts: float | None = None


@dataclass(frozen=True)
class FitnessMetrics:
    """Performance Management Chart values for a single day.

    CTL = 42-day load average (fitness), ATL = 7-day load average
    (fatigue), TSB = CTL - ATL (form).
    """

    as_of: date
    ctl: float
    atl: float
    tsb: float
    ramp_rate: float | None = None  # CTL change per week


@dataclass(frozen=True)
class PlanPhase:
    """A periodization block spanning plan weeks [start_week, end_week]."""

    name: str
    start_week: int  # 1-indexed
    end_week: int  # inclusive
    focus: str = ""
    description: str | None = None


@dataclass(frozen=True)
class TrainingPlan:
    plan_id: str
    title: str
    start_date: date
    end_date: date
    duration_weeks: int
    status: PlanStatus = PlanStatus.ACTIVE
    phases: tuple[PlanPhase, ...] = field(default_factory=tuple)
    description: str | None = None
