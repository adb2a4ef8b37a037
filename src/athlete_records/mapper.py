"""Pure functions mapping stored athlete rows to coaching_engine models.

No I/O: takes the snake_case dicts a database client returns (one dict per
row) and builds the frozen model objects the engine consumes. Rows of the
wrong shape are rejected here with a ``RecordError`` so the engine never
sees them; unknown extra columns are ignored.
"""

from __future__ import annotations

import logging
from datetime import date, datetime
from enum import IntEnum
from typing import Any, Callable, Mapping, Optional, TypeVar

from athlete_records.exceptions import (
    InvalidFieldError,
    MissingFieldError,
    RecordError,
    UnknownVariantError,
)
from coaching_engine.models.athlete import AthleteProfile
from coaching_engine.models.constraints import (
    AvailabilityConstraint,
    Constraint,
    InjuryConstraint,
    TravelConstraint,
)
from coaching_engine.models.enums import (
    ConstraintStatus,
    GoalPriority,
    GoalStatus,
    InjurySeverity,
    PlanStatus,
    TravelStatus,
)
from coaching_engine.models.goals import (
    FitnessGoal,
    Goal,
    HealthGoal,
    PerformanceGoal,
    RaceGoal,
)
from coaching_engine.models.training import (
    Activity,
    FitnessMetrics,
    PlanPhase,
    TrainingPlan,
)
from coaching_engine.models.wellness import DailyCheckIn, WellnessData

logger = logging.getLogger(__name__)

Row = Mapping[str, Any]
_E = TypeVar("_E", bound=IntEnum)
_T = TypeVar("_T")


# ---------------------------------------------------------------------------
# Field readers: each raises a RecordError naming the offending column
# ---------------------------------------------------------------------------


def _require(row: Row, field: str) -> Any:
    value = row.get(field)
    if value is None or value == "":
        raise MissingFieldError(field)
    return value


def _text(row: Row, field: str) -> Optional[str]:
    value = row.get(field)
    if value is None:
        return None
    if not isinstance(value, str):
        raise InvalidFieldError(field, value)
    return value


def _number(row: Row, field: str) -> Optional[float]:
    value = row.get(field)
    if value is None:
        return None
    # bool is an int subclass but never a valid measurement
    if isinstance(value, bool):
        raise InvalidFieldError(field, value)
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            raise InvalidFieldError(field, value) from None
    raise InvalidFieldError(field, value)


def _integer(row: Row, field: str) -> Optional[int]:
    value = _number(row, field)
    if value is None:
        return None
    if not value.is_integer():
        raise InvalidFieldError(field, row.get(field))
    return int(value)


def _parse_date(field: str, value: Any) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            # Accept full timestamps as well as bare dates
            return date.fromisoformat(value[:10])
        except ValueError:
            raise InvalidFieldError(field, value) from None
    raise InvalidFieldError(field, value)


def _date(row: Row, field: str) -> Optional[date]:
    value = row.get(field)
    if value is None or value == "":
        return None
    return _parse_date(field, value)


def _required_date(row: Row, field: str) -> date:
    return _parse_date(field, _require(row, field))


def _required_datetime(row: Row, field: str) -> datetime:
    value = _require(row, field)
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if isinstance(value, str):
        try:
            return datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError:
            raise InvalidFieldError(field, value) from None
    raise InvalidFieldError(field, value)


def _enum(row: Row, field: str, enum_cls: type[_E], default: Optional[_E] = None) -> Optional[_E]:
    value = row.get(field)
    if value is None or value == "":
        return default
    if isinstance(value, enum_cls):
        return value
    if not isinstance(value, str):
        raise UnknownVariantError(field, value)
    try:
        return enum_cls[value.strip().upper()]
    except KeyError:
        raise UnknownVariantError(field, value) from None


def _str_tuple(row: Row, field: str) -> tuple[str, ...]:
    value = row.get(field)
    if value is None:
        return ()
    if isinstance(value, str) or not isinstance(value, (list, tuple)):
        raise InvalidFieldError(field, value)
    if not all(isinstance(item, str) for item in value):
        raise InvalidFieldError(field, value)
    return tuple(value)


def _mapped(kind: str, builder: Callable[[Row], _T], row: Row) -> _T:
    """Run *builder* on *row*, logging the rejection before re-raising."""
    if not isinstance(row, Mapping):
        logger.warning("Rejected %s record: expected a mapping, got %s", kind, type(row).__name__)
        raise RecordError(f"{kind} record must be a mapping, got {type(row).__name__}")
    try:
        return builder(row)
    except RecordError as exc:
        logger.warning("Rejected %s record %s: %s", kind, row.get("id"), exc)
        raise


# ---------------------------------------------------------------------------
# Public mappers
# ---------------------------------------------------------------------------


def map_athlete(row: Row) -> AthleteProfile:
    """Map an athletes row to an AthleteProfile."""
    return _mapped("athlete", _build_athlete, row)


def _build_athlete(row: Row) -> AthleteProfile:
    return AthleteProfile(
        athlete_id=str(_require(row, "id")),
        display_name=_text(row, "display_name"),
        weight_kg=_number(row, "weight_kg"),
        ftp_watts=_number(row, "ftp_watts"),
        threshold_pace_s_per_km=_number(row, "running_threshold_pace_sec_per_km"),
        css_s_per_100m=_number(row, "css_sec_per_100m"),
        max_hr=_integer(row, "max_heart_rate"),
        lthr=_integer(row, "lthr"),
        resting_hr=_integer(row, "resting_heart_rate"),
    )


def map_goal(row: Row) -> Goal:
    """Map a goals row to the Goal variant named by ``goal_type``.

    Raises:
        UnknownVariantError: If ``goal_type`` is not race, performance,
            fitness or health.
    """
    return _mapped("goal", _build_goal, row)


def _build_goal(row: Row) -> Goal:
    goal_type = _require(row, "goal_type")
    common: dict[str, Any] = {
        "goal_id": str(_require(row, "id")),
        "title": str(_require(row, "title")),
        "priority": _enum(row, "priority", GoalPriority, GoalPriority.B),
        "status": _enum(row, "status", GoalStatus, GoalStatus.ACTIVE),
        "target_date": _date(row, "target_date"),
        "description": _text(row, "description"),
    }

    if goal_type == "race":
        return RaceGoal(
            **common,
            event_name=_text(row, "race_event_name"),
            distance=_text(row, "race_distance"),
            location=_text(row, "race_location"),
            target_time_s=_number(row, "race_target_time_seconds"),
        )
    if goal_type == "performance":
        return PerformanceGoal(
            **common,
            metric=_text(row, "perf_metric"),
            current_value=_number(row, "perf_current_value"),
            target_value=_number(row, "perf_target_value"),
        )
    if goal_type == "fitness":
        return FitnessGoal(
            **common,
            metric=_text(row, "fitness_metric"),
            target_value=_number(row, "fitness_target_value"),
        )
    if goal_type == "health":
        return HealthGoal(
            **common,
            metric=_text(row, "health_metric"),
            current_value=_number(row, "health_current_value"),
            target_value=_number(row, "health_target_value"),
        )
    raise UnknownVariantError("goal_type", goal_type)


def map_constraint(row: Row) -> Constraint:
    """Map a constraints row to the Constraint variant named by ``constraint_type``."""
    return _mapped("constraint", _build_constraint, row)


def _build_constraint(row: Row) -> Constraint:
    constraint_type = _require(row, "constraint_type")
    common: dict[str, Any] = {
        "constraint_id": str(_require(row, "id")),
        "title": str(_require(row, "title")),
        "start_date": _required_date(row, "start_date"),
        "status": _enum(row, "status", ConstraintStatus, ConstraintStatus.ACTIVE),
        "end_date": _date(row, "end_date"),
        "description": _text(row, "description"),
    }

    if constraint_type == "injury":
        return InjuryConstraint(
            **common,
            body_part=_text(row, "injury_body_part"),
            severity=_enum(row, "injury_severity", InjurySeverity),
            restrictions=_str_tuple(row, "injury_restrictions"),
        )
    if constraint_type == "travel":
        return TravelConstraint(
            **common,
            destination=_text(row, "travel_destination"),
            equipment_available=_str_tuple(row, "travel_equipment_available"),
            facilities_available=_str_tuple(row, "travel_facilities_available"),
        )
    if constraint_type == "availability":
        return AvailabilityConstraint(
            **common,
            hours_per_week=_number(row, "availability_hours_per_week"),
            days_available=_str_tuple(row, "availability_days_available"),
        )
    raise UnknownVariantError("constraint_type", constraint_type)


def map_check_in(row: Row) -> DailyCheckIn:
    """Map a daily_checkins row to a DailyCheckIn."""
    return _mapped("check-in", _build_check_in, row)


def _build_check_in(row: Row) -> DailyCheckIn:
    return DailyCheckIn(
        checkin_date=_required_date(row, "checkin_date"),
        sleep_quality=_number(row, "sleep_quality"),
        sleep_hours=_number(row, "sleep_hours"),
        energy_level=_number(row, "energy_level"),
        stress_level=_number(row, "stress_level"),
        overall_soreness=_number(row, "overall_soreness"),
        resting_hr=_number(row, "resting_hr"),
        hrv_ms=_number(row, "hrv_ms"),
        available_time_min=_number(row, "available_time_minutes"),
        equipment_access=_str_tuple(row, "equipment_access"),
        travel_status=_enum(row, "travel_status", TravelStatus),
        notes=_text(row, "notes"),
    )


def map_wellness(row: Row) -> WellnessData:
    """Map one day of wellness history."""
    return _mapped("wellness", _build_wellness, row)


def _build_wellness(row: Row) -> WellnessData:
    return WellnessData(
        day=_required_date(row, "date"),
        resting_hr=_number(row, "resting_hr"),
        hrv=_number(row, "hrv"),
        sleep_quality=_number(row, "sleep_quality"),
        sleep_hours=_number(row, "sleep_hours"),
        fatigue=_number(row, "fatigue"),
        soreness=_number(row, "soreness"),
        stress=_number(row, "stress"),
        mood=_number(row, "mood"),
        weight_kg=_number(row, "weight_kg"),
    )


def map_activity(row: Row) -> Activity:
    """Map an activity summary.

    ``training_load`` falls back to ``icu_training_load`` when absent.
    """
    return _mapped("activity", _build_activity, row)


def _build_activity(row: Row) -> Activity:
    load = _number(row, "training_load")
    if load is None:
        load = _number(row, "icu_training_load")
    return Activity(
        activity_id=str(_require(row, "id")),
        name=str(row.get("name") or ""),
        activity_type=str(_require(row, "type")),
        start_time=_required_datetime(row, "start_date"),
        moving_time_s=_number(row, "moving_time") or 0.0,
        distance_m=_number(row, "distance"),
        training_load=load,
        avg_hr=_number(row, "average_heartrate"),
        avg_watts=_number(row, "average_watts"),
    )


def map_fitness_metrics(row: Row) -> FitnessMetrics:
    """Map a fitness row; TSB is derived from CTL - ATL when not stored."""
    return _mapped("fitness", _build_fitness_metrics, row)


def _build_fitness_metrics(row: Row) -> FitnessMetrics:
    ctl = _number(row, "ctl")
    atl = _number(row, "atl")
    if ctl is None:
        raise MissingFieldError("ctl")
    if atl is None:
        raise MissingFieldError("atl")
    tsb = _number(row, "tsb")
    return FitnessMetrics(
        as_of=_required_date(row, "date"),
        ctl=ctl,
        atl=atl,
        tsb=tsb if tsb is not None else ctl - atl,
        ramp_rate=_number(row, "ramp_rate"),
    )


def map_training_plan(row: Row) -> TrainingPlan:
    """Map a training_plans row, including its JSON ``phases`` list."""
    return _mapped("training plan", _build_training_plan, row)


def _build_phase(index: int, raw: Any) -> PlanPhase:
    field = f"phases[{index}]"
    if not isinstance(raw, Mapping):
        raise InvalidFieldError(field, raw)
    start_week = _integer(raw, "start_week")
    end_week = _integer(raw, "end_week")
    if start_week is None:
        raise MissingFieldError(f"{field}.start_week")
    if end_week is None:
        raise MissingFieldError(f"{field}.end_week")
    return PlanPhase(
        name=str(_require(raw, "name")),
        start_week=start_week,
        end_week=end_week,
        focus=_text(raw, "focus") or "",
        description=_text(raw, "description"),
    )


def _build_training_plan(row: Row) -> TrainingPlan:
    raw_phases = row.get("phases") or []
    if not isinstance(raw_phases, (list, tuple)):
        raise InvalidFieldError("phases", raw_phases)
    duration = _integer(row, "duration_weeks")
    if duration is None:
        raise MissingFieldError("duration_weeks")
    return TrainingPlan(
        plan_id=str(_require(row, "id")),
        title=str(_require(row, "title")),
        start_date=_required_date(row, "start_date"),
        end_date=_required_date(row, "end_date"),
        duration_weeks=duration,
        status=_enum(row, "status", PlanStatus, PlanStatus.ACTIVE),
        phases=tuple(_build_phase(i, p) for i, p in enumerate(raw_phases)),
        description=_text(row, "description"),
    )
