"""Render a CoachingContext as ordered Markdown sections for a prompt.

Section order is fixed: athlete profile, goals, active constraints,
training plan, fitness metrics, recent activities, wellness trends and
today's check-in. A section whose data is absent or empty is left out.
Free text is collapsed to one line and capped at ``max_text_length``.
"""

from __future__ import annotations

from coaching_engine.context.formatting import (
    format_duration,
    format_number,
    format_pace,
    truncate_text,
)
from coaching_engine.models.athlete import AthleteProfile
from coaching_engine.models.constraints import (
    AvailabilityConstraint,
    Constraint,
    InjuryConstraint,
    TravelConstraint,
)
from coaching_engine.models.context import CoachingContext
from coaching_engine.models.enums import (
    FORM_STATUS_FATIGUED_TSB,
    FORM_STATUS_FRESH_TSB,
    FORM_STATUS_HIGH_FATIGUE_TSB,
)
from coaching_engine.models.goals import Goal, RaceGoal
from coaching_engine.models.policy import DEFAULT_CONTEXT_LIMITS, ContextLimits
from coaching_engine.models.training import (
    Activity,
    FitnessMetrics,
    PlanPhase,
    TrainingPlan,
)
from coaching_engine.models.wellness import DailyCheckIn, WellnessData

SECTION_SEPARATOR = "\n\n"


def _athlete_section(athlete: AthleteProfile, limits: ContextLimits) -> str:
    lines = ["## Athlete Profile"]
    if athlete.display_name:
        lines.append(f"- Name: {truncate_text(athlete.display_name, limits.max_text_length)}")
    if athlete.weight_kg:
        lines.append(f"- Weight: {format_number(athlete.weight_kg)} kg")
    if athlete.ftp_watts:
        lines.append(f"- FTP: {format_number(athlete.ftp_watts)} watts")
    if athlete.threshold_pace_s_per_km:
        lines.append(f"- Running Threshold Pace: {format_pace(athlete.threshold_pace_s_per_km)}/km")
    if athlete.css_s_per_100m:
        lines.append(f"- CSS (swim): {format_pace(athlete.css_s_per_100m)}/100m")
    if athlete.max_hr:
        lines.append(f"- Max HR: {athlete.max_hr} bpm")
    if athlete.lthr:
        lines.append(f"- LTHR: {athlete.lthr} bpm")
    return "\n".join(lines)


def _goal_line(goal: Goal, next_race: RaceGoal | None, limits: ContextLimits) -> str:
    line = f"- [{goal.priority.name}] {truncate_text(goal.title, limits.max_text_length)}"
    if goal.target_date is not None:
        line += f" (Target: {goal.target_date.isoformat()})"
    if isinstance(goal, RaceGoal) and goal is next_race:
        if goal.distance:
            line += f" - {truncate_text(goal.distance, limits.max_text_length)}"
        if goal.target_time_s:
            line += f" - Target: {format_duration(goal.target_time_s)}"
    return line


def _goals_section(context: CoachingContext, limits: ContextLimits) -> str:
    lines = ["## Goals"]
    lines.extend(_goal_line(g, context.next_race, limits) for g in context.goals)
    if context.next_race is not None and context.days_to_race is not None:
        title = truncate_text(context.next_race.title, limits.max_text_length)
        lines.append(f"- Next Race: {title} in {context.days_to_race} days")
    return "\n".join(lines)


def _constraint_line(constraint: Constraint, limits: ContextLimits) -> str:
    line = (
        f"- [{constraint.constraint_type.name}] "
        f"{truncate_text(constraint.title, limits.max_text_length)}"
    )
    if isinstance(constraint, InjuryConstraint):
        if constraint.severity is not None:
            line += f" ({constraint.severity.name.lower()})"
        if constraint.restrictions:
            restrictions = (truncate_text(r, limits.max_text_length) for r in constraint.restrictions)
            line += f" - Avoid: {', '.join(restrictions)}"
    elif isinstance(constraint, AvailabilityConstraint):
        if constraint.hours_per_week:
            line += f" - {format_number(constraint.hours_per_week)} hrs/week available"
    elif isinstance(constraint, TravelConstraint):
        if constraint.destination:
            line += f" - Destination: {truncate_text(constraint.destination, limits.max_text_length)}"
    return line


def _constraints_section(context: CoachingContext, limits: ContextLimits) -> str:
    lines = ["## Active Constraints"]
    lines.extend(_constraint_line(c, limits) for c in context.constraints)
    return "\n".join(lines)


def _plan_section(
    plan: TrainingPlan,
    phase: PlanPhase | None,
    week: int | None,
    limits: ContextLimits,
) -> str:
    lines = [
        "## Training Plan",
        f"- Plan: {truncate_text(plan.title, limits.max_text_length)}",
        f"- Duration: {plan.duration_weeks} weeks",
        f"- Dates: {plan.start_date.isoformat()} to {plan.end_date.isoformat()}",
    ]
    if week is not None:
        lines.append(f"- Current Week: {week} of {plan.duration_weeks}")
    if phase is not None:
        line = f"- Current Phase: {truncate_text(phase.name, limits.max_text_length)}"
        if phase.focus:
            line += f" ({truncate_text(phase.focus, limits.max_text_length)})"
        lines.append(line)
        if phase.description:
            lines.append(f"  {truncate_text(phase.description, limits.max_text_length)}")
    return "\n".join(lines)


def _form_status(tsb: float) -> str:
    if tsb < FORM_STATUS_HIGH_FATIGUE_TSB:
        return "HIGH FATIGUE - recovery recommended"
    if tsb < FORM_STATUS_FATIGUED_TSB:
        return "Moderately fatigued - building fitness"
    if tsb <= FORM_STATUS_FRESH_TSB:
        return "Fresh - good form for quality work"
    return "Very fresh - may be losing fitness"


def _fitness_section(metrics: FitnessMetrics) -> str:
    lines = [
        f"## Fitness Metrics (as of {metrics.as_of.isoformat()})",
        f"- CTL (Fitness): {metrics.ctl:.1f}",
        f"- ATL (Fatigue): {metrics.atl:.1f}",
        f"- TSB (Form): {metrics.tsb:.1f}",
    ]
    if metrics.ramp_rate is not None:
        lines.append(f"- Ramp Rate: {metrics.ramp_rate:.1f} TSS/week")
    lines.append(f"- Status: {_form_status(metrics.tsb)}")
    return "\n".join(lines)


def _activity_line(activity: Activity, limits: ContextLimits) -> str:
    line = (
        f"- {activity.start_time.date().isoformat()}: "
        f"{truncate_text(activity.activity_type, limits.max_text_length)} - "
        f"{truncate_text(activity.name, limits.max_text_length)}"
    )
    if activity.moving_time_s:
        line += f" ({format_duration(activity.moving_time_s)})"
    if activity.training_load:
        line += f" TSS: {activity.training_load:.0f}"
    return line


def _activities_section(activities: tuple[Activity, ...], limits: ContextLimits) -> str:
    lines = ["## Recent Activities (last 14 days)"]
    lines.extend(_activity_line(a, limits) for a in activities[: limits.max_activities])

    # Summary covers every activity, not only the listed ones
    total_time = sum(a.moving_time_s for a in activities)
    total_load = sum(a.training_load or 0.0 for a in activities)
    lines.append(f"\nPeriod Summary: {format_duration(total_time)} total, {total_load:.0f} TSS")
    return "\n".join(lines)


def _wellness_line(day: WellnessData) -> str:
    parts = [day.day.isoformat()]
    if day.sleep_hours is not None:
        parts.append(f"Sleep: {format_number(day.sleep_hours)}h")
    if day.hrv is not None:
        parts.append(f"HRV: {format_number(day.hrv)}")
    if day.fatigue is not None:
        parts.append(f"Fatigue: {format_number(day.fatigue)}/10")
    if day.soreness is not None:
        parts.append(f"Soreness: {format_number(day.soreness)}/10")
    return f"- {' | '.join(parts)}"


def _wellness_section(history: tuple[WellnessData, ...], limits: ContextLimits) -> str:
    lines = ["## Wellness Trends (last 7 days)"]
    lines.extend(_wellness_line(d) for d in history[: limits.max_wellness_days])
    return "\n".join(lines)


def _check_in_lines(check_in: DailyCheckIn, limits: ContextLimits) -> list[str]:
    lines: list[str] = []
    if check_in.sleep_quality is not None:
        lines.append(f"- Sleep Quality: {format_number(check_in.sleep_quality)}/10")
    if check_in.sleep_hours is not None:
        lines.append(f"- Sleep Duration: {format_number(check_in.sleep_hours)} hours")
    if check_in.energy_level is not None:
        lines.append(f"- Energy Level: {format_number(check_in.energy_level)}/10")
    if check_in.stress_level is not None:
        lines.append(f"- Stress Level: {format_number(check_in.stress_level)}/10")
    if check_in.overall_soreness is not None:
        lines.append(f"- Overall Soreness: {format_number(check_in.overall_soreness)}/10")
    if check_in.resting_hr is not None:
        lines.append(f"- Resting HR: {format_number(check_in.resting_hr)} bpm")
    if check_in.hrv_ms is not None:
        lines.append(f"- HRV: {format_number(check_in.hrv_ms)} ms")
    if check_in.available_time_min is not None:
        lines.append(f"- Available Time: {format_number(check_in.available_time_min)} minutes")
    if check_in.equipment_access:
        equipment = (truncate_text(e, limits.max_text_length) for e in check_in.equipment_access)
        lines.append(f"- Equipment Access: {', '.join(equipment)}")
    if check_in.travel_status is not None:
        lines.append(f"- Travel Status: {check_in.travel_status.name.lower()}")
    if check_in.notes:
        lines.append(f"- Notes: {truncate_text(check_in.notes, limits.max_text_length)}")
    return lines


def serialize_context_for_prompt(
    context: CoachingContext,
    limits: ContextLimits | None = None,
) -> str:
    """Format the coaching context as structured text for a prompt.

    Args:
        context: Context from ``build_coaching_context()``.
        limits: Text and list bounds. Defaults to ``DEFAULT_CONTEXT_LIMITS``.

    Returns:
        Sections joined by a blank line, in fixed order.
    """
    cfg = limits or DEFAULT_CONTEXT_LIMITS
    sections = [_athlete_section(context.athlete, cfg)]

    if context.goals:
        sections.append(_goals_section(context, cfg))

    if context.constraints:
        sections.append(_constraints_section(context, cfg))

    if context.training_plan is not None:
        sections.append(
            _plan_section(context.training_plan, context.current_phase, context.week_in_plan, cfg)
        )

    if context.fitness_metrics is not None:
        sections.append(_fitness_section(context.fitness_metrics))

    if context.recent_activities:
        sections.append(_activities_section(context.recent_activities, cfg))

    if context.wellness_history and cfg.max_wellness_days > 0:
        sections.append(_wellness_section(context.wellness_history, cfg))

    if context.check_in is not None:
        check_in_lines = _check_in_lines(context.check_in, cfg)
        if check_in_lines:
            sections.append("\n".join(["## Today's Check-in", *check_in_lines]))

    return SECTION_SEPARATOR.join(sections)
