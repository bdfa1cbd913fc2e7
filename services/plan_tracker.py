"""Workout plan progress tracking.

Each operation takes a WorkoutPlan and returns an updated copy; the plan
itself lives with the client.
"""

import math
from datetime import datetime
from typing import List, Optional

from schemas.plan import PlanDay, ScheduleDay, WorkoutPlan
from utils.helpers import utc_now


def set_plan(
    plan: str,
    duration: int,
    frequency: int,
    weekly_schedule: List[ScheduleDay],
    start_date: Optional[datetime] = None,
) -> WorkoutPlan:
    """Start a new plan with no completed days, positioned on day 1."""
    return WorkoutPlan(
        plan=plan,
        start_date=start_date or utc_now(),
        duration=duration,
        frequency=frequency,
        weekly_schedule=weekly_schedule,
        completed_days=[],
        current_day=1,
    )


def mark_day_complete(state: WorkoutPlan, day: int) -> WorkoutPlan:
    if day in state.completed_days:
        return state
    return state.model_copy(update={"completed_days": [*state.completed_days, day]})


def set_current_day(state: WorkoutPlan, day: int) -> WorkoutPlan:
    return state.model_copy(update={"current_day": day})


def clear_plan() -> WorkoutPlan:
    return WorkoutPlan()


def has_plan(state: WorkoutPlan) -> bool:
    return bool(state.plan and state.weekly_schedule)


def workout_for_day(state: WorkoutPlan, day: int) -> Optional[ScheduleDay]:
    """Schedule entry for a program day; the weekly schedule repeats."""
    if not state.weekly_schedule:
        return None
    return state.weekly_schedule[(day - 1) % len(state.weekly_schedule)]


def progress(state: WorkoutPlan) -> int:
    """Completed days as a percentage of the program length, rounded half up."""
    if not state.duration:
        return 0
    return math.floor(len(state.completed_days) / state.duration * 100 + 0.5)


def days_remaining(state: WorkoutPlan) -> int:
    if not state.duration:
        return 0
    return state.duration - len(state.completed_days)


def all_days(state: WorkoutPlan, selected_day: Optional[int] = None) -> List[PlanDay]:
    if not state.duration or not state.weekly_schedule:
        return []
    active = selected_day if selected_day is not None else state.current_day
    return [
        PlanDay(
            day=day,
            workout=workout_for_day(state, day),
            is_complete=day in state.completed_days,
            is_active=day == active,
        )
        for day in range(1, state.duration + 1)
    ]
