"""Calorie dashboard and per-day workout summaries."""

from datetime import date, timedelta
from typing import Dict, List, Optional

from models.workout_repository import WorkoutRepository
from schemas.dashboard import DashboardResponse, PieSlice, WeeklyCalories
from schemas.workout import Workout, WorkoutsByDateResponse
from utils.helpers import day_bounds, ordinal, utc_now

WEEK_DAYS = 7


def total_calories(workouts: List[Workout]) -> float:
    return sum(workout.calories_burned or 0 for workout in workouts)


def category_breakdown(workouts: List[Workout]) -> List[PieSlice]:
    """Calories per category, in the order categories first appear."""
    totals: Dict[str, float] = {}
    for workout in workouts:
        if not workout.category:
            continue
        totals[workout.category] = totals.get(workout.category, 0) + (workout.calories_burned or 0)
    return [
        PieSlice(id=index, value=value, label=label)
        for index, (label, value) in enumerate(totals.items())
    ]


def weekly_calories(workouts: List[Workout], today: date) -> WeeklyCalories:
    """Calories per day for today and the six days before it."""
    per_day: Dict[date, float] = {}
    for workout in workouts:
        day = workout.created_at.date()
        per_day[day] = per_day.get(day, 0) + (workout.calories_burned or 0)

    weeks = []
    calories = []
    for offset in range(WEEK_DAYS - 1, -1, -1):
        day = today - timedelta(days=offset)
        weeks.append(ordinal(day.day))
        calories.append(per_day.get(day, 0))
    return WeeklyCalories(weeks=weeks, calories_burned=calories)


def build_dashboard(
    todays_workouts: List[Workout], weekly_workouts: List[Workout], today: date
) -> DashboardResponse:
    total = total_calories(todays_workouts)
    count = len(todays_workouts)
    return DashboardResponse(
        total_calories_burnt=total,
        total_workouts=count,
        avg_calories_burnt_per_workout=total / count if count else 0,
        total_weeks_calories_burnt=weekly_calories(weekly_workouts, today),
        pie_chart_data=category_breakdown(todays_workouts),
    )


async def get_dashboard(
    repository: WorkoutRepository, user_id: str, today: Optional[date] = None
) -> DashboardResponse:
    today = today or utc_now().date()
    start_today, end_today = day_bounds(today)
    week_start, _ = day_bounds(today - timedelta(days=WEEK_DAYS - 1))

    todays_workouts = await repository.get_workouts_for_day(user_id, start_today, end_today)
    weekly_workouts = await repository.get_workouts_within_range(user_id, week_start, end_today)
    return build_dashboard(todays_workouts, weekly_workouts, today)


async def get_workouts_by_date(
    repository: WorkoutRepository, user_id: str, day: Optional[date] = None
) -> WorkoutsByDateResponse:
    start, end = day_bounds(day or utc_now().date())
    workouts = await repository.get_workouts_for_day(user_id, start, end)
    return WorkoutsByDateResponse(
        todays_workouts=workouts,
        total_calories_burnt=total_calories(workouts),
    )
