"""Dashboard response schema."""

from typing import List

from schemas.base import CamelModel


class WeeklyCalories(CamelModel):
    weeks: List[str]
    calories_burned: List[float]


class PieSlice(CamelModel):
    id: int
    value: float
    label: str


class DashboardResponse(CamelModel):
    total_calories_burnt: float
    total_workouts: int
    avg_calories_burnt_per_workout: float
    total_weeks_calories_burnt: WeeklyCalories
    pie_chart_data: List[PieSlice]
