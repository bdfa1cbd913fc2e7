"""Workout collection schema."""

from datetime import datetime
from typing import List

from pydantic import Field

from schemas.base import CamelModel


class ParsedWorkout(CamelModel):
    """One workout block read from plan text."""
    category: str = Field(..., description="Category from the #header line")
    workout_name: str = Field(..., description="Exercise name")
    sets: int = Field(..., description="Number of sets")
    reps: int = Field(..., description="Repetitions per set")
    weight: float = Field(0, description="Weight in kg, 0 for bodyweight")
    duration: float = Field(0, description="Duration in minutes")


class Workout(ParsedWorkout):
    """Workouts collection model."""
    workout_id: str = Field(..., description="Unique workout identifier")
    user_id: str = Field(..., description="Owner of the workout")
    calories_burned: float = Field(0, description="duration x weight x 5")
    created_at: datetime = Field(..., description="When the workout was logged")


class AddWorkoutRequest(CamelModel):
    workout_string: str = Field("", description="Semicolon-separated workout blocks")


class AddWorkoutResponse(CamelModel):
    message: str
    workouts: List[Workout]


class WorkoutsByDateResponse(CamelModel):
    todays_workouts: List[Workout]
    total_calories_burnt: float
