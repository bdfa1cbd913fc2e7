"""Workout plan generation schemas."""

from datetime import datetime
from typing import List, Literal, Optional

from pydantic import Field

from schemas.base import CamelModel


class GenerateRequest(CamelModel):
    """Body of the plan generation endpoint."""
    prompt: str = Field("", description="Prompt sent to the generative model")
    model: str = Field("gemini-pro", description="Preferred model name")
    max_output_tokens: int = Field(1200, ge=1, le=8192, description="Output token cap")


class ScheduleDay(CamelModel):
    """One workout day of the weekly rotation."""
    day: int = Field(..., description="Day number from the plan text")
    workouts: List[str] = Field(default_factory=list, description="Five-line workout blocks")


class GenerateResponse(CamelModel):
    success: bool = True
    text: str
    model: str
    weekly_schedule: List[ScheduleDay] = Field(default_factory=list)
    workout_format: Optional[str] = None


class PlanProfile(CamelModel):
    """User profile the coaching prompt is built from."""
    age: int = Field(..., ge=1, le=120)
    body_weight: float = Field(..., ge=1, le=500, description="Body weight in kg")
    height: float = Field(..., ge=50, le=300, description="Height in cm")
    target: str = Field(..., min_length=1, description="Fitness goal")
    duration: Literal[30, 45, 60] = Field(30, description="Program length in days")
    frequency: int = Field(3, ge=1, le=7, description="Workouts per week")


class WorkoutPlan(CamelModel):
    """Client-held plan state; never persisted server-side."""
    plan: Optional[str] = None
    start_date: Optional[datetime] = None
    duration: Optional[int] = None
    frequency: Optional[int] = None
    weekly_schedule: Optional[List[ScheduleDay]] = None
    completed_days: List[int] = Field(default_factory=list)
    current_day: int = 1


class PlanDay(CamelModel):
    """A single program day as shown by the plan tracker."""
    day: int
    workout: Optional[ScheduleDay] = None
    is_complete: bool = False
    is_active: bool = False
