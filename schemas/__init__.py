"""Collection and API schemas."""

from schemas.user import User, PublicUser, SignupRequest, SigninRequest, AuthResponse
from schemas.workout import (
    ParsedWorkout,
    Workout,
    AddWorkoutRequest,
    AddWorkoutResponse,
    WorkoutsByDateResponse,
)
from schemas.dashboard import DashboardResponse, WeeklyCalories, PieSlice
from schemas.plan import (
    GenerateRequest,
    GenerateResponse,
    ScheduleDay,
    PlanProfile,
    WorkoutPlan,
    PlanDay,
)
from schemas.tutorial import TutorialVideo, TutorialSearchResponse

__all__ = [
    "User",
    "PublicUser",
    "SignupRequest",
    "SigninRequest",
    "AuthResponse",
    "ParsedWorkout",
    "Workout",
    "AddWorkoutRequest",
    "AddWorkoutResponse",
    "WorkoutsByDateResponse",
    "DashboardResponse",
    "WeeklyCalories",
    "PieSlice",
    "GenerateRequest",
    "GenerateResponse",
    "ScheduleDay",
    "PlanProfile",
    "WorkoutPlan",
    "PlanDay",
    "TutorialVideo",
    "TutorialSearchResponse",
]
