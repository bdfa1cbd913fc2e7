"""User, dashboard and workout routes."""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from api.dependencies import current_user_id, get_current_user
from models.user_repository import EmailAlreadyExists, UserRepository, get_user_repository
from models.workout_repository import WorkoutRepository, get_workout_repository
from schemas.dashboard import DashboardResponse
from schemas.user import AuthResponse, PublicUser, SigninRequest, SignupRequest
from schemas.workout import AddWorkoutRequest, AddWorkoutResponse, WorkoutsByDateResponse
from services.auth_service import create_access_token, hash_password, verify_password
from services.dashboard_service import get_dashboard, get_workouts_by_date
from services.workout_parser import (
    WorkoutParseError,
    calculate_calories_burned,
    parse_workout_blocks,
)
from utils.helpers import parse_date_param
from utils.logger import setup_logger

logger = setup_logger(__name__)

router = APIRouter(prefix="/api/user", tags=["user"])


def _auth_response(user) -> AuthResponse:
    public_user = PublicUser.from_user(user)
    return AuthResponse(token=create_access_token(public_user), user=public_user)


@router.post("/signup", response_model=AuthResponse)
async def user_register(
    payload: SignupRequest,
    users: UserRepository = Depends(get_user_repository),
):
    """Create an account and return a signed token."""
    if not payload.email or not payload.password or not payload.name:
        raise HTTPException(status_code=400, detail="Name, email and password are required.")

    if await users.get_user_by_email(payload.email):
        raise HTTPException(status_code=409, detail="Email is already in use.")

    try:
        user = await users.create_user(
            name=payload.name,
            email=payload.email,
            password_hash=hash_password(payload.password),
            img=payload.img,
        )
    except EmailAlreadyExists:
        raise HTTPException(status_code=409, detail="Email is already in use.")

    return _auth_response(user)


@router.post("/signin", response_model=AuthResponse)
async def user_login(
    payload: SigninRequest,
    users: UserRepository = Depends(get_user_repository),
):
    if not payload.email or not payload.password:
        raise HTTPException(status_code=400, detail="Email and password are required.")

    user = await users.get_user_by_email(payload.email)
    if not user:
        raise HTTPException(status_code=404, detail="User not found")

    if not verify_password(payload.password, user.password_hash):
        raise HTTPException(status_code=403, detail="Incorrect password")

    return _auth_response(user)


@router.get("/dashboard", response_model=DashboardResponse)
async def get_user_dashboard(
    current_user: Dict[str, Any] = Depends(get_current_user),
    users: UserRepository = Depends(get_user_repository),
    workouts: WorkoutRepository = Depends(get_workout_repository),
):
    """Today's totals, the last seven days and the per-category split."""
    user = await users.get_user_by_id(current_user_id(current_user))
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    return await get_dashboard(workouts, user.user_id)


@router.get("/workout", response_model=WorkoutsByDateResponse)
async def get_workouts_for_date(
    date: Optional[str] = Query(None, description="Day to list, defaults to today"),
    current_user: Dict[str, Any] = Depends(get_current_user),
    workouts: WorkoutRepository = Depends(get_workout_repository),
):
    try:
        day = parse_date_param(date)
    except ValueError:
        raise HTTPException(status_code=400, detail="Invalid date supplied.")
    return await get_workouts_by_date(workouts, current_user_id(current_user), day)


@router.post("/workout", response_model=AddWorkoutResponse, status_code=201)
async def add_workout(
    payload: AddWorkoutRequest,
    current_user: Dict[str, Any] = Depends(get_current_user),
    workouts: WorkoutRepository = Depends(get_workout_repository),
):
    """Parse a workout string and store every block it contains."""
    if not payload.workout_string or not payload.workout_string.strip():
        raise HTTPException(status_code=400, detail="Workout string is missing")

    try:
        parsed = parse_workout_blocks(payload.workout_string)
    except WorkoutParseError as e:
        raise HTTPException(status_code=400, detail=str(e))

    if not parsed:
        raise HTTPException(status_code=400, detail="Unable to parse workouts from input.")

    stored = await workouts.put_workouts(
        current_user_id(current_user),
        parsed,
        calories=[calculate_calories_burned(workout) for workout in parsed],
    )
    return AddWorkoutResponse(message="Workouts added successfully", workouts=stored)
