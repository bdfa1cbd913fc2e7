"""AI workout plan routes."""

from fastapi import APIRouter, Depends

from schemas.plan import GenerateRequest, GenerateResponse, PlanProfile
from services.plan_service import PlanGenerator, build_plan_prompt, get_plan_generator
from utils.logger import setup_logger

logger = setup_logger(__name__)

router = APIRouter(prefix="/api", tags=["plan"])


@router.post("/generate", response_model=GenerateResponse)
async def generate_content(
    payload: GenerateRequest,
    generator: PlanGenerator = Depends(get_plan_generator),
):
    """Run a raw prompt against the generative models."""
    return await generator.generate(
        payload.prompt,
        model=payload.model,
        max_output_tokens=payload.max_output_tokens,
    )


@router.post("/generate/plan", response_model=GenerateResponse)
async def generate_plan(
    profile: PlanProfile,
    generator: PlanGenerator = Depends(get_plan_generator),
):
    """Build the coaching prompt from a user profile and generate a plan."""
    logger.info(
        f"Generating {profile.duration}-day plan, {profile.frequency} workouts per week"
    )
    return await generator.generate(build_plan_prompt(profile))
