"""Prompts for the generative endpoints."""

from prompts.workout_plan_prompt import WORKOUT_PLAN_PROMPT

__all__ = [
    "WORKOUT_PLAN_PROMPT",
]
