"""AI workout plan generation."""

import asyncio
from typing import Awaitable, Callable, List, Optional

from langchain_core.language_models.chat_models import BaseChatModel

from config.settings import settings
from prompts.workout_plan_prompt import WORKOUT_PLAN_PROMPT
from schemas.plan import GenerateResponse, PlanProfile
from services.llm_factory import get_agent_config, get_fallback_llm, get_llm
from services.workout_parser import extract_workout_format, parse_weekly_schedule
from utils.errors import ConfigurationError, ServiceError
from utils.logger import setup_logger

logger = setup_logger(__name__)

AGENT_NAME = "plan_generator"
NOT_FOUND_MARKERS = ("404", "not found")
TRANSIENT_MARKERS = ("429", "500", "503", "overloaded", "unavailable", "deadline", "resource exhausted", "timeout")


def build_plan_prompt(profile: PlanProfile) -> str:
    return WORKOUT_PLAN_PROMPT.format(
        age=profile.age,
        body_weight=f"{profile.body_weight:g}",
        height=f"{profile.height:g}",
        target=profile.target,
        duration=profile.duration,
        frequency=profile.frequency,
    )


def is_model_not_found(error: Exception) -> bool:
    message = str(error).lower()
    return any(marker in message for marker in NOT_FOUND_MARKERS)


def is_transient(error: Exception) -> bool:
    if isinstance(error, asyncio.TimeoutError):
        return True
    message = str(error).lower()
    return any(marker in message for marker in TRANSIENT_MARKERS)


def message_text(message) -> str:
    """Flatten a chat model reply into plain text."""
    content = getattr(message, "content", message)
    if isinstance(content, str):
        return content
    if isinstance(content, list):
        parts = []
        for part in content:
            if isinstance(part, str):
                parts.append(part)
            elif isinstance(part, dict) and part.get("text"):
                parts.append(part["text"])
        return "".join(parts)
    return str(content or "")


class PlanGenerator:
    """Runs a prompt against the configured models.

    Candidates are tried in order. A model-not-found error moves on to the
    next candidate, transient errors are retried with exponential backoff,
    and any other error stops the search.
    """

    def __init__(
        self,
        agent_name: str = AGENT_NAME,
        llm_factory: Callable[..., BaseChatModel] = get_llm,
        fallback_factory: Callable[..., Optional[BaseChatModel]] = get_fallback_llm,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        self.agent_name = agent_name
        self.config = get_agent_config(agent_name)
        self.llm_factory = llm_factory
        self.fallback_factory = fallback_factory
        self.sleep = sleep

    @property
    def models(self) -> List[str]:
        return list(self.config["models"])

    def candidate_models(self, requested: Optional[str]) -> List[str]:
        """Configured models, with the requested one first when it is known."""
        models = self.models
        if requested in models:
            models.remove(requested)
            models.insert(0, requested)
        return models

    async def _invoke_with_retry(self, llm: BaseChatModel, prompt: str) -> str:
        max_retries = max(1, self.config.get("max_retries", 1))
        base_delay = self.config.get("retry_base_delay", 1.0)
        for attempt in range(max_retries):
            try:
                reply = await llm.ainvoke(prompt)
                return message_text(reply).strip()
            except Exception as e:
                if not is_transient(e) or attempt == max_retries - 1:
                    raise
                delay = base_delay * (2 ** attempt)
                logger.warning(f"Transient model error ({e}); retrying in {delay:.1f}s")
                await self.sleep(delay)

    def _build_response(self, text: str, model_name: str) -> GenerateResponse:
        return GenerateResponse(
            success=True,
            text=text,
            model=model_name,
            weekly_schedule=parse_weekly_schedule(text),
            workout_format=extract_workout_format(text),
        )

    async def generate(
        self,
        prompt: str,
        model: Optional[str] = None,
        max_output_tokens: Optional[int] = None,
    ) -> GenerateResponse:
        if not prompt or not prompt.strip():
            raise ServiceError("Prompt is required", status_code=400)

        fallback_llm = self.fallback_factory(self.agent_name, max_output_tokens)
        if not settings.gemini_api_key and fallback_llm is None:
            raise ConfigurationError(
                "Gemini API key is not configured. Please set the GEMINI_API_KEY environment variable."
            )

        models = self.candidate_models(model) if settings.gemini_api_key else []
        last_error: Optional[Exception] = None

        for model_name in models:
            llm = self.llm_factory(self.agent_name, model_name, max_output_tokens)
            try:
                text = await self._invoke_with_retry(llm, prompt)
            except Exception as e:
                last_error = e
                if is_model_not_found(e):
                    logger.warning(f"Model '{model_name}' unavailable, trying next model")
                    continue
                logger.error(f"Model '{model_name}' failed: {e}")
                break

            if text:
                logger.info(f"Generated plan with model '{model_name}' ({len(text)} chars)")
                return self._build_response(text, model_name)
            logger.warning(f"Model '{model_name}' returned an empty response")

        if fallback_llm is not None:
            fallback_name = self.config.get("fallback_model", "fallback")
            try:
                text = await self._invoke_with_retry(fallback_llm, prompt)
            except Exception as e:
                logger.error(f"Fallback model '{fallback_name}' failed: {e}")
                last_error = e
            else:
                if text:
                    logger.info(f"Generated plan with fallback model '{fallback_name}'")
                    return self._build_response(text, fallback_name)

        error_message = str(last_error) if last_error else "Failed to generate content from Gemini API"
        raise ServiceError(
            f"Gemini API error: {error_message}. Tried models: {', '.join(models or self.models)}"
        )


plan_generator = None


def get_plan_generator() -> PlanGenerator:
    global plan_generator
    if plan_generator is None:
        plan_generator = PlanGenerator()
    return plan_generator
