"""Utility helpers for creating chat models with fallbacks."""

from typing import Optional

from config.agent_config import AGENT_CONFIG
from config.settings import settings
from langchain_core.language_models.chat_models import BaseChatModel
from langchain_google_genai import ChatGoogleGenerativeAI
from langchain_openai import ChatOpenAI
from utils.logger import setup_logger

logger = setup_logger(__name__)


def get_agent_config(agent_name: str) -> dict:
    config = AGENT_CONFIG.get(agent_name)
    if not config:
        raise ValueError(f"No agent configuration found for '{agent_name}'")
    return config


def get_llm(agent_name: str, model_name: str, max_output_tokens: Optional[int] = None) -> BaseChatModel:
    """Create a Gemini chat model for one of the agent's candidate models.

    Retries are handled by the caller so that model-not-found errors can
    move on to the next candidate immediately.
    """
    config = get_agent_config(agent_name)
    return ChatGoogleGenerativeAI(
        model=model_name,
        temperature=config.get("temperature", 0.3),
        max_output_tokens=max_output_tokens or config.get("max_output_tokens"),
        google_api_key=settings.gemini_api_key,
        max_retries=0,
    )


def get_fallback_llm(agent_name: str, max_output_tokens: Optional[int] = None) -> Optional[BaseChatModel]:
    """OpenAI model used once every Gemini candidate has failed.

    Returns None when no OpenAI key or fallback model is configured.
    """
    config = get_agent_config(agent_name)
    fallback_model_name = config.get("fallback_model")
    if not settings.openai_api_key or not fallback_model_name:
        return None

    try:
        return ChatOpenAI(
            model=fallback_model_name,
            temperature=config.get("temperature", 0.3),
            max_tokens=max_output_tokens or config.get("max_output_tokens"),
            api_key=settings.openai_api_key,
            max_retries=0,
        )
    except Exception as e:
        logger.warning(
            "Failed to initialize OpenAI fallback model '%s' for %s: %s",
            fallback_model_name,
            agent_name,
            e,
        )
        return None
