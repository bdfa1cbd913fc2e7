"""Agent-specific configuration."""

from typing import Dict, Any

# Model configuration for the generative endpoints
AGENT_CONFIG: Dict[str, Any] = {
    "plan_generator": {
        "models": ["gemini-pro", "gemini-1.5-pro", "gemini-1.5-flash"],
        "fallback_model": "gpt-4o-mini",
        "temperature": 0.4,
        "max_output_tokens": 1200,
        "max_retries": 3,
        "retry_base_delay": 1.0,
    },
}
