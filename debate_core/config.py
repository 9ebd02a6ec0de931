"""Runtime configuration for AI debate

Values come from the environment (a .env file is loaded by the API entry point).
"""

import os

from .guardrail import GuardrailSettings

# Style used when a debate is created without one
DEFAULT_STYLE = os.getenv("DEFAULT_STYLE", "witty")

# LLM settings
LLM_MODEL = os.getenv("LLM_MODEL", "llama-3.3-70b-versatile")
LLM_MAX_TOKENS_DEBATE = 350
LLM_TEMPERATURE_DEBATE = 0.8


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name, "")
    try:
        return int(value) if value else default
    except ValueError:
        return default


def max_tokens_per_turn() -> int:
    """Per-turn generation budget (MAX_TOKENS_PER_TURN)"""
    return _env_int("MAX_TOKENS_PER_TURN", LLM_MAX_TOKENS_DEBATE)


def safety_rewrite_enabled() -> bool:
    """SAFETY_REWRITE=on enables the remote salvage rewrite"""
    return os.getenv("SAFETY_REWRITE", "off").strip().lower() == "on"


def load_guardrail_settings() -> GuardrailSettings:
    """Build guardrail settings from the current environment"""
    return GuardrailSettings(
        rewrite_enabled=safety_rewrite_enabled(),
        max_tokens_per_turn=max_tokens_per_turn(),
    )
