"""Output moderation for debate turns

1) Fast local regex screen for disallowed content (self-harm, NSFW, doxxing)
2) If flagged and the safety rewrite is enabled, ask the LLM for a gentle rewrite
3) Otherwise return a neutral placeholder so the debate keeps moving

The pattern list is kept short on purpose; extend DISALLOWED_PATTERNS as needed.
"""

import asyncio
import json
import logging
import re
from dataclasses import dataclass
from typing import Optional

from llm_client import LLMError, TextGenerator

logger = logging.getLogger(__name__)

MAX_LEN = 1200

DISALLOWED_PATTERNS = (
    re.compile(r"\bkill yourself\b", re.IGNORECASE),
    re.compile(r"\bsuicide\b", re.IGNORECASE),
    re.compile(r"\bnsfw\b", re.IGNORECASE),
    re.compile(r"\bexplicit\b", re.IGNORECASE),
    re.compile(r"\bgraphic\b", re.IGNORECASE),
    re.compile(r"\b(dox|doxx)\w*", re.IGNORECASE),
)

NEUTRAL_PLACEHOLDER = "(Content adjusted to keep things PG-13. Let's keep it friendly.)"

REWRITE_SYSTEM_PROMPT = "\n".join([
    "You are a content safety editor.",
    "Task: Rewrite the provided reply to be mild and friendly without changing the core intent.",
    "No insults, harassment, or graphic content. Keep it concise and upbeat.",
])


@dataclass(frozen=True)
class ScreenResult:
    """Outcome of the fast screen"""
    ok: bool
    text: str
    reason: Optional[str] = None


@dataclass(frozen=True)
class GuardrailSettings:
    """Explicit knobs for the salvage rewrite"""
    rewrite_enabled: bool = False
    max_tokens_per_turn: int = 350
    rewrite_max_tokens: int = 180
    rewrite_temperature: float = 0.2
    # seconds; None waits for the generator indefinitely
    rewrite_timeout: Optional[float] = 20.0


def fast_screen(text) -> ScreenResult:
    """Screen text locally, without any network access

    Checks run in order: empty, too long (text is truncated), disallowed term.
    """
    if not text or not isinstance(text, str):
        return ScreenResult(ok=False, text="…", reason="empty")
    if len(text) > MAX_LEN:
        return ScreenResult(ok=False, text=text[:MAX_LEN], reason="too_long")
    for pattern in DISALLOWED_PATTERNS:
        if pattern.search(text):
            return ScreenResult(ok=False, text=text, reason="disallowed_term")
    return ScreenResult(ok=True, text=text)


def create_rewrite_prompt(original: str, reason: str) -> str:
    return f'Reason flagged: {reason}\n\nOriginal reply:\n"""{original}"""\n\nRewrite now:'


async def maybe_rewrite_unsafe(
    original: str,
    reason: str,
    settings: GuardrailSettings,
    generator: Optional[TextGenerator] = None,
) -> str:
    """Try to salvage flagged text with a rewrite, falling back to the placeholder"""
    if not settings.rewrite_enabled or generator is None:
        return NEUTRAL_PLACEHOLDER

    try:
        call = generator.generate(
            system_prompt=REWRITE_SYSTEM_PROMPT,
            user_prompt=create_rewrite_prompt(original, reason),
            max_tokens=min(settings.max_tokens_per_turn, settings.rewrite_max_tokens),
            temperature=settings.rewrite_temperature,
        )
        rewritten = await asyncio.wait_for(call, timeout=settings.rewrite_timeout)
    except asyncio.TimeoutError:
        logger.warning(json.dumps({"event": "safety rewrite timed out", "timeout": settings.rewrite_timeout}))
        return NEUTRAL_PLACEHOLDER
    except LLMError as e:
        logger.warning(json.dumps({"event": "safety rewrite failed", "error": str(e)}))
        return NEUTRAL_PLACEHOLDER
    except Exception as e:
        # Any generator, not only GroqClient, may be plugged in here
        logger.error(json.dumps({"event": "safety rewrite raised unexpectedly", "error": repr(e)}))
        return NEUTRAL_PLACEHOLDER

    if not isinstance(rewritten, str) or not rewritten.strip():
        return NEUTRAL_PLACEHOLDER
    return rewritten.strip()


async def enforce_guardrail(
    text,
    settings: Optional[GuardrailSettings] = None,
    generator: Optional[TextGenerator] = None,
) -> str:
    """Return text that is safe to persist

    Clean text comes back verbatim. Flagged text goes through the salvage
    rewrite, which only touches the network when ``settings.rewrite_enabled``.
    """
    screen = fast_screen(text)
    if screen.ok:
        return screen.text

    logger.info(json.dumps({"event": "guardrail flagged turn", "reason": screen.reason}))
    return await maybe_rewrite_unsafe(screen.text, screen.reason, settings or GuardrailSettings(), generator)
