"""Debate Core - cadence planning and guardrails for AI debates"""

from .types import CadenceSlot, Debate, Turn, Vote
from .cadence import CADENCE_PLANS, SUPPORTED_ROUNDS, history_matches_plan, next_slot, plan_for
from .guardrail import (
    GuardrailSettings,
    NEUTRAL_PLACEHOLDER,
    ScreenResult,
    enforce_guardrail,
    fast_screen,
)
from .store import DebateStore, DuplicateVoteError

__all__ = [
    "CadenceSlot",
    "Debate",
    "Turn",
    "Vote",
    "CADENCE_PLANS",
    "SUPPORTED_ROUNDS",
    "history_matches_plan",
    "next_slot",
    "plan_for",
    "GuardrailSettings",
    "NEUTRAL_PLACEHOLDER",
    "ScreenResult",
    "enforce_guardrail",
    "fast_screen",
    "DebateStore",
    "DuplicateVoteError",
]
