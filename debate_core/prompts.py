"""Prompt generation for AI debate"""

import math
from typing import Optional, Sequence

from .types import Role, Side, StyleTag, Turn

PERSONAS: dict[str, dict[str, str]] = {
    "witty": {
        "A": "a quick-witted optimist who wins crowds with playful analogies",
        "B": "a dry, deadpan skeptic who punctures hype with one-liners",
    },
    "academic": {
        "A": "a careful researcher who cites evidence and defines terms precisely",
        "B": "a rigorous critic who probes methodology and hidden assumptions",
    },
    "chaotic": {
        "A": "an enthusiastic contrarian who loves bold, surprising claims",
        "B": "a theatrical showman who turns every point into a story",
    },
}

ROUND_NAMES: dict[str, str] = {
    "opening": "opening",
    "rebuttal": "rebuttal",
    "crossq": "cross-examination-question",
    "crossa": "cross-examination-answer",
    "closing": "closing",
}

ROUND_INSTRUCTIONS: dict[str, str] = {
    "opening": "State your position and your strongest argument with one concrete example.",
    "rebuttal": "Rebut your opponent's last point directly, then reinforce your own case.",
    "cross-examination-question": "Ask your opponent one sharp, fair question that exposes a weakness.",
    "cross-examination-answer": "Answer your opponent's question honestly and briefly, then pivot to your case.",
    "closing": "Summarize why your side wins in a memorable closing statement.",
}


def persona_for(style: StyleTag, side: Side) -> str:
    """Pick the persona for a side, falling back to the witty pair"""
    return PERSONAS.get(style, PERSONAS["witty"])[side]


def role_to_round_name(role: Role) -> str:
    return ROUND_NAMES.get(role, "opening")


def create_debater_prompt(topic: str, persona: str, style: StyleTag, round_name: str) -> str:
    """Create system prompt for a debater

    Args:
        topic: The debate topic
        persona: Persona description from persona_for
        style: Debate style tag
        round_name: Human readable phase, see role_to_round_name

    Returns:
        System prompt string
    """
    return f"""You are {persona}, taking part in a {style} debate.
Topic: "{topic}"
Current phase: {round_name}

Rules:
- Stay on the topic and argue your side with specifics
- Keep it to 2-4 sentences, friendly and PG-13
- No insults, harassment, or graphic content"""


def create_turn_prompt(opp_last: str, round_name: str) -> str:
    """Create the user prompt for the next turn"""
    instruction = ROUND_INSTRUCTIONS.get(round_name, ROUND_INSTRUCTIONS["opening"])
    return f'Opponent\'s last statement:\n"""{opp_last}"""\n\n{instruction}'


def last_opponent_text(turns: Sequence[Turn], next_side: Side) -> Optional[str]:
    """Content of the most recent turn by the other side"""
    opponent = "B" if next_side == "A" else "A"
    for turn in reversed(turns):
        if turn.side == opponent:
            return turn.content
    return None


def estimate_tokens(text: str) -> int:
    """Rough token count, about four characters per token"""
    return math.ceil(len(text) / 4)
