"""Debate cadence planning

The cadence is a fixed table of (round_no, side, role) slots. The planner only
counts the turns already recorded and hands back the next entry of the table.
Side order is looked up, never derived from parity: later phases do not follow
simple alternation.
"""

from typing import Optional, Sequence

from .types import CadenceSlot, Turn

# Only the 3-round cadence exists for now; other lengths are rejected by the API.
SUPPORTED_ROUNDS = (3,)

CADENCE_PLANS: dict[int, tuple[CadenceSlot, ...]] = {
    3: (
        # Opening: A states the case first
        CadenceSlot(1, "A", "opening"),
        CadenceSlot(1, "B", "opening"),
        # Rebuttal: order flips so B does not also answer last
        CadenceSlot(2, "B", "rebuttal"),
        CadenceSlot(2, "A", "rebuttal"),
        # Cross-examination: each question is answered right away by the other side
        CadenceSlot(3, "A", "crossq"),
        CadenceSlot(3, "B", "crossa"),
        CadenceSlot(4, "B", "crossq"),
        CadenceSlot(4, "A", "crossa"),
        # Closing: reverse of opening, A has the last word
        CadenceSlot(5, "B", "closing"),
        CadenceSlot(5, "A", "closing"),
    ),
}


def plan_for(rounds: int) -> tuple[CadenceSlot, ...]:
    """Return the fixed slot plan for a cadence length

    Raises:
        ValueError: If no plan exists for ``rounds``
    """
    try:
        return CADENCE_PLANS[rounds]
    except KeyError:
        raise ValueError(f"Unsupported cadence length: {rounds}") from None


def next_slot(rounds: int, turns: Sequence[Turn]) -> Optional[CadenceSlot]:
    """Get the next slot to fill, or None when the cadence is complete

    Args:
        rounds: Cadence length of the debate
        turns: Turns already recorded, in creation order

    Returns:
        The plan entry at index ``len(turns)``, or None
    """
    plan = plan_for(rounds)
    n = len(turns)
    if n < len(plan):
        return plan[n]
    return None


def history_matches_plan(rounds: int, turns: Sequence[Turn]) -> bool:
    """Check that recorded turns are a prefix of the plan"""
    plan = plan_for(rounds)
    if len(turns) > len(plan):
        return False
    return all(turn.slot == expected for turn, expected in zip(turns, plan))
