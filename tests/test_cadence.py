from __future__ import annotations

import pytest

from debate_core.cadence import CADENCE_PLANS, history_matches_plan, next_slot, plan_for
from debate_core.types import CadenceSlot, Turn


def _turn(slot: CadenceSlot, i: int) -> Turn:
    return Turn(
        debate_id="d",
        round_no=slot.round_no,
        side=slot.side,
        role=slot.role,
        content="ok",
        tokens=1,
        id=str(i),
    )


def test_first_four_slots() -> None:
    """Opening goes A then B, rebuttal flips to B then A"""
    turns: list[Turn] = []
    seq = []
    for i in range(4):
        slot = next_slot(3, turns)
        seq.append(f"{slot.round_no}-{slot.side}-{slot.role}")
        turns.append(_turn(slot, i))

    assert seq == ["1-A-opening", "1-B-opening", "2-B-rebuttal", "2-A-rebuttal"]


def test_full_cadence_terminates_after_ten_turns() -> None:
    turns: list[Turn] = []
    for i in range(10):
        slot = next_slot(3, turns)
        assert slot is not None
        turns.append(_turn(slot, i))

    assert next_slot(3, turns) is None
    assert history_matches_plan(3, turns)


def test_next_slot_is_plan_entry_at_history_length() -> None:
    plan = plan_for(3)
    for n in range(len(plan)):
        history = [_turn(s, i) for i, s in enumerate(plan[:n])]
        assert next_slot(3, history) == plan[n]


def test_history_longer_than_plan_is_complete() -> None:
    plan = plan_for(3)
    history = [_turn(s, i) for i, s in enumerate(plan + plan[:2])]

    assert next_slot(3, history) is None
    assert not history_matches_plan(3, history)


def test_plan_shape() -> None:
    """Each side speaks once per role and round numbers never go back"""
    plan = CADENCE_PLANS[3]
    assert len(plan) == 10
    for side in ("A", "B"):
        roles = sorted(s.role for s in plan if s.side == side)
        assert roles == sorted(["opening", "rebuttal", "crossq", "crossa", "closing"])
    round_nos = [s.round_no for s in plan]
    assert round_nos == sorted(round_nos)
    assert plan[4:8] == (
        CadenceSlot(3, "A", "crossq"),
        CadenceSlot(3, "B", "crossa"),
        CadenceSlot(4, "B", "crossq"),
        CadenceSlot(4, "A", "crossa"),
    )
    assert [s.side for s in plan[8:]] == ["B", "A"]


def test_planner_ignores_content() -> None:
    slot = next_slot(3, [])
    turn = Turn(debate_id="d", round_no=1, side="A", role="opening", content="x" * 5000, tokens=9999)

    assert slot == CadenceSlot(1, "A", "opening")
    assert next_slot(3, [turn]) == CadenceSlot(1, "B", "opening")


def test_history_mismatch_detected() -> None:
    wrong = Turn(debate_id="d", round_no=1, side="B", role="opening", content="x", tokens=1)
    assert not history_matches_plan(3, [wrong])
    assert history_matches_plan(3, [])


def test_unsupported_length_rejected() -> None:
    with pytest.raises(ValueError):
        plan_for(5)
