from __future__ import annotations

import pytest

from debate_core.store import DebateStore, DuplicateVoteError


def test_turns_listed_in_creation_order() -> None:
    store = DebateStore()
    debate = store.create_debate("Pineapple on pizza?", "witty", 3)

    store.append_turn(debate.id, 1, "A", "opening", "first", 2)
    store.append_turn(debate.id, 1, "B", "opening", "second", 2)

    turns = store.list_turns(debate.id)
    assert [t.content for t in turns] == ["first", "second"]
    assert all(t.debate_id == debate.id for t in turns)


def test_list_turns_returns_copy() -> None:
    store = DebateStore()
    debate = store.create_debate("Cats vs dogs")
    store.list_turns(debate.id).append("junk")
    assert store.list_turns(debate.id) == []
    assert store.list_turns("missing") == []


def test_status_and_counts() -> None:
    store = DebateStore()
    a = store.create_debate("Topic one")
    store.create_debate("Topic two")
    assert a.status == "live"
    assert store.active_debate_count == 2

    store.set_debate_status(a.id, "finished")
    assert store.get_debate(a.id).status == "finished"
    assert store.active_debate_count == 1


def test_votes_tally_and_duplicates() -> None:
    store = DebateStore()
    debate = store.create_debate("Tabs or spaces")

    store.add_vote(debate.id, "A", "fp-0001")
    store.add_vote(debate.id, "B", "fp-0002")
    store.add_vote(debate.id, "A", "fp-0003")
    assert store.vote_tally(debate.id) == {"A": 2, "B": 1}

    with pytest.raises(DuplicateVoteError):
        store.add_vote(debate.id, "B", "fp-0001")


def test_unknown_debate_raises() -> None:
    store = DebateStore()
    assert store.get_debate("nope") is None
    with pytest.raises(KeyError):
        store.append_turn("nope", 1, "A", "opening", "x", 1)
    with pytest.raises(KeyError):
        store.add_vote("nope", "A", "fp-0001")
