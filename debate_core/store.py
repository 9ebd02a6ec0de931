"""In-memory storage for debates, turns and votes"""

from typing import Optional

from .types import Debate, DebateStatus, Role, Side, StyleTag, Turn, Vote


class DuplicateVoteError(Exception):
    """Raised when the same fingerprint votes twice on a debate"""

    def __init__(self, debate_id: str, fingerprint: str):
        super().__init__(f"Fingerprint already voted on debate {debate_id}")
        self.debate_id = debate_id
        self.fingerprint = fingerprint


class DebateStore:
    """Ordered-append store keyed by debate id

    There is no locking: callers must serialize read turns -> plan -> append
    for any one debate.
    """

    def __init__(self):
        self._debates: dict[str, Debate] = {}
        self._turns: dict[str, list[Turn]] = {}
        self._votes: dict[str, list[Vote]] = {}

    def create_debate(self, topic: str, style_tag: StyleTag = "witty", rounds: int = 3) -> Debate:
        """Create a new live debate"""
        debate = Debate(topic=topic, style_tag=style_tag, rounds=rounds)
        self._debates[debate.id] = debate
        self._turns[debate.id] = []
        self._votes[debate.id] = []
        return debate

    def get_debate(self, debate_id: str) -> Optional[Debate]:
        return self._debates.get(debate_id)

    def set_debate_status(self, debate_id: str, status: DebateStatus) -> Debate:
        """Update debate status

        Raises:
            KeyError: If the debate does not exist
        """
        debate = self._debates[debate_id]
        debate.status = status
        return debate

    def append_turn(
        self,
        debate_id: str,
        round_no: int,
        side: Side,
        role: Role,
        content: str,
        tokens: int,
    ) -> Turn:
        """Append a turn at the end of the debate's history

        Raises:
            KeyError: If the debate does not exist
        """
        turns = self._turns[debate_id]
        turn = Turn(
            debate_id=debate_id,
            round_no=round_no,
            side=side,
            role=role,
            content=content,
            tokens=tokens,
        )
        turns.append(turn)
        return turn

    def list_turns(self, debate_id: str) -> list[Turn]:
        """Turns in creation order (a copy; empty for unknown debates)"""
        return list(self._turns.get(debate_id, []))

    def add_vote(self, debate_id: str, winner: Side, fingerprint: str) -> Vote:
        """Record a vote

        Raises:
            KeyError: If the debate does not exist
            DuplicateVoteError: If this fingerprint already voted on the debate
        """
        votes = self._votes[debate_id]
        if any(v.fingerprint == fingerprint for v in votes):
            raise DuplicateVoteError(debate_id, fingerprint)
        vote = Vote(debate_id=debate_id, winner=winner, fingerprint=fingerprint)
        votes.append(vote)
        return vote

    def vote_tally(self, debate_id: str) -> dict[str, int]:
        tally = {"A": 0, "B": 0}
        for vote in self._votes.get(debate_id, []):
            tally[vote.winner] += 1
        return tally

    @property
    def active_debate_count(self) -> int:
        """Number of debates still live"""
        return sum(1 for d in self._debates.values() if d.status == "live")
