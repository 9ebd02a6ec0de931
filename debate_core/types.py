"""Data classes for AI debate"""

from dataclasses import dataclass, field
from typing import Optional, Literal
from datetime import datetime
import uuid

Side = Literal["A", "B"]
Role = Literal["opening", "rebuttal", "crossq", "crossa", "closing"]
StyleTag = Literal["witty", "academic", "chaotic"]
DebateStatus = Literal["live", "finished"]


def _new_id() -> str:
    return str(uuid.uuid4())


@dataclass(frozen=True)
class CadenceSlot:
    """One pending position in the cadence plan"""
    round_no: int
    side: Side
    role: Role

    def to_dict(self) -> dict:
        return {
            "round_no": self.round_no,
            "side": self.side,
            "role": self.role,
        }


@dataclass(frozen=True)
class Turn:
    """A persisted debate turn. Never mutated once stored."""
    debate_id: str
    round_no: int
    side: Side
    role: Role
    content: str
    tokens: int
    id: str = field(default_factory=_new_id)
    created_at: datetime = field(default_factory=datetime.utcnow)

    @property
    def slot(self) -> CadenceSlot:
        return CadenceSlot(round_no=self.round_no, side=self.side, role=self.role)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "debate_id": self.debate_id,
            "round_no": self.round_no,
            "side": self.side,
            "role": self.role,
            "content": self.content,
            "tokens": self.tokens,
            "created_at": self.created_at.isoformat() + "Z",
        }


@dataclass
class Debate:
    """Debate header; turns are stored separately"""
    topic: str
    style_tag: StyleTag = "witty"
    rounds: int = 3
    status: DebateStatus = "live"
    id: str = field(default_factory=_new_id)
    created_at: datetime = field(default_factory=datetime.utcnow)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "topic": self.topic,
            "style_tag": self.style_tag,
            "rounds": self.rounds,
            "status": self.status,
            "created_at": self.created_at.isoformat() + "Z",
        }


@dataclass(frozen=True)
class Vote:
    """Audience vote for the winning side"""
    debate_id: str
    winner: Side
    fingerprint: str
    id: str = field(default_factory=_new_id)
    created_at: datetime = field(default_factory=datetime.utcnow)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "debate_id": self.debate_id,
            "winner": self.winner,
            "fingerprint": self.fingerprint,
            "created_at": self.created_at.isoformat() + "Z",
        }
