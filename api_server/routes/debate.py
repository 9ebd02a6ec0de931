"""Debate API endpoints"""

import asyncio
import json
import logging
from typing import Callable, Literal, Optional

from fastapi import APIRouter, Depends, HTTPException, Request, Header
from pydantic import BaseModel, Field

from debate_core import DebateStore, DuplicateVoteError, enforce_guardrail, next_slot
from debate_core.cadence import SUPPORTED_ROUNDS
from debate_core.config import (
    DEFAULT_STYLE,
    LLM_MODEL,
    LLM_TEMPERATURE_DEBATE,
    load_guardrail_settings,
    max_tokens_per_turn,
)
from debate_core.prompts import (
    create_debater_prompt,
    create_turn_prompt,
    estimate_tokens,
    last_opponent_text,
    persona_for,
    role_to_round_name,
)
from llm_client import GroqClient, RateLimitError, APIKeyError, LLMError, TextGenerator
from api_server.middleware.rate_limit import limiter, get_rate_limit_string

logger = logging.getLogger("api_server")

router = APIRouter(prefix="/api", tags=["debate"])


# Global debate store
store = DebateStore()


# Steps for one debate run one at a time: read turns -> plan -> append
_step_locks: dict[str, asyncio.Lock] = {}


def get_store() -> DebateStore:
    return store


def get_generator_factory(
    x_api_key: Optional[str] = Header(None, alias="X-API-Key"),
) -> Callable[[], TextGenerator]:
    """Build the LLM client only when a turn actually needs generating

    Args:
        x_api_key: API key from request header (takes priority) or env var
    """
    def build() -> TextGenerator:
        try:
            return GroqClient(api_key=x_api_key, model=LLM_MODEL)
        except APIKeyError:
            raise HTTPException(
                status_code=401,
                detail="An API key is required. Provide X-API-Key or set GROQ_API_KEY.",
            )

    return build


def _step_lock(debate_id: str) -> asyncio.Lock:
    return _step_locks.setdefault(debate_id, asyncio.Lock())


# Request models
class CreateDebateRequest(BaseModel):
    """Request to create a debate"""
    topic: str = Field(..., min_length=3, max_length=200)
    style_tag: Literal["witty", "academic", "chaotic"] = DEFAULT_STYLE
    rounds: Literal[3, 5] = 3


class VoteRequest(BaseModel):
    """Audience vote"""
    debate_id: str = Field(..., min_length=10)
    winner: Literal["A", "B"]
    fingerprint: str = Field(..., min_length=6, max_length=64)


def _state(store: DebateStore, debate_id: str) -> tuple:
    debate = store.get_debate(debate_id)
    if debate is None:
        raise HTTPException(status_code=404, detail="Debate not found")
    return debate, store.list_turns(debate_id)


@router.post("/debates", status_code=201)
@limiter.limit(get_rate_limit_string())
async def create_debate(
    request: Request,
    body: CreateDebateRequest,
    store: DebateStore = Depends(get_store),
):
    """Create a new live debate"""
    if body.rounds not in SUPPORTED_ROUNDS:
        raise HTTPException(status_code=400, detail="Only rounds=3 is supported for now.")

    debate = store.create_debate(topic=body.topic, style_tag=body.style_tag, rounds=body.rounds)
    return {"debate": debate.to_dict()}


@router.post("/debates/{debate_id}/step")
@limiter.limit(get_rate_limit_string())
async def step_debate(
    request: Request,
    debate_id: str,
    store: DebateStore = Depends(get_store),
    generator_factory: Callable[[], TextGenerator] = Depends(get_generator_factory),
):
    """Advance a debate by one turn

    Plans the next slot, generates it, runs the guardrail and stores the turn.
    A failed generation leaves the debate live so the step can be retried.
    Concurrent steps on the same debate wait for each other.
    """
    _state(store, debate_id)
    async with _step_lock(debate_id):
        return await _advance(store, debate_id, generator_factory)


async def _advance(
    store: DebateStore,
    debate_id: str,
    generator_factory: Callable[[], TextGenerator],
) -> dict:
    debate, turns = _state(store, debate_id)

    slot = next_slot(debate.rounds, turns)
    if slot is None:
        store.set_debate_status(debate_id, "finished")
        return {
            "status": "finished",
            "debate": debate.to_dict(),
            "turns": [t.to_dict() for t in turns],
        }

    generator = generator_factory()

    round_name = role_to_round_name(slot.role)
    system_prompt = create_debater_prompt(
        topic=debate.topic,
        persona=persona_for(debate.style_tag, slot.side),
        style=debate.style_tag,
        round_name=round_name,
    )
    user_prompt = create_turn_prompt(
        opp_last=last_opponent_text(turns, slot.side) or "(no prior context)",
        round_name=round_name,
    )

    try:
        text = await generator.generate(
            system_prompt=system_prompt,
            user_prompt=user_prompt,
            max_tokens=max_tokens_per_turn(),
            temperature=LLM_TEMPERATURE_DEBATE,
        )
    except RateLimitError as e:
        raise HTTPException(
            status_code=429,
            detail=f"Rate limit exceeded. Retry after {e.retry_after} seconds.",
            headers={"Retry-After": str(e.retry_after)},
        )
    except LLMError as e:
        logger.error(json.dumps({"debate_id": debate_id, "event": "step generation failed", "error": str(e)}))
        raise HTTPException(status_code=500, detail="generation failed")

    text = await enforce_guardrail(text, load_guardrail_settings(), generator)

    turn = store.append_turn(
        debate_id=debate_id,
        round_no=slot.round_no,
        side=slot.side,
        role=slot.role,
        content=text,
        tokens=estimate_tokens(text),
    )

    now_turns = store.list_turns(debate_id)
    if next_slot(debate.rounds, now_turns) is None:
        store.set_debate_status(debate_id, "finished")

    return {
        "status": debate.status,
        "turn": turn.to_dict(),
        "debate": debate.to_dict(),
        "turns": [t.to_dict() for t in now_turns],
    }


@router.get("/debates/{debate_id}")
async def get_debate(debate_id: str, store: DebateStore = Depends(get_store)):
    """Current debate state with vote tally"""
    debate, turns = _state(store, debate_id)
    return {
        "debate": debate.to_dict(),
        "turns": [t.to_dict() for t in turns],
        "votes": store.vote_tally(debate_id),
    }


@router.post("/votes", status_code=201)
@limiter.limit(get_rate_limit_string())
async def record_vote(
    request: Request,
    body: VoteRequest,
    store: DebateStore = Depends(get_store),
):
    """Record an audience vote for side A or B"""
    try:
        vote = store.add_vote(body.debate_id, body.winner, body.fingerprint)
    except KeyError:
        raise HTTPException(status_code=404, detail="Debate not found")
    except DuplicateVoteError:
        raise HTTPException(status_code=409, detail="Already voted on this debate")
    return {"vote": vote.to_dict()}
