"""Health check endpoint"""

from datetime import datetime
from fastapi import APIRouter, Depends

from debate_core import DebateStore
from .debate import get_store

router = APIRouter()

VERSION = "1.0.0"


@router.get("/health")
async def health_check(store: DebateStore = Depends(get_store)):
    """Liveness plus a count of debates still in progress"""
    return {
        "ok": True,
        "status": "healthy",
        "timestamp": datetime.utcnow().isoformat() + "Z",
        "version": VERSION,
        "active_debates": store.active_debate_count,
    }
