from fastapi import APIRouter, Depends, HTTPException, Query
from typing import List, Optional
from db.storage import MemoryStore, get_store
from models.elo import EloEntry, EloEntryCreate
from models.stats import EloStats, RecentPerformance
from utils.stats import Period
from config import get_config_value

router = APIRouter()

PERIODS = {period.value for period in Period}

@router.get("/elo/{user_id}", response_model=List[EloEntry])
async def list_elo_entries(user_id: int, store: MemoryStore = Depends(get_store)):
    """All rating changes for a user, oldest first."""
    return store.get_elo_entries(user_id)

@router.post("/elo", response_model=EloEntry)
async def create_elo_entry(data: EloEntryCreate, store: MemoryStore = Depends(get_store)):
    return store.create_elo_entry(data)

@router.get("/elo-stats/{user_id}/{period}", response_model=EloStats)
async def elo_stats(user_id: int, period: str, store: MemoryStore = Depends(get_store)):
    """Rating change over the last week, month or year."""
    if period not in PERIODS:
        raise HTTPException(status_code=400, detail="Invalid period")
    return store.get_elo_stats(user_id, Period(period))

@router.get("/elo-performance/{user_id}", response_model=RecentPerformance)
async def elo_performance(
    user_id: int,
    limit: Optional[int] = Query(default=None, ge=1),
    store: MemoryStore = Depends(get_store),
):
    """Win rate, average change and best streak over the most recent games."""
    limit = limit or get_config_value("ratings", "recent_window", 10)
    return store.get_recent_performance(user_id, limit)
