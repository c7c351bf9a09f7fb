from fastapi import APIRouter, Depends
from db.storage import MemoryStore, get_store
from models.stats import ProgressOverview
from utils.progress import summarize_completion, summarize_courses, summarize_goals_by_type

router = APIRouter()

@router.get("/progress/{user_id}", response_model=ProgressOverview)
async def user_progress(user_id: int, store: MemoryStore = Depends(get_store)):
    """Dashboard totals: daily goals, goals per period, courses and analysed games."""
    return ProgressOverview(
        daily_goals=summarize_completion(store.get_daily_goals(user_id)),
        goals=summarize_goals_by_type(store.get_goals(user_id)),
        courses=summarize_courses(store.get_courses(user_id)),
        games_analyzed=len(store.get_game_analyses(user_id)),
    )
