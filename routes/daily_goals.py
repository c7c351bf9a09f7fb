from fastapi import APIRouter, Depends, HTTPException
from typing import List
from db.storage import MemoryStore, get_store
from models.goal import DailyGoal, DailyGoalCreate, DailyGoalUpdate

router = APIRouter()

@router.get("/daily-goals/{user_id}", response_model=List[DailyGoal])
async def list_daily_goals(user_id: int, store: MemoryStore = Depends(get_store)):
    return store.get_daily_goals(user_id)

@router.post("/daily-goals", response_model=DailyGoal)
async def create_daily_goal(data: DailyGoalCreate, store: MemoryStore = Depends(get_store)):
    return store.create_daily_goal(data)

@router.patch("/daily-goals/{goal_id}", response_model=DailyGoal)
async def update_daily_goal(goal_id: int, updates: DailyGoalUpdate, store: MemoryStore = Depends(get_store)):
    goal = store.update_daily_goal(goal_id, updates.changed_fields())
    if not goal:
        raise HTTPException(status_code=404, detail="Goal not found")
    return goal

@router.delete("/daily-goals/{goal_id}")
async def delete_daily_goal(goal_id: int, store: MemoryStore = Depends(get_store)):
    if not store.delete_daily_goal(goal_id):
        raise HTTPException(status_code=404, detail="Goal not found")
    return {"success": True}
