from fastapi import APIRouter, Depends, HTTPException, Query
from typing import List, Optional
from db.storage import MemoryStore, get_store
from models.goal import Goal, GoalCreate, GoalType, GoalUpdate

router = APIRouter()

@router.get("/goals/{user_id}", response_model=List[Goal])
async def list_goals(
    user_id: int,
    goal_type: Optional[GoalType] = Query(default=None, alias="type"),
    store: MemoryStore = Depends(get_store),
):
    """Weekly, monthly and yearly goals, newest first, optionally of one type."""
    return store.get_goals(user_id, goal_type)

@router.post("/goals", response_model=Goal)
async def create_goal(data: GoalCreate, store: MemoryStore = Depends(get_store)):
    return store.create_goal(data)

@router.patch("/goals/{goal_id}", response_model=Goal)
async def update_goal(goal_id: int, updates: GoalUpdate, store: MemoryStore = Depends(get_store)):
    goal = store.update_goal(goal_id, updates.changed_fields())
    if not goal:
        raise HTTPException(status_code=404, detail="Goal not found")
    return goal

@router.delete("/goals/{goal_id}")
async def delete_goal(goal_id: int, store: MemoryStore = Depends(get_store)):
    if not store.delete_goal(goal_id):
        raise HTTPException(status_code=404, detail="Goal not found")
    return {"success": True}
