from fastapi import APIRouter, Depends, HTTPException
from db.storage import MemoryStore, get_store
from models.user import User, UserCreate, UserUpdate
from config import load_config

router = APIRouter()

@router.get("/user/{user_id}", response_model=User)
async def get_user(user_id: int, store: MemoryStore = Depends(get_store)):
    user = store.get_user(user_id)
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    return user

@router.post("/user", response_model=User)
async def create_user(data: UserCreate, store: MemoryStore = Depends(get_store)):
    """Create a user; ratings the client leaves out start at the configured default."""
    if store.get_user_by_username(data.username):
        raise HTTPException(status_code=400, detail="Username already taken")
    default_elo = load_config()["ratings"]["default_elo"]
    defaults = {}
    if "current_elo" not in data.model_fields_set:
        defaults["current_elo"] = default_elo
    if "peak_elo" not in data.model_fields_set:
        defaults["peak_elo"] = max(default_elo, defaults.get("current_elo", data.current_elo))
    if defaults:
        data = data.model_copy(update=defaults)
    return store.create_user(data)

@router.patch("/user/{user_id}", response_model=User)
async def update_user(user_id: int, updates: UserUpdate, store: MemoryStore = Depends(get_store)):
    if not store.get_user(user_id):
        raise HTTPException(status_code=404, detail="User not found")
    fields = updates.changed_fields()
    if updates.username:
        existing = store.get_user_by_username(updates.username)
        if existing and existing.id != user_id:
            raise HTTPException(status_code=400, detail="Username already taken")
    user = store.update_user(user_id, fields)
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    return user
