from pydantic import Field
from typing import Optional
from datetime import datetime

from .base import ApiModel, ApiInput, ApiUpdate

class UserSettings(ApiModel):
    show_engine_arrows: bool = True
    engine_depth: int = Field(default=15, ge=1)
    preferred_engine: str = "stockfish17"
    sidebar_collapsed: bool = False

class UserBase(ApiModel):
    username: str = Field(min_length=1)
    current_elo: int = 1200
    peak_elo: int = 1200
    profile_complete: bool = False
    settings: UserSettings = Field(default_factory=UserSettings)

class UserCreate(UserBase, ApiInput):
    pass

class UserUpdate(ApiUpdate):
    username: Optional[str] = Field(default=None, min_length=1)
    current_elo: Optional[int] = None
    peak_elo: Optional[int] = None
    profile_complete: Optional[bool] = None
    settings: Optional[UserSettings] = None

class User(UserBase):
    id: int
    created_at: datetime
