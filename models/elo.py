from pydantic import field_validator
from typing import Optional
from datetime import datetime

from .base import ApiModel, ApiInput, ensure_aware

class EloEntryBase(ApiModel):
    user_id: int
    elo_change: int
    new_elo: int
    date: datetime
    notes: Optional[str] = None

    @field_validator('date')
    @classmethod
    def normalize_date(cls, v):
        return ensure_aware(v)

class EloEntryCreate(EloEntryBase, ApiInput):
    pass

class EloEntry(EloEntryBase):
    id: int
