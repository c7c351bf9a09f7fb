from pydantic import Field, field_validator
from typing import List, Optional
from datetime import datetime
from enum import Enum

from .base import ApiModel, ApiInput, ApiUpdate, ensure_aware

class Weekday(str, Enum):
    MONDAY = "monday"
    TUESDAY = "tuesday"
    WEDNESDAY = "wednesday"
    THURSDAY = "thursday"
    FRIDAY = "friday"
    SATURDAY = "saturday"
    SUNDAY = "sunday"

class GoalType(str, Enum):
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"  # shown as the masterlist

# Daily goals

class DailyGoalBase(ApiModel):
    user_id: int
    title: str = Field(min_length=1)
    completed: bool = False
    repeat_days: List[Weekday] = Field(default_factory=list)

class DailyGoalCreate(DailyGoalBase, ApiInput):
    pass

class DailyGoalUpdate(ApiUpdate):
    title: Optional[str] = Field(default=None, min_length=1)
    completed: Optional[bool] = None
    repeat_days: Optional[List[Weekday]] = None

class DailyGoal(DailyGoalBase):
    id: int
    created_at: datetime

# Weekly / monthly / yearly goals

class GoalBase(ApiModel):
    user_id: int
    title: str = Field(min_length=1)
    description: Optional[str] = None
    type: GoalType
    completed: bool = False
    target_date: Optional[datetime] = None

    @field_validator('target_date')
    @classmethod
    def normalize_target_date(cls, v):
        return ensure_aware(v)

class GoalCreate(GoalBase, ApiInput):
    pass

class GoalUpdate(ApiUpdate):
    nullable_fields = frozenset({"description", "target_date"})

    title: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    type: Optional[GoalType] = None
    completed: Optional[bool] = None
    target_date: Optional[datetime] = None

    @field_validator('target_date')
    @classmethod
    def normalize_target_date(cls, v):
        return ensure_aware(v)

class Goal(GoalBase):
    id: int
    created_at: datetime
