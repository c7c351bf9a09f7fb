from pydantic import Field
from typing import Optional
from datetime import datetime

from .base import ApiModel, ApiInput, ApiUpdate

class CourseBase(ApiModel):
    user_id: int
    title: str = Field(min_length=1)
    description: Optional[str] = None
    total_lessons: int = Field(default=0, ge=0)
    completed_lessons: int = Field(default=0, ge=0)
    completed: bool = False

class CourseCreate(CourseBase, ApiInput):
    pass

class CourseUpdate(ApiUpdate):
    nullable_fields = frozenset({"description"})

    title: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    total_lessons: Optional[int] = Field(default=None, ge=0)
    completed_lessons: Optional[int] = Field(default=None, ge=0)
    completed: Optional[bool] = None

class Course(CourseBase):
    id: int
    created_at: datetime
