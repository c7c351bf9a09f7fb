from pydantic import Field
from typing import Dict, List

from .base import ApiModel
from .elo import EloEntry

class EloStats(ApiModel):
    change: int = 0
    entries: List[EloEntry] = Field(default_factory=list)
    average_per_game: float = 0.0

class RecentPerformance(ApiModel):
    games: int = 0
    win_rate: float = 0.0
    average_change: float = 0.0
    best_streak: int = 0

class CompletionSummary(ApiModel):
    completed: int = 0
    total: int = 0
    percent: float = 0.0

class CourseSummary(CompletionSummary):
    completed_lessons: int = 0
    total_lessons: int = 0
    lesson_percent: float = 0.0

class ProgressOverview(ApiModel):
    daily_goals: CompletionSummary
    goals: Dict[str, CompletionSummary]
    courses: CourseSummary
    games_analyzed: int = 0
