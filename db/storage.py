"""In-memory entity store.

One table per entity type, each with its own id counter. All tables share a
single re-entrant lock so id allocation and the ELO entry / user rating
update happen as one critical section.
"""
import logging
import threading
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from fastapi import Request

from models.analysis import GameAnalysis, GameAnalysisCreate
from models.course import Course, CourseCreate
from models.elo import EloEntry, EloEntryCreate
from models.goal import DailyGoal, DailyGoalCreate, Goal, GoalCreate, GoalType
from models.stats import EloStats, RecentPerformance
from models.user import User, UserCreate
from utils.stats import DEFAULT_RECENT_WINDOW, elo_stats, recent_performance

logger = logging.getLogger(__name__)


def utcnow():
    return datetime.now(timezone.utc)


class EntityTable:
    """Id-keyed records of one model type, sorted at read time."""

    def __init__(self, model, lock, order_by="created_at", newest_first=True, stamp_created=True):
        self.model = model
        self._lock = lock
        self._order_by = order_by
        self._newest_first = newest_first
        self._stamp_created = stamp_created
        self._rows = {}
        self._next_id = 1

    def __len__(self):
        return len(self._rows)

    def create(self, fields: Dict[str, Any]):
        with self._lock:
            record_id = self._next_id
            self._next_id += 1
            values = dict(fields)
            values["id"] = record_id
            if self._stamp_created:
                values["created_at"] = utcnow()
            record = self.model(**values)
            self._rows[record_id] = record
        logger.debug("Created %s id=%s", self.model.__name__, record_id)
        return record

    def get(self, record_id: int):
        return self._rows.get(record_id)

    def update(self, record_id: int, fields: Dict[str, Any]):
        """Shallow-merge `fields` into the record; values are not re-validated."""
        with self._lock:
            record = self._rows.get(record_id)
            if record is None:
                return None
            updated = record.model_copy(update=dict(fields))
            self._rows[record_id] = updated
        logger.debug("Updated %s id=%s fields=%s", self.model.__name__, record_id, sorted(fields))
        return updated

    def delete(self, record_id: int) -> bool:
        with self._lock:
            removed = self._rows.pop(record_id, None)
        if removed is not None:
            logger.debug("Deleted %s id=%s", self.model.__name__, record_id)
        return removed is not None

    def find(self, predicate):
        with self._lock:
            rows = list(self._rows.values())
        return next((row for row in rows if predicate(row)), None)

    def list_by_user(self, user_id: int, predicate=None) -> List:
        with self._lock:
            rows = [
                row for row in self._rows.values()
                if row.user_id == user_id and (predicate is None or predicate(row))
            ]
        rows.sort(
            key=lambda row: (getattr(row, self._order_by), row.id),
            reverse=self._newest_first,
        )
        return rows


class MemoryStore:
    def __init__(self):
        self._lock = threading.RLock()
        self.users = EntityTable(User, self._lock)
        self.elo_entries = EntityTable(
            EloEntry, self._lock, order_by="date", newest_first=False, stamp_created=False
        )
        self.daily_goals = EntityTable(DailyGoal, self._lock)
        self.courses = EntityTable(Course, self._lock)
        self.goals = EntityTable(Goal, self._lock)
        self.game_analyses = EntityTable(GameAnalysis, self._lock)

    # Users

    def get_user(self, user_id: int) -> Optional[User]:
        return self.users.get(user_id)

    def get_user_by_username(self, username: str) -> Optional[User]:
        return self.users.find(lambda user: user.username == username)

    def create_user(self, data: UserCreate) -> User:
        return self.users.create(data.model_dump())

    def update_user(self, user_id: int, fields: Dict[str, Any]) -> Optional[User]:
        return self.users.update(user_id, fields)

    # ELO

    def get_elo_entries(self, user_id: int) -> List[EloEntry]:
        return self.elo_entries.list_by_user(user_id)

    def create_elo_entry(self, data: EloEntryCreate) -> EloEntry:
        """Store the entry and move the owner's current/peak rating by its change."""
        with self._lock:
            entry = self.elo_entries.create(data.model_dump())
            user = self.users.get(entry.user_id)
            if user is None:
                logger.debug("ELO entry %s has no user %s; rating not updated", entry.id, entry.user_id)
                return entry
            current_elo = user.current_elo + entry.elo_change
            self.users.update(user.id, {
                "current_elo": current_elo,
                "peak_elo": max(user.peak_elo, current_elo),
            })
        return entry

    def get_elo_stats(self, user_id: int, period, now: Optional[datetime] = None) -> EloStats:
        return elo_stats(self.get_elo_entries(user_id), period, now)

    def get_recent_performance(self, user_id: int, limit: int = DEFAULT_RECENT_WINDOW) -> RecentPerformance:
        return recent_performance(self.get_elo_entries(user_id), limit)

    # Daily goals

    def get_daily_goals(self, user_id: int) -> List[DailyGoal]:
        return self.daily_goals.list_by_user(user_id)

    def create_daily_goal(self, data: DailyGoalCreate) -> DailyGoal:
        return self.daily_goals.create(data.model_dump())

    def update_daily_goal(self, goal_id: int, fields: Dict[str, Any]) -> Optional[DailyGoal]:
        return self.daily_goals.update(goal_id, fields)

    def delete_daily_goal(self, goal_id: int) -> bool:
        return self.daily_goals.delete(goal_id)

    # Courses

    def get_courses(self, user_id: int) -> List[Course]:
        return self.courses.list_by_user(user_id)

    def get_course(self, course_id: int) -> Optional[Course]:
        return self.courses.get(course_id)

    def create_course(self, data: CourseCreate) -> Course:
        return self.courses.create(data.model_dump())

    def update_course(self, course_id: int, fields: Dict[str, Any]) -> Optional[Course]:
        return self.courses.update(course_id, fields)

    def delete_course(self, course_id: int) -> bool:
        return self.courses.delete(course_id)

    # Goals

    def get_goals(self, user_id: int, goal_type=None) -> List[Goal]:
        if not goal_type:
            return self.goals.list_by_user(user_id)
        goal_type = GoalType(goal_type)
        return self.goals.list_by_user(user_id, lambda goal: goal.type == goal_type)

    def get_goal(self, goal_id: int) -> Optional[Goal]:
        return self.goals.get(goal_id)

    def create_goal(self, data: GoalCreate) -> Goal:
        return self.goals.create(data.model_dump())

    def update_goal(self, goal_id: int, fields: Dict[str, Any]) -> Optional[Goal]:
        return self.goals.update(goal_id, fields)

    def delete_goal(self, goal_id: int) -> bool:
        return self.goals.delete(goal_id)

    # Game analyses

    def get_game_analyses(self, user_id: int) -> List[GameAnalysis]:
        return self.game_analyses.list_by_user(user_id)

    def create_game_analysis(self, data: GameAnalysisCreate) -> GameAnalysis:
        return self.game_analyses.create(data.model_dump())

    def get_game_analysis(self, analysis_id: int) -> Optional[GameAnalysis]:
        return self.game_analyses.get(analysis_id)


def get_store(request: Request) -> MemoryStore:
    """FastAPI dependency: the store built at startup."""
    return request.app.state.store
