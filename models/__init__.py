from .user import User, UserCreate, UserUpdate, UserSettings
from .elo import EloEntry, EloEntryCreate
from .goal import DailyGoal, DailyGoalCreate, DailyGoalUpdate, Goal, GoalCreate, GoalUpdate, GoalType, Weekday
from .course import Course, CourseCreate, CourseUpdate
from .analysis import GameAnalysis, GameAnalysisCreate, PositionAnalysis, PositionAnalysisRequest
from .stats import EloStats, RecentPerformance, CompletionSummary, CourseSummary, ProgressOverview

__all__ = [
    'User', 'UserCreate', 'UserUpdate', 'UserSettings',
    'EloEntry', 'EloEntryCreate',
    'DailyGoal', 'DailyGoalCreate', 'DailyGoalUpdate', 'Goal', 'GoalCreate', 'GoalUpdate', 'GoalType', 'Weekday',
    'Course', 'CourseCreate', 'CourseUpdate',
    'GameAnalysis', 'GameAnalysisCreate', 'PositionAnalysis', 'PositionAnalysisRequest',
    'EloStats', 'RecentPerformance', 'CompletionSummary', 'CourseSummary', 'ProgressOverview',
]
