# Routes package __init__.py - re-exports routers for main.py convenience
from .users import router as users_router
from .elo import router as elo_router
from .daily_goals import router as daily_goals_router
from .courses import router as courses_router
from .goals import router as goals_router
from .analyses import router as analyses_router
from .progress import router as progress_router

__all__ = [
    'users_router', 'elo_router', 'daily_goals_router', 'courses_router',
    'goals_router', 'analyses_router', 'progress_router',
]
