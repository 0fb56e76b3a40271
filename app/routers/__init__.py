"""
API routers - Tất cả các API endpoints
"""
from app.routers import oxford
from app.routers import topics
from app.routers import game
from app.routers import practice
from app.routers import upload
from app.routers import word_status
from app.routers import progress

__all__ = [
    "oxford",
    "topics",
    "game",
    "practice",
    "upload",
    "word_status",
    "progress"
]
