"""
Database models - Export all models
"""
from app.models.vocabulary import OxfordWord
from app.models.topic import Topic, TopicWord
from app.models.progress import UserProgress, UserWordStrings

__all__ = [
    # Content
    "OxfordWord",
    "Topic",
    "TopicWord",
    
    # Progress
    "UserProgress",
    "UserWordStrings",
]
