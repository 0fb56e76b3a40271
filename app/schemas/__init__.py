"""
Schemas package initialization - Export all Pydantic schemas
"""
# Vocabulary schemas
from app.schemas.vocabulary import (
    AttachImageRequest, OxfordWordResponse, OxfordWordListResponse,
    WordCountResponse, AttachImageResponse, ImageSearchResponse, GameWord
)

# Topic schemas
from app.schemas.topic import TopicResponse, TopicWordResponse

# Practice schemas
from app.schemas.practice import (
    PracticeRequest, PracticeResponse,
    EvaluationRequest, EvaluationResult, EvaluationResponse
)

# Progress schemas
from app.schemas.progress import (
    ProgressUpdateRequest, ProgressItem, ProgressStats, ProgressData,
    ProgressListResponse, ProgressSaveResponse,
    WordStatusUpdateRequest, WordStatusResponse, WordStatusStringsResponse,
    StatsOverview, SourceStats, StatsData, StatsResponse
)

# User schemas
from app.schemas.user import AuthUser, AvatarUploadResponse

__all__ = [
    # Vocabulary
    "AttachImageRequest", "OxfordWordResponse", "OxfordWordListResponse",
    "WordCountResponse", "AttachImageResponse", "ImageSearchResponse", "GameWord",
    
    # Topic
    "TopicResponse", "TopicWordResponse",
    
    # Practice
    "PracticeRequest", "PracticeResponse",
    "EvaluationRequest", "EvaluationResult", "EvaluationResponse",
    
    # Progress
    "ProgressUpdateRequest", "ProgressItem", "ProgressStats", "ProgressData",
    "ProgressListResponse", "ProgressSaveResponse",
    "WordStatusUpdateRequest", "WordStatusResponse", "WordStatusStringsResponse",
    "StatsOverview", "SourceStats", "StatsData", "StatsResponse",
    
    # User
    "AuthUser", "AvatarUploadResponse",
]
