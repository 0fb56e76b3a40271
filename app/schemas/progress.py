"""
Progress schemas - Tiến độ và trạng thái học từ vựng

Hai cách lưu tiến độ song song:
1. user_progress: mỗi lần luyện một từ → 1 dòng (attempts, feedback AI)
2. user_word_strings: danh sách mastered/learning dạng chuỗi, dùng cho thống kê
"""
from pydantic import BaseModel, Field
from typing import Any, Optional, List, Dict
from datetime import date, datetime


# ============= USER_PROGRESS =============

class ProgressUpdateRequest(BaseModel):
    """Body POST /progress"""
    user_id: Optional[str] = Field(None, alias="userId")
    word: Optional[str] = None
    word_meaning: Optional[str] = Field(None, alias="wordMeaning")
    source: Optional[str] = None
    topic: Optional[str] = None
    is_mastered: bool = Field(False, alias="isMastered")
    feedback: Optional[str] = None


class ProgressItem(BaseModel):
    id: int
    user_id: str
    word: str
    word_meaning: Optional[str] = None
    source: str
    topic: Optional[str] = None
    is_mastered: bool = False
    attempts: int = 0
    learned_date: Optional[date] = None
    first_attempt_date: Optional[datetime] = None
    last_attempt_date: Optional[datetime] = None
    ai_feedback: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    
    class Config:
        from_attributes = True


class ProgressStats(BaseModel):
    total_words: int = Field(..., alias="totalWords")
    mastered_words: int = Field(..., alias="masteredWords")
    in_progress: int = Field(..., alias="inProgress")
    mastery_rate: str = Field(..., alias="masteryRate")
    
    class Config:
        populate_by_name = True


class ProgressData(BaseModel):
    progress: List[ProgressItem]
    stats: ProgressStats


class ProgressListResponse(BaseModel):
    success: bool = True
    data: ProgressData


class ProgressSaveResponse(BaseModel):
    success: bool = True
    data: ProgressItem


# ============= USER_WORD_STRINGS =============

class WordStatusUpdateRequest(BaseModel):
    """Body POST /word-status"""
    word: Optional[str] = None
    source: Optional[str] = None
    is_correct: Any = Field(None, alias="isCorrect")  # chỉ nhận true/false, kiểm tra ở router


class WordStatusResponse(BaseModel):
    word: str
    source: str
    status: str  # mastered | learning | not-started


class WordStatusStringsResponse(BaseModel):
    mastered_words: str = Field("", alias="masteredWords")
    learning_words: str = Field("", alias="learningWords")
    source: str
    
    class Config:
        populate_by_name = True


# ============= STATS =============

class StatsOverview(BaseModel):
    total_mastered: int = Field(0, alias="totalMastered")
    total_learning: int = Field(0, alias="totalLearning")
    total_studied: int = Field(0, alias="totalStudied")
    mastery_rate: str = Field("0", alias="masteryRate")
    
    class Config:
        populate_by_name = True


class SourceStats(BaseModel):
    mastered: int = 0
    learning: int = 0
    total: int = 0
    mastery_rate: str = Field("0", alias="masteryRate")
    progress: str = "0"
    completion_rate: str = Field("0", alias="completionRate")
    
    class Config:
        populate_by_name = True


class StatsData(BaseModel):
    overview: StatsOverview
    by_source: Dict[str, SourceStats] = Field(..., alias="bySource")
    
    class Config:
        populate_by_name = True


class StatsResponse(BaseModel):
    success: bool = True
    data: StatsData
