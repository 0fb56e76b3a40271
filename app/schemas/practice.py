"""
Practice schemas - Luyện đặt câu với AI (Gemini)
"""
from pydantic import BaseModel, Field
from typing import Optional


class PracticeRequest(BaseModel):
    """Câu học sinh đặt với từ vựng cần luyện"""
    word: str = Field(..., min_length=1)
    meaning: str = ""
    example: str = ""
    user_input: str = Field(..., alias="userInput", min_length=1)


class PracticeResponse(BaseModel):
    success: bool = True
    feedback: str


class EvaluationRequest(BaseModel):
    """Yêu cầu chấm câu ĐẠT / CHƯA ĐẠT"""
    word: Optional[str] = None
    meaning: Optional[str] = None
    user_input: Optional[str] = Field(None, alias="userInput")
    source: Optional[str] = Field(None, description="oxford | topics")
    topic: Optional[str] = None


class EvaluationResult(BaseModel):
    passed: bool
    feedback: str
    confidence: float = Field(..., ge=0, le=1)


class EvaluationResponse(BaseModel):
    success: bool = True
    evaluation: EvaluationResult
    source: str  # gemini-ai | fallback-simple
