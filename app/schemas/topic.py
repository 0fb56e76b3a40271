"""
Topic schemas - Cấu trúc dữ liệu cho Chủ đề

GIẢI THÍCH BẢNG TOPICS:
========================
Bảng `topics` nhóm từ vựng theo chủ đề (Food, Travel, Family...).
Từ vựng của từng chủ đề nằm trong bảng `topic_words` (topic_id → topics.id).
word_count không lưu trong DB mà được đếm lúc đọc.
"""
from pydantic import BaseModel
from typing import Optional


class TopicResponse(BaseModel):
    """Schema chủ đề kèm số từ vựng"""
    id: int
    name: str
    description: Optional[str] = None
    word_count: int = 0
    
    class Config:
        from_attributes = True


class TopicWordResponse(BaseModel):
    """Schema từ vựng thuộc chủ đề"""
    id: int
    term: str
    meaning: str
    pos: Optional[str] = None
    example: Optional[str] = None
    image_url: Optional[str] = None
    
    class Config:
        from_attributes = True
