"""
Topics Router - API endpoints cho Chủ đề từ vựng

=== GIẢI QUYẾT VẤN ĐỀ GÌ? ===
1. Hiển thị danh sách chủ đề kèm số từ vựng
2. Lấy toàn bộ từ vựng của 1 chủ đề

=== LOGIC HOẠT ĐỘNG ===
- User mở trang Topics → GET /topics → Danh sách chủ đề (A→Z) + word_count
- User click vào 1 chủ đề → GET /topics/{id}/words → Từ vựng sắp xếp A→Z
"""
import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.database import get_db
from app.models import Topic, TopicWord
from app.schemas.topic import TopicResponse, TopicWordResponse

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/topics",
    tags=["Topics"]
)


# ============================================================
# GET /topics - Lấy danh sách chủ đề
# ============================================================
@router.get("", response_model=List[TopicResponse])
def get_topics(db: Session = Depends(get_db)):
    """
    📋 LẤY DANH SÁCH CHỦ ĐỀ
    
    word_count = COUNT(topic_words) qua LEFT JOIN, chủ đề chưa có từ → 0
    """
    try:
        rows = db.query(
            Topic.id,
            Topic.name,
            Topic.description,
            func.count(TopicWord.id).label("word_count")
        ).outerjoin(
            TopicWord, TopicWord.topic_id == Topic.id
        ).group_by(
            Topic.id, Topic.name, Topic.description
        ).order_by(Topic.name).all()
    except SQLAlchemyError as e:
        logger.error(f"Topics API error: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch topics"
        )
    
    return [
        TopicResponse(
            id=row.id,
            name=row.name,
            description=row.description,
            word_count=row.word_count
        )
        for row in rows
    ]


# ============================================================
# GET /topics/{topic_id}/words - Từ vựng của 1 chủ đề
# ============================================================
@router.get("/{topic_id}/words", response_model=List[TopicWordResponse])
def get_topic_words(
    topic_id: int,
    db: Session = Depends(get_db)
):
    """
    📖 LẤY TỪ VỰNG CỦA CHỦ ĐỀ
    
    Chủ đề không tồn tại → danh sách rỗng
    """
    try:
        words = db.query(TopicWord).filter(
            TopicWord.topic_id == topic_id
        ).order_by(TopicWord.term).all()
    except SQLAlchemyError as e:
        logger.error(f"Topic words API error: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch topic words"
        )
    
    return [TopicWordResponse.model_validate(w) for w in words]
