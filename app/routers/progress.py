"""
Progress Router - Lịch sử luyện tập và thống kê học từ vựng

=== ENDPOINTS ===
1. GET /progress?userId=...&source=oxford - Lịch sử luyện tập + tỉ lệ thuộc
2. POST /progress - Lưu kết quả 1 lần luyện
3. GET /stats - Thống kê mastered/learning theo nguồn (yêu cầu đăng nhập)
"""
import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, status, Query
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.database import get_db
from app.core.dependencies import get_current_user
from app.schemas.progress import (
    ProgressUpdateRequest, ProgressItem, ProgressData,
    ProgressListResponse, ProgressSaveResponse, StatsResponse
)
from app.schemas.user import AuthUser
from app.services.progress_service import progress_service

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Progress"])


# ============================================================
# GET /progress - Lịch sử luyện tập
# ============================================================
@router.get("/progress", response_model=ProgressListResponse)
def get_progress(
    user_id: Optional[str] = Query(None, alias="userId"),
    source: Optional[str] = Query(None, description="oxford | topics | all"),
    db: Session = Depends(get_db)
):
    """📈 LẤY LỊCH SỬ LUYỆN TẬP"""
    if not user_id:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="User ID required")
    
    try:
        items = progress_service.list_progress(db, user_id, source)
    except SQLAlchemyError as e:
        logger.error(f"Error fetching progress: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch progress"
        )
    
    return ProgressListResponse(
        success=True,
        data=ProgressData(
            progress=[ProgressItem.model_validate(p) for p in items],
            stats=progress_service.summarize_progress(items)
        )
    )


# ============================================================
# POST /progress - Lưu kết quả luyện tập
# ============================================================
@router.post("/progress", response_model=ProgressSaveResponse)
def save_progress(
    request: ProgressUpdateRequest,
    db: Session = Depends(get_db)
):
    """
    💾 LƯU KẾT QUẢ LUYỆN TẬP
    
    Example request:
    {
        "userId": "3f1c...",
        "word": "apple",
        "wordMeaning": "quả táo",
        "source": "oxford",
        "isMastered": true,
        "feedback": "Câu đúng ngữ pháp..."
    }
    """
    if not request.user_id or not request.word or not request.source:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Missing required fields: userId, word, source"
        )
    
    try:
        record = progress_service.save_progress(
            db,
            user_id=request.user_id,
            word=request.word,
            source=request.source,
            word_meaning=request.word_meaning,
            topic=request.topic,
            is_mastered=request.is_mastered,
            feedback=request.feedback
        )
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error saving progress: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to save progress"
        )
    
    return ProgressSaveResponse(success=True, data=ProgressItem.model_validate(record))


# ============================================================
# GET /stats - Thống kê học từ vựng
# ============================================================
@router.get("/stats", response_model=StatsResponse)
def get_stats(
    db: Session = Depends(get_db),
    current_user: AuthUser = Depends(get_current_user)
):
    """
    📊 THỐNG KÊ HỌC TỪ VỰNG
    
    Lỗi database → 500 kèm thống kê rỗng để UI vẫn hiển thị được
    """
    try:
        stats = progress_service.get_user_stats(db, current_user.id)
    except SQLAlchemyError as e:
        logger.error(f"Stats API error: {e}")
        empty = progress_service.empty_stats()
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail={
                "success": False,
                "error": "Server error",
                "data": empty.model_dump(by_alias=True),
            }
        )
    
    logger.info(f"📊 Stats for user {current_user.id}: {stats.overview.total_studied} words studied")
    return StatsResponse(success=True, data=stats)
