"""
Word Status Router - Trạng thái mastered / learning của từng từ

=== ENDPOINTS ===
1. GET /word-status?source=oxford - Lấy 2 chuỗi mastered/learning để frontend tự parse
2. GET /word-status?word=apple&source=oxford - Trạng thái của 1 từ
3. POST /word-status - Cập nhật trạng thái sau khi user trả lời
"""
import logging
from typing import Optional, Union

from fastapi import APIRouter, Depends, HTTPException, status, Query
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.database import get_db
from app.core.dependencies import get_current_user
from app.schemas.progress import (
    WordStatusUpdateRequest, WordStatusResponse, WordStatusStringsResponse
)
from app.schemas.user import AuthUser
from app.services.progress_service import progress_service

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/word-status",
    tags=["Progress"]
)


@router.get("", response_model=Union[WordStatusResponse, WordStatusStringsResponse])
def get_word_status(
    word: Optional[str] = Query(None, description="Từ cần xem trạng thái (bỏ trống = tất cả)"),
    source: str = Query("oxford", description="oxford | topics"),
    db: Session = Depends(get_db),
    current_user: AuthUser = Depends(get_current_user)
):
    """
    🔍 LẤY TRẠNG THÁI TỪ VỰNG
    
    Lỗi database không làm hỏng UI: trả về chuỗi rỗng.
    """
    try:
        if word:
            word_state = progress_service.get_word_status(db, current_user.id, source, word)
            return WordStatusResponse(word=word, source=source, status=word_state)
        
        record = progress_service.get_word_strings(db, current_user.id, source)
    except SQLAlchemyError as e:
        logger.error(f"word-status GET error: {e}")
        return WordStatusStringsResponse(mastered_words="", learning_words="", source=source)
    
    return WordStatusStringsResponse(
        mastered_words=(record.mastered_words or "") if record else "",
        learning_words=(record.learning_words or "") if record else "",
        source=source
    )


@router.post("", response_model=WordStatusResponse)
def update_word_status(
    request: WordStatusUpdateRequest,
    db: Session = Depends(get_db),
    current_user: AuthUser = Depends(get_current_user)
):
    """
    💾 CẬP NHẬT TRẠNG THÁI
    
    isCorrect = true → mastered, false → learning
    
    Example request:
    {"word": "apple", "source": "oxford", "isCorrect": true}
    """
    if not request.word or not request.source or not isinstance(request.is_correct, bool):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Missing fields")
    
    try:
        new_status = progress_service.update_word_status(
            db, current_user.id, request.source, request.word, request.is_correct
        )
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"word-status POST error: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server error"
        )
    
    logger.info(f"📤 Updated: \"{request.word}\" = {new_status}")
    return WordStatusResponse(word=request.word, source=request.source, status=new_status)
