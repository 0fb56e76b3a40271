"""
Game Router - Lấy từ ngẫu nhiên cho mini game (flashcard, quiz, typing)
"""
import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status, Query
from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.config import settings
from app.database import get_db
from app.models import OxfordWord
from app.schemas.vocabulary import GameWord
from app.utils.pagination import clamp

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/game",
    tags=["Game"]
)


@router.get("/random", response_model=List[GameWord])
def get_random_words(
    n: int = Query(settings.GAME_DEFAULT_WORDS, description="Số từ (1-50)"),
    db: Session = Depends(get_db)
):
    """🎮 Lấy n từ Oxford ngẫu nhiên (chỉ term + meaning)"""
    count = clamp(n, 1, settings.GAME_MAX_WORDS)
    
    try:
        words = db.query(OxfordWord.term, OxfordWord.meaning).order_by(
            func.random()
        ).limit(count).all()
    except SQLAlchemyError as e:
        logger.error(f"❌ Game random API error: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch random words"
        )
    
    logger.info(f"✅ Found {len(words)} random words for game")
    return [GameWord(term=w.term, meaning=w.meaning) for w in words]
