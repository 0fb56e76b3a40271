"""
Practice Router - Luyện đặt câu với từ vựng, AI nhận xét

=== ENDPOINTS ===
1. POST /gemini-practice - Nhận xét ngắn gọn câu học sinh đặt
2. POST /ai-evaluate - Chấm ĐẠT / CHƯA ĐẠT (có fallback khi hết quota)

=== LOGIC HOẠT ĐỘNG ===
1. User học từ "apple", đặt câu "I eat an apple every day"
2. Frontend gửi {word, meaning, example, userInput}
3. Server ghép prompt tiếng Việt cố định → gọi Gemini
4. Trả nguyên văn text đầu tiên Gemini trả về
"""
import logging

from fastapi import APIRouter, Depends, HTTPException, status

from app.schemas.practice import (
    PracticeRequest, PracticeResponse,
    EvaluationRequest, EvaluationResult, EvaluationResponse
)
from app.services.gemini_service import GeminiService, GeminiError, get_gemini_service

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Practice"])

PRACTICE_ERROR = "Có lỗi xảy ra khi phân tích. Vui lòng thử lại!"
EVALUATION_ERROR = "Có lỗi xảy ra khi đánh giá. Vui lòng thử lại!"


# ============================================================
# POST /gemini-practice - Nhận xét câu
# ============================================================
@router.post("/gemini-practice", response_model=PracticeResponse)
async def gemini_practice(
    request: PracticeRequest,
    gemini: GeminiService = Depends(get_gemini_service)
):
    """
    ✍️ NHẬN XÉT CÂU HỌC SINH ĐẶT
    
    Example request:
    {
        "word": "apple",
        "meaning": "quả táo",
        "example": "She ate an apple.",
        "userInput": "I eat apple every day"
    }
    """
    logger.info(f"Sending practice request to Gemini: word={request.word}")
    
    try:
        feedback = await gemini.practice_feedback(
            word=request.word,
            meaning=request.meaning,
            example=request.example,
            user_input=request.user_input
        )
    except GeminiError as e:
        logger.error(f"Gemini API error: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail={"success": False, "error": PRACTICE_ERROR}
        )
    
    return PracticeResponse(success=True, feedback=feedback)


# ============================================================
# POST /ai-evaluate - Chấm câu ĐẠT / CHƯA ĐẠT
# ============================================================
@router.post("/ai-evaluate", response_model=EvaluationResponse)
async def ai_evaluate(
    request: EvaluationRequest,
    gemini: GeminiService = Depends(get_gemini_service)
):
    """
    ✅ CHẤM CÂU ĐẠT / CHƯA ĐẠT
    
    Logic:
    1. Gemini trả text theo format 📚 / 🔤 / ✨ / 💡 Kết luận
    2. passed = có "Kết luận: ĐẠT", hoặc có "ĐẠT" mà không có "CHƯA ĐẠT"
    3. Gemini hết quota (429) → chấm đơn giản: câu có chứa từ không
    
    Response source: "gemini-ai" | "fallback-simple"
    """
    if not request.word or not request.meaning or not request.user_input:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Missing required fields: word, meaning, userInput"
        )
    
    logger.info(f"=== AI EVALUATION REQUEST === word={request.word} source={request.source}")
    
    try:
        evaluation = await gemini.evaluate_sentence(
            word=request.word,
            meaning=request.meaning,
            user_input=request.user_input
        )
    except GeminiError as e:
        logger.error(f"AI Evaluation API Error: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail={"success": False, "error": EVALUATION_ERROR, "details": str(e)}
        )
    
    return EvaluationResponse(
        success=True,
        evaluation=EvaluationResult(
            passed=evaluation.passed,
            feedback=evaluation.feedback,
            confidence=evaluation.confidence
        ),
        source=evaluation.source
    )
