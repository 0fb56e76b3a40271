"""
Gemini Service - Nhận xét câu học sinh đặt với từ vựng (Google Gemini)

=== CHỨC NĂNG ===
1. Practice feedback: nhận xét ngắn (≤ 60 từ) bằng tiếng Việt
2. Evaluation: chấm ĐẠT / CHƯA ĐẠT kèm nhận xét theo format cố định
3. Fallback khi Gemini hết quota (HTTP 429): chấm đơn giản tại server

=== GEMINI API ===
- Endpoint: {base_url}/models/{model}:generateContent
- Auth: header "X-goog-api-key"
- Chỉ dùng candidates[0].content.parts[0].text
"""
import logging
from dataclasses import dataclass
from typing import Optional

import httpx

from app.config import settings

logger = logging.getLogger(__name__)


PRACTICE_PROMPT = """Bạn là một giáo viên tiếng Anh. Đánh giá ngắn gọn bằng tiếng Việt về cách học sinh sử dụng từ vựng.

Từ vựng: "{word}"
Nghĩa: {meaning}
Ví dụ: {example}
Câu của học sinh: "{user_input}"

Yêu cầu phản hồi:
- KHÔNG chào hỏi
- Ngắn gọn, đúng trọng tâm (tối đa 60 từ)
- Đánh giá: đúng/sai nghĩa, ngữ pháp
- Đưa ra cách sửa (nếu cần)
- Khen ngợi ngắn gọn

Trả lời trực tiếp, không dài dòng."""


EVALUATION_PROMPT = """Bạn là một giáo viên tiếng Anh chuyên nghiệp. Hãy đánh giá câu tiếng Anh của học sinh với các tiêu chí:

**Từ vựng học:** "{word}" (nghĩa: {meaning})
**Câu của học sinh:** "{user_input}"

**Yêu cầu đánh giá:**

1. **KIỂM TRA CƠ BẢN:**
   - Có sử dụng từ "{word}" không?
   - Câu có ý nghĩa rõ ràng không?
   - Ngữ pháp có đúng không? (đặc biệt chú ý subject-verb agreement)

2. **TIÊU CHÍ ĐẠT/CHƯA ĐẠT:**
   - ĐẠT: Dùng đúng từ + ngữ pháp cơ bản đúng + có ý nghĩa
   - CHƯA ĐẠT: Không dùng từ hoặc sai ngữ pháp nghiêm trọng hoặc không có ý nghĩa

3. **LƯU Ý QUAN TRỌNG:**
   - KHÔNG trừ điểm vì thiếu viết hoa đầu câu
   - KHÔNG trừ điểm vì thiếu dấu chấm cuối câu
   - CHỈ tập trung vào: dùng từ đúng nghĩa + ngữ pháp cơ bản + ý nghĩa câu

**Trả lời thẳng bằng text thuần, KHÔNG dùng JSON:**

Đánh giá ngắn gọn theo format (KHÔNG dùng ** markdown):
📚 Từ vựng: [nếu không dùng từ "{word}" thì ghi "Không sử dụng từ vựng yêu cầu", nếu có thì đánh giá]
🔤 Ngữ pháp: [đánh giá ngữ pháp, chỉ ra lỗi cụ thể nếu có]
✨ Chất lượng: [đánh giá tổng thể về câu]
💡 Kết luận: [ĐẠT/CHƯA ĐẠT + gợi ý ngắn gọn]

Trả lời trực tiếp, không bao bọc trong JSON, markdown hay code block."""


class GeminiError(Exception):
    """Gemini trả lỗi HTTP, lỗi mạng hoặc response sai cấu trúc"""
    
    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


@dataclass
class Evaluation:
    """Kết quả chấm câu"""
    passed: bool
    feedback: str
    confidence: float
    source: str  # gemini-ai | fallback-simple


class GeminiService:
    """Service gọi Gemini generateContent"""
    
    def __init__(self, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.api_key = settings.GEMINI_API_KEY
        self.base_url = settings.GEMINI_BASE_URL
        self.model = settings.GEMINI_MODEL
        self.timeout = settings.HTTP_TIMEOUT_SECONDS
        self._transport = transport
    
    async def generate_text(self, prompt: str) -> str:
        """
        Gửi prompt và lấy text của candidate đầu tiên
        
        Raises:
            GeminiError: lỗi HTTP (kèm status_code), lỗi mạng, hoặc thiếu text
        """
        url = f"{self.base_url}/models/{self.model}:generateContent"
        headers = {
            "Content-Type": "application/json",
            "X-goog-api-key": self.api_key or "",
        }
        payload = {"contents": [{"parts": [{"text": prompt}]}]}
        
        async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
            try:
                response = await client.post(url, headers=headers, json=payload)
                response.raise_for_status()
                data = response.json()
                
            except httpx.HTTPStatusError as e:
                logger.error(f"Gemini API error response: {e.response.text}")
                raise GeminiError(
                    f"Gemini API error: {e.response.status_code}",
                    status_code=e.response.status_code
                )
            except httpx.RequestError as e:
                raise GeminiError(f"Network error calling Gemini: {e}")
            except ValueError as e:
                raise GeminiError(f"Invalid JSON from Gemini: {e}")
        
        text = self._extract_text(data)
        if not text:
            logger.error(f"Invalid Gemini response structure: {data}")
            raise GeminiError("Invalid response format from Gemini API")
        return text
    
    async def practice_feedback(self, word: str, meaning: str, example: str, user_input: str) -> str:
        """Nhận xét ngắn về câu học sinh đặt"""
        prompt = PRACTICE_PROMPT.format(
            word=word,
            meaning=meaning,
            example=example,
            user_input=user_input
        )
        return await self.generate_text(prompt)
    
    async def evaluate_sentence(self, word: str, meaning: str, user_input: str) -> Evaluation:
        """
        Chấm câu ĐẠT / CHƯA ĐẠT
        
        Nếu Gemini hết quota (429) thì dùng simple_evaluation thay thế.
        Các lỗi khác được raise lên router.
        """
        prompt = EVALUATION_PROMPT.format(word=word, meaning=meaning, user_input=user_input)
        try:
            text = await self.generate_text(prompt)
        except GeminiError as e:
            if e.status_code == 429:
                logger.warning("Gemini quota exceeded, using fallback evaluation")
                return simple_evaluation(word, user_input)
            raise
        
        cleaned = text.strip()
        passed = is_passed(cleaned)
        return Evaluation(
            passed=passed,
            feedback=cleaned,
            confidence=0.85 if passed else 0.75,
            source="gemini-ai"
        )
    
    def _extract_text(self, data: dict) -> Optional[str]:
        """candidates[0].content.parts[0].text"""
        try:
            return data["candidates"][0]["content"]["parts"][0]["text"]
        except (KeyError, IndexError, TypeError):
            return None


def is_passed(text: str) -> bool:
    """ĐẠT khi có 'Kết luận: ĐẠT', hoặc có 'ĐẠT' mà không có 'CHƯA ĐẠT'"""
    return "Kết luận: ĐẠT" in text or ("ĐẠT" in text and "CHƯA ĐẠT" not in text)


def simple_evaluation(word: str, user_input: str) -> Evaluation:
    """Chấm đơn giản khi AI không khả dụng: câu có chứa từ vựng không"""
    has_word = word.lower() in user_input.lower()
    if has_word:
        feedback = f'✅ Tốt! Bạn đã sử dụng từ "{word}" trong câu. (AI tạm thời không khả dụng)'
    else:
        feedback = f'❌ Bạn chưa sử dụng từ "{word}" trong câu. Hãy thử viết lại câu có chứa từ này.'
    return Evaluation(
        passed=has_word and len(user_input.strip()) > 3,
        feedback=feedback,
        confidence=0.5,
        source="fallback-simple"
    )


# Singleton instance
gemini_service = GeminiService()


def get_gemini_service() -> GeminiService:
    return gemini_service
