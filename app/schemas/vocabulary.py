"""
Vocabulary schemas - Cấu trúc dữ liệu cho Từ vựng Oxford

GIẢI THÍCH BẢNG OXFORD_WORDS:
=============================
Bảng `oxford_words` lưu danh sách Oxford 3000 kèm nghĩa tiếng Việt.

Ví dụ:
- term: "apple"
- meaning: "quả táo"
- pos: "noun"
- example: "She ate an apple for breakfast."
- ipa: "/ˈæp.əl/"
- image_url: ảnh minh họa lấy từ Unsplash
- topic: "food"
"""
from pydantic import BaseModel, Field
from typing import Optional, List


# ============= REQUEST SCHEMAS =============

class AttachImageRequest(BaseModel):
    """Schema gắn ảnh cho từ vựng"""
    term: Optional[str] = Field(None, description="Từ cần tìm ảnh")


# ============= RESPONSE SCHEMAS =============

class OxfordWordResponse(BaseModel):
    """Schema trả về thông tin từ vựng"""
    id: int
    term: str
    meaning: str
    pos: Optional[str] = None
    example: Optional[str] = None
    image_url: Optional[str] = None
    ipa: Optional[str] = None
    topic: Optional[str] = None
    
    class Config:
        from_attributes = True


class OxfordWordListResponse(BaseModel):
    """Schema danh sách từ vựng với phân trang"""
    words: List[OxfordWordResponse]
    total: int
    page: int
    limit: int
    total_pages: int = Field(..., alias="totalPages")
    
    class Config:
        populate_by_name = True


class WordCountResponse(BaseModel):
    """Schema đếm số từ khớp bộ lọc"""
    total: int


class AttachImageResponse(BaseModel):
    """Schema kết quả gắn ảnh"""
    term: str
    image_url: str
    updated: int  # Số dòng được cập nhật


class ImageSearchResponse(BaseModel):
    """Schema danh sách ảnh gợi ý để chọn thủ công"""
    term: str
    urls: List[str]


class GameWord(BaseModel):
    """Từ vựng rút gọn cho mini game"""
    term: str
    meaning: str
    
    class Config:
        from_attributes = True
