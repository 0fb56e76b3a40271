"""
Oxford Router - API endpoints cho Từ vựng Oxford 3000

=== GIẢI QUYẾT VẤN ĐỀ GÌ? ===
1. Danh sách từ vựng có tìm kiếm, lọc theo topic, phân trang
2. Đếm số từ khớp bộ lọc (không phân trang)
3. Gắn ảnh minh họa từ Unsplash vào từ vựng
4. Gợi ý nhiều ảnh để chọn thủ công

=== LOGIC HOẠT ĐỘNG ===
- User mở trang Oxford → GET /oxford?page=1&limit=50 → Hiển thị 50 từ đầu
- User gõ "ap" → GET /oxford?search=ap → "apple", "map" (tìm trong term VÀ meaning)
- Admin bấm "Lấy ảnh" → POST /oxford/image {"term": "apple"} → Lưu image_url
"""
import logging
import re
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, status, Query
from sqlalchemy import func, or_
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.config import settings
from app.database import get_db
from app.models import OxfordWord
from app.schemas.vocabulary import (
    AttachImageRequest, AttachImageResponse, ImageSearchResponse,
    OxfordWordListResponse, OxfordWordResponse, WordCountResponse
)
from app.services.image_service import ImageService, UnsplashError, get_image_service
from app.utils.pagination import clamp, page_offset, resolve_limit, total_pages

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/oxford",
    tags=["Oxford Words"]
)

MISSING_TABLE_PATTERN = re.compile(r"relation .* does not exist|no such table", re.IGNORECASE)


def apply_search(query, search: Optional[str]):
    """ILIKE '%search%' trên term HOẶC meaning"""
    if search:
        pattern = f"%{search}%"
        query = query.filter(or_(
            OxfordWord.term.ilike(pattern),
            OxfordWord.meaning.ilike(pattern)
        ))
    return query


# ============================================================
# GET /oxford - Danh sách từ vựng
# ============================================================
@router.get("", response_model=OxfordWordListResponse)
def get_words(
    search: Optional[str] = Query(None, description="Tìm theo term hoặc meaning"),
    topic: Optional[str] = Query(None, description="Lọc theo topic"),
    page: int = Query(1, ge=1, description="Số trang"),
    limit: Optional[str] = Query(None, description="Số từ mỗi trang (1-10000) hoặc 'all'"),
    db: Session = Depends(get_db)
):
    """
    📋 LẤY DANH SÁCH TỪ VỰNG
    
    Logic:
    1. Filter ILIKE theo search (term OR meaning), equality theo topic
    2. Đếm tổng số từ khớp filter
    3. Sắp xếp theo term A→Z, lấy trang hiện tại
    4. totalPages = ceil(total / limit)
    
    Use case:
    - limit=all → tải toàn bộ (tối đa 10000 từ) cho chế độ học offline
    """
    try:
        page_size = resolve_limit(limit, settings.WORDS_DEFAULT_LIMIT, settings.WORDS_MAX_LIMIT)
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="limit must be a number or 'all'"
        )
    
    missing_env = settings.missing_database_env
    if missing_env:
        logger.warning(f"[oxford] Missing DB env vars: {', '.join(missing_env)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail={
                "error": "Database env not configured",
                "missingEnv": missing_env,
                "hint": "Add PGHOST, PGPORT, PGDATABASE, PGUSER, PGPASSWORD to .env",
            }
        )
    
    query = apply_search(db.query(OxfordWord), search)
    if topic:
        query = query.filter(OxfordWord.topic == topic)
    
    try:
        total = query.count()
        words = query.order_by(OxfordWord.term.asc()).offset(
            page_offset(page, page_size)
        ).limit(page_size).all()
    except SQLAlchemyError as e:
        msg = str(e)
        logger.error(f"[oxford] DB query failed: {msg}")
        if MISSING_TABLE_PATTERN.search(msg):
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail={
                    "error": "Table oxford_words not found",
                    "fix": "Run migration or create table oxford_words",
                }
            )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail={
                "error": "Database connection error",
                "detail": msg,
                "fix": "Check database server and credentials",
            }
        )
    
    return OxfordWordListResponse(
        words=[OxfordWordResponse.model_validate(w) for w in words],
        total=total,
        page=page,
        limit=page_size,
        total_pages=total_pages(total, page_size)
    )


# ============================================================
# GET /oxford/image/count - Đếm số từ khớp search
# ============================================================
@router.get("/image/count", response_model=WordCountResponse)
def count_words(
    search: Optional[str] = Query(None, description="Tìm theo term hoặc meaning"),
    db: Session = Depends(get_db)
):
    """
    🔢 ĐẾM SỐ TỪ KHỚP BỘ LỌC
    
    Dùng cho màn hình gắn ảnh hàng loạt: biết trước có bao nhiêu từ cần xử lý.
    """
    try:
        total = apply_search(db.query(OxfordWord), search).count()
    except SQLAlchemyError as e:
        logger.error(f"COUNT error: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="count failed"
        )
    return WordCountResponse(total=total)


# ============================================================
# POST /oxford/image - Gắn ảnh Unsplash vào từ vựng
# ============================================================
@router.post("/image", response_model=AttachImageResponse)
async def attach_image(
    request: AttachImageRequest,
    db: Session = Depends(get_db),
    images: ImageService = Depends(get_image_service)
):
    """
    🖼️ GẮN ẢNH CHO TỪ VỰNG
    
    Logic:
    1. Tìm 1 ảnh vuông trên Unsplash theo term
    2. Không có ảnh → 404, KHÔNG sửa DB
    3. Cập nhật image_url cho MỌI dòng có LOWER(term) = LOWER(:term)
    
    Example request:
    {"term": "apple"}
    """
    term = (request.term or "").strip()
    if not term:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="term required")
    
    try:
        image_url = await images.find_first_image(term)
        if not image_url:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="No image found")
        
        updated = db.query(OxfordWord).filter(
            func.lower(OxfordWord.term) == func.lower(term)
        ).update({OxfordWord.image_url: image_url}, synchronize_session=False)
        db.commit()
        
    except HTTPException:
        raise
    except (UnsplashError, SQLAlchemyError) as e:
        db.rollback()
        logger.error(f"oxford/image error: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch/save image"
        )
    
    logger.info(f"🖼️ Attached image to '{term}' ({updated} rows)")
    return AttachImageResponse(term=term, image_url=image_url, updated=updated)


# ============================================================
# GET /oxford/image/search - Gợi ý ảnh (không lưu DB)
# ============================================================
@router.get("/image/search", response_model=ImageSearchResponse)
async def search_images(
    term: Optional[str] = Query(None, description="Từ cần tìm ảnh"),
    per: int = Query(settings.IMAGE_SEARCH_DEFAULT, description="Số ảnh (tối đa 12)"),
    images: ImageService = Depends(get_image_service)
):
    """
    🔍 GỢI Ý ẢNH ĐỂ CHỌN THỦ CÔNG
    
    Trả về tối đa 12 URL ảnh. Kết quả Unsplash được cache 1 giờ.
    
    Example:
        GET /oxford/image/search?term=apple&per=8
    """
    if not term:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="term required")
    
    per_page = clamp(per, 1, settings.IMAGE_SEARCH_MAX)
    
    try:
        urls = await images.search_image_urls(term, per_page)
    except UnsplashError as e:
        logger.error(f"image/search error: {e}")
        if e.status_code is not None:
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=f"Unsplash {e.status_code}"
            )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to search images"
        )
    
    return ImageSearchResponse(term=term, urls=urls)
