"""
Upload Router - Upload avatar lên Supabase Storage

=== LOGIC HOẠT ĐỘNG ===
1. Xác thực Bearer token qua Supabase Auth → 401 nếu thiếu / sai
2. Kiểm tra file: có file, content-type image/*, tối đa 2MB → 400 nếu sai
3. Tạo tên file avatars/<user_id>-<timestamp>.<ext>
4. Upload (upsert) rồi trả về public URL

Mọi kiểm tra ở bước 1-2 chạy TRƯỚC khi gọi Storage.
"""
import logging
from typing import Optional

import httpx
from fastapi import APIRouter, Depends, HTTPException, status, UploadFile, File
from fastapi.concurrency import run_in_threadpool
from supabase import StorageException

from app.config import settings
from app.core.dependencies import get_current_user
from app.schemas.user import AuthUser, AvatarUploadResponse
from app.services.storage_service import AvatarStorage, build_avatar_path, get_avatar_storage

logger = logging.getLogger(__name__)

router = APIRouter(tags=["User Profile"])


# ============================================================
# POST /upload-avatar - Upload avatar
# ============================================================
@router.post("/upload-avatar", response_model=AvatarUploadResponse)
async def upload_avatar(
    file: Optional[UploadFile] = File(None),
    current_user: AuthUser = Depends(get_current_user),
    storage: AvatarStorage = Depends(get_avatar_storage)
):
    """
    📷 UPLOAD AVATAR
    
    Chấp nhận mọi định dạng ảnh (image/*)
    Kích thước tối đa: 2MB
    """
    if file is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="No file provided")
    
    # Validate file type
    if not (file.content_type or "").startswith("image/"):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="File must be an image")
    
    # Read file content
    content = await file.read()
    
    # Check file size (max 2MB)
    if len(content) > settings.MAX_AVATAR_SIZE:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="File size must be less than 2MB"
        )
    
    file_path = build_avatar_path(current_user.id, file.filename)
    logger.info(f"Upload avatar: user={current_user.id} file={file.filename} size={len(content)}")
    
    try:
        public_url = await run_in_threadpool(storage.upload, file_path, content, file.content_type)
    except (StorageException, httpx.HTTPError) as e:
        logger.error(f"Storage upload error: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail={"error": "Upload failed", "details": str(e)}
        )
    
    return AvatarUploadResponse(success=True, url=public_url, path=file_path)
