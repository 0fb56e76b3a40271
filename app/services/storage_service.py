"""
Storage Service - Upload avatar lên Supabase Storage

File được lưu tại bucket "avatars", đường dẫn avatars/<user_id>-<timestamp_ms>.<ext>
Upload với upsert=true nên upload lại cùng đường dẫn sẽ ghi đè.
"""
import logging
import time
from typing import Optional

from fastapi import Depends
from supabase import Client

from app.config import settings
from app.core.supabase import get_supabase_admin

logger = logging.getLogger(__name__)


def build_avatar_path(user_id: str, filename: Optional[str], now_ms: Optional[int] = None) -> str:
    """
    Tạo đường dẫn file không trùng lặp từ user_id + timestamp
    
    Example:
        >>> build_avatar_path("u-1", "me.png", now_ms=1700000000000)
        'avatars/u-1-1700000000000.png'
    """
    if now_ms is None:
        now_ms = int(time.time() * 1000)
    ext = filename.split(".")[-1] if filename and "." in filename else "jpg"
    return f"avatars/{user_id}-{now_ms}.{ext}"


class AvatarStorage:
    """Bọc Supabase Storage bucket chứa avatar"""
    
    def __init__(self, client: Client, bucket: str = settings.AVATAR_BUCKET):
        self.client = client
        self.bucket = bucket
    
    def upload(self, path: str, content: bytes, content_type: str) -> str:
        """
        Upload file và trả về public URL
        
        Raises:
            StorageException: Supabase Storage từ chối upload
        """
        storage = self.client.storage.from_(self.bucket)
        storage.upload(
            path=path,
            file=content,
            file_options={"content-type": content_type, "upsert": "true"},
        )
        logger.info(f"📷 Uploaded avatar: {self.bucket}/{path} ({len(content)} bytes)")
        return storage.get_public_url(path)


def get_avatar_storage(client: Client = Depends(get_supabase_admin)) -> AvatarStorage:
    return AvatarStorage(client)
