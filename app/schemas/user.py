"""
User schemas - Thông tin user từ Supabase Auth và upload avatar
"""
from pydantic import BaseModel
from typing import Optional


class AuthUser(BaseModel):
    """User đã xác thực qua Supabase (chỉ giữ các trường cần dùng)"""
    id: str
    email: Optional[str] = None


class AvatarUploadResponse(BaseModel):
    success: bool = True
    url: str
    path: str
