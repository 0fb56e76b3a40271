"""
Dependencies - Các hàm dependency dùng để bảo vệ routes
FastAPI sẽ tự động gọi các hàm này TRƯỚC KHI endpoint chính chạy

Xác thực được giao hoàn toàn cho Supabase Auth: server chỉ gửi access token
lên Supabase để lấy thông tin user, không tự decode JWT.
"""
import logging
from typing import Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from supabase import AuthError, Client

from app.core.supabase import get_supabase_client
from app.schemas.user import AuthUser

logger = logging.getLogger(__name__)


# ============= HTTP BEARER SECURITY SCHEME =============

# HTTPBearer: Tự động lấy token từ header "Authorization: Bearer <token>"
# auto_error=False: Thiếu header thì trả 401 theo format {"error": ...} của app
security = HTTPBearer(auto_error=False)


# ============= GET CURRENT USER DEPENDENCY =============

def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    supabase: Client = Depends(get_supabase_client)
) -> AuthUser:
    """
    Dependency để lấy user hiện tại từ Supabase access token
    
    WORKFLOW:
    1. Lấy token từ header "Authorization: Bearer <token>"
    2. Gọi supabase.auth.get_user(token) để xác thực
    3. Return AuthUser (id = UUID của Supabase)
    
    Raises:
        HTTPException 401 "Unauthorized": Không có header Authorization
        HTTPException 401 "Invalid token": Token sai / hết hạn / user không tồn tại
    
    Example usage trong route:
        @router.get("/stats")
        def get_stats(current_user: AuthUser = Depends(get_current_user)):
            return {"user_id": current_user.id}
    """
    if credentials is None or not credentials.credentials:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized",
            headers={"WWW-Authenticate": "Bearer"},
        )
    
    invalid_token = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Invalid token",
        headers={"WWW-Authenticate": "Bearer"},
    )
    
    try:
        response = supabase.auth.get_user(credentials.credentials)
    except AuthError as e:
        logger.info(f"Supabase rejected access token: {e}")
        raise invalid_token
    
    user = response.user if response else None
    if user is None or not user.id:
        raise invalid_token
    
    return AuthUser(id=str(user.id), email=getattr(user, "email", None))
