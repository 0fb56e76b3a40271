"""
Services - Business Logic Layer

Các service gọi dịch vụ bên ngoài và xử lý logic nghiệp vụ:
- image_service: Gọi Unsplash API tìm ảnh minh họa (cache 1 giờ)
- gemini_service: Gọi Gemini API nhận xét / chấm câu học sinh đặt
- storage_service: Upload avatar lên Supabase Storage
- progress_service: Tiến độ học từ vựng và thống kê
"""
from app.services.image_service import ImageService, UnsplashError
from app.services.gemini_service import GeminiService, GeminiError
from app.services.storage_service import AvatarStorage
from app.services.progress_service import ProgressService

__all__ = [
    "ImageService",
    "UnsplashError",
    "GeminiService",
    "GeminiError",
    "AvatarStorage",
    "ProgressService"
]
