"""
Image Service - Tìm ảnh minh họa cho từ vựng qua Unsplash API

=== CHỨC NĂNG ===
1. Tìm ảnh vuông (orientation=squarish) theo từ khóa
2. Lấy ảnh đầu tiên để gắn vào từ vựng
3. Lấy tối đa 12 ảnh gợi ý cho admin chọn thủ công

=== UNSPLASH API ===
- Endpoint: https://api.unsplash.com/search/photos
- Auth: header "Authorization: Client-ID <access_key>"
- Mỗi kết quả có urls.small / urls.regular

=== CACHE ===
Kết quả tìm kiếm được cache trong bộ nhớ 1 giờ (theo term + per_page)
để tránh vượt rate limit của Unsplash (50 request/giờ với demo key).
"""
import logging
import time
from collections import OrderedDict
from typing import List, Optional, Tuple

import httpx

from app.config import settings

logger = logging.getLogger(__name__)


class UnsplashError(Exception):
    """Unsplash trả về lỗi HTTP hoặc không kết nối được"""
    
    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class TTLCache:
    """Cache LRU trong bộ nhớ, mỗi entry hết hạn sau ttl giây"""
    
    def __init__(self, ttl: int, max_entries: int):
        self.ttl = ttl
        self.max_entries = max_entries
        self._entries: OrderedDict = OrderedDict()  # key -> (timestamp, value)
    
    def get(self, key):
        entry = self._entries.get(key)
        if entry is None:
            return None
        ts, value = entry
        if time.time() - ts > self.ttl:
            self._entries.pop(key, None)
            return None
        self._entries.move_to_end(key)
        return value
    
    def put(self, key, value):
        self._entries[key] = (time.time(), value)
        self._entries.move_to_end(key)
        if len(self._entries) > self.max_entries:
            self._entries.popitem(last=False)
    
    def clear(self):
        self._entries.clear()
    
    def __len__(self):
        return len(self._entries)


class ImageService:
    """Service tìm ảnh từ Unsplash"""
    
    def __init__(self, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.access_key = settings.UNSPLASH_ACCESS_KEY
        self.base_url = settings.UNSPLASH_BASE_URL
        self.timeout = settings.HTTP_TIMEOUT_SECONDS
        self.cache = TTLCache(
            ttl=settings.IMAGE_CACHE_TTL_SECONDS,
            max_entries=settings.IMAGE_CACHE_MAX_ENTRIES
        )
        # transport chỉ dùng khi test (httpx.MockTransport)
        self._transport = transport
    
    async def search_image_urls(self, term: str, per_page: int) -> List[str]:
        """
        Tìm ảnh theo từ khóa
        
        Args:
            term: Từ vựng cần tìm ảnh
            per_page: Số ảnh muốn lấy
            
        Returns:
            Danh sách URL ảnh (urls.small, fallback urls.regular)
            
        Raises:
            UnsplashError: Nếu Unsplash trả lỗi hoặc lỗi mạng
        """
        cache_key: Tuple[str, int] = (term, per_page)
        cached = self.cache.get(cache_key)
        if cached is not None:
            logger.debug(f"🗂️ Unsplash cache hit: {term} ({per_page})")
            return list(cached)
        
        data = await self._call_unsplash(term, per_page)
        urls = self._extract_urls(data)
        self.cache.put(cache_key, urls)
        return list(urls)
    
    async def find_first_image(self, term: str) -> Optional[str]:
        """Lấy URL ảnh đầu tiên, None nếu không có kết quả"""
        urls = await self.search_image_urls(term, per_page=1)
        return urls[0] if urls else None
    
    async def _call_unsplash(self, term: str, per_page: int) -> dict:
        """Gọi Unsplash search/photos"""
        params = {
            "query": term,
            "per_page": str(per_page),
            "orientation": "squarish",
        }
        headers = {
            "Authorization": f"Client-ID {self.access_key}",
            "Accept-Version": "v1",
        }
        
        async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
            try:
                response = await client.get(
                    f"{self.base_url}/search/photos",
                    params=params,
                    headers=headers
                )
                response.raise_for_status()
                return response.json()
                
            except httpx.HTTPStatusError as e:
                raise UnsplashError(
                    f"Unsplash {e.response.status_code}",
                    status_code=e.response.status_code
                )
            except httpx.RequestError as e:
                raise UnsplashError(f"Network error calling Unsplash: {e}")
            except ValueError as e:
                raise UnsplashError(f"Invalid JSON from Unsplash: {e}")
    
    def _extract_urls(self, data) -> List[str]:
        """
        Trích xuất urls.small / urls.regular từ kết quả
        
        Raises:
            UnsplashError: response không phải object JSON hoặc results không phải list
        """
        if not isinstance(data, dict):
            raise UnsplashError("Invalid response format from Unsplash")
        results = data.get("results") or []
        if not isinstance(results, list):
            raise UnsplashError("Invalid response format from Unsplash")
        
        urls = []
        for result in results:
            if not isinstance(result, dict):
                continue
            photo_urls = result.get("urls")
            if not isinstance(photo_urls, dict):
                continue
            url = photo_urls.get("small") or photo_urls.get("regular")
            if url:
                urls.append(url)
        return urls


# Singleton instance
image_service = ImageService()


def get_image_service() -> ImageService:
    """Dependency trả về ImageService dùng chung (giữ cache giữa các request)"""
    return image_service
