"""
Pagination helpers - Tính limit / offset / tổng số trang cho danh sách từ vựng
"""
import math
from typing import Optional

# Giá trị đặc biệt: lấy toàn bộ (tối đa max_limit)
ALL_SENTINEL = "all"


def resolve_limit(raw: Optional[str], default: int, max_limit: int) -> int:
    """
    Chuyển query param `limit` thành số nguyên hợp lệ
    
    - None / "" → default
    - "all" → max_limit
    - số → kẹp trong [1, max_limit]
    
    Raises:
        ValueError: nếu raw không phải số nguyên
    
    Example:
        >>> resolve_limit("all", 50, 10000)
        10000
        >>> resolve_limit("0", 50, 10000)
        1
    """
    if raw is None or raw.strip() == "":
        return default
    if raw.strip().lower() == ALL_SENTINEL:
        return max_limit
    return min(max(int(raw), 1), max_limit)


def clamp(value: int, lower: int, upper: int) -> int:
    return min(max(value, lower), upper)


def page_offset(page: int, limit: int) -> int:
    return (page - 1) * limit


def total_pages(total: int, limit: int) -> int:
    """totalPages = ceil(total / limit)"""
    return math.ceil(total / limit) if limit > 0 else 0
