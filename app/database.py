"""
Kết nối PostgreSQL - engine + session dùng chung cho cả app

Engine được tạo 1 lần khi import, pool kết nối tái sử dụng giữa các request.
Kết nối thật chỉ mở ở query đầu tiên nên app vẫn khởi động được khi thiếu env.
"""
import logging
from typing import Generator

from sqlalchemy import create_engine, text
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import QueuePool

from app.config import settings

logger = logging.getLogger(__name__)

engine = create_engine(
    settings.DATABASE_URL,
    poolclass=QueuePool,
    pool_size=settings.DATABASE_POOL_SIZE,
    max_overflow=5,
    pool_pre_ping=True,   # Supabase pooler hay đóng kết nối idle
    pool_recycle=1800,
    echo=settings.DEBUG,
)

SessionLocal = sessionmaker(bind=engine, autoflush=False, expire_on_commit=True)

Base = declarative_base()


def get_db() -> Generator[Session, None, None]:
    """
    Dependency: mở 1 session cho mỗi request, luôn đóng khi xong
    
    Usage:
        @router.get("/topics")
        def get_topics(db: Session = Depends(get_db)):
            ...
    """
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


def check_db_connection() -> bool:
    """SELECT 1 để kiểm tra database, False nếu thiếu env hoặc không kết nối được"""
    if settings.missing_database_env:
        return False
    try:
        with engine.connect() as connection:
            connection.execute(text("SELECT 1"))
    except Exception as e:
        logger.error(f"Database ping failed: {e}")
        return False
    return True
