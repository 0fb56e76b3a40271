"""
Application configuration settings
"""
from pydantic_settings import BaseSettings
from sqlalchemy.engine import URL
from typing import Optional, List


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""
    
    # Application
    APP_NAME: str = "Oxford Vocabulary VN"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    ENVIRONMENT: str = "development"  # development, staging, production
    
    # Database PostgreSQL (Supabase / hosted Postgres)
    PGHOST: Optional[str] = None
    PGPORT: int = 5432
    PGDATABASE: Optional[str] = None
    PGUSER: Optional[str] = None
    PGPASSWORD: Optional[str] = None
    PGSSL: bool = False
    DATABASE_POOL_SIZE: int = 5
    
    @property
    def DATABASE_URL(self) -> URL:
        """PostgreSQL URL, user/password có ký tự đặc biệt (@ / :) vẫn đúng"""
        return URL.create(
            "postgresql+psycopg2",
            username=self.PGUSER,
            password=self.PGPASSWORD,
            host=self.PGHOST,
            port=self.PGPORT,
            database=self.PGDATABASE,
            query={"sslmode": "require"} if self.PGSSL else {},
        )
    
    @property
    def missing_database_env(self) -> List[str]:
        """Các biến môi trường database còn thiếu"""
        keys = ["PGHOST", "PGDATABASE", "PGUSER", "PGPASSWORD"]
        return [key for key in keys if not getattr(self, key)]
    
    # Supabase - Auth + Storage
    SUPABASE_URL: Optional[str] = None
    SUPABASE_ANON_KEY: Optional[str] = None
    SUPABASE_SERVICE_ROLE_KEY: Optional[str] = None
    AVATAR_BUCKET: str = "avatars"
    
    # Unsplash - Photo search
    UNSPLASH_ACCESS_KEY: Optional[str] = None
    UNSPLASH_BASE_URL: str = "https://api.unsplash.com"
    IMAGE_CACHE_TTL_SECONDS: int = 60 * 60
    IMAGE_CACHE_MAX_ENTRIES: int = 512
    IMAGE_SEARCH_DEFAULT: int = 8
    IMAGE_SEARCH_MAX: int = 12
    
    # Google Gemini - Generative language
    GEMINI_API_KEY: Optional[str] = None
    GEMINI_BASE_URL: str = "https://generativelanguage.googleapis.com/v1beta"
    GEMINI_MODEL: str = "gemini-2.0-flash"
    
    # Outbound HTTP
    HTTP_TIMEOUT_SECONDS: float = 30.0
    
    # Word list
    WORDS_DEFAULT_LIMIT: int = 50
    WORDS_MAX_LIMIT: int = 10000
    GAME_DEFAULT_WORDS: int = 10
    GAME_MAX_WORDS: int = 50
    OXFORD_TARGET_WORDS: int = 3000
    
    # File Upload
    MAX_AVATAR_SIZE: int = 2 * 1024 * 1024  # 2MB
    
    # CORS - Allow multiple origins for development
    CORS_ORIGINS: List[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
        "*"  # Allow all origins in development (remove in production!)
    ]
    
    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
