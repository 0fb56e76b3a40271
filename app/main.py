"""
Main FastAPI application entry point
"""
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
import time
import logging

from app.config import settings
from app.database import check_db_connection

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Vietnamese Oxford 3000 vocabulary API with Unsplash images and Gemini practice feedback",
    docs_url="/docs",
    redoc_url="/redoc",
)

# CORS - frontend tĩnh (HTML/JS) gọi API từ origin khác
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Authorization", "Content-Type"],
)


def integration_status() -> dict:
    """Các dịch vụ bên ngoài đã có key trong .env chưa"""
    return {
        "unsplash": bool(settings.UNSPLASH_ACCESS_KEY),
        "gemini": bool(settings.GEMINI_API_KEY),
        "supabase": bool(settings.SUPABASE_URL and settings.SUPABASE_ANON_KEY),
    }


@app.middleware("http")
async def timing_middleware(request: Request, call_next):
    """Ghi thời gian xử lý vào header X-Process-Time"""
    started = time.perf_counter()
    response = await call_next(request)
    response.headers["X-Process-Time"] = f"{time.perf_counter() - started:.4f}"
    return response


@app.on_event("startup")
async def on_startup():
    logger.info(f"📚 {settings.APP_NAME} v{settings.APP_VERSION} ({settings.ENVIRONMENT})")
    
    for name, configured in integration_status().items():
        if not configured:
            logger.warning(f"⚠️ {name} key not set, related endpoints will fail")
    
    missing_env = settings.missing_database_env
    if missing_env:
        logger.warning(f"⚠️ Missing database env vars: {', '.join(missing_env)}")
    elif check_db_connection():
        logger.info("✅ Database connection successful")
    else:
        logger.error("❌ Database connection failed")


@app.get("/", tags=["Health"])
async def root():
    """Thông tin app và danh sách nhóm API"""
    return {
        "name": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "status": "running",
        "endpoints": [
            "/api/oxford",
            "/api/topics",
            "/api/game/random",
            "/api/gemini-practice",
            "/api/ai-evaluate",
            "/api/upload-avatar",
            "/api/word-status",
            "/api/progress",
            "/api/stats",
        ],
    }


@app.get("/health", tags=["Health"])
def health():
    """Kiểm tra kết nối database và cấu hình dịch vụ ngoài"""
    db_ok = check_db_connection()
    return {
        "status": "ok" if db_ok else "degraded",
        "database": "connected" if db_ok else "disconnected",
        "missingEnv": settings.missing_database_env,
        "integrations": integration_status(),
    }


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """
    Chuẩn hóa lỗi về dạng {"error": ...}
    
    detail là dict thì trả nguyên (VD: {"error": "Upload failed", "details": ...})
    """
    if isinstance(exc.detail, dict):
        content = exc.detail
    else:
        content = {"error": exc.detail}
    return JSONResponse(
        status_code=exc.status_code,
        content=jsonable_encoder(content),
        headers=getattr(exc, "headers", None)
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Dữ liệu đầu vào sai → 400"""
    return JSONResponse(
        status_code=400,
        content={
            "error": "Invalid request",
            "details": jsonable_encoder(exc.errors())
        }
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Global exception handler"""
    logger.error(f"Global exception: {exc}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content={
            "error": "Internal server error",
            "details": str(exc) if settings.DEBUG else "An error occurred"
        }
    )


# Include routers
from app.routers import oxford, topics, game, practice, upload, word_status, progress

app.include_router(oxford.router, prefix="/api")
app.include_router(topics.router, prefix="/api")
app.include_router(game.router, prefix="/api")
app.include_router(practice.router, prefix="/api")
app.include_router(upload.router, prefix="/api")
app.include_router(word_status.router, prefix="/api")
app.include_router(progress.router, prefix="/api")


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "app.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG
    )
