"""
Pytest fixtures dùng chung

- Database: SQLite in-memory thay cho PostgreSQL (override get_db)
- Supabase Auth / Storage: fake object, không gọi mạng
- Unsplash / Gemini: service thật chạy trên httpx.MockTransport
"""
import json
import os

# Phải set TRƯỚC khi import app (settings đọc env lúc import)
os.environ.setdefault("PGHOST", "localhost")
os.environ.setdefault("PGDATABASE", "vocab_test")
os.environ.setdefault("PGUSER", "tester")
os.environ.setdefault("PGPASSWORD", "secret")

from types import SimpleNamespace

import httpx
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.main import app
from app.database import Base, get_db
from app.core.supabase import get_supabase_client
from app.services.image_service import ImageService, get_image_service
from app.services.gemini_service import GeminiService, get_gemini_service
from app.services.storage_service import get_avatar_storage

VALID_TOKEN = "valid-token"
TEST_USER_ID = "11111111-2222-3333-4444-555555555555"


# ============= FAKE SUPABASE =============

class FakeAuth:
    """Chỉ chấp nhận VALID_TOKEN, token khác → user None (hoặc raise self.error nếu được set)"""
    
    def __init__(self):
        self.tokens = []
        self.error = None
    
    def get_user(self, token):
        self.tokens.append(token)
        if self.error is not None:
            raise self.error
        if token == VALID_TOKEN:
            return SimpleNamespace(user=SimpleNamespace(id=TEST_USER_ID, email="learner@example.com"))
        return SimpleNamespace(user=None)


class FakeSupabase:
    def __init__(self):
        self.auth = FakeAuth()


class FakeAvatarStorage:
    """Ghi lại mọi lần upload, có thể giả lập lỗi"""
    
    def __init__(self):
        self.uploads = []
        self.error = None
    
    def upload(self, path, content, content_type):
        self.uploads.append({"path": path, "size": len(content), "content_type": content_type})
        if self.error is not None:
            raise self.error
        return f"https://storage.example.com/avatars/{path}"


# ============= STUB HTTP APIS =============

class UnsplashStub:
    """Giả lập GET /search/photos"""
    
    def __init__(self):
        self.requests = []
        self.urls = []
        self.status_code = 200
        self.use_regular = False
        self.raw_body = None
    
    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.status_code != 200:
            return httpx.Response(self.status_code, json={"errors": ["Rate Limit Exceeded"]})
        if self.raw_body is not None:
            return httpx.Response(200, content=self.raw_body)
        per_page = int(request.url.params["per_page"])
        key = "regular" if self.use_regular else "small"
        results = [{"urls": {key: url}} for url in self.urls[:per_page]]
        return httpx.Response(200, json={"total": len(self.urls), "results": results})


class GeminiStub:
    """Giả lập POST models/{model}:generateContent"""
    
    def __init__(self):
        self.requests = []
        self.text = "Câu đúng ngữ pháp, dùng từ chính xác. Rất tốt!"
        self.status_code = 200
        self.payload = None
    
    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.status_code != 200:
            return httpx.Response(self.status_code, json={"error": {"code": self.status_code}})
        if self.payload is not None:
            return httpx.Response(200, json=self.payload)
        return httpx.Response(200, json={
            "candidates": [{"content": {"parts": [{"text": self.text}]}}]
        })
    
    def prompt(self, index: int = -1) -> str:
        body = json.loads(self.requests[index].content)
        return body["contents"][0]["parts"][0]["text"]


# ============= FIXTURES =============

@pytest.fixture
def db_session():
    """SQLite in-memory, tạo bảng mới cho mỗi test"""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSession()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture
def fake_supabase():
    return FakeSupabase()


@pytest.fixture
def fake_storage():
    return FakeAvatarStorage()


@pytest.fixture
def unsplash():
    return UnsplashStub()


@pytest.fixture
def gemini():
    return GeminiStub()


@pytest.fixture
def client(db_session, fake_supabase, fake_storage, unsplash, gemini):
    """TestClient với mọi dependency bên ngoài đã được thay thế"""
    image_service = ImageService(transport=httpx.MockTransport(unsplash.handler))
    gemini_service = GeminiService(transport=httpx.MockTransport(gemini.handler))
    
    def override_get_db():
        yield db_session
    
    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_supabase_client] = lambda: fake_supabase
    app.dependency_overrides[get_avatar_storage] = lambda: fake_storage
    app.dependency_overrides[get_image_service] = lambda: image_service
    app.dependency_overrides[get_gemini_service] = lambda: gemini_service
    
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def auth_headers():
    return {"Authorization": f"Bearer {VALID_TOKEN}"}
