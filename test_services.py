"""
Test các service và helper không cần database
"""
import asyncio
import json

import httpx
import pytest

from sqlalchemy.engine import make_url

from app.config import Settings
from app.services.gemini_service import GeminiService, GeminiError, is_passed, simple_evaluation
from app.services.image_service import ImageService, TTLCache, UnsplashError
from app.services.progress_service import format_rate, progress_service
from app.services.storage_service import AvatarStorage, build_avatar_path
from app.utils.pagination import resolve_limit, clamp, page_offset, total_pages
from app.utils.word_lists import split_words, join_words, move_word, word_status


# ============= PAGINATION =============

def test_resolve_limit():
    assert resolve_limit(None, 50, 10000) == 50
    assert resolve_limit("", 50, 10000) == 50
    assert resolve_limit("all", 50, 10000) == 10000
    assert resolve_limit("ALL", 50, 10000) == 10000
    assert resolve_limit("20", 50, 10000) == 20
    assert resolve_limit("-5", 50, 10000) == 1
    assert resolve_limit("20000", 50, 10000) == 10000
    with pytest.raises(ValueError):
        resolve_limit("ten", 50, 10000)


def test_page_math():
    assert clamp(0, 1, 12) == 1
    assert clamp(99, 1, 12) == 12
    assert page_offset(1, 50) == 0
    assert page_offset(3, 50) == 100
    assert total_pages(0, 50) == 0
    assert total_pages(50, 50) == 1
    assert total_pages(51, 50) == 2


# ============= WORD LISTS =============

def test_split_and_join_words():
    assert split_words(None) == []
    assert split_words("") == []
    assert split_words("apple'map''book") == ["apple", "map", "book"]
    assert join_words(["apple", "map"]) == "apple'map"


def test_move_word_keeps_word_in_one_list():
    mastered, learning = move_word(["apple", "map"], ["cat"], "cat", True)
    assert (mastered, learning) == (["apple", "map", "cat"], [])
    
    mastered, learning = move_word(mastered, learning, "apple", False)
    assert (mastered, learning) == (["map", "cat"], ["apple"])
    
    assert word_status(mastered, learning, "apple") == "learning"
    assert word_status(mastered, learning, "map") == "mastered"
    assert word_status(mastered, learning, "dog") == "not-started"


def test_format_rate_and_empty_stats():
    assert format_rate(0, 0) == "0"
    assert format_rate(1, 3) == "33.3"
    assert format_rate(2, 2) == "100.0"
    
    empty = progress_service.empty_stats().model_dump(by_alias=True)
    assert empty["bySource"]["oxford"]["completionRate"] == "0"
    assert empty["bySource"]["topics"]["completionRate"] == "N/A"


# ============= CACHE =============

def test_ttl_cache_expires_entries(monkeypatch):
    now = [1000.0]
    monkeypatch.setattr("app.services.image_service.time.time", lambda: now[0])
    cache = TTLCache(ttl=3600, max_entries=10)
    
    cache.put(("apple", 8), ["a.jpg"])
    now[0] += 3599
    assert cache.get(("apple", 8)) == ["a.jpg"]
    
    now[0] += 2
    assert cache.get(("apple", 8)) is None
    assert len(cache) == 0


def test_ttl_cache_evicts_least_recently_used():
    cache = TTLCache(ttl=3600, max_entries=2)
    cache.put("a", 1)
    cache.put("b", 2)
    cache.get("a")
    cache.put("c", 3)
    
    assert cache.get("b") is None
    assert cache.get("a") == 1
    assert cache.get("c") == 3


# ============= UNSPLASH =============

def test_image_service_sends_client_id_and_parses_urls():
    seen = []
    
    def handler(request):
        seen.append(request)
        return httpx.Response(200, json={"results": [
            {"urls": {"small": "s1.jpg", "regular": "r1.jpg"}},
            {"urls": {"regular": "r2.jpg"}},
            {"urls": {}},
        ]})
    
    service = ImageService(transport=httpx.MockTransport(handler))
    service.access_key = "demo-key"
    
    urls = asyncio.run(service.search_image_urls("apple", 3))
    
    assert urls == ["s1.jpg", "r2.jpg"]
    assert seen[0].headers["Authorization"] == "Client-ID demo-key"
    assert seen[0].headers["Accept-Version"] == "v1"
    assert seen[0].url.path == "/search/photos"
    assert seen[0].url.params["query"] == "apple"


def test_image_service_errors():
    def forbidden(request):
        return httpx.Response(403, json={"errors": ["OAuth error"]})
    
    def offline(request):
        raise httpx.ConnectError("offline", request=request)
    
    with pytest.raises(UnsplashError) as exc:
        asyncio.run(ImageService(transport=httpx.MockTransport(forbidden)).find_first_image("apple"))
    assert exc.value.status_code == 403
    assert str(exc.value) == "Unsplash 403"
    
    with pytest.raises(UnsplashError) as exc:
        asyncio.run(ImageService(transport=httpx.MockTransport(offline)).find_first_image("apple"))
    assert exc.value.status_code is None


# ============= GEMINI =============

def test_gemini_service_posts_prompt_with_api_key():
    seen = []
    
    def handler(request):
        seen.append(request)
        return httpx.Response(200, json={
            "candidates": [{"content": {"parts": [{"text": "Tốt lắm!"}, {"text": "bỏ qua"}]}}]
        })
    
    service = GeminiService(transport=httpx.MockTransport(handler))
    service.api_key = "gem-key"
    
    text = asyncio.run(service.generate_text("xin chào"))
    
    assert text == "Tốt lắm!"
    assert seen[0].method == "POST"
    assert seen[0].headers["X-goog-api-key"] == "gem-key"
    assert json.loads(seen[0].content) == {"contents": [{"parts": [{"text": "xin chào"}]}]}


def test_gemini_service_http_error_keeps_status():
    service = GeminiService(transport=httpx.MockTransport(lambda request: httpx.Response(401, json={})))
    
    with pytest.raises(GeminiError) as exc:
        asyncio.run(service.generate_text("hi"))
    assert exc.value.status_code == 401


def test_is_passed():
    assert is_passed("💡 Kết luận: ĐẠT")
    assert is_passed("Câu này ĐẠT yêu cầu")
    assert not is_passed("💡 Kết luận: CHƯA ĐẠT")
    assert not is_passed("Cần viết lại câu")


def test_simple_evaluation():
    assert simple_evaluation("apple", "I EAT AN APPLE").passed is True
    assert simple_evaluation("apple", "I eat rice").passed is False
    short = simple_evaluation("go", "go ")
    assert short.passed is False
    assert short.source == "fallback-simple"
    assert short.confidence == 0.5


# ============= STORAGE =============

def test_build_avatar_path():
    assert build_avatar_path("u-1", "me.png", now_ms=1700000000000) == "avatars/u-1-1700000000000.png"
    assert build_avatar_path("u-1", "archive.tar.gz", now_ms=1) == "avatars/u-1-1.gz"
    assert build_avatar_path("u-1", "noext", now_ms=1) == "avatars/u-1-1.jpg"
    assert build_avatar_path("u-1", None, now_ms=1) == "avatars/u-1-1.jpg"


def test_avatar_storage_uploads_with_upsert():
    calls = {}
    
    class Bucket:
        def upload(self, path, file, file_options):
            calls["upload"] = (path, file, file_options)
        
        def get_public_url(self, path):
            return f"https://cdn.example.com/{path}"
    
    class Storage:
        def from_(self, bucket):
            calls["bucket"] = bucket
            return Bucket()
    
    class Client:
        storage = Storage()
    
    url = AvatarStorage(Client(), bucket="avatars").upload("avatars/u-1-1.png", b"img", "image/png")
    
    assert url == "https://cdn.example.com/avatars/u-1-1.png"
    assert calls["bucket"] == "avatars"
    assert calls["upload"] == (
        "avatars/u-1-1.png", b"img", {"content-type": "image/png", "upsert": "true"}
    )


# ============= CONFIG =============

def test_database_url_escapes_special_characters():
    config = Settings(
        PGHOST="db.example.supabase.co",
        PGPORT=6543,
        PGDATABASE="postgres",
        PGUSER="postgres.abc",
        PGPASSWORD="p@ss/w:rd#1",
        PGSSL=True,
    )
    
    url = config.DATABASE_URL
    parsed = make_url(url.render_as_string(hide_password=False))
    
    assert parsed.drivername == "postgresql+psycopg2"
    assert parsed.username == "postgres.abc"
    assert parsed.password == "p@ss/w:rd#1"
    assert parsed.host == "db.example.supabase.co"
    assert parsed.port == 6543
    assert parsed.database == "postgres"
    assert parsed.query == {"sslmode": "require"}


def test_database_url_without_ssl():
    config = Settings(PGHOST="localhost", PGDATABASE="vocab", PGUSER="u", PGPASSWORD="p", PGSSL=False)
    
    assert config.DATABASE_URL.query == {}
    assert config.missing_database_env == []
