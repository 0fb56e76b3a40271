"""
Supabase clients - Khởi tạo một lần, dùng lại cho mọi request

- get_supabase_client(): dùng anon key, để xác thực access token của user
- get_supabase_admin(): dùng service role key, để upload Storage (bỏ qua RLS)
"""
from functools import lru_cache

from supabase import Client, create_client

from app.config import settings


@lru_cache
def get_supabase_client() -> Client:
    return create_client(settings.SUPABASE_URL, settings.SUPABASE_ANON_KEY)


@lru_cache
def get_supabase_admin() -> Client:
    return create_client(settings.SUPABASE_URL, settings.SUPABASE_SERVICE_ROLE_KEY)
