"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")

MEMORY_BACKEND = "memory"
SUPABASE_BACKEND = "supabase"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    storage_backend: str = MEMORY_BACKEND
    supabase_url: str | None = None
    supabase_service_key: str | None = None
    stats_timezone: str = "UTC"
    hydration_xp_per_glass: int = 10
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def parse_storage_backend(raw: str | None) -> str:
    """Normalize the configured storage backend name."""
    cleaned = (raw or "").strip().lower()
    if cleaned in {"", MEMORY_BACKEND, "in-memory", "inmemory"}:
        return MEMORY_BACKEND
    if cleaned == SUPABASE_BACKEND:
        return SUPABASE_BACKEND
    raise ValueError(f"Unknown storage backend: {raw}")
