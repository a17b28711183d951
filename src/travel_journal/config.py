"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    openai_api_key: str | None = None
    openai_model: str = "gpt-5-mini"
    openai_store: bool = False
    store_backend: str = "file"
    store_path: str = ".travel-journal"
    store_key_prefix: str = "my-travel-tales-"
    supabase_url: str | None = None
    supabase_service_key: str | None = None
    simulated_latency_scale: float = 1.0
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def parse_store_backend(raw: str) -> str:
    """Normalize the configured store backend name."""
    cleaned = raw.strip().lower()
    if cleaned in {"", "file", "json"}:
        return "file"
    if cleaned in {"memory", "supabase"}:
        return cleaned
    raise ValueError(f"Unknown store backend: {raw!r}")
