from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

ROOT_DIR = Path(__file__).resolve().parents[2]

load_dotenv(ROOT_DIR / ".env")

_DEFAULT_CORS_ORIGINS = (
    "http://localhost:3000,"
    "http://127.0.0.1:3000,"
    "http://localhost:5173,"
    "http://127.0.0.1:5173,"
    "http://localhost:8080,"
    "http://127.0.0.1:8080"
)


def _split_csv(value: str) -> tuple[str, ...]:
    return tuple(item.strip() for item in value.split(",") if item.strip())


@dataclass(frozen=True)
class Settings:
    app_env: str = os.getenv("APP_ENV", "local")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    xai_api_key: str | None = os.getenv("XAI_API_KEY")
    xai_api_base_url: str = os.getenv("XAI_API_BASE_URL", "https://api.x.ai/v1")
    xai_model: str = os.getenv("XAI_MODEL", "grok-beta")

    lyrics_api_base_url: str = os.getenv("LYRICS_API_BASE_URL", "https://api.lyrics.ovh/v1")
    oembed_url: str = os.getenv("OEMBED_URL", "https://www.youtube.com/oembed")

    credential_backend: str = os.getenv("CREDENTIAL_BACKEND", "memory")
    credential_key: str = os.getenv("CREDENTIAL_KEY", "xai_api_key")
    redis_url: str | None = os.getenv("REDIS_URL")

    cors_origins: tuple[str, ...] = field(
        default_factory=lambda: _split_csv(os.getenv("CORS_ORIGINS", _DEFAULT_CORS_ORIGINS))
    )


settings = Settings()
