"""Application settings loaded from environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class UpstreamConfig:
    api_key: str
    model: str
    timeout_seconds: float


@dataclass(frozen=True)
class Settings:
    app_env: str
    log_level: str
    upstream: UpstreamConfig
    fetch_pause_seconds: float
    default_currency: str


def _float(name: str, default: float) -> float:
    return float(os.getenv(name, str(default)))


def get_settings() -> Settings:
    return Settings(
        app_env=os.getenv("APP_ENV", "local"),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        upstream=UpstreamConfig(
            api_key=os.getenv("OPENAI_API_KEY", ""),
            model=os.getenv("OPENAI_MODEL", "gpt-4o-search-preview"),
            timeout_seconds=_float("PERFORMANCE_TIMEOUT_SECONDS", 12.0),
        ),
        fetch_pause_seconds=_float("FETCH_PAUSE_SECONDS", 0.5),
        default_currency=os.getenv("DEFAULT_CURRENCY", "EUR"),
    )


settings = get_settings()
