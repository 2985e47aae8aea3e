"""Application configuration and constants."""
from __future__ import annotations

import os
from dataclasses import dataclass


def _get_env(name: str, default: str) -> str:
    value = os.getenv(name)
    return value if value is not None else default


def _get_flag(name: str, default: str) -> bool:
    return _get_env(name, default).lower() in {"1", "true", "yes"}


@dataclass(frozen=True)
class Settings:
    """Simple settings container with environment variable overrides."""

    log_level: str = _get_env("LOG_LEVEL", "INFO")
    redis_host: str = _get_env("REDIS_HOST", "localhost")
    redis_port: int = int(_get_env("REDIS_PORT", "6379"))
    cache_enabled: bool = _get_flag("CACHE_ENABLED", "true")
    cache_ttl_seconds: int = int(_get_env("CACHE_TTL_SECONDS", "3600"))
    default_max_phonemes: int = int(_get_env("DEFAULT_MAX_PHONEMES", "0"))
    max_batch_size: int = int(_get_env("MAX_BATCH_SIZE", "500"))
    max_text_length: int = int(_get_env("MAX_TEXT_LENGTH", "256"))


settings = Settings()
