"""Application configuration and constants."""
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

PACKAGE_DIR = Path(__file__).resolve().parent


def _get_env(name: str, default: str) -> str:
    value = os.getenv(name)
    return value if value is not None else default


@dataclass(frozen=True)
class Settings:
    """Simple settings container with environment variable overrides."""

    api_base_url: str = _get_env("API_BASE_URL", "http://127.0.0.1:8000/api")
    request_timeout_seconds: float = float(_get_env("REQUEST_TIMEOUT_SECONDS", "10"))
    fallback_catalog_path: str = _get_env(
        "FALLBACK_CATALOG_PATH", str(PACKAGE_DIR / "data" / "catalog.json")
    )
    redis_host: str = _get_env("REDIS_HOST", "localhost")
    redis_port: int = int(_get_env("REDIS_PORT", "6379"))
    cache_ttl_seconds: int = int(_get_env("CACHE_TTL_SECONDS", "60"))
    log_level: str = _get_env("LOG_LEVEL", "INFO")


settings = Settings()

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
