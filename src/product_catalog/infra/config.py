from __future__ import annotations

import os

API_VERSION = "1.0.0"


def app_env() -> str:
    return os.getenv("APP_ENV", "development")


def is_development() -> bool:
    return app_env() == "development"


def log_level() -> str:
    return os.getenv("LOG_LEVEL", "INFO").upper()


def api_base_url() -> str:
    """Prefix for the product routes, e.g. "/api"."""
    url = os.getenv("API_BASE_URL", "/api").rstrip("/")

    if url and not url.startswith("/"):
        raise RuntimeError("API_BASE_URL must start with '/'")

    return url


def server_host() -> str:
    return os.getenv("HOST", "127.0.0.1")


def server_port() -> int:
    raw = os.getenv("PORT", "3000")

    try:
        return int(raw)
    except ValueError:
        raise RuntimeError(f"PORT must be an integer, got {raw!r}") from None
