"""Runtime settings for the YAML parsing service."""
from __future__ import annotations

import math
import os
from types import SimpleNamespace


def _comma_separated_list(value: str | None) -> list[str]:
    if not value:
        return []
    return [item.strip() for item in value.split(",") if item.strip()]


ENV = os.getenv("ENV", os.getenv("ENVIRONMENT", "development")).strip().lower()
ENVIRONMENT = os.getenv("ENVIRONMENT", ENV).strip().lower()
ALLOWED_CORS_ORIGINS = _comma_separated_list(os.getenv("ALLOWED_ORIGINS"))

UPLOAD_MAX_MB = int(os.getenv("UPLOAD_MAX_MB", "1"))
MAX_UPLOAD_BYTES = int(os.getenv("MAX_UPLOAD_BYTES", str(UPLOAD_MAX_MB * 1024 * 1024)))
if MAX_UPLOAD_BYTES < UPLOAD_MAX_MB * 1024 * 1024:
    MAX_UPLOAD_BYTES = UPLOAD_MAX_MB * 1024 * 1024
else:
    UPLOAD_MAX_MB = max(UPLOAD_MAX_MB, math.ceil(MAX_UPLOAD_BYTES / (1024 * 1024)))

RATE_LIMIT_REQUESTS = int(os.getenv("RATE_LIMIT_REQUESTS", "30"))
RATE_LIMIT_WINDOW_SECONDS = int(os.getenv("RATE_LIMIT_WINDOW_SECONDS", "60"))

YAML_MAX_DEPTH = int(os.getenv("YAML_MAX_DEPTH", "200"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").strip().upper()

settings = SimpleNamespace(
    ENV=ENV,
    ENVIRONMENT=ENVIRONMENT,
    ALLOWED_ORIGINS=ALLOWED_CORS_ORIGINS,
    ALLOWED_CORS_ORIGINS=ALLOWED_CORS_ORIGINS,
    UPLOAD_MAX_MB=UPLOAD_MAX_MB,
    MAX_UPLOAD_BYTES=MAX_UPLOAD_BYTES,
    RATE_LIMIT_REQUESTS=RATE_LIMIT_REQUESTS,
    RATE_LIMIT_WINDOW_SECONDS=RATE_LIMIT_WINDOW_SECONDS,
    YAML_MAX_DEPTH=YAML_MAX_DEPTH,
    LOG_LEVEL=LOG_LEVEL,
)

__all__ = [
    "ENV",
    "ENVIRONMENT",
    "ALLOWED_CORS_ORIGINS",
    "UPLOAD_MAX_MB",
    "MAX_UPLOAD_BYTES",
    "RATE_LIMIT_REQUESTS",
    "RATE_LIMIT_WINDOW_SECONDS",
    "YAML_MAX_DEPTH",
    "LOG_LEVEL",
    "settings",
]
