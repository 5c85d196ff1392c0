"""Core configuration and infrastructure helpers."""

from .config import (
    ALLOWED_CORS_ORIGINS,
    API_URL,
    BLOCKED_WORDS,
    DATABASE_URL,
    DB_RESET,
    DEFAULT_MESSAGE,
    FOUNDER_ATTEMPTS,
    FOUNDER_NAME,
    LOG_LEVEL,
    MAX_ATTEMPTS,
    MAX_MESSAGE_LENGTH,
    MAX_NAME_LENGTH,
    SEED_FOUNDER,
    STORAGE_BACKEND,
    TARGET_TIME,
    TICK_SECONDS,
)
from .database import build_engine, engine, get_session
from .logs import configure_logging
from .time import to_iso, utcnow

__all__ = [
    "ALLOWED_CORS_ORIGINS",
    "API_URL",
    "BLOCKED_WORDS",
    "DATABASE_URL",
    "DB_RESET",
    "DEFAULT_MESSAGE",
    "FOUNDER_ATTEMPTS",
    "FOUNDER_NAME",
    "LOG_LEVEL",
    "MAX_ATTEMPTS",
    "MAX_MESSAGE_LENGTH",
    "MAX_NAME_LENGTH",
    "SEED_FOUNDER",
    "STORAGE_BACKEND",
    "TARGET_TIME",
    "TICK_SECONDS",
    "build_engine",
    "configure_logging",
    "engine",
    "get_session",
    "to_iso",
    "utcnow",
]
