"""Application settings and environment helpers."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, List

from dotenv import load_dotenv

load_dotenv(override=False)


def _env_bool(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise RuntimeError(f"{name} must be an integer") from exc


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError as exc:
        raise RuntimeError(f"{name} must be a number") from exc


def _split_csv(raw: str | None) -> List[str]:
    if not raw:
        return []
    return [item.strip() for item in raw.split(",") if item.strip()]


def _unique(values: Iterable[str]) -> List[str]:
    seen = set()
    ordered: List[str] = []
    for value in values:
        if value not in seen:
            seen.add(value)
            ordered.append(value)
    return ordered


_PROJECT_ROOT = Path(__file__).resolve().parents[2]


# Storage --------------------------------------------------------------------
DATA_DIR = Path(os.getenv("DATA_DIR", str(_PROJECT_ROOT / "data")))
DATABASE_URL = os.getenv("DATABASE_URL") or f"sqlite:///{DATA_DIR / 'app.db'}"

STORAGE_BACKEND = (os.getenv("STORAGE_BACKEND") or "sql").strip().lower()
if STORAGE_BACKEND not in {"sql", "memory"}:
    raise RuntimeError("STORAGE_BACKEND must be 'sql' or 'memory'")

DB_RESET = _env_bool("DB_RESET", False)
SEED_FOUNDER = _env_bool("SEED_FOUNDER", False)


# CORS -----------------------------------------------------------------------
# FRONTEND_ORIGIN can contain a comma-separated list for multi-domain deploys.
_frontend_origins = _split_csv(os.getenv("FRONTEND_ORIGIN"))
_additional_origins = _split_csv(os.getenv("ADDITIONAL_ALLOWED_ORIGINS"))

_local_dev_origins = [
    "http://localhost:5173",
    "http://127.0.0.1:5173",
    "http://localhost:5000",
    "http://127.0.0.1:5000",
]

ALLOWED_CORS_ORIGINS = _unique(
    [
        *_frontend_origins,
        *_additional_origins,
        *_local_dev_origins,
    ]
)


# Game rules -----------------------------------------------------------------
TARGET_TIME = _env_float("TARGET_TIME", 10.00)
TICK_SECONDS = 0.01
MAX_NAME_LENGTH = _env_int("MAX_NAME_LENGTH", 30)
# largest value a 32-bit INTEGER column holds
MAX_ATTEMPTS = 2**31 - 1
MAX_MESSAGE_LENGTH = _env_int("MAX_MESSAGE_LENGTH", 100)
DEFAULT_MESSAGE = os.getenv("DEFAULT_MESSAGE") or "No one can beat my record"
BLOCKED_WORDS = _split_csv(os.getenv("BLOCKED_WORDS"))

FOUNDER_NAME = "App Founder"
FOUNDER_ATTEMPTS = 19


# Runtime behaviour ----------------------------------------------------------
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
API_URL = os.getenv("DARKTIMER_API_URL", "http://127.0.0.1:3000")


__all__ = [
    "ALLOWED_CORS_ORIGINS",
    "API_URL",
    "BLOCKED_WORDS",
    "DATABASE_URL",
    "DATA_DIR",
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
]
