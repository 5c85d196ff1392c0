"""System-level API endpoints."""

from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter

from ...core import (
    DEFAULT_MESSAGE,
    MAX_MESSAGE_LENGTH,
    MAX_NAME_LENGTH,
    TARGET_TIME,
    TICK_SECONDS,
)

router = APIRouter(tags=["system"])


@router.get("/health")
def health() -> Dict[str, bool]:
    """Simple readiness probe."""

    return {"ok": True}


@router.get("/config")
def get_config() -> Dict[str, Any]:
    """Expose game settings the frontend needs."""

    return {
        "targetTime": TARGET_TIME,
        "tickSeconds": TICK_SECONDS,
        "maxNameLength": MAX_NAME_LENGTH,
        "maxMessageLength": MAX_MESSAGE_LENGTH,
        "defaultMessage": DEFAULT_MESSAGE,
    }


__all__ = ["router"]
