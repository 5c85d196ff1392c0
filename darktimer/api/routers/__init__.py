"""Aggregate API routers."""

from fastapi import APIRouter

from .attempts import router as attempts_router
from .leaderboard import router as leaderboard_router
from .system import router as system_router

ALL_ROUTERS: tuple[APIRouter, ...] = (
    system_router,
    attempts_router,
    leaderboard_router,
)

__all__ = ["ALL_ROUTERS"]
