"""Leaderboard endpoints."""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from ...services import GameError, leaderboard_view, player_view
from ...store import PlayerStore
from ..deps import get_store

router = APIRouter(prefix="/api", tags=["leaderboard"])


@router.get("/leaderboard")
def get_leaderboard(
    limit: Optional[int] = Query(default=None, ge=1, le=100),
    store: PlayerStore = Depends(get_store),
):
    """Ranked players, fewest attempts to a perfect stop first."""

    return leaderboard_view(store, limit)


@router.get("/players/{name}")
def get_player(name: str, store: PlayerStore = Depends(get_store)):
    try:
        return player_view(store, name)
    except GameError as exc:
        raise HTTPException(exc.status_code, exc.detail) from exc


__all__ = ["router"]
