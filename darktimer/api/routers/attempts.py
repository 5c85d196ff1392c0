"""Attempt submission and leader message endpoints."""

from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException

from ...services import (
    ContentFilter,
    GameError,
    parse_attempt,
    player_to_dict,
    resolve_attempt,
    update_message,
)
from ...store import PlayerStore
from ..deps import get_content_filter, get_store

router = APIRouter(prefix="/api", tags=["attempts"])


@router.post("/attempt")
def submit_attempt(
    body: Dict[str, Any],
    store: PlayerStore = Depends(get_store),
    content_filter: ContentFilter = Depends(get_content_filter),
):
    """Submit a stopped time; perfect stops land on the leaderboard."""

    try:
        submission = parse_attempt(body)
        outcome = resolve_attempt(store, content_filter, submission)
    except GameError as exc:
        raise HTTPException(exc.status_code, exc.detail) from exc
    return outcome.to_dict()


@router.post("/update-message")
def update_leader_message(
    body: Dict[str, Any],
    store: PlayerStore = Depends(get_store),
    content_filter: ContentFilter = Depends(get_content_filter),
):
    """Replace the top player's taunt message."""

    try:
        player = update_message(store, content_filter, body)
    except GameError as exc:
        raise HTTPException(exc.status_code, exc.detail) from exc
    return {"success": True, "player": player_to_dict(player)}


__all__ = ["router"]
