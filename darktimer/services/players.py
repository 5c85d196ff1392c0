"""Helpers for player domain objects."""

from __future__ import annotations

from typing import Any, Dict, Optional

from ..core.time import to_iso
from ..models import Player


def player_to_dict(player: Optional[Player]) -> Optional[Dict[str, Any]]:
    """Serialise a player model to API-friendly dict."""

    if player is None:
        return None
    return {
        "id": player.id,
        "name": player.name,
        "totalAttempts": player.total_attempts,
        "perfectAttempts": player.perfect_attempts,
        "firstPerfectAttempt": player.first_perfect_attempt,
        "bestTime": player.best_time,
        "message": player.message,
        "createdAt": to_iso(player.created_at),
        "updatedAt": to_iso(player.updated_at),
    }


__all__ = ["player_to_dict"]
