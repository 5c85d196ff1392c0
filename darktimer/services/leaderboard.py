"""Leaderboard read views and leader message updates."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from ..core.config import DEFAULT_MESSAGE, FOUNDER_ATTEMPTS, FOUNDER_NAME, TARGET_TIME
from ..models import Player
from ..store import PlayerStore
from .attempts import ContentCheck, check_content, normalize_message, normalize_name
from .errors import NotLeaderError, PlayerNotFoundError
from .players import player_to_dict

logger = logging.getLogger(__name__)


def leaderboard_view(store: PlayerStore, limit: Optional[int] = None) -> Dict[str, Any]:
    """Ranked players plus the current leader."""

    players = store.list_ranked()
    top_player = players[0] if players else None
    if limit is not None:
        players = players[:limit]
    return {
        "players": [player_to_dict(player) for player in players],
        "topPlayer": player_to_dict(top_player),
    }


def player_view(store: PlayerStore, name: str) -> Dict[str, Any]:
    player = store.get_player_by_name(name)
    if not player:
        raise PlayerNotFoundError("Player not found")
    return {"player": player_to_dict(player), "rank": store.rank(player.id)}


def update_message(
    store: PlayerStore, content_check: ContentCheck, body: Dict[str, Any]
) -> Player:
    """Let the current leader replace their taunt message."""

    name = normalize_name(body.get("playerName"))
    message = normalize_message(body.get("message"), required=True)
    check_content(message, content_check)

    top_player = store.top_player()
    if top_player is None or top_player.name != name:
        logger.warning("Message update refused for non-leader %s", name)
        raise NotLeaderError("Only the current top player can update the message")

    top_player.message = message
    player = store.update_player(top_player)
    logger.info("Leader %s updated their message", player.name)
    return player


def seed_founder(store: PlayerStore) -> Optional[Player]:
    """Create the founding record holder when the store is empty."""

    if store.count_players():
        return None
    player = store.create_player(
        Player(
            name=FOUNDER_NAME,
            total_attempts=FOUNDER_ATTEMPTS,
            perfect_attempts=1,
            first_perfect_attempt=FOUNDER_ATTEMPTS,
            best_time=TARGET_TIME,
            message=DEFAULT_MESSAGE,
        )
    )
    logger.info("Seeded %s at %d attempts", player.name, FOUNDER_ATTEMPTS)
    return player


__all__ = ["leaderboard_view", "player_view", "seed_founder", "update_message"]
