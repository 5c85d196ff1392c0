"""Storage interface for player records."""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import List, Optional, Tuple

from ..models import Player


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def ranking_key(player: Player) -> Tuple[int, datetime, int]:
    """Sort key for ranked players: fewest attempts, then earliest created."""

    return (
        player.first_perfect_attempt,
        _as_utc(player.created_at),
        player.id or 0,
    )


class PlayerStore(ABC):
    """Capability set the game services need from a backing store.

    Only players with a non-null ``first_perfect_attempt`` take part in the
    ranking. ``rank`` returns ``None`` for anyone outside it.
    """

    @abstractmethod
    def get_player(self, player_id: int) -> Optional[Player]:
        ...

    @abstractmethod
    def get_player_by_name(self, name: str) -> Optional[Player]:
        ...

    @abstractmethod
    def create_player(self, player: Player) -> Player:
        """Persist a new player and return it with its generated id."""

    @abstractmethod
    def update_player(self, player: Player) -> Player:
        """Persist changes made to an existing player."""

    @abstractmethod
    def list_ranked(self) -> List[Player]:
        ...

    @abstractmethod
    def count_players(self) -> int:
        ...

    def top_player(self) -> Optional[Player]:
        ranked = self.list_ranked()
        return ranked[0] if ranked else None

    def rank(self, player_id: int) -> Optional[int]:
        for position, player in enumerate(self.list_ranked(), start=1):
            if player.id == player_id:
                return position
        return None


__all__ = ["PlayerStore", "ranking_key"]
