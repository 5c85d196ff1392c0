"""In-memory player store."""

from __future__ import annotations

import itertools
import threading
from typing import Dict, List, Optional

from ..core.time import utcnow
from ..models import Player
from .base import PlayerStore, ranking_key


def _copy(player: Player) -> Player:
    return Player.model_validate(player.model_dump())


class MemoryPlayerStore(PlayerStore):
    """Dict-backed store keyed by generated id, with a name index.

    Callers get copies, so nothing changes until ``update_player`` runs.
    """

    def __init__(self):
        self._players: Dict[int, Player] = {}
        self._by_name: Dict[str, int] = {}
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    def get_player(self, player_id: int) -> Optional[Player]:
        with self._lock:
            player = self._players.get(player_id)
            return _copy(player) if player else None

    def get_player_by_name(self, name: str) -> Optional[Player]:
        with self._lock:
            player_id = self._by_name.get(name)
            if player_id is None:
                return None
            return _copy(self._players[player_id])

    def create_player(self, player: Player) -> Player:
        with self._lock:
            if player.name in self._by_name:
                raise ValueError(f"Player {player.name!r} already exists")
            stored = _copy(player)
            stored.id = next(self._ids)
            self._players[stored.id] = stored
            self._by_name[stored.name] = stored.id
            return _copy(stored)

    def update_player(self, player: Player) -> Player:
        with self._lock:
            if player.id not in self._players:
                raise KeyError(player.id)
            current = self._players[player.id]
            if player.name != current.name:
                if player.name in self._by_name:
                    raise ValueError(f"Player {player.name!r} already exists")
                del self._by_name[current.name]
                self._by_name[player.name] = player.id
            stored = _copy(player)
            stored.updated_at = utcnow()
            self._players[stored.id] = stored
            return _copy(stored)

    def list_ranked(self) -> List[Player]:
        with self._lock:
            ranked = [
                p for p in self._players.values() if p.first_perfect_attempt is not None
            ]
            ranked.sort(key=ranking_key)
            return [_copy(p) for p in ranked]

    def count_players(self) -> int:
        with self._lock:
            return len(self._players)


__all__ = ["MemoryPlayerStore"]
