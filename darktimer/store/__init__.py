"""Player storage adapters."""

from .base import PlayerStore, ranking_key
from .memory import MemoryPlayerStore
from .sql import SQLPlayerStore

__all__ = ["MemoryPlayerStore", "PlayerStore", "SQLPlayerStore", "ranking_key"]
