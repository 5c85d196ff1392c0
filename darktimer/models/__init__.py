"""Database model exports."""

from .player import Player

__all__ = ["Player"]
