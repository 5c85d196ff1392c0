"""Domain errors raised by the game services."""

from __future__ import annotations


class GameError(Exception):
    """Base class for errors that map onto a client-facing HTTP status."""

    status_code = 400

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class ValidationError(GameError):
    status_code = 400


class ContentRejectedError(GameError):
    status_code = 400


class NotLeaderError(GameError):
    status_code = 403


class PlayerNotFoundError(GameError):
    status_code = 404


__all__ = [
    "ContentRejectedError",
    "GameError",
    "NotLeaderError",
    "PlayerNotFoundError",
    "ValidationError",
]
