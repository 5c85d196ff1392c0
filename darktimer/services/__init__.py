"""Service layer helpers."""

from .attempts import (
    AttemptOutcome,
    AttemptSubmission,
    is_perfect,
    parse_attempt,
    resolve_attempt,
)
from .errors import (
    ContentRejectedError,
    GameError,
    NotLeaderError,
    PlayerNotFoundError,
    ValidationError,
)
from .leaderboard import leaderboard_view, player_view, seed_founder, update_message
from .moderation import ContentFilter, build_content_filter
from .players import player_to_dict

__all__ = [
    "AttemptOutcome",
    "AttemptSubmission",
    "ContentFilter",
    "ContentRejectedError",
    "GameError",
    "NotLeaderError",
    "PlayerNotFoundError",
    "ValidationError",
    "build_content_filter",
    "is_perfect",
    "leaderboard_view",
    "parse_attempt",
    "player_to_dict",
    "player_view",
    "resolve_attempt",
    "seed_founder",
    "update_message",
]
