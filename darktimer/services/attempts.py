"""Attempt resolution: perfection check and leaderboard upsert."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

from ..core.config import (
    DEFAULT_MESSAGE,
    MAX_ATTEMPTS,
    MAX_MESSAGE_LENGTH,
    MAX_NAME_LENGTH,
    TARGET_TIME,
)
from ..models import Player
from ..store import PlayerStore
from .errors import ContentRejectedError, ValidationError
from .players import player_to_dict

logger = logging.getLogger(__name__)

ContentCheck = Callable[[str], bool]


@dataclass
class AttemptSubmission:
    player_name: str
    time: float
    attempts: int
    message: Optional[str] = None


@dataclass
class AttemptOutcome:
    is_perfect: bool
    rank: Optional[int]
    top_player: Optional[Player]
    player: Optional[Player] = None
    is_new_record: Optional[bool] = None

    def to_dict(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {
            "isPerfect": self.is_perfect,
            "rank": self.rank,
            "topPlayer": player_to_dict(self.top_player),
        }
        if self.is_perfect:
            body["player"] = player_to_dict(self.player)
            body["isNewRecord"] = self.is_new_record
        return body


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def normalize_name(raw: Any) -> str:
    """Strip and length-check a player name."""

    if not isinstance(raw, str) or not raw.strip():
        raise ValidationError("playerName is required")
    name = raw.strip()
    if len(name) > MAX_NAME_LENGTH:
        raise ValidationError(
            f"playerName must be {MAX_NAME_LENGTH} characters or less"
        )
    return name


def normalize_message(raw: Any, *, required: bool = False) -> Optional[str]:
    """Return a stripped message, ``None`` when absent and optional."""

    if raw is None or (isinstance(raw, str) and not raw.strip()):
        if required:
            raise ValidationError("message is required")
        return None
    if not isinstance(raw, str):
        raise ValidationError("message must be a string")
    message = raw.strip()
    if len(message) > MAX_MESSAGE_LENGTH:
        raise ValidationError(
            f"message must be {MAX_MESSAGE_LENGTH} characters or less"
        )
    return message


def check_content(message: Optional[str], content_check: ContentCheck) -> None:
    if message is not None and not content_check(message):
        logger.warning("Rejected message by content filter: %r", message)
        raise ContentRejectedError("Message contains inappropriate content")


def parse_attempt(body: Dict[str, Any]) -> AttemptSubmission:
    """Validate an inbound ``/api/attempt`` payload."""

    name = normalize_name(body.get("playerName"))

    time = body.get("time")
    if not _is_number(time):
        raise ValidationError("time must be a number")
    try:
        time = float(time)
    except OverflowError:
        raise ValidationError("time must be a number") from None
    if not math.isfinite(time):
        raise ValidationError("time must be a number")

    attempts = body.get("attempts")
    if not _is_number(attempts) or (
        isinstance(attempts, float) and not attempts.is_integer()
    ):
        raise ValidationError("attempts must be an integer")
    if attempts < 1:
        raise ValidationError("attempts must be at least 1")
    if attempts > MAX_ATTEMPTS:
        raise ValidationError(f"attempts must be at most {MAX_ATTEMPTS}")

    return AttemptSubmission(
        player_name=name,
        time=time,
        attempts=int(attempts),
        message=normalize_message(body.get("message")),
    )


def is_perfect(time: float, target: float = TARGET_TIME) -> bool:
    """A stop counts only when it lands exactly on the target."""

    return time == target


def _record_perfect(store: PlayerStore, submission: AttemptSubmission) -> Player:
    player = store.get_player_by_name(submission.player_name)

    if player is None:
        player = store.create_player(
            Player(
                name=submission.player_name,
                total_attempts=submission.attempts,
                perfect_attempts=1,
                first_perfect_attempt=submission.attempts,
                best_time=TARGET_TIME,
                message=submission.message or DEFAULT_MESSAGE,
            )
        )
        logger.info(
            "New player %s perfect in %d attempts",
            player.name,
            submission.attempts,
        )
        return player

    if (
        player.first_perfect_attempt is None
        or submission.attempts < player.first_perfect_attempt
    ):
        logger.info(
            "%s improved first perfect attempt %s -> %d",
            player.name,
            player.first_perfect_attempt,
            submission.attempts,
        )
        player.first_perfect_attempt = submission.attempts
    player.perfect_attempts += 1
    player.total_attempts += submission.attempts
    player.best_time = TARGET_TIME
    if submission.message is not None:
        player.message = submission.message
    return store.update_player(player)


def _holds_record(store: PlayerStore, player: Player) -> bool:
    others = [p for p in store.list_ranked() if p.id != player.id]
    return all(
        player.first_perfect_attempt < other.first_perfect_attempt for other in others
    )


def resolve_attempt(
    store: PlayerStore,
    content_check: ContentCheck,
    submission: AttemptSubmission,
) -> AttemptOutcome:
    """Decide whether an attempt is perfect and update the leaderboard.

    Non-perfect attempts leave the store untouched. A supplied message is
    screened before any write.
    """

    check_content(submission.message, content_check)

    if not is_perfect(submission.time):
        return AttemptOutcome(
            is_perfect=False,
            rank=None,
            top_player=store.top_player(),
        )

    player = _record_perfect(store, submission)
    rank = store.rank(player.id)
    is_new_record = _holds_record(store, player)
    if is_new_record:
        logger.info(
            "%s holds the record at %d attempts",
            player.name,
            player.first_perfect_attempt,
        )

    return AttemptOutcome(
        is_perfect=True,
        rank=rank,
        top_player=store.top_player(),
        player=player,
        is_new_record=is_new_record,
    )


__all__ = [
    "AttemptOutcome",
    "AttemptSubmission",
    "check_content",
    "is_perfect",
    "normalize_message",
    "normalize_name",
    "parse_attempt",
    "resolve_attempt",
]
