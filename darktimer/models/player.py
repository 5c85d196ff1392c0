"""Database model for leaderboard players."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlmodel import Field as ORMField, SQLModel

from ..core.config import MAX_NAME_LENGTH
from ..core.time import utcnow


class Player(SQLModel, table=True):
    """Player identified by display name, ranked by first perfect attempt."""

    id: Optional[int] = ORMField(default=None, primary_key=True)
    name: str = ORMField(index=True, unique=True, max_length=MAX_NAME_LENGTH)
    total_attempts: int = 0
    perfect_attempts: int = 0
    first_perfect_attempt: Optional[int] = ORMField(default=None, index=True)
    best_time: Optional[float] = None
    message: Optional[str] = None
    created_at: datetime = ORMField(default_factory=utcnow)
    updated_at: datetime = ORMField(default_factory=utcnow)


__all__ = ["Player"]
