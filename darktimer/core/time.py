"""Time helpers shared across the backend."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional


def utcnow() -> datetime:
    """Return the current UTC datetime."""
    return datetime.now(timezone.utc)


def to_iso(value: Optional[datetime]) -> Optional[str]:
    """Render a datetime as an ISO-8601 UTC string with a ``Z`` suffix.

    SQLite hands back naive datetimes, freshly built models carry tz-aware
    ones; both are UTC.
    """

    if value is None:
        return None
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return value.isoformat() + "Z"


__all__ = ["to_iso", "utcnow"]
