"""Request-scoped dependencies for the API routers."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

from sqlmodel import Session

from ..core import BLOCKED_WORDS, STORAGE_BACKEND, engine
from ..services.moderation import ContentFilter, build_content_filter
from ..store import MemoryPlayerStore, PlayerStore, SQLPlayerStore

memory_store = MemoryPlayerStore()
content_filter = build_content_filter(BLOCKED_WORDS)


@contextmanager
def open_store() -> Iterator[PlayerStore]:
    """Open the configured player store."""

    if STORAGE_BACKEND == "memory":
        yield memory_store
        return
    with Session(engine) as session:
        yield SQLPlayerStore(session)


def get_store() -> Iterator[PlayerStore]:
    """FastAPI dependency that yields a store for one request."""

    with open_store() as store:
        yield store


def get_content_filter() -> ContentFilter:
    return content_filter


__all__ = [
    "content_filter",
    "get_content_filter",
    "get_store",
    "memory_store",
    "open_store",
]
