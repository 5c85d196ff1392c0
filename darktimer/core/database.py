"""Database configuration and session helpers."""

from __future__ import annotations

from typing import Iterator

from sqlalchemy.engine import Engine
from sqlmodel import Session, create_engine

from .config import DATA_DIR, DATABASE_URL


def build_engine(url: str = DATABASE_URL, **kwargs) -> Engine:
    """Create an engine, adding the SQLite thread flag when needed."""

    if url.startswith("sqlite"):
        kwargs.setdefault("connect_args", {"check_same_thread": False})
        if url == f"sqlite:///{DATA_DIR / 'app.db'}":
            DATA_DIR.mkdir(parents=True, exist_ok=True)
    return create_engine(url, **kwargs)


engine = build_engine()


def get_session() -> Iterator[Session]:
    """FastAPI dependency that yields a database session."""

    with Session(engine) as session:
        yield session


__all__ = ["build_engine", "engine", "get_session"]
