"""FastAPI application factory and configuration."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlmodel import SQLModel

from . import __version__, models  # noqa: F401 - ensure models are registered with SQLModel
from .api import register_api
from .api.deps import open_store
from .core import (
    ALLOWED_CORS_ORIGINS,
    DB_RESET,
    LOG_LEVEL,
    SEED_FOUNDER,
    STORAGE_BACKEND,
    configure_logging,
    engine,
)
from .services import seed_founder

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if STORAGE_BACKEND == "sql":
        if DB_RESET:
            SQLModel.metadata.drop_all(engine)
        SQLModel.metadata.create_all(engine)
    if SEED_FOUNDER:
        with open_store() as store:
            seed_founder(store)
    logger.info("Dark Timer API ready (storage=%s)", STORAGE_BACKEND)
    yield


def create_app() -> FastAPI:
    configure_logging(LOG_LEVEL)
    app = FastAPI(title="Dark Timer API", version=__version__, lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ALLOWED_CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )
    register_api(app)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("darktimer.app:app", host="127.0.0.1", port=3000, reload=True)
