"""API assembly helpers."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from .routers import ALL_ROUTERS

logger = logging.getLogger(__name__)


async def unhandled_error(request: Request, exc: Exception) -> JSONResponse:
    """Log anything the routers did not map and answer with a bare 500."""

    logger.exception("Error processing %s %s", request.method, request.url.path)
    return JSONResponse({"detail": "Internal server error"}, status_code=500)


def register_api(app: FastAPI) -> None:
    """Attach the routers and the catch-all error handler."""

    app.add_exception_handler(Exception, unhandled_error)
    for router in ALL_ROUTERS:
        app.include_router(router)


__all__ = ["register_api", "unhandled_error"]
