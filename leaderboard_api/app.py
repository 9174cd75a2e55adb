"""
FastAPI application entry point for the participant API.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from leaderboard_api.config import get_settings
from leaderboard_api.routes import router

logger = logging.getLogger(__name__)


async def _http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.detail)
    return JSONResponse({"error": str(exc.detail)}, status_code=exc.status_code)


async def _validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    # Malformed bodies are client errors, reported as 400 like the other checks.
    if request.method == "PUT":
        message = "Valid score is required"
    elif request.method == "POST":
        message = "Participant name is required"
    else:
        message = "Invalid request"
    return JSONResponse({"error": message}, status_code=400)


def create_app() -> FastAPI:
    settings = get_settings()
    app = FastAPI(title="Leaderboard Participants API", version="0.1.0")
    app.add_exception_handler(StarletteHTTPException, _http_error)
    app.add_exception_handler(RequestValidationError, _validation_error)
    app.include_router(router, prefix=settings.api_prefix)
    return app


app = create_app()
