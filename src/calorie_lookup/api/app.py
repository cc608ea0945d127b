"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import Response

from calorie_lookup.api.auth import (
    CALORIES_PATH,
    INVALID_REQUEST_MESSAGE,
    message_response,
)
from calorie_lookup.api.auth import router as auth_router
from calorie_lookup.app_logging import configure_logging
from calorie_lookup.config import parse_allowed_origins
from calorie_lookup.containers import AppContainer


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info("Starting calorie lookup API (%s)", container.settings.environment)
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    app.add_middleware(
        CORSMiddleware,
        allow_origins=parse_allowed_origins(container.settings.cors_allowed_origins),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(RequestValidationError)
    async def validation_error(
        request: Request, exc: RequestValidationError
    ) -> Response:
        """Answer malformed calorie requests with the lookup's own 400 body."""
        if request.url.path == CALORIES_PATH:
            return message_response(
                status.HTTP_400_BAD_REQUEST, INVALID_REQUEST_MESSAGE
            )
        return await request_validation_exception_handler(request, exc)

    app.include_router(auth_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app
