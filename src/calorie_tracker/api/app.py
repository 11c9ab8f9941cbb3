"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from postgrest.exceptions import APIError

from calorie_tracker.api.resources import router as resources_router
from calorie_tracker.app_logging import configure_logging
from calorie_tracker.config import parse_allowed_origins
from calorie_tracker.containers import AppContainer
from calorie_tracker.domain.errors import NotFoundError, StoreError, ValidationError


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
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
    app.include_router(resources_router)

    @app.exception_handler(ValidationError)
    async def validation_error(_: Request, exc: ValidationError) -> JSONResponse:
        return _error(status.HTTP_400_BAD_REQUEST, str(exc))

    @app.exception_handler(RequestValidationError)
    async def request_error(
        request: Request, _: RequestValidationError
    ) -> JSONResponse:
        return _error(
            status.HTTP_400_BAD_REQUEST,
            f"Invalid request for {request.method} {request.url.path}",
        )

    @app.exception_handler(NotFoundError)
    async def not_found(_: Request, exc: NotFoundError) -> JSONResponse:
        return _error(status.HTTP_404_NOT_FOUND, str(exc))

    @app.exception_handler(StoreError)
    async def store_error(request: Request, exc: StoreError) -> JSONResponse:
        logger.exception("Store failure on %s %s", request.method, request.url.path)
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc))

    @app.exception_handler(APIError)
    async def supabase_error(request: Request, exc: APIError) -> JSONResponse:
        logger.exception("Supabase error on %s %s", request.method, request.url.path)
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Store request failed")

    @app.get("/", response_class=PlainTextResponse)
    async def root() -> str:
        """Plain-text banner."""
        return "Calorie tracker API is running"

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app


def _error(status_code: int, message: str) -> JSONResponse:
    """Return the JSON error body used by every endpoint."""
    return JSONResponse(status_code=status_code, content={"error": message})
