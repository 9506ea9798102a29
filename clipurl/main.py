"""Main application module.

This module builds the FastAPI application, includes routes,
and configures middleware and exception handlers.

Run with ``uvicorn clipurl.main:create_app --factory`` or ``clipurl serve``.
"""

import time
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from loguru import logger
from starlette.exceptions import HTTPException as StarletteHTTPException

from clipurl.api import build_api_router
from clipurl.core.config import Settings, get_settings
from clipurl.core.logging import setup_logging
from clipurl.db.base import Database
from clipurl.middleware.logging import RequestLoggingMiddleware


def register_exception_handlers(app: FastAPI, settings: Settings) -> None:
    """Render every error as a JSON body with an ``error`` key."""

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        """Handle validation errors with detailed information."""
        logger.warning(f"Request validation error: {exc}")
        return JSONResponse(
            status_code=422,
            content={"error": "Validation error", "details": jsonable_encoder(exc.errors())}
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Global exception handler to catch and log all unhandled exceptions."""
        error_id = f"error-{time.time()}"
        logger.bind(
            error_id=error_id,
            url=str(request.url),
            client_host=request.client.host if request.client else None
        ).opt(exception=exc).error(
            "Unhandled exception in {} {}", request.method, request.url.path
        )
        return JSONResponse(
            status_code=500,
            content={
                "error": str(exc) if settings.DEBUG else "Internal server error",
                "error_id": error_id,
            }
        )


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Process settings; read from the environment when omitted

    Returns:
        Configured FastAPI app
    """
    settings = settings or get_settings()
    setup_logging(settings)

    app = FastAPI(
        title=settings.APP_NAME,
        description=settings.APP_DESCRIPTION,
        version=settings.APP_VERSION,
        docs_url="/docs" if settings.DEBUG else None,
        redoc_url="/redoc" if settings.DEBUG else None,
    )

    app.state.settings = settings
    app.state.database = Database.from_settings(settings)

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    if settings.REQUEST_LOGGING_ENABLED:
        app.add_middleware(RequestLoggingMiddleware)

    register_exception_handlers(app, settings)
    app.include_router(build_api_router(settings))

    @app.on_event("startup")
    async def startup_event():
        """Run startup tasks."""
        logger.info(f"Starting {settings.APP_NAME} v{settings.APP_VERSION}")
        logger.info(f"Environment: {settings.ENVIRONMENT.value}")
        logger.info(f"Debug mode: {settings.DEBUG}")
        await app.state.database.create_all()

    @app.on_event("shutdown")
    async def shutdown_event():
        """Run cleanup tasks."""
        logger.info(f"Shutting down {settings.APP_NAME}")
        await app.state.database.dispose()

    return app
