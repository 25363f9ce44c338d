"""Commerce - FastAPI Application

This module creates and configures the FastAPI application.
"""

import traceback
import uuid
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .api.health import router as health_router
from .api.settings import router as settings_router
from .core.config import get_settings_instance
from .core.database import close_db, init_db
from .core.exceptions import CommerceException
from .core.logging import get_logger, setup_logging

logger = get_logger(__name__)


def generate_error_id() -> str:
    """Generate a unique error ID for tracking."""
    return f"ERR-{uuid.uuid4().hex[:8].upper()}"


def get_request_context(request: Request) -> dict[str, Any]:
    """Extract relevant context from request for error logging."""
    return {
        "method": request.method,
        "path": request.url.path,
        "query_params": dict(request.query_params),
        "client": request.client.host if request.client else None,
    }


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings_instance()
    setup_logging()
    logger.info("Starting Commerce", extra={"version": settings.version, "environment": settings.environment})
    if settings.database_auto_create:
        await init_db()
    yield
    await close_db()
    logger.info("Commerce shutdown complete")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings_instance()
    app = FastAPI(
        title=settings.app_name,
        description="Commerce store settings API",
        version=settings.version,
        debug=settings.debug,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    setup_exception_handlers(app)
    setup_routes(app)
    return app


def setup_exception_handlers(app: FastAPI) -> None:
    """Register handlers that render errors into the ``{"error": ...}`` envelope."""
    settings = get_settings_instance()

    @app.exception_handler(CommerceException)
    async def commerce_exception_handler(request: Request, exc: CommerceException):
        error_id = generate_error_id() if exc.status_code >= 500 else None

        if exc.status_code >= 500:
            logger.error(
                "Commerce server error",
                extra={
                    "error_id": error_id,
                    "error_code": exc.error_code,
                    "error_message": exc.message,
                    "request_context": get_request_context(request),
                },
            )
        else:
            logger.warning(
                "Commerce client error",
                extra={
                    "error_code": exc.error_code,
                    "error_message": exc.message,
                    "request_context": get_request_context(request),
                },
            )

        error_response = {
            "error": {
                "code": exc.error_code,
                "message": exc.message,
                "details": exc.details,
            }
        }
        if error_id:
            error_response["error"]["error_id"] = error_id
        return JSONResponse(status_code=exc.status_code, content=error_response)

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        if exc.status_code >= 400:
            logger.warning(
                "HTTP client error",
                extra={"status_code": exc.status_code, "request_context": get_request_context(request)},
            )
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": {"code": f"HTTP_{exc.status_code}", "message": exc.detail, "details": {}}},
            headers=getattr(exc, "headers", None) or None,
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        error_id = generate_error_id()
        logger.error(
            "Unhandled exception",
            extra={"error_id": error_id, "request_context": get_request_context(request)},
            exc_info=exc,
        )
        error_response: dict[str, Any] = {
            "error": {
                "code": "INTERNAL_SERVER_ERROR",
                "message": "An unexpected error occurred",
                "error_id": error_id,
            }
        }
        if settings.debug:
            error_response["error"]["details"] = {
                "exception": type(exc).__name__,
                "traceback": traceback.format_exception(type(exc), exc, exc.__traceback__),
            }
        return JSONResponse(status_code=500, content=error_response)


def setup_routes(app: FastAPI) -> None:
    """Configure application routes."""
    settings = get_settings_instance()
    app.include_router(health_router, prefix=settings.api_v1_prefix)
    app.include_router(settings_router, prefix=settings.api_v1_prefix)


app = create_app()
