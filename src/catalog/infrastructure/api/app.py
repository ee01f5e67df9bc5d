"""FastAPI application entry point."""

from __future__ import annotations

import logging
import time
from datetime import datetime, timezone
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from catalog.domain.exceptions import (
    DomainException,
    EntityNotFoundError,
    StorageError,
    ValidationError,
)
from catalog.infrastructure.api.products import router as products_router
from catalog.infrastructure.api.responses import error_response
from catalog.infrastructure.config import settings

logger = logging.getLogger(__name__)

APP_TITLE = "Product Catalog API"
APP_VERSION = "1.0.0"


def create_app() -> FastAPI:
    app = FastAPI(
        title=APP_TITLE,
        description="CRUD API for a product catalog stored in a JSON file",
        version=APP_VERSION,
        debug=settings.debug,
    )
    started = time.monotonic()

    app.include_router(products_router)

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        logger.info(
            "%s %s -> %d (%.1f ms)",
            request.method,
            request.url.path,
            response.status_code,
            (time.perf_counter() - start) * 1000,
        )
        return response

    @app.get("/", tags=["meta"])
    def root() -> dict[str, Any]:
        """API information."""
        return {
            "status": "success",
            "message": APP_TITLE,
            "version": APP_VERSION,
            "documentation": app.docs_url,
            "endpoints": {"products": "/api/products", "health": "/health"},
        }

    @app.get("/health", tags=["meta"])
    def health_check() -> dict[str, Any]:
        """Health check endpoint."""
        return {
            "status": "success",
            "message": "API is running",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "uptime": round(time.monotonic() - started, 3),
        }

    _register_exception_handlers(app)
    return app


def _register_exception_handlers(app: FastAPI) -> None:

    @app.exception_handler(DomainException)
    async def domain_error(request: Request, exc: DomainException):
        if isinstance(exc, ValidationError):
            return error_response(422, "Invalid input data", details=exc.violations)
        if isinstance(exc, EntityNotFoundError):
            return error_response(404, "Product not found")
        if isinstance(exc, StorageError):
            logger.error("Storage failure on %s %s", request.method, request.url.path)
            return error_response(500, "Could not save products")
        logger.error("Unhandled domain error on %s: %s", request.url.path, exc)
        return error_response(400, str(exc))

    @app.exception_handler(RequestValidationError)
    async def request_validation_error(request: Request, exc: RequestValidationError):
        details = [
            {key: value for key, value in error.items() if key != "input"}
            for error in exc.errors()
        ]
        return error_response(422, "Invalid input data", details=details)

    @app.exception_handler(StarletteHTTPException)
    async def http_error(request: Request, exc: StarletteHTTPException):
        if exc.status_code == 404:
            return error_response(404, "Route not found", path=request.url.path)
        return error_response(exc.status_code, str(exc.detail))

    @app.exception_handler(Exception)
    async def unexpected_error(request: Request, exc: Exception):
        logger.exception("Unexpected error on %s %s", request.method, request.url.path)
        return error_response(500, "Internal server error")


app = create_app()
