"""Custom exception handlers for FastAPI application.

Converts the Planning Center error taxonomy into HTTP responses so domain
exceptions never leak out as bare 500s with stack traces.

| Exception           | Status |
|---------------------|--------|
| ConfigurationError  | 503    |
| NotInitializedError | 409    |
| ProviderError       | 502 (404 when Planning Center said 404) |
| ValidationError     | 422    |
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from worshipboard.domain.exceptions import (
    ConfigurationError,
    NotInitializedError,
    ProviderError,
    ValidationError,
)

logger = logging.getLogger(__name__)


def register_exception_handlers(app: FastAPI) -> None:
    """Register handlers for domain exceptions.

    Must be called during app setup, before requests arrive.

    Args:
        app: FastAPI application instance
    """

    @app.exception_handler(ConfigurationError)
    async def configuration_error_handler(
        request: Request, exc: ConfigurationError
    ) -> JSONResponse:
        """Handle missing configuration with 503 Service Unavailable."""
        logger.warning(
            "Configuration error at %s: %s",
            request.url.path,
            exc.message,
            extra={"path": request.url.path, "error": exc.message},
        )
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"detail": exc.message},
        )

    @app.exception_handler(NotInitializedError)
    async def not_initialized_error_handler(
        request: Request, exc: NotInitializedError
    ) -> JSONResponse:
        """Handle calls before initialization with 409 Conflict."""
        logger.warning(
            "Planning Center not initialized at %s",
            request.url.path,
            extra={"path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_409_CONFLICT,
            content={"detail": exc.message},
        )

    # Hey future me - we pass Planning Center's status through in the body so the
    # admin UI can tell "bad credentials" (401) from "Planning Center is down" (5xx).
    @app.exception_handler(ProviderError)
    async def provider_error_handler(
        request: Request, exc: ProviderError
    ) -> JSONResponse:
        """Handle Planning Center failures with 502 Bad Gateway (or 404)."""
        logger.error(
            "Planning Center error at %s: %s",
            request.url.path,
            exc.message,
            extra={
                "path": request.url.path,
                "provider_status": exc.status_code,
                "resource": exc.resource,
            },
        )
        status_code = (
            status.HTTP_404_NOT_FOUND
            if exc.is_not_found
            else status.HTTP_502_BAD_GATEWAY
        )
        return JSONResponse(
            status_code=status_code,
            content={"detail": exc.message, "provider_status": exc.status_code},
        )

    @app.exception_handler(ValidationError)
    async def validation_error_handler(
        request: Request, exc: ValidationError
    ) -> JSONResponse:
        """Handle malformed Provider data with 422 Unprocessable Entity."""
        logger.warning(
            "Validation error at %s: %s",
            request.url.path,
            exc.message,
            extra={"path": request.url.path, "error": exc.message},
        )
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content={"detail": exc.message},
        )
