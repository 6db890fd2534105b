"""
Gateway error taxonomy and the handlers that turn it into `{"error": ...}` bodies.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class GatewayError(Exception):
    """Base error raised at a gateway boundary. `message` is safe to show callers."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ConfigurationError(GatewayError):
    """A required upstream credential is missing."""


class ValidationError(GatewayError):
    """Caller input is missing or malformed."""

    status_code = status.HTTP_400_BAD_REQUEST


class UpstreamError(GatewayError):
    """An external service call failed (network, non-2xx, unreadable body)."""


async def gateway_error_handler(request: Request, exc: GatewayError) -> JSONResponse:
    """Render a GatewayError as the public error body."""
    logger.warning(f"⚠️  {request.method} {request.url.path} -> {exc.status_code}: {exc.message}")
    return JSONResponse({"error": exc.message}, status_code=exc.status_code)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Hide pydantic's error detail behind a fixed 400 message."""
    logger.warning(f"⚠️  {request.method} {request.url.path} rejected: {exc.errors()}")
    return JSONResponse({"error": "Invalid request"}, status_code=status.HTTP_400_BAD_REQUEST)


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Last resort: log the traceback, return a generic error body."""
    logger.exception(f"❌ Unhandled error on {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        {"error": "Internal server error"},
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(GatewayError, gateway_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
