"""
Error types shared by the store, services and API handlers.

Every error the service reports to a client is a ``ServiceError``
subclass carrying the HTTP status it maps to.  ``register_error_handlers``
installs a single FastAPI exception handler that renders them as
``{"error": "<message>"}``.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse


logger = logging.getLogger(__name__)


class ServiceError(Exception):
    """Base class for errors surfaced to API clients."""

    status_code: int = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(ServiceError):
    """Malformed or missing required input."""

    status_code = 400


class NotFound(ServiceError):
    """A referenced record does not exist."""

    status_code = 404


class StoreError(ServiceError):
    """The persistent store failed."""

    status_code = 500


def register_error_handlers(app: FastAPI) -> None:
    """Render ``ServiceError`` exceptions as small JSON error payloads."""

    @app.exception_handler(ServiceError)
    async def service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
        if exc.status_code >= 500:
            logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})
