"""Global exception handlers for the API.

Error bodies follow the envelopes the web client expects:

- domain and API errors: ``{"error": "<message>"}`` (plus ``message`` when
  an underlying cause is passed through)
- unknown routes: ``{"error": "Endpoint not found", "path": "..."}``
- anything unhandled: ``{"error": {"message": "...", "status": 500}}``
"""

import logging
import traceback
from typing import Any
from uuid import uuid4

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from revision_platform.shared.config import get_settings
from revision_platform.shared.exceptions import (
    ResourceNotFoundError,
    RevisionPlatformException,
    ValidationError as DomainValidationError,
)

logger = logging.getLogger(__name__)


class APIError(Exception):
    """API exception with a ready-made error body."""

    def __init__(
        self,
        error: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        message: str | None = None,
    ):
        self.error = error
        self.status_code = status_code
        self.message = message
        super().__init__(error)

    def to_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {"error": self.error}
        if self.message is not None:
            body["message"] = self.message
        return body


def _request_id(request: Request) -> str:
    return getattr(request.state, "request_id", str(uuid4()))


def create_unhandled_error_response(message: str, status_code: int) -> dict[str, Any]:
    """Body for errors nothing else claimed."""
    return {"error": {"message": message, "status": status_code}}


def status_for_exception(exc: RevisionPlatformException) -> int:
    """Map a domain exception onto an HTTP status code.

    - ValidationError -> 400 Bad Request
    - ResourceNotFoundError -> 404 Not Found
    - anything else (fixture or configuration problems) -> 500
    """
    if isinstance(exc, DomainValidationError):
        return status.HTTP_400_BAD_REQUEST
    if isinstance(exc, ResourceNotFoundError):
        return status.HTTP_404_NOT_FOUND
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def setup_exception_handlers(app: FastAPI) -> None:
    """Setup global exception handlers for the application.

    Args:
        app: FastAPI application instance
    """

    @app.exception_handler(APIError)
    async def api_error_handler(request: Request, exc: APIError) -> JSONResponse:
        logger.warning(
            f"API Error: {exc.status_code} - {exc.error}",
            extra={
                "request_id": _request_id(request),
                "status_code": exc.status_code,
                "path": request.url.path,
            },
        )
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

    @app.exception_handler(RevisionPlatformException)
    async def domain_exception_handler(
        request: Request, exc: RevisionPlatformException
    ) -> JSONResponse:
        status_code = status_for_exception(exc)
        logger.warning(
            f"Domain Exception: {exc.__class__.__name__} - {exc.message}",
            extra={
                "request_id": _request_id(request),
                "error_type": exc.__class__.__name__,
                "status_code": status_code,
                "path": request.url.path,
            },
        )
        return JSONResponse(status_code=status_code, content=exc.to_dict())

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Malformed bodies are reported as 400s, like missing fields."""
        errors = []
        for error in exc.errors():
            loc = " -> ".join(str(x) for x in error["loc"])
            errors.append({
                "field": loc,
                "message": error["msg"],
                "type": error["type"],
            })

        logger.warning(
            f"Validation Error: {len(errors)} errors",
            extra={
                "request_id": _request_id(request),
                "path": request.url.path,
                "errors": errors,
            },
        )

        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": "Invalid request body", "details": errors},
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        if exc.status_code == status.HTTP_404_NOT_FOUND:
            return JSONResponse(
                status_code=status.HTTP_404_NOT_FOUND,
                content={"error": "Endpoint not found", "path": request.url.path},
            )
        return JSONResponse(
            status_code=exc.status_code,
            content=create_unhandled_error_response(str(exc.detail), exc.status_code),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception) -> JSONResponse:
        extra: dict[str, Any] = {
            "request_id": _request_id(request),
            "path": request.url.path,
        }
        if get_settings().is_development:
            extra["traceback"] = traceback.format_exc()

        logger.error(f"Unhandled Exception: {type(exc).__name__}: {exc}", extra=extra)

        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=create_unhandled_error_response(
                str(exc) or "Internal server error",
                status.HTTP_500_INTERNAL_SERVER_ERROR,
            ),
        )
