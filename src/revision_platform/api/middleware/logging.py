"""Request logging for the revision platform API."""

import logging
import re
import time
from typing import Any
from uuid import uuid4

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from revision_platform.shared.config import get_settings

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"
_REQUEST_ID_PATTERN = re.compile(r"^[a-zA-Z0-9\-_]{1,64}$")

# Polled by load balancers and the wizard; logged at DEBUG only
QUIET_PATHS = frozenset({"/", "/api/health", "/api/ai/test"})


def resolve_request_id(header_value: str | None) -> str:
    """Reuse a well-formed client request ID, otherwise mint a new one."""
    if header_value and _REQUEST_ID_PATTERN.match(header_value):
        return header_value
    return str(uuid4())


def level_for_status(status_code: int) -> int:
    if status_code >= 500:
        return logging.ERROR
    if status_code >= 400:
        return logging.WARNING
    return logging.INFO


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Tag every request with an ID and log one line per outcome.

    Generation and chat requests can take seconds while the agent answers,
    so the completion line carries the duration.
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        request_id = resolve_request_id(request.headers.get(REQUEST_ID_HEADER))
        request.state.request_id = request_id
        route = f"{request.method} {request.url.path}"
        fields: dict[str, Any] = {
            "request_id": request_id,
            "method": request.method,
            "path": request.url.path,
        }
        quiet = request.url.path in QUIET_PATHS

        logger.log(logging.DEBUG if quiet else logging.INFO, f"-> {route}", extra=fields)
        started = time.perf_counter()

        try:
            response = await call_next(request)
        except Exception as exc:
            logger.error(
                f"<- {route} raised {type(exc).__name__}",
                extra={**fields, "duration_ms": self._elapsed_ms(started), "error": str(exc)},
            )
            raise

        response.headers[REQUEST_ID_HEADER] = request_id

        level = level_for_status(response.status_code)
        if quiet and level == logging.INFO:
            level = logging.DEBUG
        logger.log(
            level,
            f"<- {route} {response.status_code}",
            extra={
                **fields,
                "status_code": response.status_code,
                "duration_ms": self._elapsed_ms(started),
            },
        )
        return response

    @staticmethod
    def _elapsed_ms(started: float) -> float:
        return round((time.perf_counter() - started) * 1000, 2)


def setup_logging() -> None:
    """Configure application logging.

    Production logs one JSON-like object per line; other environments use
    a readable format.
    """
    settings = get_settings()
    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)

    if settings.is_production:
        log_format = (
            '{"timestamp": "%(asctime)s", "level": "%(levelname)s", '
            '"logger": "%(name)s", "message": "%(message)s"}'
        )
    else:
        log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    logging.basicConfig(level=log_level, format=log_format, datefmt="%Y-%m-%dT%H:%M:%S%z")

    # Requests are already logged by RequestLoggingMiddleware
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("google").setLevel(logging.WARNING)
