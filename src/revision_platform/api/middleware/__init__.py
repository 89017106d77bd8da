"""API middleware package."""

from revision_platform.api.middleware.error_handler import setup_exception_handlers
from revision_platform.api.middleware.logging import RequestLoggingMiddleware, setup_logging

__all__ = ["RequestLoggingMiddleware", "setup_exception_handlers", "setup_logging"]
