"""Shared exceptions for the revision platform.

This module defines the exception hierarchy used across all modules so the
API layer can map domain failures onto HTTP responses in one place.
"""

from typing import Any


class RevisionPlatformException(Exception):
    """Base exception for all application errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for API responses."""
        return {"error": self.message}


# ===================
# Resource Errors
# ===================

class ResourceNotFoundError(RevisionPlatformException):
    """Raised when a requested fixture is not found."""

    def __init__(self, message: str, resource_type: str, resource_id: str) -> None:
        super().__init__(
            message,
            {"resource_type": resource_type, "resource_id": resource_id},
        )


class SubjectNotFoundError(ResourceNotFoundError):
    """Raised when a subject id is unknown."""

    def __init__(self, subject_id: str) -> None:
        super().__init__("Subject not found", "Subject", subject_id)


class NoChaptersFoundError(ResourceNotFoundError):
    """Raised when a subject has no chapters (or does not exist)."""

    def __init__(self, subject_id: str) -> None:
        super().__init__("No chapters found for this subject", "Subject", subject_id)


class ChapterNotFoundError(ResourceNotFoundError):
    """Raised when a chapter is unknown or belongs to another subject."""

    def __init__(self, subject_id: str, chapter_id: str) -> None:
        super().__init__("Chapter not found", "Chapter", chapter_id)
        self.details["subject_id"] = subject_id


class FixtureLoadError(RevisionPlatformException):
    """Raised when a fixture file cannot be read or parsed."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(
            f"Failed to load fixture {path}: {reason}",
            {"path": path},
        )


# ===================
# Validation Errors
# ===================

class ValidationError(RevisionPlatformException):
    """Raised when request input validation fails."""
    pass


class MissingFieldsError(ValidationError):
    """Raised when required request fields are absent or empty."""

    def __init__(self, required: list[str], missing: list[str]) -> None:
        super().__init__(
            f"Missing required fields: {', '.join(required)}",
            {"missing": missing},
        )


class InvalidModeError(ValidationError):
    """Raised when a learning mode is not one of the supported values."""

    def __init__(self, mode: str, allowed: list[str]) -> None:
        super().__init__(
            f"Invalid mode: {mode}. Expected one of: {', '.join(allowed)}",
            {"mode": mode},
        )


# ===================
# Integration Errors
# ===================

class ExternalServiceError(RevisionPlatformException):
    """Raised when an external service call fails."""

    def __init__(self, service: str, message: str) -> None:
        super().__init__(
            f"External service error ({service}): {message}",
            {"service": service},
        )


class AgentServiceError(ExternalServiceError):
    """Raised when the conversational agent call fails."""

    def __init__(self, message: str) -> None:
        super().__init__("DialogflowCX", message)


class ApiClientError(ExternalServiceError):
    """Raised by the wizard when a backend API call fails."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__("RevisionPlatformAPI", message)
        self.reason = message
        self.status_code = status_code
        self.details["status_code"] = status_code


# ===================
# Configuration Errors
# ===================

class ConfigurationError(RevisionPlatformException):
    """Raised when there's a configuration problem."""
    pass


class AgentNotConfiguredError(ConfigurationError):
    """Raised when the real agent is requested without project/agent ids."""

    def __init__(self) -> None:
        super().__init__(
            "Conversational agent is not configured. "
            "Set GOOGLE_CLOUD_PROJECT and VERTEX_AGENT_ID to enable it."
        )
