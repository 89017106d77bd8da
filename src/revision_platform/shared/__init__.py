"""Shared utilities and common code."""

from revision_platform.shared.config import Settings, get_settings
from revision_platform.shared.models import BaseSchema, LearningMode, MessageRole

__all__ = [
    # Config
    "Settings",
    "get_settings",
    # Models
    "BaseSchema",
    # Enums
    "LearningMode",
    "MessageRole",
]
