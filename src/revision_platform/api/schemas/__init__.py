"""API schemas package."""

from revision_platform.api.schemas.ai import (
    AITestResponse,
    ChatMessage,
    ChatRequest,
    ChatResponse,
    GenerateRequest,
    GenerateResponse,
    GenerationMetadata,
)
from revision_platform.api.schemas.common import HealthResponse, ServiceInfoResponse
from revision_platform.api.schemas.fixtures import ChapterResponse, SubjectResponse

__all__ = [
    # AI
    "AITestResponse",
    "ChatMessage",
    "ChatRequest",
    "ChatResponse",
    "GenerateRequest",
    "GenerateResponse",
    "GenerationMetadata",
    # Common
    "HealthResponse",
    "ServiceInfoResponse",
    # Fixtures
    "ChapterResponse",
    "SubjectResponse",
]
