"""API routers package."""

from revision_platform.api.routers.ai import router as ai_router
from revision_platform.api.routers.chapters import router as chapters_router
from revision_platform.api.routers.health import router as health_router
from revision_platform.api.routers.subjects import router as subjects_router

__all__ = [
    "ai_router",
    "chapters_router",
    "health_router",
    "subjects_router",
]
