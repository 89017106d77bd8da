"""FastAPI application setup and configuration."""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from revision_platform.api.middleware.error_handler import setup_exception_handlers
from revision_platform.api.middleware.logging import RequestLoggingMiddleware, setup_logging
from revision_platform.api.schemas.common import ServiceInfoResponse
from revision_platform.shared.config import get_settings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager.

    Logs the effective configuration on startup.
    """
    settings = get_settings()
    logger.info(f"{settings.service_name} starting ({settings.environment})")
    if not settings.agent_configured:
        logger.warning("Conversational agent not configured, AI routes will return mock content")
    yield
    logger.info(f"{settings.service_name} shutting down")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance
    """
    settings = get_settings()
    setup_logging()

    application = FastAPI(
        title=settings.service_name,
        description="""
        Revision platform API:
        - Subjects and chapters from static fixtures
        - AI-generated revision notes and practice assessments
        - Chapter-scoped chat with a conversational agent
        """,
        version=settings.version,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    cors_origins = settings.cors_origins_list
    application.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins,
        allow_credentials="*" not in cors_origins,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization", "X-Request-ID"],
    )

    setup_exception_handlers(application)

    application.add_middleware(RequestLoggingMiddleware)

    from revision_platform.api.routers import (
        ai_router,
        chapters_router,
        health_router,
        subjects_router,
    )

    application.include_router(
        health_router,
        prefix="/api/health",
        tags=["Health"],
    )
    application.include_router(
        subjects_router,
        prefix="/api/subjects",
        tags=["Subjects"],
    )
    application.include_router(
        chapters_router,
        prefix="/api/chapters",
        tags=["Chapters"],
    )
    application.include_router(
        ai_router,
        prefix="/api/ai",
        tags=["AI"],
    )

    @application.get(
        "/",
        response_model=ServiceInfoResponse,
        tags=["Health"],
        summary="Service information",
    )
    async def root() -> ServiceInfoResponse:
        return ServiceInfoResponse(
            message=settings.service_name,
            version=settings.version,
            endpoints={
                "health": "/api/health",
                "subjects": "/api/subjects",
                "chapters": "/api/chapters/:subjectId",
                "aiGenerate": "/api/ai/generate",
                "aiChat": "/api/ai/chat",
            },
        )

    return application


# Create app instance
app = create_app()
