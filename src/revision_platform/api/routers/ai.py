"""AI content generation and chat routes."""

import logging
from typing import Optional

from fastapi import APIRouter
from pydantic import BaseModel

from revision_platform.api.dependencies import AgentServiceDep
from revision_platform.api.middleware.error_handler import APIError
from revision_platform.api.schemas.ai import (
    AITestResponse,
    ChatRequest,
    ChatResponse,
    GenerateRequest,
    GenerateResponse,
    GenerationMetadata,
)
from revision_platform.modules.content import default_request
from revision_platform.shared.datetime_utils import utc_now_iso
from revision_platform.shared.exceptions import InvalidModeError, MissingFieldsError
from revision_platform.shared.models import LearningMode

logger = logging.getLogger(__name__)

router = APIRouter()

GENERATE_FIELDS = ["mode", "subject", "chapter"]
CHAT_FIELDS = ["mode", "subject", "chapter", "message"]


def require_fields(payload: BaseModel, fields: list[str]) -> None:
    """Reject payloads with absent, null or empty required fields.

    Raises:
        MissingFieldsError: Listing every required field (400)
    """
    missing = [name for name in fields if not getattr(payload, name)]
    if missing:
        raise MissingFieldsError(fields, missing)


def parse_mode(value: str) -> LearningMode:
    """Parse the learning mode.

    Raises:
        InvalidModeError: If the mode is not supported (400)
    """
    try:
        return LearningMode.parse(value)
    except ValueError as e:
        raise InvalidModeError(value, LearningMode.values()) from e


@router.post(
    "/generate",
    response_model=GenerateResponse,
    summary="Generate study content",
    description="Generate revision notes, assessment questions or a chat opener.",
    responses={400: {"description": "Missing required fields"}},
)
async def generate(
    agent: AgentServiceDep, payload: Optional[GenerateRequest] = None
) -> GenerateResponse:
    payload = payload or GenerateRequest()
    require_fields(payload, GENERATE_FIELDS)
    mode = parse_mode(payload.mode)

    logger.info(f"Generating {mode.value} content for {payload.subject} - {payload.chapter}")

    try:
        content = await agent.generate(
            mode=mode,
            subject=payload.subject,
            chapter=payload.chapter,
            request=payload.request or default_request(mode, payload.subject, payload.chapter),
        )
    except Exception as e:
        logger.error(f"Error generating AI content: {e}")
        raise APIError("Failed to generate content", message=str(e)) from e

    return GenerateResponse(
        content=content,
        metadata=GenerationMetadata(
            mode=mode.value,
            subject=payload.subject,
            chapter=payload.chapter,
            timestamp=utc_now_iso(),
        ),
    )


@router.post(
    "/chat",
    response_model=ChatResponse,
    summary="Chat about a chapter",
    description="Answer a student's question in the context of a subject chapter.",
    responses={400: {"description": "Missing required fields"}},
)
async def chat(agent: AgentServiceDep, payload: Optional[ChatRequest] = None) -> ChatResponse:
    payload = payload or ChatRequest()
    require_fields(payload, CHAT_FIELDS)
    mode = parse_mode(payload.mode)

    logger.info(f"Processing chat message for {payload.subject} - {payload.chapter}")

    try:
        content = await agent.chat(
            mode=mode,
            subject=payload.subject,
            chapter=payload.chapter,
            message=payload.message,
            history=payload.history or [],
        )
    except Exception as e:
        logger.error(f"Error processing chat message: {e}")
        raise APIError("Failed to process message", message=str(e)) from e

    return ChatResponse(content=content, timestamp=utc_now_iso())


@router.get(
    "/test",
    response_model=AITestResponse,
    summary="AI service status",
    description="Report whether a real conversational agent is configured.",
)
async def ai_status(agent: AgentServiceDep) -> AITestResponse:
    return AITestResponse(
        message="AI service is running",
        vertex_ai_configured=agent.is_configured,
        timestamp=utc_now_iso(),
    )
