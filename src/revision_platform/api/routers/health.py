"""Health check API routes."""

from fastapi import APIRouter

from revision_platform.api.schemas.common import HealthResponse
from revision_platform.shared.config import get_settings
from revision_platform.shared.datetime_utils import utc_now_iso

router = APIRouter()


@router.get(
    "",
    response_model=HealthResponse,
    summary="Basic health check",
    description="Simple health check endpoint.",
)
async def health_check() -> HealthResponse:
    return HealthResponse(
        status="ok",
        timestamp=utc_now_iso(),
        service=get_settings().service_name,
    )
