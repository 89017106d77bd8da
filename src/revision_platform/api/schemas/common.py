"""Common API response schemas."""

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(
        ...,
        description="Overall health status",
    )
    timestamp: str = Field(
        ...,
        description="Server time (ISO 8601, UTC)",
    )
    service: str = Field(
        ...,
        description="Service name",
    )


class ServiceInfoResponse(BaseModel):
    """Root endpoint response listing the API entry points."""

    message: str
    version: str
    endpoints: dict[str, str]
