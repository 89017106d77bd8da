"""AI generation and chat API schemas.

Request fields are optional at the schema level: presence is checked by
the routes so that a missing field produces a 400 with the field list.
"""

from pydantic import BaseModel, ConfigDict, Field

from revision_platform.shared.models import BaseSchema


class ChatMessage(BaseModel):
    """One message of the client-side chat history."""

    model_config = ConfigDict(extra="allow")

    role: str = Field(
        default="",
        description="Message author, usually user or assistant",
    )
    content: str = Field(
        default="",
        description="Message text",
    )
    timestamp: str | None = Field(
        default=None,
        description="Client timestamp",
    )
    error: bool | None = Field(
        default=None,
        description="Whether the message reports a client-side error",
    )


class GenerateRequest(BaseModel):
    """Initial content generation request."""

    mode: str | None = Field(
        default=None,
        description="Learning mode (revision, assessment, chat)",
    )
    subject: str | None = Field(
        default=None,
        description="Subject name",
    )
    chapter: str | None = Field(
        default=None,
        description="Chapter name",
    )
    request: str | None = Field(
        default=None,
        description="Free-text request; a default is derived when omitted",
    )


class ChatRequest(BaseModel):
    """Chat turn request."""

    mode: str | None = Field(default=None, description="Learning mode")
    subject: str | None = Field(default=None, description="Subject name")
    chapter: str | None = Field(default=None, description="Chapter name")
    message: str | None = Field(default=None, description="Student message")
    history: list[ChatMessage] | None = Field(
        default=None,
        description="Earlier messages of this chat (not sent to the agent)",
    )


class GenerationMetadata(BaseModel):
    """Echo of the generation context."""

    mode: str
    subject: str
    chapter: str
    timestamp: str


class GenerateResponse(BaseModel):
    """Generated content response."""

    content: str = Field(
        ...,
        description="Generated markdown content",
    )
    metadata: GenerationMetadata


class ChatResponse(BaseModel):
    """Chat reply response."""

    content: str = Field(
        ...,
        description="Assistant reply",
    )
    timestamp: str


class AITestResponse(BaseSchema):
    """AI service status response."""

    message: str
    vertex_ai_configured: bool = Field(
        ...,
        alias="vertexAIConfigured",
        description="Whether a real agent is configured",
    )
    timestamp: str
