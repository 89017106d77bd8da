"""Base models and common types used across modules."""

from enum import Enum

from pydantic import BaseModel, ConfigDict


class BaseSchema(BaseModel):
    """Base schema with common configuration."""

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
    )


# Common enums and types


class LearningMode(str, Enum):
    """Learning modes offered by the wizard."""

    REVISION = "revision"
    ASSESSMENT = "assessment"
    CHAT = "chat"

    @classmethod
    def values(cls) -> list[str]:
        return [mode.value for mode in cls]

    @classmethod
    def parse(cls, value: "str | LearningMode") -> "LearningMode":
        """Parse a mode, raising ValueError for unknown values."""
        if isinstance(value, cls):
            return value
        return cls(str(value).strip().lower())

    @classmethod
    def coerce(cls, value: "str | LearningMode", default: "LearningMode | None" = None) -> "LearningMode":
        """Parse a mode, falling back to ``default`` (revision) for unknown values."""
        try:
            return cls.parse(value)
        except ValueError:
            return default or cls.REVISION

    @property
    def label(self) -> str:
        return self.value.capitalize()


class MessageRole(str, Enum):
    """Author of a chat message."""

    USER = "user"
    ASSISTANT = "assistant"
