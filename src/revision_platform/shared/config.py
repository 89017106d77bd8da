"""Application configuration loaded from environment variables."""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_DATA_DIR = Path(__file__).resolve().parent.parent / "data"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Environment
    environment: Literal["development", "staging", "production"] = "development"
    log_level: str = "INFO"
    service_name: str = "Revision Platform API"
    version: str = "1.0.0"

    # Conversational agent (Dialogflow CX)
    google_cloud_project: str | None = None
    google_cloud_location: str = "global"
    vertex_agent_id: str | None = None
    agent_language_code: str = "en"

    # Fixture data
    data_dir: Path = DEFAULT_DATA_DIR

    # API Settings
    api_host: str = "0.0.0.0"
    api_port: int = 3001

    # CORS Settings
    # Comma-separated list of allowed origins, "*" for any
    cors_origins: str = "*"

    # Wizard client settings
    api_base_url: str = "http://localhost:3001"
    api_timeout_seconds: float = 60.0

    @field_validator("google_cloud_project", "vertex_agent_id", mode="before")
    @classmethod
    def strip_quotes(cls, value: str | None) -> str | None:
        """Remove double quotes that often leak in from copied .env values."""
        if isinstance(value, str):
            value = value.replace('"', "").strip()
            return value or None
        return value

    @field_validator("google_cloud_location", mode="before")
    @classmethod
    def default_location(cls, value: str | None) -> str:
        if isinstance(value, str):
            value = value.replace('"', "").strip()
        return value or "global"

    @property
    def is_development(self) -> bool:
        return self.environment == "development"

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @property
    def agent_configured(self) -> bool:
        """Whether enough agent configuration exists to call the real agent."""
        return bool(self.google_cloud_project and self.vertex_agent_id)

    @property
    def cors_origins_list(self) -> list[str]:
        """Get CORS origins as a list."""
        origins = [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]
        return origins or ["*"]


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
