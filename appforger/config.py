"""Application configuration with pydantic-settings.

Requires: DATABASE_URL
Required for forging: GITHUB_TOKEN (or GITHUB_PAT), GITHUB_OWNER
Optional: OPENAI_API_KEY (AI generation), VERCEL_TOKEN / VERCEL_TEAM_ID (web deploys)

Usage:
    from appforger.config import get_settings

    settings = get_settings()
"""

from functools import lru_cache
from typing import Literal

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """AppForger settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # === Required ===

    database_url: str = Field(
        ...,
        description="Async SQLAlchemy connection URL",
        examples=["postgresql+asyncpg://user:pass@db:5432/appforger"],
    )

    # === Git hosting (required to forge, checked per request) ===

    github_token: str | None = Field(
        default=None,
        validation_alias=AliasChoices("GITHUB_TOKEN", "GITHUB_PAT"),
        description="Bearer token used for every GitHub API call",
    )
    github_owner: str | None = Field(
        default=None,
        description="Account that owns forged repositories",
    )
    github_api_url: str = Field(default="https://api.github.com")
    github_api_version: str = Field(default="2022-11-28")

    # === Deployment platform (optional) ===

    vercel_token: str | None = Field(default=None, description="Vercel API token")
    vercel_team_id: str | None = Field(
        default=None,
        description="Team scope appended as ?teamId= to every Vercel request",
    )
    vercel_api_url: str = Field(default="https://api.vercel.com")

    # === AI generation (optional) ===

    openai_api_key: str | None = Field(default=None, description="OpenAI API key")
    openai_model: str = Field(default="gpt-4o")
    openai_temperature: float = Field(default=0.7, ge=0.0, le=2.0)
    openai_max_tokens: int = Field(default=16000, ge=1)

    # === Forge pipeline ===

    repo_name_prefix: str = Field(default="appforger")
    commit_settle_seconds: float = Field(
        default=2.0,
        ge=0.0,
        description="Pause between repository creation and the first commit",
    )

    # === Logging ===

    service_name: str = Field(default="appforger")
    log_format: Literal["json", "console"] = Field(default="console")
    log_level: str = Field(default="INFO")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure log level is valid."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper_v = v.upper()
        if upper_v not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return upper_v

    @property
    def github_configured(self) -> bool:
        return bool(self.github_token and self.github_owner)

    @property
    def vercel_configured(self) -> bool:
        return bool(self.vercel_token)

    @property
    def openai_configured(self) -> bool:
        return bool(self.openai_api_key)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Validates required env vars on first call.
    Raises ValidationError if DATABASE_URL is missing.
    """
    return Settings()


class ConfigurationError(RuntimeError):
    """A credential or setting required by the requested operation is missing."""
