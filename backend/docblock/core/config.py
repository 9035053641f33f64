"""Application configuration and settings management."""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_prefix="DOCBLOCK_", extra="ignore")

    app_name: str = Field(default="Doc Block Parser API", description="Human readable application name.")
    environment: Literal["local", "development", "staging", "production"] = Field(
        default="local",
        description="Deployment environment name.",
    )
    log_level: str = Field(default="INFO", description="Root logging level for the service.")
    include_tokens: bool = Field(
        default=False,
        description="Return the raw token stream in parse responses unless the request overrides it.",
    )
    max_upload_bytes: int = Field(
        default=2 * 1024 * 1024,
        description="Largest source file accepted by the upload endpoint.",
    )
    allowed_suffixes: list[str] = Field(
        default=[".php", ".inc", ".java", ".js", ".ts", ".c", ".h", ".cpp", ".hpp", ".cs", ".txt"],
        description="File suffixes accepted by the upload endpoint.",
    )


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings."""

    return Settings()


settings = get_settings()
