"""Environment-based application settings. Read-only; no business logic."""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    app_name: str = Field(default="text-chunker", description="Service name")
    environment: Literal["development", "staging", "production"] = Field(
        default="development", description="Runtime environment"
    )
    debug: bool = Field(default=False, description="Enable debug mode")
    log_level: str = Field(default="INFO", description="Log level name")

    # Server
    host: str = Field(default="0.0.0.0", description="Listen host")
    port: int = Field(default=8000, ge=1, le=65535, description="Listen port")

    # AWS Bedrock (model invocation demo). Credentials fall back to the boto3 chain when unset.
    aws_region: str = Field(default="eu-north-1", description="AWS region for Bedrock")
    aws_access_key_id: str | None = Field(default=None, description="AWS access key id")
    aws_secret_access_key: str | None = Field(default=None, description="AWS secret access key")
    aws_session_token: str | None = Field(default=None, description="AWS session token")
    bedrock_model_id: str = Field(default="eu.amazon.nova-pro-v1:0", description="Bedrock model id")
    bedrock_max_tokens: int = Field(default=500, ge=1, description="Maximum response length")
    bedrock_temperature: float = Field(default=0.5, ge=0.0, le=1.0, description="Sampling temperature")


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance. Use for app lifetime."""
    return Settings()
