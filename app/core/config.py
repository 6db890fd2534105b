"""
Configuration management using Pydantic Settings.
"""

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # API Settings
    app_name: str = "APOD Explorer API"
    app_version: str = "0.1.0"
    debug: bool = False
    api_prefix: str = "/api"
    log_level: str = "INFO"

    # CORS Settings - accepts comma-separated string
    allowed_origins: str = "http://localhost:3000"

    def get_allowed_origins(self) -> list[str]:
        """Get allowed origins as a list."""
        return [origin.strip() for origin in self.allowed_origins.split(",") if origin.strip()]

    # NASA APOD Settings
    nasa_api_key: str | None = None
    nasa_api_url: str = "https://api.nasa.gov/planetary/apod"

    # Explanation Source Settings
    explanation_provider: Literal["gemini", "bedrock"] = "gemini"
    gemini_api_key: str | None = None
    gemini_model: str = "gemini-1.5-flash"

    # AWS Bedrock Settings (explanation_provider=bedrock)
    aws_region: str = "us-east-2"
    aws_access_key_id: str | None = None
    aws_secret_access_key: str | None = None
    bedrock_model_id: str = "us.anthropic.claude-3-5-sonnet-20241022-v2:0"

    # None means outbound calls never time out
    upstream_timeout: float | None = None

    # Client Settings
    gateway_url: str = "http://localhost:8000"


@lru_cache
def get_settings() -> Settings:
    """Settings dependency; override in tests via app.dependency_overrides."""
    return Settings()
