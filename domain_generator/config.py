"""
Centralized configuration using Pydantic Settings.

All environment variables are loaded and validated here.
"""

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Gemini
    gemini_api_key: str = Field(
        default="",
        validation_alias=AliasChoices("gemini_api_key", "api_key"),
    )
    gemini_model: str = "gemini-2.5-pro"
    require_api_key: bool = True  # Abort startup when the key is missing

    # Logging
    log_level: str = "INFO"
    json_logs: bool = True  # False for colored dev output

    # CORS (the web client may be served from another origin)
    cors_origins: list[str] = ["*"]


# Global settings instance
settings = Settings()
