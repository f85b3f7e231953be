"""Configuration management for Subaddress Labeler.

This module handles application configuration using Pydantic settings.
Configuration can be loaded from environment variables or .env files.
"""

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings with environment variable support.

    All settings can be overridden via environment variables with
    the SUBADDRESS_LABELER_ prefix (e.g., SUBADDRESS_LABELER_LOG_LEVEL).
    List values are given as JSON, e.g.
    SUBADDRESS_LABELER_TRUSTED_CREATOR_DOMAINS='["example.com"]'.
    """

    model_config = SettingsConfigDict(
        env_prefix="SUBADDRESS_LABELER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Labeling Configuration
    trusted_creator_domains: list[str] = Field(
        default_factory=lambda: ["bswck.dev"],
        description=(
            "Sender domains allowed to create missing labels. Senders from any "
            "other domain can only match labels that already exist."
        ),
    )
    inbox_query: str = Field(
        default="in:inbox",
        description="Gmail search query selecting the threads to label",
    )
    max_threads: int | None = Field(
        default=None,
        description="Maximum number of threads to process per run (default: all)",
    )

    # Gmail Configuration
    gmail_credentials_path: Path = Field(
        default=Path("credentials.json"),
        description="Path to Gmail API credentials file",
    )
    gmail_token_path: Path = Field(
        default=Path("token.json"),
        description="Path to Gmail API token file",
    )
    gmail_scope: str = Field(
        default="https://www.googleapis.com/auth/gmail.modify",
        description=(
            "OAuth scope used for Gmail access. Labeling threads and creating "
            "labels needs gmail.modify."
        ),
    )

    # Application Configuration
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    debug: bool = Field(
        default=False,
        description="Enable debug mode",
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings.

    Returns:
        Settings: Application settings instance.
    """
    return Settings()
