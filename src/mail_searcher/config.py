"""Configuration management for Mail Searcher.

This module handles application configuration using Pydantic settings.
Configuration can be loaded from environment variables or .env files.
"""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings with environment variable support.

    All settings can be overridden via environment variables with
    the MAIL_SEARCHER_ prefix (e.g., MAIL_SEARCHER_SOURCE_PATH).
    """

    model_config = SettingsConfigDict(
        env_prefix="MAIL_SEARCHER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Source file configuration
    source_path: Path = Field(
        default=Path("correos.txt"),
        description="Path to the delimited text file holding message records",
    )
    field_delimiter: str = Field(
        default=";",
        description="Single character separating sender, subject, body and date",
    )
    source_encoding: str = Field(
        default="utf-8",
        description="Text encoding of the source file",
    )
    load_seed_records: bool = Field(
        default=True,
        description="Index the built-in sample records before reading the source file",
    )

    # Presentation
    color: bool = Field(
        default=True,
        description="Use ANSI colors when rendering screens",
    )

    # Application Configuration
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="WARNING",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    debug: bool = Field(
        default=False,
        description="Enable debug mode",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def uppercase_log_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings.

    Returns:
        Settings: Application settings instance.
    """
    return Settings()
