"""
Configuration settings for the quizzer CLI.

Uses Pydantic Settings for environment variable management with .env file support.
"""
from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="QUIZZER_",
        case_sensitive=False,
        extra="ignore",
    )

    # ========================================
    # Quiz content
    # ========================================
    load_default_quizzes: bool = Field(
        default=True,
        description="Seed the store with the built-in capital-city quizzes",
    )

    # ========================================
    # Play mode
    # ========================================
    random_seed: int | None = Field(
        default=None,
        description="Seed for the play-mode question order (None for random)",
    )

    # ========================================
    # Shell
    # ========================================
    prompt_text: str = Field(
        default="quiz > ",
        description="Prompt shown while waiting for a command",
    )
    credits_author: str = Field(
        default="ALVARO",
        description="Author name shown by the credits command",
    )

    # ========================================
    # Logging
    # ========================================
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="WARNING",
        description="Logging verbosity level",
    )
    log_file: str | None = Field(
        default=None,
        description="Log file path (None for stderr only)",
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
