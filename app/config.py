# =============================================================================
# app/config.py - Application Settings
# =============================================================================
# This module loads configuration from environment variables using pydantic-settings.
# It provides a single Settings class with all configuration values.
#
# Usage:
#   from app.config import get_settings
#   print(get_settings().API_TOKEN)
#
# Environment variables are loaded from:
# 1. System environment variables
# 2. .env file in project root (if exists)
# =============================================================================

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Every setting has a development default, so the API starts with no
    environment at all.
    """

    # -------------------------------------------------------------------------
    # Security
    # -------------------------------------------------------------------------

    API_TOKEN: str = Field(
        default="my-secret-token",
        min_length=1,
        description="Bearer token every protected request must present"
    )

    # Paths reachable without a token (comma-separated string that gets parsed)
    PUBLIC_PATHS: str = Field(
        default="/",
        description="Paths exempt from token validation (comma-separated)"
    )

    # -------------------------------------------------------------------------
    # Store
    # -------------------------------------------------------------------------

    SEED_USERS: bool = Field(
        default=True,
        description="Start the store with the Alice and Bob sample records"
    )

    # -------------------------------------------------------------------------
    # Application Settings
    # -------------------------------------------------------------------------

    ENVIRONMENT: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Current environment"
    )

    DEBUG: bool = Field(
        default=False,
        description="Enable debug mode (verbose logging, auto-reload)"
    )

    API_HOST: str = Field(
        default="0.0.0.0",
        description="Host to bind the API server to"
    )

    API_PORT: int = Field(
        default=8000,
        ge=1,
        le=65535,
        description="Port for the API server"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        case_sensitive=True,
    )

    # -------------------------------------------------------------------------
    # Computed Properties
    # -------------------------------------------------------------------------

    @property
    def public_paths_list(self) -> list[str]:
        """
        Parse PUBLIC_PATHS string into a list.

        Example: "/, /health" -> ["/", "/health"]
        """
        return [path.strip() for path in self.PUBLIC_PATHS.split(",") if path.strip()]


@lru_cache
def get_settings() -> Settings:
    """
    Get cached Settings instance.

    The environment and .env file are read and validated only once.
    """
    return Settings()

