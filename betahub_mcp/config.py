# Copyright (c) 2025-2026 OptimNow. All Rights Reserved.
# Licensed under the Apache License, Version 2.0.
# See LICENSE file in the project root for full license information.

"""Configuration management for the BetaHub MCP Server.

This module handles loading and validating configuration from environment
variables with sensible defaults.
"""

from typing import Optional

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from . import __version__

DEFAULT_API_BASE_URL = "https://app.betahub.io/"


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings have sensible defaults. The BetaHub token itself is not a
    setting: it is read by the auth service from the environment variable
    named by ``token_env_var`` (or from ``--token=``).
    """

    # BetaHub API
    api_base_url: str = Field(
        default=DEFAULT_API_BASE_URL,
        description="Base URL of the BetaHub API",
        validation_alias=AliasChoices("BETAHUB_API_BASE", "BETAHUB_API_BASE_URL"),
    )
    user_agent: str = Field(
        default="betahub-mcp-server/1.0",
        description="User-Agent header sent with every request",
        validation_alias="BETAHUB_USER_AGENT",
    )
    token_env_var: str = Field(
        default="BETAHUB_TOKEN",
        description="Name of the environment variable holding the BetaHub token",
        validation_alias="BETAHUB_TOKEN_ENV_VAR",
    )

    # Server identity
    server_name: str = Field(
        default="betahub-mcp-server",
        description="Name advertised to the MCP host",
    )
    server_version: str = Field(
        default=__version__,
        description="Version advertised to the MCP host",
    )

    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR)",
        validation_alias="LOG_LEVEL",
    )

    model_config = SettingsConfigDict(
        env_prefix="",  # No prefix for environment variables
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    @field_validator("api_base_url")
    @classmethod
    def _ensure_trailing_slash(cls, value: str) -> str:
        value = value.strip()
        if not value:
            return DEFAULT_API_BASE_URL
        return value if value.endswith("/") else f"{value}/"


def get_settings() -> Settings:
    """
    Get application settings.

    Loads settings from environment variables and .env file.

    Returns:
        Settings instance with all configuration values
    """
    return Settings()


# Global settings instance (lazy loaded)
_settings: Optional[Settings] = None


def settings() -> Settings:
    """
    Get the global settings instance.

    Creates the settings instance on first call and caches it.

    Returns:
        Global Settings instance
    """
    global _settings
    if _settings is None:
        _settings = get_settings()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next call re-reads the environment."""
    global _settings
    _settings = None


def get_api_url(endpoint: str, base_url: Optional[str] = None) -> str:
    """
    Resolve an API endpoint against the configured base URL.

    Absolute ``http``/``https`` endpoints are returned unchanged. A single
    leading slash is dropped so ``/projects.json`` and ``projects.json``
    resolve to the same URL.

    Args:
        endpoint: Relative endpoint (may carry a query string) or absolute URL
        base_url: Base URL to resolve against (defaults to the global settings)

    Returns:
        Absolute request URL
    """
    if endpoint.startswith(("http://", "https://")):
        return endpoint

    base = base_url if base_url is not None else settings().api_base_url
    clean_endpoint = endpoint[1:] if endpoint.startswith("/") else endpoint
    return f"{base}{clean_endpoint}"
