"""BetaHub API client module."""

from .betahub_client import (
    BetaHubClient,
    create_api_client,
    get_api_client,
    reset_api_client,
)

__all__ = ["BetaHubClient", "create_api_client", "get_api_client", "reset_api_client"]
