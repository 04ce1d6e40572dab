"""Services for the BetaHub MCP Server."""

from .auth_service import (
    format_auth_header,
    get_session,
    initialize,
    is_authenticated,
    load_credential,
    reset_session,
    validate_credential,
)

__all__ = [
    "format_auth_header",
    "get_session",
    "initialize",
    "is_authenticated",
    "load_credential",
    "reset_session",
    "validate_credential",
]
