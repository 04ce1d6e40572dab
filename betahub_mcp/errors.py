# Copyright (c) 2025-2026 OptimNow. All Rights Reserved.
# Licensed under the Apache License, Version 2.0.
# See LICENSE file in the project root for full license information.

"""Error taxonomy shared by the auth service, the API client and the tools."""

from typing import Any, Optional


class BetaHubError(Exception):
    """Base exception for all BetaHub MCP Server errors."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class AuthenticationError(BetaHubError):
    """Raised when the credential is missing or invalid, or auth is not initialized."""

    def __init__(self, message: str, status_code: int = 401):
        super().__init__(message, status_code)


class ApiError(BetaHubError):
    """Raised when a BetaHub API call fails at the HTTP or transport level."""

    def __init__(self, message: str, status_code: int, endpoint: Optional[str] = None):
        super().__init__(message, status_code)
        self.endpoint = endpoint


class ValidationError(BetaHubError):
    """Raised when tool input fails validation, before any network call."""

    def __init__(self, message: str, field: Optional[str] = None, value: Any = None):
        super().__init__(message, 400)
        self.field = field
        self.value = value


class NotFoundError(ApiError):
    """The requested resource does not exist (HTTP 404)."""

    def __init__(self, resource: str, resource_id: Optional[str] = None):
        message = f"{resource} {resource_id} not found" if resource_id else f"{resource} not found"
        super().__init__(message, 404)
        self.resource = resource
        self.resource_id = resource_id


class AccessDeniedError(ApiError):
    """The token may not access the requested resource (HTTP 403)."""

    def __init__(self, resource: str, resource_id: Optional[str] = None):
        message = (
            f"Access denied to {resource} {resource_id}"
            if resource_id
            else f"Access denied to {resource}"
        )
        super().__init__(message, 403)
        self.resource = resource
        self.resource_id = resource_id


class ToolExecutionError(BetaHubError):
    """Generic tool failure wrapping an API error that is neither 404 nor 403."""

    def __init__(self, operation: str, cause: BaseException):
        super().__init__(
            f"Failed to {operation}: {format_error_message(cause)}",
            getattr(cause, "status_code", None),
        )
        self.operation = operation


def format_error_message(error: Any) -> str:
    """Return a printable message for an exception or any other value."""
    if isinstance(error, BetaHubError):
        return error.message
    return str(error)
