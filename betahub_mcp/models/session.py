# Copyright (c) 2025-2026 OptimNow. All Rights Reserved.
# Licensed under the Apache License, Version 2.0.
# See LICENSE file in the project root for full license information.

"""Data models for the authenticated session."""

from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from .enums import TokenKind

PERSONAL_ACCESS_TOKEN_PREFIX = "pat-"
PROJECT_TOKEN_PREFIX = "tkn-"


class User(BaseModel):
    """A BetaHub user as embedded in other resources."""

    model_config = ConfigDict(extra="ignore")

    id: Optional[Union[int, str]] = Field(default=None, description="User ID")
    name: Optional[str] = Field(default=None, description="Display name")
    email: Optional[str] = Field(default=None, description="Email address")
    avatar_url: Optional[str] = Field(default=None, description="Avatar image URL")


class TokenProject(BaseModel):
    """The project a project-scoped token belongs to."""

    model_config = ConfigDict(extra="ignore")

    id: Optional[Union[int, str]] = None
    name: Optional[str] = None


class TokenInfo(BaseModel):
    """Payload returned by the ``auth/verify`` endpoint."""

    model_config = ConfigDict(extra="ignore")

    valid: bool = Field(default=False, description="Whether the token is valid")
    token_type: Optional[str] = Field(
        default=None,
        description="personal_access_token, project_auth_token or jwt",
    )
    user: Optional[User] = None
    project: Optional[TokenProject] = None
    expires_at: Optional[str] = Field(default=None, description="Token expiry timestamp")
    error: Optional[str] = Field(default=None, description="Service-provided error text")


def token_kind_for(token: str) -> TokenKind:
    """Classify a token by its prefix."""
    if token.startswith(PERSONAL_ACCESS_TOKEN_PREFIX):
        return TokenKind.PERSONAL_ACCESS
    if token.startswith(PROJECT_TOKEN_PREFIX):
        return TokenKind.PROJECT
    return TokenKind.BEARER


class Session(BaseModel):
    """The validated credential, created once at startup and never mutated."""

    model_config = ConfigDict(frozen=True)

    token: str = Field(description="The raw token string", repr=False)
    kind: TokenKind = Field(description="Token kind derived from its prefix")
    token_info: Optional[TokenInfo] = Field(
        default=None, description="Identity returned by token validation"
    )

    @property
    def token_type(self) -> Optional[str]:
        return self.token_info.token_type if self.token_info else None

    @property
    def expires_at(self) -> Optional[str]:
        return self.token_info.expires_at if self.token_info else None
