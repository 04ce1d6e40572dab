# Copyright (c) 2025-2026 OptimNow. All Rights Reserved.
# Licensed under the Apache License, Version 2.0.
# See LICENSE file in the project root for full license information.

"""Token loading, validation and the process-wide session.

The session is established exactly once, at startup, before the MCP server
accepts tool calls. It is read-only afterwards: there is no re-validation and
no token rotation.
"""

import logging
import os
import sys
from typing import Mapping, Optional, Sequence

import httpx

from ..config import Settings, get_api_url, settings as get_default_settings
from ..errors import AuthenticationError
from ..models.session import (
    PERSONAL_ACCESS_TOKEN_PREFIX,
    PROJECT_TOKEN_PREFIX,
    Session,
    TokenInfo,
    token_kind_for,
)

logger = logging.getLogger(__name__)

TOKEN_ARG_PREFIX = "--token="
VERIFY_ENDPOINT = "auth/verify"

_session: Optional[Session] = None


def load_credential(
    argv: Optional[Sequence[str]] = None,
    environ: Optional[Mapping[str, str]] = None,
    settings: Optional[Settings] = None,
) -> Optional[str]:
    """
    Resolve the BetaHub token.

    A ``--token=<value>`` command-line argument takes precedence over the
    environment variable named by ``settings.token_env_var``.

    Args:
        argv: Command-line arguments, excluding the program name
            (defaults to ``sys.argv[1:]``)
        environ: Environment mapping (defaults to ``os.environ``)
        settings: Application settings

    Returns:
        The token, or None when neither source provides one
    """
    settings = settings or get_default_settings()
    argv = sys.argv[1:] if argv is None else argv
    environ = os.environ if environ is None else environ

    for arg in argv:
        if arg.startswith(TOKEN_ARG_PREFIX):
            token = arg[len(TOKEN_ARG_PREFIX):]
            if token:
                return token
            break

    return environ.get(settings.token_env_var) or None


def format_auth_header(token: str) -> str:
    """
    Build the Authorization header value for a token.

    Personal access tokens (``pat-``) and structured tokens containing a
    ``.`` (JWT-style) use the Bearer scheme. Project tokens (``tkn-``) are
    sent verbatim. Anything else defaults to Bearer.
    """
    if token.startswith(PERSONAL_ACCESS_TOKEN_PREFIX) or "." in token:
        return f"Bearer {token}"
    if token.startswith(PROJECT_TOKEN_PREFIX):
        return token
    return f"Bearer {token}"


async def validate_credential(
    token: str,
    settings: Optional[Settings] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> TokenInfo:
    """
    Verify a token against the BetaHub ``auth/verify`` endpoint.

    Args:
        token: Token to verify
        settings: Application settings
        transport: Optional httpx transport (used by tests)

    Returns:
        TokenInfo describing the token's identity

    Raises:
        AuthenticationError: If the service rejects the token or cannot be reached
    """
    settings = settings or get_default_settings()
    url = get_api_url(VERIFY_ENDPOINT, settings.api_base_url)
    headers = {
        "User-Agent": settings.user_agent,
        "Authorization": format_auth_header(token),
        "Content-Type": "application/json",
    }

    try:
        async with httpx.AsyncClient(transport=transport) as client:
            response = await client.post(url, headers=headers)
    except httpx.HTTPError as e:
        raise AuthenticationError(f"Token validation request failed: {e}") from e

    if not response.is_success:
        raise AuthenticationError(
            f"Token validation failed with status {response.status_code}"
        )

    try:
        token_info = TokenInfo.model_validate(response.json())
    except ValueError as e:
        raise AuthenticationError(f"Token validation returned an invalid payload: {e}") from e

    if not token_info.valid:
        raise AuthenticationError(token_info.error or "Token validation failed")

    return token_info


async def initialize(
    settings: Optional[Settings] = None,
    argv: Optional[Sequence[str]] = None,
    environ: Optional[Mapping[str, str]] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> Session:
    """
    Load and validate the token, then store the process-wide session.

    Subsequent calls return the stored session without re-validating.

    Raises:
        AuthenticationError: If no token is configured or validation fails
    """
    global _session
    if _session is not None:
        logger.warning("Authentication already initialized; reusing the existing session")
        return _session

    settings = settings or get_default_settings()
    token = load_credential(argv=argv, environ=environ, settings=settings)
    if not token:
        raise AuthenticationError(
            f"{settings.token_env_var} environment variable is required. "
            "Set it to your BetaHub Personal Access Token (pat-xxxxx) "
            "or Project Auth Token (tkn-xxxxx)"
        )

    logger.info("Validating BetaHub token...")
    token_info = await validate_credential(token, settings=settings, transport=transport)

    _session = Session(token=token, kind=token_kind_for(token), token_info=token_info)

    logger.info(f"Token validated successfully (type: {token_info.token_type})")
    if token_info.user:
        logger.info(f"Authenticated as {token_info.user.name} ({token_info.user.email})")
    if token_info.project:
        logger.info(f"Token scoped to project {token_info.project.name}")
    if token_info.expires_at:
        logger.info(f"Token expires at {token_info.expires_at}")

    return _session


def get_session() -> Session:
    """
    Return the process-wide session.

    Raises:
        AuthenticationError: If ``initialize`` has not completed
    """
    if _session is None:
        raise AuthenticationError("Authentication not initialized")
    return _session


def is_authenticated() -> bool:
    """True once a validated session has been stored."""
    return _session is not None


def reset_session() -> None:
    """Forget the stored session. Intended for tests."""
    global _session
    _session = None
