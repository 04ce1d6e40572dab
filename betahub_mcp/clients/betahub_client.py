# Copyright (c) 2025-2026 OptimNow. All Rights Reserved.
# Licensed under the Apache License, Version 2.0.
# See LICENSE file in the project root for full license information.

"""Authenticated HTTP client for the BetaHub REST API."""

import json
import logging
from typing import Any, Optional

import httpx

from ..config import Settings, get_api_url, settings as get_default_settings
from ..errors import ApiError
from ..services.auth_service import format_auth_header, get_session

logger = logging.getLogger(__name__)


class BetaHubClient:
    """
    Thin wrapper around ``httpx.AsyncClient`` for BetaHub API calls.

    Every request carries the User-Agent and Authorization headers. HTTP
    failures and transport failures are both translated into ``ApiError``
    so callers only ever handle one exception type. There is no retry and
    no timeout beyond httpx's default.
    """

    def __init__(
        self,
        token: str,
        settings: Optional[Settings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize the client.

        Args:
            token: BetaHub token used for the Authorization header
            settings: Application settings (base URL, user agent)
            transport: Optional httpx transport (used by tests)
        """
        self._token = token
        self.settings = settings or get_default_settings()
        self._transport = transport

    def _build_headers(
        self, body: Any = None, extra: Optional[dict[str, str]] = None
    ) -> dict[str, str]:
        headers = {
            "User-Agent": self.settings.user_agent,
            "Authorization": format_auth_header(self._token),
        }
        if isinstance(body, (dict, list)):
            headers["Content-Type"] = "application/json"
        if extra:
            headers.update(extra)
        return headers

    async def request(
        self,
        endpoint: str,
        method: str = "GET",
        body: Any = None,
        headers: Optional[dict[str, str]] = None,
    ) -> Any:
        """
        Perform one authenticated request and return the decoded JSON body.

        Args:
            endpoint: Endpoint relative to the base URL, or an absolute URL
            method: HTTP method
            body: Request body; dicts and lists are sent as JSON
            headers: Extra headers, overriding the defaults

        Returns:
            Decoded JSON response

        Raises:
            ApiError: On non-2xx status (with that status) or transport
                failure (status 500, message prefixed with "Network error")
        """
        url = get_api_url(endpoint, self.settings.api_base_url)
        request_headers = self._build_headers(body, headers)

        content: Optional[bytes] = None
        if isinstance(body, (dict, list)):
            content = json.dumps(body).encode("utf-8")
        elif body is not None:
            content = body if isinstance(body, bytes) else str(body).encode("utf-8")

        logger.debug(f"{method} {endpoint}")

        try:
            async with httpx.AsyncClient(transport=self._transport) as client:
                response = await client.request(
                    method, url, headers=request_headers, content=content
                )
        except httpx.HTTPError as e:
            logger.warning(f"Network error calling {endpoint}: {e}")
            raise ApiError(f"Network error: {e}", 500, endpoint) from e

        if not response.is_success:
            logger.warning(f"{method} {endpoint} returned HTTP {response.status_code}")
            raise ApiError(
                f"API request failed: {response.reason_phrase}",
                response.status_code,
                endpoint,
            )

        try:
            return response.json()
        except ValueError as e:
            raise ApiError(
                f"Invalid JSON response: {e}", response.status_code, endpoint
            ) from e

    async def get(self, endpoint: str) -> Any:
        """GET ``endpoint`` and return the decoded JSON body."""
        return await self.request(endpoint, method="GET")

    async def post(self, endpoint: str, body: Any = None) -> Any:
        """POST ``body`` (as JSON) to ``endpoint`` and return the decoded JSON body."""
        return await self.request(endpoint, method="POST", body=body)


# Default client (lazy loaded from the session)
_default_client: Optional[BetaHubClient] = None


def get_api_client() -> BetaHubClient:
    """
    Get the process-wide client bound to the session's token.

    Created on first call and cached.

    Raises:
        AuthenticationError: If authentication has not been initialized
    """
    global _default_client
    if _default_client is None:
        _default_client = BetaHubClient(get_session().token)
    return _default_client


def create_api_client(
    token: str,
    settings: Optional[Settings] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> BetaHubClient:
    """Create an independent client bound to an explicit token."""
    return BetaHubClient(token, settings=settings, transport=transport)


def reset_api_client() -> None:
    """Drop the cached default client. Intended for tests."""
    global _default_client
    _default_client = None
