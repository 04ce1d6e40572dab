# Copyright (c) 2025-2026 OptimNow. All Rights Reserved.
# Licensed under the Apache License, Version 2.0.
# See LICENSE file in the project root for full license information.

"""MCP tool for listing the projects visible to the authenticated token."""

import logging
from typing import Any

import pydantic

from ..clients.betahub_client import BetaHubClient
from ..errors import ApiError, ToolExecutionError
from ..models.pagination import Pagination
from ..models.project import Project
from ..models.tool_response import ToolResponse

logger = logging.getLogger(__name__)

ENDPOINT = "projects.json"


def _format_project(raw: dict[str, Any], base_url: str) -> dict[str, Any]:
    project = Project.model_validate(raw)
    upstream = project.model_dump(mode="json", exclude_unset=True)

    formatted = {key: upstream[key] for key in ("id", "name", "description") if key in upstream}
    formatted["url"] = project.url or f"{base_url}projects/{project.id}"
    formatted["member_count"] = project.member_count or 0
    if "created_at" in upstream:
        formatted["created_at"] = upstream["created_at"]
    return formatted


async def list_projects(client: BetaHubClient) -> ToolResponse:
    """
    List all projects accessible to the authenticated user.

    The service answers either with a bare array or with an object holding a
    ``projects`` array; any other shape is treated as no projects.

    Args:
        client: Authenticated BetaHub API client

    Returns:
        ToolResponse with ``{"projects": [...], "total_count": N, "pagination": {...}}``

    Raises:
        ToolExecutionError: On any API failure, including 403 and 404, or a
            malformed project record
    """
    try:
        response = await client.get(ENDPOINT)
    except ApiError as e:
        raise ToolExecutionError("fetch projects", e) from e

    upstream_pagination = None
    if isinstance(response, list):
        projects = response
    elif isinstance(response, dict):
        projects = response.get("projects") or []
        upstream_pagination = response.get("pagination")
    else:
        projects = []

    base_url = client.settings.api_base_url
    try:
        formatted = [_format_project(project, base_url) for project in projects]
        # Projects arrive as a single page holding every item
        pagination = Pagination.resolve(
            upstream_pagination, len(formatted), max(len(formatted), 1)
        )
    except pydantic.ValidationError as e:
        raise ToolExecutionError("fetch projects", e) from e

    logger.info(f"Listed {len(formatted)} projects")

    return ToolResponse.from_json(
        {
            "projects": formatted,
            "total_count": len(formatted),
            "pagination": pagination.model_dump(),
        }
    )
