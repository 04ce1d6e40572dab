# Copyright (c) 2025-2026 OptimNow. All Rights Reserved.
# Licensed under the Apache License, Version 2.0.
# See LICENSE file in the project root for full license information.

"""MCP tool for listing the releases of a project."""

import logging

import pydantic

from ..clients.betahub_client import BetaHubClient
from ..errors import ApiError, ToolExecutionError
from ..models.pagination import Pagination
from ..models.release import Release
from ..models.tool_response import ToolResponse
from ..utils.error_mapping import raise_for_api_error
from ..utils.input_validation import InputValidator

logger = logging.getLogger(__name__)

NO_RELEASES_MESSAGE = "No releases found for this project"


def _single_page(item_count: int) -> dict:
    # Releases are not paginated upstream; the whole list is one page
    return Pagination.resolve(None, item_count, max(item_count, 1)).model_dump()


async def list_releases(client: BetaHubClient, project_id: str) -> ToolResponse:
    """
    List all releases for a BetaHub project.

    Each release gets a ``url`` pointing at its page on BetaHub. A response
    that is not an array is reported as an empty list with an explanatory
    ``message``.

    Args:
        client: Authenticated BetaHub API client
        project_id: Project to list releases for

    Returns:
        ToolResponse with ``{"releases": [...], "total_count": N,
        "pagination": {...}, "project_id": ...}``

    Raises:
        ValidationError: If project_id is invalid
        NotFoundError: If the project does not exist
        AccessDeniedError: If the token may not read the project
        ToolExecutionError: On any other API failure or a malformed release
    """
    project_id = InputValidator.validate_project_id(project_id)

    try:
        response = await client.get(f"projects/{project_id}/releases.json")
    except ApiError as e:
        raise_for_api_error(e, "fetch releases", "Project", project_id)

    if not isinstance(response, list):
        return ToolResponse.from_json(
            {
                "releases": [],
                "total_count": 0,
                "pagination": _single_page(0),
                "project_id": project_id,
                "message": NO_RELEASES_MESSAGE,
            }
        )

    base_url = client.settings.api_base_url
    releases = []
    try:
        for raw in response:
            release = Release.model_validate(raw)
            release.url = f"{base_url}projects/{project_id}/releases/{release.id}"
            releases.append(release.model_dump(mode="json", exclude_unset=True))
    except pydantic.ValidationError as e:
        raise ToolExecutionError("fetch releases", e) from e

    logger.info(f"Listed {len(releases)} releases for project {project_id}")

    return ToolResponse.from_json(
        {
            "releases": releases,
            "total_count": len(releases),
            "pagination": _single_page(len(releases)),
            "project_id": project_id,
        }
    )
