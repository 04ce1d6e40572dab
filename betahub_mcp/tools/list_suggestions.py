# Copyright (c) 2025-2026 OptimNow. All Rights Reserved.
# Licensed under the Apache License, Version 2.0.
# See LICENSE file in the project root for full license information.

"""MCP tool for listing feature requests (suggestions) of a project."""

import logging
from typing import Optional
from urllib.parse import urlencode

import pydantic

from ..clients.betahub_client import BetaHubClient
from ..errors import ApiError, ToolExecutionError
from ..models.enums import FeatureRequestStatus, SuggestionSort
from ..models.feature_request import FeatureRequest
from ..models.pagination import Pagination
from ..models.tool_response import ToolResponse
from ..utils.error_mapping import raise_for_api_error
from ..utils.input_validation import InputValidator

logger = logging.getLogger(__name__)

DEFAULT_SORT = SuggestionSort.TOP.value
DEFAULT_PAGE = 1

# The service pages feature requests 25 at a time and ignores any limit
SERVICE_PAGE_SIZE = 25
MAX_LIMIT = 25


async def list_suggestions(
    client: BetaHubClient,
    project_id: str,
    sort: Optional[str] = None,
    page: Optional[int] = None,
    limit: Optional[int] = None,
    status: Optional[str] = None,
    created_after: Optional[str] = None,
    created_before: Optional[str] = None,
    updated_after: Optional[str] = None,
    updated_before: Optional[str] = None,
) -> ToolResponse:
    """
    List feature requests (suggestions) from a BetaHub project.

    Only non-default parameters are sent. ``limit`` is applied locally by
    truncating the returned page, since the service has no such parameter.

    Args:
        client: Authenticated BetaHub API client
        project_id: Project to list feature requests for
        sort: One of top, new, all, moderation, rejected, muted, duplicates
        page: Page number, starting at 1
        limit: Maximum number of feature requests to return (1-25)
        status: Filter by feature request status
        created_after: ISO 8601 lower bound on creation time
        created_before: ISO 8601 upper bound on creation time
        updated_after: ISO 8601 lower bound on last update
        updated_before: ISO 8601 upper bound on last update

    Returns:
        ToolResponse with feature_requests, pagination, sort, filters and project_id

    Raises:
        ValidationError: If any argument is invalid
        NotFoundError: If the project does not exist
        AccessDeniedError: If the token may not read the project
        ToolExecutionError: On any other API failure
    """
    project_id = InputValidator.validate_project_id(project_id)
    sort = InputValidator.validate_choice(sort, SuggestionSort, "sort", default=DEFAULT_SORT)
    page = InputValidator.validate_integer(page, "page", default=DEFAULT_PAGE, minimum=1)
    limit = InputValidator.validate_integer(
        limit, "limit", default=MAX_LIMIT, minimum=1, maximum=MAX_LIMIT
    )
    status = InputValidator.validate_choice(status, FeatureRequestStatus, "status")

    filters = {
        "status": status,
        "created_after": InputValidator.validate_date(created_after, "createdAfter"),
        "created_before": InputValidator.validate_date(created_before, "createdBefore"),
        "updated_after": InputValidator.validate_date(updated_after, "updatedAfter"),
        "updated_before": InputValidator.validate_date(updated_before, "updatedBefore"),
    }
    applied_filters = {key: value for key, value in filters.items() if value}

    params: dict[str, str] = {}
    if sort != DEFAULT_SORT:
        params["sort"] = sort
    if page != DEFAULT_PAGE:
        params["page"] = str(page)
    params.update(applied_filters)

    endpoint = f"projects/{project_id}/feature_requests.json"
    if params:
        endpoint = f"{endpoint}?{urlencode(params)}"

    try:
        response = await client.get(endpoint)
    except ApiError as e:
        raise_for_api_error(e, "fetch feature requests", "Project", project_id)

    if not isinstance(response, dict):
        response = {}

    feature_requests = response.get("feature_requests") or []
    if limit < MAX_LIMIT:
        feature_requests = feature_requests[:limit]

    try:
        formatted = [
            FeatureRequest.model_validate(raw).model_dump(mode="json", exclude_unset=True)
            for raw in feature_requests
        ]
        pagination = Pagination.resolve(
            response.get("pagination"), len(formatted), SERVICE_PAGE_SIZE
        )
    except pydantic.ValidationError as e:
        raise ToolExecutionError("fetch feature requests", e) from e

    pagination.per_page = min(limit, pagination.per_page)

    logger.info(
        f"Listed {len(formatted)} feature requests for project {project_id} "
        f"(sort={sort}, page={page})"
    )

    return ToolResponse.from_json(
        {
            "feature_requests": formatted,
            "pagination": pagination.model_dump(),
            "sort": sort,
            "filters": applied_filters,
            "project_id": project_id,
        }
    )
