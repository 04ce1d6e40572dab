# Copyright (c) 2025-2026 OptimNow. All Rights Reserved.
# Licensed under the Apache License, Version 2.0.
# See LICENSE file in the project root for full license information.

"""MCP tool for listing issues (bug reports) of a project."""

import logging
from typing import Optional
from urllib.parse import urlencode

import pydantic

from ..clients.betahub_client import BetaHubClient
from ..errors import ApiError, ToolExecutionError
from ..models.enums import IssuePriority, IssueStatus
from ..models.issue import Issue
from ..models.pagination import Pagination
from ..models.tool_response import ToolResponse
from ..utils.error_mapping import raise_for_api_error
from ..utils.input_validation import InputValidator

logger = logging.getLogger(__name__)

DEFAULT_PAGE = 1
DEFAULT_PER_PAGE = 20
MAX_PER_PAGE = 100


async def list_issues(
    client: BetaHubClient,
    project_id: str,
    status: Optional[str] = None,
    priority: Optional[str] = None,
    page: Optional[int] = None,
    per_page: Optional[int] = None,
    created_after: Optional[str] = None,
    created_before: Optional[str] = None,
    updated_after: Optional[str] = None,
    updated_before: Optional[str] = None,
    tag_ids: Optional[str] = None,
) -> ToolResponse:
    """
    List issues (bug reports) from a BetaHub project.

    Query parameters are sent in a fixed order and only when they differ
    from the service defaults.

    Args:
        client: Authenticated BetaHub API client
        project_id: Project to list issues for
        status: Filter by issue status
        priority: Filter by priority (low, medium, high, critical)
        page: Page number, starting at 1
        per_page: Page size (1-100, default 20)
        created_after: ISO 8601 lower bound on creation time
        created_before: ISO 8601 upper bound on creation time
        updated_after: ISO 8601 lower bound on last update
        updated_before: ISO 8601 upper bound on last update
        tag_ids: Comma-separated issue tag ids, e.g. "1,2,3"

    Returns:
        ToolResponse with issues, pagination, filters and project_id

    Raises:
        ValidationError: If any argument is invalid
        NotFoundError: If the project does not exist
        AccessDeniedError: If the token may not read the project
        ToolExecutionError: On any other API failure
    """
    project_id = InputValidator.validate_project_id(project_id)
    page = InputValidator.validate_integer(page, "page", default=DEFAULT_PAGE, minimum=1)
    per_page = InputValidator.validate_integer(
        per_page, "perPage", default=DEFAULT_PER_PAGE, minimum=1, maximum=MAX_PER_PAGE
    )

    filters = {
        "status": InputValidator.validate_choice(status, IssueStatus, "status"),
        "priority": InputValidator.validate_choice(priority, IssuePriority, "priority"),
        "created_after": InputValidator.validate_date(created_after, "createdAfter"),
        "created_before": InputValidator.validate_date(created_before, "createdBefore"),
        "updated_after": InputValidator.validate_date(updated_after, "updatedAfter"),
        "updated_before": InputValidator.validate_date(updated_before, "updatedBefore"),
        "tag_ids": InputValidator.validate_id_list(tag_ids, "tagIds"),
    }
    applied_filters = {key: value for key, value in filters.items() if value}

    params: dict[str, str] = {}
    if page != DEFAULT_PAGE:
        params["page"] = str(page)
    if per_page != DEFAULT_PER_PAGE:
        params["per_page"] = str(per_page)
    params.update(applied_filters)

    endpoint = f"projects/{project_id}/issues.json"
    if params:
        endpoint = f"{endpoint}?{urlencode(params)}"

    try:
        response = await client.get(endpoint)
    except ApiError as e:
        raise_for_api_error(e, "fetch issues", "Project", project_id)

    if not isinstance(response, dict):
        response = {}

    try:
        issues = [
            Issue.model_validate(raw).model_dump(mode="json", exclude_unset=True)
            for raw in response.get("issues") or []
        ]
        pagination = Pagination.resolve(response.get("pagination"), len(issues), per_page)
    except pydantic.ValidationError as e:
        raise ToolExecutionError("fetch issues", e) from e

    logger.info(f"Listed {len(issues)} issues for project {project_id} (page={page})")

    return ToolResponse.from_json(
        {
            "issues": issues,
            "pagination": pagination.model_dump(),
            "filters": applied_filters,
            "project_id": project_id,
        }
    )
