# Copyright (c) 2025-2026 OptimNow. All Rights Reserved.
# Licensed under the Apache License, Version 2.0.
# See LICENSE file in the project root for full license information.

"""MCP tool for searching issues (bug reports) within a project."""

import logging
from typing import Optional

import pydantic

from ..clients.betahub_client import BetaHubClient
from ..errors import ApiError, ToolExecutionError
from ..models.issue import Issue
from ..models.search import parse_search_response
from ..models.tool_response import ToolResponse
from ..utils.error_mapping import raise_for_api_error
from .search_common import SearchArguments

logger = logging.getLogger(__name__)


async def search_issues(
    client: BetaHubClient,
    project_id: str,
    query: Optional[str] = None,
    scoped_id: Optional[str] = None,
    skip_ids: Optional[str] = None,
    partial: Optional[bool] = None,
) -> ToolResponse:
    """
    Search for issues (bug reports) within a BetaHub project.

    Exactly one of ``query`` (text search) and ``scoped_id`` (lookup of a
    single issue) must be given. The result ``type`` tells which
    of the three response shapes the service returned: ``title_search``,
    ``full_search`` or ``scoped_id_search``.

    Args:
        client: Authenticated BetaHub API client
        project_id: Project to search in
        query: Text matched against titles and descriptions
        scoped_id: Scoped ID of a single issue, e.g. "123" or "bug-456"
        skip_ids: Comma-separated issue ids to exclude
        partial: Return a short autocomplete-style result (at most 4 items)

    Returns:
        ToolResponse with the discriminated search result

    Raises:
        ValidationError: If neither or both of query and scoped_id are given
        NotFoundError: If the issue (scoped lookup) or project is missing
        AccessDeniedError: If the token may not search the project
        ToolExecutionError: On any other API failure
    """
    args = SearchArguments(project_id, query, scoped_id, skip_ids, partial)
    endpoint = args.endpoint(f"projects/{args.project_id}/issues/search.json")

    try:
        response = await client.get(endpoint)
    except ApiError as e:
        if args.scoped_id:
            raise_for_api_error(
                e,
                "search issues",
                "Issue",
                args.scoped_id,
                access_resource="search issues in project",
                access_resource_id=args.project_id,
            )
        raise_for_api_error(
            e,
            "search issues",
            "Project",
            args.project_id,
            access_resource="search issues in project",
        )

    try:
        result = parse_search_response(
            response,
            "issues",
            Issue,
            query=args.query,
            scoped_id=args.scoped_id,
            partial=args.partial,
        )
    except pydantic.ValidationError as e:
        raise ToolExecutionError("search issues", e) from e

    logger.info(f"Issue search in project {args.project_id} returned {result.type}")

    return ToolResponse.from_json(
        result.to_dict("issues", "issue", args.project_id)
    )
