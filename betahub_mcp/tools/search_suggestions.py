# Copyright (c) 2025-2026 OptimNow. All Rights Reserved.
# Licensed under the Apache License, Version 2.0.
# See LICENSE file in the project root for full license information.

"""MCP tool for searching feature requests (suggestions) within a project."""

import logging
from typing import Optional

import pydantic

from ..clients.betahub_client import BetaHubClient
from ..errors import ApiError, ToolExecutionError
from ..models.feature_request import FeatureRequest
from ..models.search import parse_search_response
from ..models.tool_response import ToolResponse
from ..utils.error_mapping import raise_for_api_error
from .search_common import SearchArguments

logger = logging.getLogger(__name__)


async def search_suggestions(
    client: BetaHubClient,
    project_id: str,
    query: Optional[str] = None,
    scoped_id: Optional[str] = None,
    skip_ids: Optional[str] = None,
    partial: Optional[bool] = None,
) -> ToolResponse:
    """
    Search for feature requests within a BetaHub project.

    Exactly one of ``query`` (text search) and ``scoped_id`` (lookup of a
    single feature request) must be given. The result ``type`` tells which
    of the three response shapes the service returned: ``title_search``,
    ``full_search`` or ``scoped_id_search``.

    Args:
        client: Authenticated BetaHub API client
        project_id: Project to search in
        query: Text matched against titles and descriptions
        scoped_id: Scoped ID of a single feature request, e.g. "123" or "fr-456"
        skip_ids: Comma-separated feature request ids to exclude
        partial: Return a short autocomplete-style result (at most 4 items)

    Returns:
        ToolResponse with the discriminated search result

    Raises:
        ValidationError: If neither or both of query and scoped_id are given
        NotFoundError: If the feature request (scoped lookup) or project is missing
        AccessDeniedError: If the token may not search the project
        ToolExecutionError: On any other API failure
    """
    args = SearchArguments(project_id, query, scoped_id, skip_ids, partial)
    endpoint = args.endpoint(f"projects/{args.project_id}/feature_requests/search.json")

    try:
        response = await client.get(endpoint)
    except ApiError as e:
        if args.scoped_id:
            raise_for_api_error(
                e,
                "search feature requests",
                "Feature request",
                args.scoped_id,
                access_resource="search feature requests in project",
                access_resource_id=args.project_id,
            )
        raise_for_api_error(
            e,
            "search feature requests",
            "Project",
            args.project_id,
            access_resource="search feature requests in project",
        )

    try:
        result = parse_search_response(
            response,
            "feature_requests",
            FeatureRequest,
            query=args.query,
            scoped_id=args.scoped_id,
            partial=args.partial,
        )
    except pydantic.ValidationError as e:
        raise ToolExecutionError("search feature requests", e) from e

    logger.info(f"Feature request search in project {args.project_id} returned {result.type}")

    return ToolResponse.from_json(
        result.to_dict("feature_requests", "feature_request", args.project_id)
    )
