# Copyright (c) 2025-2026 OptimNow. All Rights Reserved.
# Licensed under the Apache License, Version 2.0.
# See LICENSE file in the project root for full license information.

"""Stdio MCP server using FastMCP from the mcp Python SDK.

This module creates a standard MCP server that speaks the JSON-RPC
protocol over stdio, making it compatible with:
- Claude Desktop (claude_desktop_config.json)
- MCP Inspector (npx @modelcontextprotocol/inspector)
- Any MCP client that uses the stdio transport

It is a thin wrapper: all BetaHub logic lives in the tool modules. Every
handler is gated on the session established at startup by the auth service.

Usage::

    # Run directly (stdio transport):
    BETAHUB_TOKEN=pat-xxxxx python -m betahub_mcp

    # Test with MCP Inspector:
    npx @modelcontextprotocol/inspector python -m betahub_mcp --token=pat-xxxxx
"""

import asyncio
import functools
import logging
import sys
from dataclasses import dataclass
from typing import Annotated, Any, Awaitable, Callable, Literal, Optional

from mcp.server.fastmcp import FastMCP
from mcp.types import TextContent
from pydantic import Field

from .clients.betahub_client import get_api_client
from .config import Settings, settings as get_default_settings
from .errors import AuthenticationError
from .services.auth_service import initialize, is_authenticated
from .utils.error_sanitization import log_error_safely, redact_sensitive_info
from . import tools

logger = logging.getLogger(__name__)

Handler = Callable[..., Awaitable[list[TextContent]]]

ProjectId = Annotated[str, Field(description="The project ID (e.g. pr-123)")]
DateFilter = Annotated[
    Optional[str],
    Field(description="ISO 8601 date or datetime (e.g. 2024-01-31 or 2024-01-31T12:00:00Z)"),
]
SuggestionSortOption = Literal["top", "new", "all", "moderation", "rejected", "muted", "duplicates"]
SuggestionStatusOption = Literal[
    "pending", "approved", "rejected", "in_progress", "completed", "duplicate"
]
IssueStatusOption = Literal[
    "new", "in_progress", "needs_more_info", "resolved", "closed", "wont_fix"
]
IssuePriorityOption = Literal["low", "medium", "high", "critical"]


@dataclass(frozen=True)
class ToolDefinition:
    """MCP-facing metadata of one tool."""

    name: str
    title: str
    description: str


LIST_PROJECTS = ToolDefinition(
    name="listProjects",
    title="List BetaHub Projects",
    description="List all projects accessible to the authenticated user",
)
LIST_SUGGESTIONS = ToolDefinition(
    name="listSuggestions",
    title="List Feature Requests/Suggestions",
    description="List feature requests (suggestions) from a BetaHub project",
)
SEARCH_SUGGESTIONS = ToolDefinition(
    name="searchSuggestions",
    title="Search Feature Requests/Suggestions",
    description=(
        "Search for feature requests (suggestions) within a BetaHub project. "
        "Supports text search and scoped ID lookup."
    ),
)
LIST_ISSUES = ToolDefinition(
    name="listIssues",
    title="List Issues/Bugs",
    description="List issues (bug reports) from a BetaHub project",
)
SEARCH_ISSUES = ToolDefinition(
    name="searchIssues",
    title="Search Issues/Bugs",
    description=(
        "Search for issues (bug reports) within a BetaHub project. "
        "Supports text search and scoped ID lookup."
    ),
)
LIST_ISSUE_TAGS = ToolDefinition(
    name="listIssueTags",
    title="List Issue Tags",
    description=(
        "List all issue tags from a BetaHub project. "
        "Tags are used to categorize and filter issues."
    ),
)
LIST_RELEASES = ToolDefinition(
    name="listReleases",
    title="List Project Releases",
    description="List all releases for a BetaHub project",
)

TOOL_DEFINITIONS = [
    LIST_PROJECTS,
    LIST_SUGGESTIONS,
    SEARCH_SUGGESTIONS,
    LIST_ISSUES,
    SEARCH_ISSUES,
    LIST_ISSUE_TAGS,
    LIST_RELEASES,
]


def requires_auth(tool_name: str) -> Callable[[Handler], Handler]:
    """
    Gate a handler on the authenticated session.

    Failures are logged with credentials redacted and re-raised so the MCP
    host receives a rejected call.
    """

    def decorator(handler: Handler) -> Handler:
        @functools.wraps(handler)
        async def wrapper(*args: Any, **kwargs: Any) -> list[TextContent]:
            if not is_authenticated():
                raise AuthenticationError("Authentication required")
            try:
                return await handler(*args, **kwargs)
            except Exception as e:
                log_error_safely(e, {"tool": tool_name}, logger)
                raise

        return wrapper

    return decorator


# ---------------------------------------------------------------------------
# Tool handlers
# ---------------------------------------------------------------------------
@requires_auth(LIST_PROJECTS.name)
async def list_projects_handler() -> list[TextContent]:
    """List all projects accessible to the authenticated user."""
    response = await tools.list_projects(get_api_client())
    return response.content


@requires_auth(LIST_SUGGESTIONS.name)
async def list_suggestions_handler(
    projectId: ProjectId,
    sort: Annotated[
        SuggestionSortOption, Field(description="Sort order for feature requests")
    ] = "top",
    page: Annotated[int, Field(ge=1, description="Page number")] = 1,
    limit: Annotated[
        int, Field(ge=1, le=25, description="Maximum number of feature requests to return")
    ] = 25,
    status: Annotated[
        Optional[SuggestionStatusOption], Field(description="Filter by status")
    ] = None,
    createdAfter: DateFilter = None,
    createdBefore: DateFilter = None,
    updatedAfter: DateFilter = None,
    updatedBefore: DateFilter = None,
) -> list[TextContent]:
    """List feature requests (suggestions) from a BetaHub project."""
    response = await tools.list_suggestions(
        get_api_client(),
        project_id=projectId,
        sort=sort,
        page=page,
        limit=limit,
        status=status,
        created_after=createdAfter,
        created_before=createdBefore,
        updated_after=updatedAfter,
        updated_before=updatedBefore,
    )
    return response.content


@requires_auth(SEARCH_SUGGESTIONS.name)
async def search_suggestions_handler(
    projectId: ProjectId,
    query: Annotated[
        Optional[str],
        Field(description="Text matched against feature request titles and descriptions"),
    ] = None,
    scopedId: Annotated[
        Optional[str],
        Field(description='Find a specific feature request by its scoped ID (e.g. "123" or "fr-456")'),
    ] = None,
    skipIds: Annotated[
        Optional[str],
        Field(description="Comma-separated feature request IDs to exclude from results"),
    ] = None,
    partial: Annotated[
        bool, Field(description="Return limited results optimized for autocomplete (max 4)")
    ] = False,
) -> list[TextContent]:
    """Search for feature requests within a BetaHub project."""
    response = await tools.search_suggestions(
        get_api_client(),
        project_id=projectId,
        query=query,
        scoped_id=scopedId,
        skip_ids=skipIds,
        partial=partial,
    )
    return response.content


@requires_auth(LIST_ISSUES.name)
async def list_issues_handler(
    projectId: ProjectId,
    status: Annotated[Optional[IssueStatusOption], Field(description="Filter by status")] = None,
    priority: Annotated[
        Optional[IssuePriorityOption], Field(description="Filter by priority")
    ] = None,
    page: Annotated[int, Field(ge=1, description="Page number")] = 1,
    perPage: Annotated[
        int, Field(ge=1, le=100, description="Number of issues per page")
    ] = 20,
    createdAfter: DateFilter = None,
    createdBefore: DateFilter = None,
    updatedAfter: DateFilter = None,
    updatedBefore: DateFilter = None,
    tagIds: Annotated[
        Optional[str],
        Field(description='Comma-separated issue tag IDs (e.g. "1,2,3"); see listIssueTags'),
    ] = None,
) -> list[TextContent]:
    """List issues (bug reports) from a BetaHub project."""
    response = await tools.list_issues(
        get_api_client(),
        project_id=projectId,
        status=status,
        priority=priority,
        page=page,
        per_page=perPage,
        created_after=createdAfter,
        created_before=createdBefore,
        updated_after=updatedAfter,
        updated_before=updatedBefore,
        tag_ids=tagIds,
    )
    return response.content


@requires_auth(SEARCH_ISSUES.name)
async def search_issues_handler(
    projectId: ProjectId,
    query: Annotated[
        Optional[str], Field(description="Text matched against issue titles and descriptions")
    ] = None,
    scopedId: Annotated[
        Optional[str],
        Field(description='Find a specific issue by its scoped ID (e.g. "123" or "bug-456")'),
    ] = None,
    skipIds: Annotated[
        Optional[str], Field(description="Comma-separated issue IDs to exclude from results")
    ] = None,
    partial: Annotated[
        bool, Field(description="Return limited results optimized for autocomplete (max 4)")
    ] = False,
) -> list[TextContent]:
    """Search for issues within a BetaHub project."""
    response = await tools.search_issues(
        get_api_client(),
        project_id=projectId,
        query=query,
        scoped_id=scopedId,
        skip_ids=skipIds,
        partial=partial,
    )
    return response.content


@requires_auth(LIST_ISSUE_TAGS.name)
async def list_issue_tags_handler(projectId: ProjectId) -> list[TextContent]:
    """List all issue tags from a BetaHub project."""
    response = await tools.list_issue_tags(get_api_client(), project_id=projectId)
    return response.content


@requires_auth(LIST_RELEASES.name)
async def list_releases_handler(projectId: ProjectId) -> list[TextContent]:
    """List all releases for a BetaHub project."""
    response = await tools.list_releases(get_api_client(), project_id=projectId)
    return response.content


HANDLERS: dict[str, Handler] = {
    LIST_PROJECTS.name: list_projects_handler,
    LIST_SUGGESTIONS.name: list_suggestions_handler,
    SEARCH_SUGGESTIONS.name: search_suggestions_handler,
    LIST_ISSUES.name: list_issues_handler,
    SEARCH_ISSUES.name: search_issues_handler,
    LIST_ISSUE_TAGS.name: list_issue_tags_handler,
    LIST_RELEASES.name: list_releases_handler,
}


# ---------------------------------------------------------------------------
# Server construction and entry point
# ---------------------------------------------------------------------------
def create_server(settings: Optional[Settings] = None) -> FastMCP:
    """
    Create a FastMCP server with every BetaHub tool registered.

    Args:
        settings: Application settings (defaults to the global settings)

    Returns:
        Configured FastMCP instance, not yet running
    """
    settings = settings or get_default_settings()
    server = FastMCP(settings.server_name)

    for definition in TOOL_DEFINITIONS:
        server.add_tool(
            HANDLERS[definition.name],
            name=definition.name,
            title=definition.title,
            description=definition.description,
            structured_output=False,
        )

    logger.debug(f"Registered {len(TOOL_DEFINITIONS)} tools on {settings.server_name}")
    return server


def configure_logging(log_level: str) -> None:
    """
    Configure logging for the application.

    Logs go to stderr: stdout carries the JSON-RPC stream.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
    """
    numeric_level = getattr(logging, log_level.upper(), logging.INFO)

    logging.basicConfig(
        level=numeric_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    # Request lines from httpx would otherwise log every API call at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


async def run(settings: Optional[Settings] = None) -> None:
    """Authenticate, then serve MCP over stdio until the host disconnects."""
    settings = settings or get_default_settings()
    await initialize(settings=settings)
    server = create_server(settings)
    logger.info(f"{settings.server_name} v{settings.server_version} running on stdio")
    await server.run_stdio_async()


def main() -> None:
    """Entry point for the stdio MCP server."""
    app_settings = get_default_settings()
    configure_logging(app_settings.log_level)

    logger.info("Starting BetaHub MCP Server (stdio transport)")

    try:
        asyncio.run(run(app_settings))
    except KeyboardInterrupt:
        logger.info("Shutting down BetaHub MCP Server")
        sys.exit(0)
    except AuthenticationError as e:
        logger.error(f"Authentication failed: {redact_sensitive_info(e.message)}")
        sys.exit(1)
    except Exception as e:
        logger.error(f"Failed to start server: {redact_sensitive_info(str(e))}")
        sys.exit(1)


if __name__ == "__main__":
    main()
