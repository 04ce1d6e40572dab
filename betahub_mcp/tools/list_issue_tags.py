# Copyright (c) 2025-2026 OptimNow. All Rights Reserved.
# Licensed under the Apache License, Version 2.0.
# See LICENSE file in the project root for full license information.

"""MCP tool for listing the issue tags of a project as a Markdown report."""

import logging

import pydantic

from ..clients.betahub_client import BetaHubClient
from ..errors import ApiError, ToolExecutionError
from ..models.issue_tag import IssueTag, TagForest
from ..models.tool_response import ToolResponse
from ..utils.error_mapping import raise_for_api_error
from ..utils.input_validation import InputValidator

logger = logging.getLogger(__name__)

NO_TAGS_MESSAGE = "No issue tags found in this project."

USAGE_FOOTER = (
    "\n---\n"
    "**Usage:** Use tag IDs with the `listIssues` tool's `tagIds` parameter "
    "to filter issues by tags.\n"
    'Example: `tagIds: "1,2,3"` to filter issues with tags 1, 2, or 3.\n'
)


def render_tag_report(project_id: str, tags: list[IssueTag]) -> str:
    """
    Render the issue tag hierarchy as Markdown.

    One section per top-level tag with its sub-tags, followed by any tags
    whose parent is not a top-level tag, followed by a usage hint.
    """
    forest = TagForest.build(tags)

    lines = [f"# Issue Tags for Project {project_id}", "", f"Found {len(tags)} tag(s)", ""]

    for section in forest.sections:
        parent = section.parent
        lines.append(f"## {parent.name} (ID: {parent.id})")
        lines.append(f"- **Color:** {parent.color or '-'}")
        if parent.description:
            lines.append(f"- **Description:** {parent.description}")
        if section.children:
            lines.append("- **Sub-tags:**")
            for child in section.children:
                entry = f"  - {child.name} (ID: {child.id})"
                if child.description:
                    entry += f" - {child.description}"
                lines.append(entry)
        lines.append("")

    if forest.orphans:
        lines.append("## ⚠️ Orphaned Tags")
        lines.append("The following tags reference non-existent parents:")
        for tag in forest.orphans:
            lines.append(f"- {tag.name} (ID: {tag.id}, Missing Parent ID: {tag.parent_tag_id})")
        lines.append("")

    return "\n".join(lines) + "\n" + USAGE_FOOTER


async def list_issue_tags(client: BetaHubClient, project_id: str) -> ToolResponse:
    """
    List all issue tags from a BetaHub project.

    Args:
        client: Authenticated BetaHub API client
        project_id: Project to list tags for

    Returns:
        ToolResponse carrying a Markdown report, or the plain
        "No issue tags found in this project." when there are none

    Raises:
        ValidationError: If project_id is invalid
        NotFoundError: If the project does not exist
        AccessDeniedError: If the token may not read the project
        ToolExecutionError: On any other API failure
    """
    project_id = InputValidator.validate_project_id(project_id)

    try:
        response = await client.get(f"projects/{project_id}/issue_tags.json")
    except ApiError as e:
        raise_for_api_error(e, "fetch issue tags", "Project", project_id)

    raw_tags = response.get("tags") if isinstance(response, dict) else None
    if not raw_tags:
        return ToolResponse.from_text(NO_TAGS_MESSAGE)

    try:
        tags = [IssueTag.model_validate(raw) for raw in raw_tags]
    except pydantic.ValidationError as e:
        raise ToolExecutionError("fetch issue tags", e) from e

    logger.info(f"Listed {len(tags)} issue tags for project {project_id}")

    return ToolResponse.from_text(render_tag_report(project_id, tags))
