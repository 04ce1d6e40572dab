"""Unit tests for list_issue_tags tool."""

import pytest

from betahub_mcp.errors import AccessDeniedError, ApiError, NotFoundError, ToolExecutionError
from betahub_mcp.models.issue_tag import IssueTag, TagForest
from betahub_mcp.tools.list_issue_tags import NO_TAGS_MESSAGE, list_issue_tags
from tests.helpers import response_text


class TestTagForest:
    """Test hierarchy construction from the flat tag list."""

    def test_children_and_orphans(self):
        tags = [
            IssueTag(id=1, name="Graphics"),
            IssueTag(id=2, name="Shaders", parent_tag_id=1),
            IssueTag(id=3, name="Lost", parent_tag_id=999),
        ]

        forest = TagForest.build(tags)

        assert [section.parent.id for section in forest.sections] == [1]
        assert [child.id for child in forest.sections[0].children] == [2]
        assert [orphan.id for orphan in forest.orphans] == [3]

    def test_grandchild_is_orphan(self):
        tags = [
            IssueTag(id=1, name="Root"),
            IssueTag(id=2, name="Child", parent_tag_id=1),
            IssueTag(id=3, name="Grandchild", parent_tag_id=2),
        ]

        forest = TagForest.build(tags)

        assert [orphan.id for orphan in forest.orphans] == [3]

    def test_parent_id_matches_across_int_and_string(self):
        tags = [IssueTag(id=1, name="Root"), IssueTag(id=2, name="Child", parent_tag_id="1")]

        forest = TagForest.build(tags)

        assert forest.orphans == []
        assert forest.sections[0].children[0].id == 2

    def test_parents_keep_upstream_order(self):
        tags = [
            IssueTag(id=5, name="Audio"),
            IssueTag(id=6, name="Music", parent_tag_id=5),
            IssueTag(id=1, name="Graphics"),
        ]

        forest = TagForest.build(tags)

        assert [section.parent.name for section in forest.sections] == ["Audio", "Graphics"]


@pytest.mark.asyncio
async def test_markdown_report(mock_client):
    mock_client.get.return_value = {
        "tags": [
            {"id": 1, "name": "Graphics", "color": "#FF0000", "description": "Rendering problems"},
            {"id": 2, "name": "Shaders", "color": "#00FF00", "parent_tag_id": 1,
             "description": "Shader compilation"},
            {"id": 4, "name": "Textures", "color": "#0000FF", "parent_tag_id": 1},
            {"id": 3, "name": "Lost", "color": "#999999", "parent_tag_id": 999},
        ]
    }

    text = response_text(await list_issue_tags(mock_client, "pr-test"))

    mock_client.get.assert_awaited_once_with("projects/pr-test/issue_tags.json")
    assert text == (
        "# Issue Tags for Project pr-test\n"
        "\n"
        "Found 4 tag(s)\n"
        "\n"
        "## Graphics (ID: 1)\n"
        "- **Color:** #FF0000\n"
        "- **Description:** Rendering problems\n"
        "- **Sub-tags:**\n"
        "  - Shaders (ID: 2) - Shader compilation\n"
        "  - Textures (ID: 4)\n"
        "\n"
        "## ⚠️ Orphaned Tags\n"
        "The following tags reference non-existent parents:\n"
        "- Lost (ID: 3, Missing Parent ID: 999)\n"
        "\n"
        "\n"
        "---\n"
        "**Usage:** Use tag IDs with the `listIssues` tool's `tagIds` parameter "
        "to filter issues by tags.\n"
        'Example: `tagIds: "1,2,3"` to filter issues with tags 1, 2, or 3.\n'
    )


@pytest.mark.asyncio
async def test_report_without_orphans_or_children(mock_client):
    mock_client.get.return_value = {"tags": [{"id": 7, "name": "UI", "color": "#123456"}]}

    text = response_text(await list_issue_tags(mock_client, "pr-test"))

    assert "## UI (ID: 7)\n- **Color:** #123456\n\n\n---\n" in text
    assert "Sub-tags" not in text
    assert "Orphaned" not in text


@pytest.mark.asyncio
@pytest.mark.parametrize("payload", [{"tags": []}, {}, []])
async def test_no_tags(mock_client, payload):
    mock_client.get.return_value = payload

    text = response_text(await list_issue_tags(mock_client, "pr-test"))

    assert text == NO_TAGS_MESSAGE == "No issue tags found in this project."


@pytest.mark.asyncio
async def test_404_is_project_not_found(mock_client):
    mock_client.get.side_effect = ApiError("API request failed: Not Found", 404)

    with pytest.raises(NotFoundError) as exc_info:
        await list_issue_tags(mock_client, "pr-missing")

    assert exc_info.value.message == "Project pr-missing not found"


@pytest.mark.asyncio
async def test_403_is_access_denied(mock_client):
    mock_client.get.side_effect = ApiError("API request failed: Forbidden", 403)

    with pytest.raises(AccessDeniedError):
        await list_issue_tags(mock_client, "pr-locked")


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "tag",
    [
        {"id": 1, "name": None},
        {"name": "No id"},
    ],
)
async def test_malformed_tag_is_tool_execution_error(mock_client, tag):
    mock_client.get.return_value = {"tags": [{"id": 2, "name": "Bug"}, tag]}

    with pytest.raises(ToolExecutionError) as exc_info:
        await list_issue_tags(mock_client, "pr-test")

    assert exc_info.value.message.startswith("Failed to fetch issue tags:")
