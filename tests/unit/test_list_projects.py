"""Unit tests for list_projects tool."""

import pytest

from betahub_mcp.errors import ApiError, BetaHubError, ToolExecutionError
from betahub_mcp.tools.list_projects import list_projects
from tests.helpers import response_json


@pytest.mark.asyncio
async def test_bare_array_response(mock_client):
    mock_client.get.return_value = [
        {
            "id": "pr-1",
            "name": "Space Game",
            "description": "A game in space",
            "url": "https://app.betahub.io/projects/pr-1",
            "member_count": 12,
            "created_at": "2024-01-01T00:00:00Z",
            "secret_setting": True,
        }
    ]

    result = response_json(await list_projects(mock_client))

    mock_client.get.assert_awaited_once_with("projects.json")
    assert result["total_count"] == 1
    assert result["projects"][0] == {
        "id": "pr-1",
        "name": "Space Game",
        "description": "A game in space",
        "url": "https://app.betahub.io/projects/pr-1",
        "member_count": 12,
        "created_at": "2024-01-01T00:00:00Z",
    }


@pytest.mark.asyncio
async def test_wrapped_response_fills_defaults(mock_client):
    mock_client.get.return_value = {"projects": [{"id": "pr-2", "name": "Racing"}]}

    result = response_json(await list_projects(mock_client))

    project = result["projects"][0]
    assert project["url"] == "https://betahub.test/projects/pr-2"
    assert project["member_count"] == 0


@pytest.mark.asyncio
async def test_null_member_count_becomes_zero(mock_client):
    mock_client.get.return_value = [{"id": "pr-3", "member_count": None}]

    result = response_json(await list_projects(mock_client))

    assert result["projects"][0]["member_count"] == 0


@pytest.mark.asyncio
async def test_unexpected_shape_is_empty(mock_client):
    mock_client.get.return_value = {"unexpected": []}

    result = response_json(await list_projects(mock_client))

    assert result == {
        "projects": [],
        "total_count": 0,
        "pagination": {"current_page": 1, "total_pages": 1, "total_count": 0, "per_page": 1},
    }


@pytest.mark.asyncio
@pytest.mark.parametrize("status", [403, 404, 500])
async def test_any_api_error_is_tool_execution_error(mock_client, status):
    mock_client.get.side_effect = ApiError("API request failed: Oops", status, "projects.json")

    with pytest.raises(ToolExecutionError) as exc_info:
        await list_projects(mock_client)

    assert exc_info.value.message == "Failed to fetch projects: API request failed: Oops"


@pytest.mark.asyncio
async def test_missing_pagination_is_synthesized(mock_client):
    mock_client.get.return_value = [{"id": "pr-1", "name": "A"}, {"id": "pr-2", "name": "B"}]

    result = response_json(await list_projects(mock_client))

    assert result["pagination"] == {
        "current_page": 1,
        "total_pages": 1,
        "total_count": 2,
        "per_page": 2,
    }


@pytest.mark.asyncio
async def test_upstream_pagination_is_kept(mock_client):
    mock_client.get.return_value = {
        "projects": [{"id": "pr-1", "name": "A"}],
        "pagination": {"current_page": 2, "total_pages": 3, "total_count": 41, "per_page": 20},
    }

    result = response_json(await list_projects(mock_client))

    assert result["total_count"] == 1
    assert result["pagination"] == {
        "current_page": 2,
        "total_pages": 3,
        "total_count": 41,
        "per_page": 20,
    }


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "payload",
    [
        [{"name": "no id"}],
        [{"id": "pr-1", "member_count": "many"}],
        ["pr-1"],
    ],
)
async def test_malformed_project_is_tool_execution_error(mock_client, payload):
    mock_client.get.return_value = payload

    with pytest.raises(ToolExecutionError) as exc_info:
        await list_projects(mock_client)

    assert isinstance(exc_info.value, BetaHubError)
    assert exc_info.value.message.startswith("Failed to fetch projects:")
