"""Unit tests for list_issues tool."""

import pytest

from betahub_mcp.errors import AccessDeniedError, ApiError, NotFoundError, ToolExecutionError, ValidationError
from betahub_mcp.tools.list_issues import list_issues
from tests.helpers import response_json


@pytest.mark.asyncio
async def test_query_string_exact(mock_client):
    mock_client.get.return_value = {"issues": []}

    await list_issues(mock_client, "pr-test", page=3, per_page=30, status="new", priority="critical")

    mock_client.get.assert_awaited_once_with(
        "projects/pr-test/issues.json?page=3&per_page=30&status=new&priority=critical"
    )


@pytest.mark.asyncio
async def test_defaults_send_no_query_string(mock_client):
    mock_client.get.return_value = {"issues": []}

    await list_issues(mock_client, "pr-test", page=1, per_page=20)

    mock_client.get.assert_awaited_once_with("projects/pr-test/issues.json")


@pytest.mark.asyncio
async def test_date_and_tag_filters_in_order(mock_client):
    mock_client.get.return_value = {"issues": []}

    await list_issues(
        mock_client,
        "pr-test",
        created_after="2024-01-01",
        created_before="2024-02-01",
        updated_after="2024-03-01",
        updated_before="2024-04-01",
        tag_ids="1,2,3",
    )

    mock_client.get.assert_awaited_once_with(
        "projects/pr-test/issues.json?created_after=2024-01-01&created_before=2024-02-01"
        "&updated_after=2024-03-01&updated_before=2024-04-01&tag_ids=1%2C2%2C3"
    )


@pytest.mark.asyncio
async def test_response_shape(mock_client, sample_issue):
    mock_client.get.return_value = {
        "issues": [sample_issue],
        "pagination": {"current_page": 2, "total_pages": 5, "total_count": 90, "per_page": 20},
    }

    result = response_json(await list_issues(mock_client, "pr-test", page=2, priority="critical"))

    issue = result["issues"][0]
    assert issue["id"] == 501
    assert issue["score"] == 87
    assert issue["steps_to_reproduce"] == ["Start the game", "Wait for the splash screen"]
    assert issue["assigned_to"] is None
    assert issue["reported_by"]["name"] == "Tester"
    assert "crash_dump" not in issue
    assert result["pagination"]["current_page"] == 2
    assert result["filters"] == {"priority": "critical"}
    assert result["project_id"] == "pr-test"


@pytest.mark.asyncio
async def test_missing_pagination_uses_requested_page_size(mock_client, sample_issue):
    mock_client.get.return_value = {"issues": [sample_issue, dict(sample_issue, id=502)]}

    result = response_json(await list_issues(mock_client, "pr-test", per_page=50))

    assert result["pagination"] == {
        "current_page": 1,
        "total_pages": 1,
        "total_count": 2,
        "per_page": 50,
    }


@pytest.mark.asyncio
async def test_404_is_project_not_found(mock_client):
    mock_client.get.side_effect = ApiError("API request failed: Not Found", 404)

    with pytest.raises(NotFoundError) as exc_info:
        await list_issues(mock_client, "pr-missing")

    assert exc_info.value.message == "Project pr-missing not found"


@pytest.mark.asyncio
async def test_403_is_access_denied(mock_client):
    mock_client.get.side_effect = ApiError("API request failed: Forbidden", 403)

    with pytest.raises(AccessDeniedError):
        await list_issues(mock_client, "pr-locked")


@pytest.mark.asyncio
async def test_other_failure_is_tool_execution_error(mock_client):
    mock_client.get.side_effect = ApiError("Network error: timed out", 500)

    with pytest.raises(ToolExecutionError) as exc_info:
        await list_issues(mock_client, "pr-test")

    assert exc_info.value.message == "Failed to fetch issues: Network error: timed out"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "kwargs",
    [
        {"per_page": 101},
        {"per_page": 0},
        {"status": "open"},
        {"priority": "urgent"},
        {"tag_ids": "1,,2"},
    ],
)
async def test_invalid_arguments_rejected_before_request(mock_client, kwargs):
    with pytest.raises(ValidationError):
        await list_issues(mock_client, "pr-test", **kwargs)

    mock_client.get.assert_not_awaited()


@pytest.mark.asyncio
async def test_step_objects_pass_through(mock_client):
    steps = [{"step": "Start the game"}, {"step": "Open the map"}]
    mock_client.get.return_value = {"issues": [{"id": 7, "steps_to_reproduce": steps}]}

    result = response_json(await list_issues(mock_client, "pr-test"))

    assert result["issues"][0]["steps_to_reproduce"] == steps


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "payload",
    [
        {"issues": [{"id": 1, "steps_to_reproduce": "1. open\n2. crash"}]},
        {"issues": [{"title": "No id"}]},
        {"issues": [], "pagination": {"current_page": 0, "total_pages": -1}},
    ],
)
async def test_malformed_response_is_tool_execution_error(mock_client, payload):
    mock_client.get.return_value = payload

    with pytest.raises(ToolExecutionError) as exc_info:
        await list_issues(mock_client, "pr-test")

    assert exc_info.value.message.startswith("Failed to fetch issues:")
