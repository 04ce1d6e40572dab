"""Pytest configuration and shared fixtures."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from betahub_mcp.clients.betahub_client import BetaHubClient, reset_api_client
from betahub_mcp.config import Settings, reset_settings
from betahub_mcp.services.auth_service import reset_session

TEST_BASE_URL = "https://betahub.test/"


@pytest.fixture
def anyio_backend():
    """Configure anyio backend for async tests."""
    return "asyncio"


# =============================================================================
# Environment and Configuration Fixtures
# =============================================================================

@pytest.fixture(autouse=True)
def clean_state(monkeypatch):
    """Reset the process-wide session, client and settings around every test."""
    for name in ("BETAHUB_TOKEN", "BETAHUB_API_BASE", "BETAHUB_API_BASE_URL",
                 "BETAHUB_USER_AGENT", "BETAHUB_TOKEN_ENV_VAR"):
        monkeypatch.delenv(name, raising=False)
    reset_session()
    reset_api_client()
    reset_settings()
    yield
    reset_session()
    reset_api_client()
    reset_settings()


@pytest.fixture
def test_settings():
    """Settings pointing at a fake BetaHub host."""
    return Settings(api_base_url=TEST_BASE_URL, user_agent="betahub-mcp-tests/1.0")


# =============================================================================
# BetaHub API Mocks
# =============================================================================

@pytest.fixture
def mock_client(test_settings):
    """Create a mock BetaHub client whose ``get`` is an AsyncMock."""
    client = MagicMock(spec=BetaHubClient)
    client.settings = test_settings
    client.get = AsyncMock(return_value={})
    return client


# =============================================================================
# Test Data Fixtures
# =============================================================================

@pytest.fixture
def sample_verify_payload():
    """Successful auth/verify response for a personal access token."""
    return {
        "valid": True,
        "token_type": "personal_access_token",
        "user": {"id": 7, "name": "Test User", "email": "test@example.com"},
        "expires_at": "2030-01-01T00:00:00Z",
    }


@pytest.fixture
def sample_feature_request():
    """Provide a raw feature request as returned by the API."""
    return {
        "id": 101,
        "title": "Dark mode",
        "description": "Please add a dark theme",
        "status": "pending",
        "votes": 42,
        "voted": False,
        "is_duplicate": False,
        "duplicates_count": 0,
        "user": {"id": 3, "name": "Ada", "email": "ada@example.com"},
        "created_at": "2024-01-01T00:00:00Z",
        "updated_at": "2024-01-02T00:00:00Z",
        "url": "https://app.betahub.io/projects/pr-test/feature_requests/101",
        "internal_notes": "not for export",
    }


@pytest.fixture
def sample_issue():
    """Provide a raw issue as returned by the API."""
    return {
        "id": 501,
        "title": "Crash on launch",
        "description": "The game crashes after the splash screen",
        "status": "new",
        "priority": "critical",
        "score": 87,
        "steps_to_reproduce": ["Start the game", "Wait for the splash screen"],
        "assigned_to": None,
        "reported_by": {"id": 9, "name": "Tester", "email": "tester@example.com"},
        "potential_duplicate": None,
        "created_at": "2024-02-01T00:00:00Z",
        "updated_at": "2024-02-02T00:00:00Z",
        "url": "https://app.betahub.io/projects/pr-test/issues/501",
        "crash_dump": "0xdeadbeef",
    }


# =============================================================================
# Pytest Hooks for Test Reporting
# =============================================================================

def pytest_configure(config):
    """Configure pytest with custom markers and settings."""
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
    config.addinivalue_line(
        "markers", "property: marks tests as property-based tests"
    )


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "property" in str(item.fspath):
            item.add_marker(pytest.mark.property)
        elif "integration" in str(item.fspath):
            item.add_marker(pytest.mark.integration)


def pytest_sessionstart(session):
    """Print test session information."""
    print("\n" + "=" * 70)
    print("BetaHub MCP Server - Test Suite")
    print("=" * 70)


def pytest_sessionfinish(session, exitstatus):
    """Print test session summary."""
    print("\n" + "=" * 70)
    if exitstatus == 0:
        print("PASS: All tests passed!")
    else:
        print(f"FAIL: Tests failed with exit status: {exitstatus}")
    print("=" * 70)
