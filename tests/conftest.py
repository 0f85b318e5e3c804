"""Shared pytest configuration and fixtures for graph_access_token tests."""

import pytest

# Graph API response bodies and RESPX routers
pytest_plugins = ["tests.fixtures.graph_api"]

CONFIG_ENV_VARS = (
    "GRAPH_API_VERSION",
    "GRAPH_HTTP_TIMEOUT",
    "LOG_LEVEL",
    "FB_APP_ID",
    "FB_APP_SECRET",
)


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: marks tests as unit tests (fast, no external deps)")


@pytest.fixture(autouse=True)
def clean_config_environment(monkeypatch):
    """Start every test without configuration from the developer's shell."""
    for name in CONFIG_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def app_id():
    return 123456789


@pytest.fixture
def app_secret():
    return "test-app-secret"
