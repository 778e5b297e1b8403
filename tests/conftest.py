"""Root fixtures shared by all test packages."""

import pytest

from tests.utils.factories import AuthConfigFactory


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def jira_env(monkeypatch):
    """Set the required Jira environment variables and clear the optional ones."""
    env = AuthConfigFactory.create_env()
    for name in (
        "JIRA_PROTOCOL",
        "JIRA_API_VERSION",
        "JIRA_SSL_VERIFY",
        "JIRA_TIMEOUT",
    ):
        monkeypatch.delenv(name, raising=False)
    for name, value in env.items():
        monkeypatch.setenv(name, value)
    return env
