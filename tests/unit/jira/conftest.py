"""
Test fixtures for Jira unit tests.

The atlassian ``Jira`` class is replaced by a MagicMock preloaded with the
payloads from ``tests.fixtures.jira_mocks``.
"""

import copy
from unittest.mock import MagicMock, patch

import pytest

from jira_mcp.jira import JiraFetcher
from jira_mcp.jira.config import JiraConfig
from tests.fixtures.jira_mocks import (
    MOCK_JIRA_ATTACHMENTS,
    MOCK_JIRA_PROJECTS,
    MOCK_JIRA_TRANSITIONS,
)
from tests.utils.factories import JiraIssueFactory


@pytest.fixture
def jira_config_factory():
    """
    Factory for creating JiraConfig instances with customizable options.

    Example:
        def test_config(jira_config_factory):
            config = jira_config_factory(host="jira.example.com")
            assert config.url == "https://jira.example.com"
    """

    def _create_config(**overrides):
        defaults = {
            "host": "test.atlassian.net",
            "username": "test@example.com",
            "access_token": "test-api-token",
        }
        return JiraConfig(**{**defaults, **overrides})

    return _create_config


@pytest.fixture
def mock_config(jira_config_factory):
    """Standard Jira Cloud configuration."""
    return jira_config_factory()


@pytest.fixture
def server_config(jira_config_factory):
    """Jira Server/Data Center configuration."""
    return jira_config_factory(host="jira.example.com")


@pytest.fixture
def mock_atlassian_jira():
    """Mock of the atlassian Jira client with realistic responses."""
    mock_jira = MagicMock()

    mock_jira.projects.return_value = copy.deepcopy(MOCK_JIRA_PROJECTS)
    mock_jira.issue.return_value = JiraIssueFactory.create(
        fields={"attachment": copy.deepcopy(MOCK_JIRA_ATTACHMENTS)}
    )
    mock_jira.get_issue_transitions_full.return_value = copy.deepcopy(
        MOCK_JIRA_TRANSITIONS
    )
    mock_jira.jql.return_value = {
        "issues": [
            JiraIssueFactory.create("TEST-1"),
            JiraIssueFactory.create("TEST-2"),
        ],
        "total": 2,
        "startAt": 0,
        "maxResults": 50,
    }
    mock_jira.post.return_value = {
        "issues": [JiraIssueFactory.create("TEST-1")],
        "isLast": True,
    }
    mock_jira.set_issue_status_by_transition_id.return_value = None
    mock_jira.assign_issue.return_value = None

    return mock_jira


@pytest.fixture
def jira_fetcher(mock_config, mock_atlassian_jira):
    """JiraFetcher for a Cloud instance backed by the mocked client."""
    with patch("jira_mcp.jira.client.Jira", return_value=mock_atlassian_jira):
        yield JiraFetcher(config=mock_config)


@pytest.fixture
def server_jira_fetcher(server_config, mock_atlassian_jira):
    """JiraFetcher for a Server/Data Center instance backed by the mocked client."""
    with patch("jira_mcp.jira.client.Jira", return_value=mock_atlassian_jira):
        yield JiraFetcher(config=server_config)
