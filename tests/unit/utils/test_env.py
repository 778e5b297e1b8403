"""Tests for the environment helpers."""

import pytest

from jira_mcp.utils.env import getenv, is_env_ssl_verify


def test_getenv_prefers_explicit_mapping(monkeypatch):
    monkeypatch.setenv("JIRA_HOST", "from-env.atlassian.net")
    assert getenv({"JIRA_HOST": "explicit.atlassian.net"}, "JIRA_HOST") == (
        "explicit.atlassian.net"
    )


def test_getenv_falls_back_to_process_env(monkeypatch):
    monkeypatch.setenv("JIRA_HOST", "from-env.atlassian.net")
    assert getenv({}, "JIRA_HOST") == "from-env.atlassian.net"


def test_getenv_default(monkeypatch):
    monkeypatch.delenv("JIRA_TIMEOUT", raising=False)
    assert getenv({}, "JIRA_TIMEOUT", "75") == "75"
    assert getenv({}, "JIRA_TIMEOUT") is None


@pytest.mark.parametrize(
    "value,expected",
    [
        ("false", False),
        ("FALSE", False),
        ("0", False),
        ("no", False),
        ("true", True),
        ("anything", True),
    ],
)
def test_is_env_ssl_verify(value, expected):
    assert is_env_ssl_verify({"JIRA_SSL_VERIFY": value}, "JIRA_SSL_VERIFY") is expected


def test_is_env_ssl_verify_defaults_to_true(monkeypatch):
    monkeypatch.delenv("JIRA_SSL_VERIFY", raising=False)
    assert is_env_ssl_verify({}, "JIRA_SSL_VERIFY") is True
