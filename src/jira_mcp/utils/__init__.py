"""
Utility functions for Jira MCP.
"""

from .decorators import handle_jira_api_errors
from .env import getenv, is_env_ssl_verify
from .urls import is_atlassian_cloud_url, normalize_host_url

__all__ = [
    "getenv",
    "handle_jira_api_errors",
    "is_atlassian_cloud_url",
    "is_env_ssl_verify",
    "normalize_host_url",
]
