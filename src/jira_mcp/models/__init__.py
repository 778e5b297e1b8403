"""
Pydantic models for Jira MCP.
"""

from .base import ApiModel
from .jira import (
    JiraAttachment,
    JiraIssue,
    JiraProject,
    JiraStatus,
    JiraTransition,
)

__all__ = [
    "ApiModel",
    "JiraAttachment",
    "JiraIssue",
    "JiraProject",
    "JiraStatus",
    "JiraTransition",
]
