"""
Jira data models for Jira MCP.

Pydantic projections of the Jira REST API entities exposed by the tools.
"""

from .common import JiraAttachment, JiraStatus
from .issue import JiraIssue
from .project import JiraProject
from .workflow import JiraTransition

__all__ = [
    "JiraAttachment",
    "JiraIssue",
    "JiraProject",
    "JiraStatus",
    "JiraTransition",
]
