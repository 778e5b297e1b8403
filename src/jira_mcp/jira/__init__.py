"""Jira API module for Jira MCP.

This module provides various Jira API client implementations.
"""

from .client import JiraClient
from .config import JiraConfig
from .issues import IssuesMixin
from .projects import ProjectsMixin
from .search import SearchMixin
from .transitions import TransitionsMixin


class JiraFetcher(
    ProjectsMixin,
    SearchMixin,
    IssuesMixin,
    TransitionsMixin,
):
    """
    The main Jira client class providing access to all Jira operations.

    This class inherits from multiple mixins that provide specific functionality:
    - ProjectsMixin: Project listing
    - SearchMixin: JQL search
    - IssuesMixin: Issue retrieval and assignment
    - TransitionsMixin: Workflow transitions
    """

    pass


__all__ = ["JiraFetcher", "JiraConfig", "JiraClient"]
