"""Module for Jira issue operations."""

from ..logging_config import get_logger
from ..models.jira import JiraIssue
from ..utils import handle_jira_api_errors
from .client import JiraClient

logger = get_logger("jira-mcp.jira")


class IssuesMixin(JiraClient):
    """Mixin for Jira issue operations."""

    @handle_jira_api_errors("Jira API")
    def get_issue(self, issue_key: str) -> JiraIssue:
        """
        Get a Jira issue by key or id.

        Args:
            issue_key: The issue key (e.g. 'PROJ-123') or numeric id

        Returns:
            JiraIssue model, attachments included

        Raises:
            HTTPError: If Jira reports no such issue
        """
        issue = self.jira.issue(issue_key)
        if not isinstance(issue, dict):
            msg = f"Unexpected return value type from `jira.issue`: {type(issue)}"
            logger.error(msg)
            raise TypeError(msg)
        return JiraIssue.from_api_response(issue)

    @handle_jira_api_errors("Jira API")
    def assign_issue(self, issue_key: str, account_id: str) -> None:
        """
        Set the assignee of an issue.

        Cloud identifies users by account id; Server/Data Center by user name.

        Args:
            issue_key: The issue key (e.g. 'PROJ-123')
            account_id: Account id (Cloud) or user name (Server/DC)
        """
        self.jira.assign_issue(issue_key, account_id)
        logger.info(f"Assigned {issue_key} to {account_id}")
