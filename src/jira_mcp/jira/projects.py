"""Module for Jira project operations."""

from ..logging_config import get_logger
from ..models.jira import JiraProject
from ..utils import handle_jira_api_errors
from .client import JiraClient

logger = get_logger("jira-mcp.jira")


class ProjectsMixin(JiraClient):
    """Mixin for Jira project operations."""

    @handle_jira_api_errors("Jira API")
    def get_all_projects(self, include_archived: bool = False) -> list[JiraProject]:
        """
        Get all projects visible to the current user.

        Args:
            include_archived: Keep projects flagged as archived

        Returns:
            Projects in the order Jira returned them
        """
        projects = self.jira.projects(included_archived=True)
        if not isinstance(projects, list):
            msg = f"Unexpected return value type from `jira.projects`: {type(projects)}"
            logger.error(msg)
            raise TypeError(msg)

        if not include_archived:
            projects = [
                project
                for project in projects
                if not (isinstance(project, dict) and project.get("archived"))
            ]

        logger.debug(f"Retrieved {len(projects)} projects")
        return [JiraProject.from_api_response(project) for project in projects]
