"""Module for Jira transition operations."""

from ..logging_config import get_logger
from ..models.jira import JiraTransition
from ..utils import handle_jira_api_errors
from .client import JiraClient

logger = get_logger("jira-mcp.jira")


class TransitionsMixin(JiraClient):
    """Mixin for Jira transition operations."""

    @handle_jira_api_errors("Jira API")
    def get_transitions(self, issue_key: str) -> list[JiraTransition]:
        """
        Get the transitions currently available for an issue.

        The list depends on the workflow and the issue's current status
        and may be empty.

        Args:
            issue_key: The issue key (e.g. 'PROJ-123')

        Returns:
            List of JiraTransition models
        """
        transitions_data = self.jira.get_issue_transitions_full(issue_key)
        if not isinstance(transitions_data, dict):
            msg = (
                "Unexpected return value type from `jira.get_issue_transitions_full`: "
                f"{type(transitions_data)}"
            )
            logger.error(msg)
            raise TypeError(msg)

        return [
            JiraTransition.from_api_response(transition)
            for transition in transitions_data.get("transitions") or []
        ]

    def find_transition_to_status(
        self, issue_key: str, status_id: str
    ) -> JiraTransition | None:
        """
        Find the transition leading an issue to a status.

        Args:
            issue_key: The issue key (e.g. 'PROJ-123')
            status_id: Id of the target status (not of the transition)

        Returns:
            The first matching transition, or None
        """
        for transition in self.get_transitions(issue_key):
            if transition.to_status_id == str(status_id):
                return transition
        return None

    @handle_jira_api_errors("Jira API")
    def transition_issue(self, issue_key: str, transition_id: str | int) -> None:
        """
        Execute a transition on an issue.

        Args:
            issue_key: The issue key (e.g. 'PROJ-123')
            transition_id: The id of the transition to perform
        """
        self.jira.set_issue_status_by_transition_id(issue_key, str(transition_id))
        logger.info(f"Transitioned {issue_key} with transition {transition_id}")
