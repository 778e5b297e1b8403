"""Module for Jira search operations.

Cloud retired ``GET /rest/api/2/search``; there ``POST /rest/api/<version>/search/jql``
is used instead, at the same API version as the rest of the client. Server/Data
Center keeps the classic JQL endpoint. Only the first page is fetched.
"""

from collections.abc import Sequence

from ..logging_config import get_logger
from ..models.jira import JiraIssue
from ..utils import handle_jira_api_errors
from .client import JiraClient
from .constants import DEFAULT_SEARCH_LIMIT, DEFAULT_TASK_FIELDS

logger = get_logger("jira-mcp.jira")


class SearchMixin(JiraClient):
    """Mixin providing JQL search for Jira issues."""

    @handle_jira_api_errors("Jira API")
    def search_issues(
        self,
        jql: str,
        fields: Sequence[str] | str | None = None,
        limit: int = DEFAULT_SEARCH_LIMIT,
    ) -> list[JiraIssue]:
        """
        Search for issues using JQL (Jira Query Language).

        Args:
            jql: JQL query string (e.g., "project = DEMO ORDER BY created DESC")
            fields: Fields Jira should return. ``None`` selects
                DEFAULT_TASK_FIELDS; a string is passed through as-is.
                The projection of every issue keeps its fixed shape.
            limit: Maximum number of issues to return

        Returns:
            Matching issues in the order Jira returned them

        Raises:
            TypeError: Unexpected API response type
            JiraAuthenticationError: Authentication failed (401/403)
        """
        if fields is None:
            fields_list = list(DEFAULT_TASK_FIELDS)
        elif isinstance(fields, str):
            fields_list = [field.strip() for field in fields.split(",") if field.strip()]
        else:
            fields_list = list(fields)

        if self.config.is_cloud:
            response = self.jira.post(
                f"rest/api/{self.config.api_version}/search/jql",
                json={"jql": jql, "fields": fields_list, "maxResults": limit},
            )
        else:
            response = self.jira.jql(jql, fields=",".join(fields_list), limit=limit)

        if not isinstance(response, dict):
            msg = f"Unexpected return value type from JQL search: {type(response)}"
            logger.error(msg)
            raise TypeError(msg)

        issues = response.get("issues") or []
        logger.debug(f"JQL '{jql}' returned {len(issues)} issues")
        return [JiraIssue.from_api_response(issue) for issue in issues]
