"""Base client module for Jira API interactions."""

from atlassian import Jira

from ..logging_config import get_logger
from .config import JiraConfig

logger = get_logger("jira-mcp.jira")


class JiraClient:
    """Base client for Jira API interactions."""

    def __init__(self, config: JiraConfig | None = None) -> None:
        """Initialize the Jira client with a given configuration.

        Args:
            config: Jira configuration object. If None, will be loaded from environment variables.

        Raises:
            JiraConfigError: If the configuration is loaded from the
                environment and required variables are missing.
        """
        self.config = config if config is not None else JiraConfig.from_env()

        self.jira = Jira(
            url=self.config.url,
            username=self.config.username,
            password=self.config.access_token,
            cloud=self.config.is_cloud,
            api_version=self.config.api_version,
            verify_ssl=self.config.ssl_verify,
            timeout=self.config.timeout,
        )

        if not self.config.ssl_verify:
            logger.warning(
                f"SSL verification disabled for Jira ({self.config.url}). "
                "This is insecure and should only be used in testing environments."
            )
