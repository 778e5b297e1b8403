"""Configuration module for Jira API interactions."""

from collections.abc import Mapping
from dataclasses import dataclass

from ..exceptions import JiraConfigError
from ..utils import getenv, is_atlassian_cloud_url, is_env_ssl_verify, normalize_host_url

REQUIRED_ENV_VARS = ("JIRA_HOST", "JIRA_USERNAME", "JIRA_ACCESS_TOKEN")
DEFAULT_PROTOCOL = "https"
DEFAULT_API_VERSION = "2"
DEFAULT_TIMEOUT = 75


@dataclass(frozen=True)
class JiraConfig:
    """Jira API configuration.

    Created once at startup and shared by reference for the lifetime of
    the process.
    """

    host: str  # Host name, optionally with scheme
    username: str  # Email or username
    access_token: str  # API token or password
    protocol: str = DEFAULT_PROTOCOL
    api_version: str = DEFAULT_API_VERSION
    ssl_verify: bool = True
    timeout: int = DEFAULT_TIMEOUT

    @property
    def url(self) -> str:
        """Base URL of the Jira instance."""
        return normalize_host_url(self.host, self.protocol)

    @property
    def is_cloud(self) -> bool:
        """Check if this is a cloud instance.

        Returns:
            True if this is a cloud instance (atlassian.net), False otherwise.
        """
        return is_atlassian_cloud_url(self.url)

    @classmethod
    def from_env(cls, env: Mapping[str, str] | None = None) -> "JiraConfig":
        """Create configuration from environment variables.

        Args:
            env: Explicit variables taking precedence over ``os.environ``.

        Returns:
            JiraConfig with values from the environment.

        Raises:
            JiraConfigError: If any required variable is missing; the error
                lists all of them.
        """
        env = env or {}
        missing = [name for name in REQUIRED_ENV_VARS if not getenv(env, name)]
        if missing:
            raise JiraConfigError(missing)

        timeout_value = getenv(env, "JIRA_TIMEOUT", str(DEFAULT_TIMEOUT))
        try:
            timeout = int(timeout_value or DEFAULT_TIMEOUT)
        except ValueError as e:
            raise ValueError(
                f"JIRA_TIMEOUT must be an integer number of seconds, got {timeout_value!r}"
            ) from e

        return cls(
            host=getenv(env, "JIRA_HOST") or "",
            username=getenv(env, "JIRA_USERNAME") or "",
            access_token=getenv(env, "JIRA_ACCESS_TOKEN") or "",
            protocol=getenv(env, "JIRA_PROTOCOL") or DEFAULT_PROTOCOL,
            api_version=getenv(env, "JIRA_API_VERSION") or DEFAULT_API_VERSION,
            ssl_verify=is_env_ssl_verify(env, "JIRA_SSL_VERIFY"),
            timeout=timeout,
        )
