class JiraMCPError(Exception):
    """Base exception for Jira MCP errors."""

    pass


class JiraConfigError(JiraMCPError):
    """Raised when required configuration values are missing or invalid."""

    def __init__(self, missing: list[str]) -> None:
        self.missing = list(missing)
        super().__init__(
            f"Missing required environment variables: {', '.join(self.missing)}"
        )


class JiraAuthenticationError(JiraMCPError):
    """Raised when Jira API authentication fails (401/403)."""

    pass
