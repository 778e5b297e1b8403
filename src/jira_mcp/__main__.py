"""Entry point for running the Jira MCP server with ``python -m jira_mcp``."""

from jira_mcp import main

if __name__ == "__main__":
    main()
