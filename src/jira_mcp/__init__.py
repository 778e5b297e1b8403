import asyncio
import os
import sys

import click
from dotenv import load_dotenv

__version__ = "1.0.0"

from .exceptions import JiraConfigError
from .logging_config import log_operation, setup_logger

logger = setup_logger()


@click.command()
@click.option(
    "-v",
    "--verbose",
    count=True,
    help="Increase verbosity (can be used multiple times)",
)
@click.option(
    "--env-file", type=click.Path(exists=True, dir_okay=False), help="Path to .env file"
)
@click.option(
    "--transport",
    type=click.Choice(["stdio", "sse"]),
    default="stdio",
    help="Transport type (stdio or sse)",
)
@click.option(
    "--port",
    default=8000,
    help="Port to listen on for SSE transport",
)
@click.option(
    "--log-dir",
    help="Directory to store log files",
)
@click.option(
    "--log-to-file/--no-log-to-file",
    default=False,
    help="Enable/disable file logging",
)
@click.option("--jira-host", help="Jira host (e.g., your-domain.atlassian.net)")
@click.option("--jira-username", help="Jira username/email")
@click.option("--jira-token", help="Jira API token or password")
@click.option(
    "--jira-ssl-verify/--no-jira-ssl-verify",
    default=True,
    help="Verify SSL certificates (default: verify)",
)
def main(
    verbose: int,
    env_file: str | None,
    transport: str,
    port: int,
    log_dir: str | None,
    log_to_file: bool,
    jira_host: str | None,
    jira_username: str | None,
    jira_token: str | None,
    jira_ssl_verify: bool,
) -> None:
    """Jira MCP Server - Jira issue tools for MCP."""
    logging_level = None
    if verbose == 1:
        logging_level = "INFO"
    elif verbose >= 2:
        logging_level = "DEBUG"

    setup_logger(
        name="jira-mcp",
        level=logging_level,
        log_to_file=log_to_file,
        log_dir=log_dir,
    )

    with log_operation(logger, "application_startup", app_version=__version__):
        if env_file:
            logger.info(f"Loading environment from file: {env_file}")
            load_dotenv(env_file)
        else:
            logger.debug("Attempting to load environment from default .env file")
            load_dotenv()

        if jira_host:
            os.environ["JIRA_HOST"] = jira_host
        if jira_username:
            os.environ["JIRA_USERNAME"] = jira_username
        if jira_token:
            os.environ["JIRA_ACCESS_TOKEN"] = jira_token
        if not jira_ssl_verify:
            os.environ["JIRA_SSL_VERIFY"] = "false"

        from .jira.config import JiraConfig

        try:
            JiraConfig.from_env()
        except (JiraConfigError, ValueError) as e:
            raise click.ClickException(str(e)) from e

    from . import server

    logger.info(f"Starting Jira MCP v{__version__} with {transport} transport")
    try:
        asyncio.run(server.run_server(transport=transport, port=port))
    except Exception as e:
        logger.error(f"Fatal error running server: {e}", exc_info=True)
        sys.exit(1)


__all__ = ["main", "__version__", "setup_logger", "log_operation"]

if __name__ == "__main__":
    main()
