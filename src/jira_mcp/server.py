from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import dataclass
from typing import Any

import anyio
from mcp.server import Server
from mcp.types import CallToolResult, Tool

from . import __version__
from .handlers import dispatch
from .jira import JiraConfig, JiraFetcher
from .logging_config import get_logger, log_config_param
from .tools import TOOLS

logger = get_logger("jira-mcp.server")


@dataclass
class AppContext:
    """Application context for Jira MCP."""

    jira: JiraFetcher


def log_jira_config(config: JiraConfig) -> None:
    log_config_param(logger, "Jira", "URL", config.url)
    log_config_param(logger, "Jira", "Username", config.username)
    log_config_param(
        logger, "Jira", "Access Token", config.access_token, sensitive=True
    )
    log_config_param(logger, "Jira", "API Version", config.api_version)
    log_config_param(logger, "Jira", "SSL Verify", str(config.ssl_verify))


@asynccontextmanager
async def server_lifespan(server: Server) -> AsyncIterator[AppContext]:
    """Build the Jira client once for the lifetime of the server."""
    logger.info("Starting Jira MCP server")

    config = JiraConfig.from_env()
    log_jira_config(config)

    jira = JiraFetcher(config=config)
    logger.info("Jira client initialized successfully.")
    try:
        yield AppContext(jira=jira)
    finally:
        logger.info("Jira MCP server stopped")


app = Server("jira-mcp", version=__version__, lifespan=server_lifespan)


@app.list_tools()
async def list_tools() -> list[Tool]:
    """List the Jira tools."""
    return list(TOOLS)


@app.call_tool(validate_input=False)
async def call_tool(name: str, arguments: dict[str, Any] | None) -> CallToolResult:
    """Handle a Jira tool call.

    The Jira client is synchronous, so the call runs in a worker thread.
    """
    ctx = app.request_context.lifespan_context
    result = await anyio.to_thread.run_sync(dispatch, ctx.jira, name, arguments)
    return result.to_call_tool_result()


async def run_server(transport: str = "stdio", port: int = 8000) -> None:
    """Run the Jira MCP server with the specified transport."""
    if transport == "sse":
        import uvicorn
        from mcp.server.sse import SseServerTransport
        from starlette.applications import Starlette
        from starlette.requests import Request
        from starlette.responses import Response
        from starlette.routing import Mount, Route

        sse = SseServerTransport("/messages/")

        async def handle_sse(request: Request) -> Response:
            async with sse.connect_sse(
                request.scope, request.receive, request._send
            ) as streams:
                await app.run(
                    streams[0], streams[1], app.create_initialization_options()
                )
            return Response()

        starlette_app = Starlette(
            routes=[
                Route("/sse", endpoint=handle_sse),
                Mount("/messages/", app=sse.handle_post_message),
            ],
        )

        config = uvicorn.Config(starlette_app, host="0.0.0.0", port=port)  # noqa: S104
        server = uvicorn.Server(config)
        # serve() keeps us on the current event loop
        await server.serve()
    else:
        from mcp.server.stdio import stdio_server

        async with stdio_server() as (read_stream, write_stream):
            await app.run(
                read_stream, write_stream, app.create_initialization_options()
            )
