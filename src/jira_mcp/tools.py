"""Tool definitions exposed by the Jira MCP server.

The tools listed here are the only ones the dispatcher accepts, and their
``required`` lists are checked before any call reaches Jira.
"""

from typing import Any

from mcp.types import Tool

from .jira.constants import DEFAULT_TASK_FIELDS

TASK_ID_PROPERTY: dict[str, Any] = {
    "type": "string",
    "description": "JIRA task ID (e.g., PROJECT-123)",
}

GET_PROJECTS_TOOL = Tool(
    name="getProjects",
    description="Get list of JIRA projects",
    inputSchema={
        "type": "object",
        "properties": {
            "archived": {
                "type": "boolean",
                "description": "Include archived projects",
                "default": False,
            },
        },
    },
)

GET_TASKS_TOOL = Tool(
    name="getTasks",
    description="Get JIRA tasks based on JQL query",
    inputSchema={
        "type": "object",
        "properties": {
            "jql": {
                "type": "string",
                "description": "JQL query to filter tasks",
            },
            "fields": {
                "type": "array",
                "items": {"type": "string"},
                "description": "Fields to include in the response",
                "default": list(DEFAULT_TASK_FIELDS),
            },
        },
        "required": ["jql"],
    },
)

GET_TASK_TOOL = Tool(
    name="getTask",
    description="Get a single JIRA task by ID",
    inputSchema={
        "type": "object",
        "properties": {"taskId": TASK_ID_PROPERTY},
        "required": ["taskId"],
    },
)

UPDATE_TASK_STATUS_TOOL = Tool(
    name="updateTaskStatus",
    description="Update the status of a JIRA task",
    inputSchema={
        "type": "object",
        "properties": {
            "taskId": TASK_ID_PROPERTY,
            "statusId": {
                "type": "string",
                "description": "ID of the target status",
            },
        },
        "required": ["taskId", "statusId"],
    },
)

UPDATE_TASK_OWNER_TOOL = Tool(
    name="updateTaskOwner",
    description="Update the assignee of a JIRA task",
    inputSchema={
        "type": "object",
        "properties": {
            "taskId": TASK_ID_PROPERTY,
            "accountId": {
                "type": "string",
                "description": "Account ID of the user to assign the task to",
            },
        },
        "required": ["taskId", "accountId"],
    },
)

GET_AVAILABLE_STATUSES_TOOL = Tool(
    name="getAvailableStatuses",
    description="Get list of available JIRA statuses for a task",
    inputSchema={
        "type": "object",
        "properties": {"taskId": TASK_ID_PROPERTY},
        "required": ["taskId"],
    },
)

GET_TASK_ATTACHMENTS_TOOL = Tool(
    name="getTaskAttachments",
    description="Get list of attachments for a JIRA task",
    inputSchema={
        "type": "object",
        "properties": {"taskId": TASK_ID_PROPERTY},
        "required": ["taskId"],
    },
)

TOOLS: tuple[Tool, ...] = (
    GET_PROJECTS_TOOL,
    GET_TASKS_TOOL,
    GET_TASK_TOOL,
    UPDATE_TASK_STATUS_TOOL,
    UPDATE_TASK_OWNER_TOOL,
    GET_AVAILABLE_STATUSES_TOOL,
    GET_TASK_ATTACHMENTS_TOOL,
)

TOOLS_BY_NAME: dict[str, Tool] = {tool.name: tool for tool in TOOLS}
TOOL_NAMES: tuple[str, ...] = tuple(TOOLS_BY_NAME)


def get_tool(name: str) -> Tool | None:
    """Return the tool registered under ``name``, if any."""
    return TOOLS_BY_NAME.get(name)


def required_arguments(name: str) -> list[str]:
    """Return the required argument names of a tool, in declaration order."""
    tool = TOOLS_BY_NAME.get(name)
    if tool is None:
        return []
    return list(tool.inputSchema.get("required", []))


def missing_arguments(name: str, arguments: dict[str, Any] | None) -> list[str]:
    """Return the required arguments of ``name`` that are absent or null."""
    arguments = arguments or {}
    return [arg for arg in required_arguments(name) if arguments.get(arg) is None]
