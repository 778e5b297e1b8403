"""Tool handlers translating MCP tool calls into Jira operations.

Every handler takes the shared :class:`JiraFetcher` and the call arguments
and returns a :class:`ToolResult`. Failures raised by Jira are turned into
error results by :func:`dispatch`, so nothing escapes a tool call.
"""

import json
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from mcp.types import CallToolResult, TextContent

from .jira import JiraFetcher
from .jira.constants import DEFAULT_TASK_FIELDS
from .logging_config import get_logger, log_operation
from .tools import TOOLS_BY_NAME, missing_arguments

logger = get_logger("jira-mcp.handlers")


@dataclass(frozen=True)
class ToolResult:
    """Outcome of a tool call: a text payload, flagged when it is an error."""

    text: str
    is_error: bool = False

    @classmethod
    def ok(cls, payload: Any) -> "ToolResult":
        return cls(text=json.dumps(payload, indent=2, ensure_ascii=False))

    @classmethod
    def error(cls, message: str) -> "ToolResult":
        return cls(text=message, is_error=True)

    def to_call_tool_result(self) -> CallToolResult:
        return CallToolResult(
            content=[TextContent(type="text", text=self.text)],
            isError=self.is_error,
        )


Handler = Callable[[JiraFetcher, dict[str, Any]], ToolResult]


def get_projects(jira: JiraFetcher, arguments: dict[str, Any]) -> ToolResult:
    projects = jira.get_all_projects(include_archived=bool(arguments.get("archived")))
    return ToolResult.ok([project.to_simplified_dict() for project in projects])


def get_tasks(jira: JiraFetcher, arguments: dict[str, Any]) -> ToolResult:
    fields = arguments.get("fields")
    if fields is None:
        fields = list(DEFAULT_TASK_FIELDS)
    issues = jira.search_issues(arguments["jql"], fields=fields)
    # The projection shape does not follow the requested fields
    return ToolResult.ok([issue.to_simplified_dict() for issue in issues])


def get_task(jira: JiraFetcher, arguments: dict[str, Any]) -> ToolResult:
    issue = jira.get_issue(arguments["taskId"])
    return ToolResult.ok(issue.to_simplified_dict())


def update_task_status(jira: JiraFetcher, arguments: dict[str, Any]) -> ToolResult:
    task_id = arguments["taskId"]
    status_id = arguments["statusId"]

    transition = jira.find_transition_to_status(task_id, status_id)
    if transition is None:
        logger.warning(f"No transition of {task_id} leads to status {status_id}")
        return ToolResult.error(
            f"Invalid status transition for issue {task_id} to status {status_id}"
        )

    jira.transition_issue(task_id, transition.id)
    try:
        updated = jira.get_issue(task_id)
    except Exception as e:
        logger.error(f"Status of {task_id} changed but re-fetch failed: {e}")
        return ToolResult.error(
            f"Status of {task_id} was updated but fetching the updated issue failed: {e}"
        )
    return ToolResult.ok(updated.to_simplified_dict(only=("id", "key", "status")))


def update_task_owner(jira: JiraFetcher, arguments: dict[str, Any]) -> ToolResult:
    task_id = arguments["taskId"]

    jira.assign_issue(task_id, arguments["accountId"])
    try:
        updated = jira.get_issue(task_id)
    except Exception as e:
        logger.error(f"Assignee of {task_id} changed but re-fetch failed: {e}")
        return ToolResult.error(
            f"Assignee of {task_id} was updated but fetching the updated issue failed: {e}"
        )
    return ToolResult.ok(updated.to_simplified_dict(only=("id", "key", "assignee")))


def get_available_statuses(jira: JiraFetcher, arguments: dict[str, Any]) -> ToolResult:
    transitions = jira.get_transitions(arguments["taskId"])
    return ToolResult.ok([transition.to_simplified_dict() for transition in transitions])


def get_task_attachments(jira: JiraFetcher, arguments: dict[str, Any]) -> ToolResult:
    issue = jira.get_issue(arguments["taskId"])
    return ToolResult.ok(issue.attachments_to_simplified_list())


HANDLERS: dict[str, Handler] = {
    "getProjects": get_projects,
    "getTasks": get_tasks,
    "getTask": get_task,
    "updateTaskStatus": update_task_status,
    "updateTaskOwner": update_task_owner,
    "getAvailableStatuses": get_available_statuses,
    "getTaskAttachments": get_task_attachments,
}


def dispatch(
    jira: JiraFetcher, name: str, arguments: dict[str, Any] | None
) -> ToolResult:
    """Run one tool call end to end.

    Args:
        jira: Shared Jira client
        name: Tool name as listed by the server
        arguments: Tool arguments; ``None`` is treated as no arguments

    Returns:
        The handler's result, or an error result for unknown tools, missing
        arguments and any failure raised while talking to Jira
    """
    arguments = arguments or {}

    handler = HANDLERS.get(name)
    if handler is None or name not in TOOLS_BY_NAME:
        logger.warning(f"Unknown tool requested: {name}")
        return ToolResult.error(f"Unknown tool: {name}")

    missing = missing_arguments(name, arguments)
    if missing:
        return ToolResult.error(
            f"Missing required arguments for {name}: {', '.join(missing)}"
        )

    try:
        with log_operation(logger, name):
            return handler(jira, arguments)
    except Exception as e:
        logger.debug(f"Tool {name} failed", exc_info=True)
        return ToolResult.error(str(e))
