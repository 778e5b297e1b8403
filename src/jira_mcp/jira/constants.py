"""Constants for Jira operations."""

DEFAULT_TASK_FIELDS: tuple[str, ...] = (
    "summary",
    "description",
    "status",
    "assignee",
    "created",
    "updated",
    "duedate",
)

# Page size of a single search request; no further pages are fetched.
DEFAULT_SEARCH_LIMIT = 50
