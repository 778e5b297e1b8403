"""
Jira issue models.

The issue projection has a fixed shape whatever fields were requested
from Jira; fields the response does not carry are simply left out.
"""

from collections.abc import Iterable
from typing import Any

from pydantic import Field

from ..base import ApiModel, pick
from .common import JiraAttachment

ISSUE_FIELD_KEYS = (
    "summary",
    "description",
    "status",
    "assignee",
    "created",
    "updated",
    "duedate",
    "priority",
)


class JiraIssue(ApiModel):
    """
    Model representing a Jira issue.

    ``status``, ``assignee`` and ``priority`` are the raw Jira objects;
    ``description`` is a string on API v2 and an ADF document on v3.
    """

    id: str | int | None = None
    key: str | None = None
    summary: str | None = None
    description: Any = None
    status: dict[str, Any] | None = None
    assignee: dict[str, Any] | None = None
    created: str | None = None
    updated: str | None = None
    duedate: str | None = None
    priority: dict[str, Any] | None = None
    attachments: list[JiraAttachment] = Field(default_factory=list, exclude=True)

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "JiraIssue":
        """
        Create a JiraIssue from a Jira API response.

        Args:
            data: The issue data from the Jira API

        Returns:
            A JiraIssue instance
        """
        if not isinstance(data, dict):
            return cls()

        fields = data.get("fields") or {}
        values = {**pick(data, ("id", "key")), **pick(fields, ISSUE_FIELD_KEYS)}
        values["attachments"] = [
            JiraAttachment.from_api_response(attachment)
            for attachment in fields.get("attachment") or []
        ]
        return cls.model_validate(values)

    def to_simplified_dict(self, only: Iterable[str] | None = None) -> dict[str, Any]:
        """Convert to the issue projection.

        Args:
            only: Restrict the projection to these keys, in projection order

        Returns:
            The projected issue
        """
        result = super().to_simplified_dict()
        if only is None:
            return result
        wanted = set(only)
        return {key: value for key, value in result.items() if key in wanted}

    def attachments_to_simplified_list(self) -> list[dict[str, Any]]:
        return [attachment.to_simplified_dict() for attachment in self.attachments]
