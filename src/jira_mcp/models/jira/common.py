"""
Common Jira entity models shared by issues and transitions.
"""

from typing import Any

from pydantic import Field

from ..base import ApiModel, pick

ATTACHMENT_KEYS = (
    "id",
    "filename",
    "created",
    "size",
    "mimeType",
    "content",
    "thumbnail",
)
STATUS_KEYS = ("id", "name", "statusCategory")


class JiraAttachment(ApiModel):
    """
    Model representing a Jira issue attachment.
    """

    id: str | int | None = None
    filename: str | None = None
    created: str | None = None
    size: int | None = None
    mime_type: str | None = Field(default=None, alias="mimeType")
    content: str | None = None
    thumbnail: str | None = None

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "JiraAttachment":
        return cls.model_validate(pick(data, ATTACHMENT_KEYS))


class JiraStatus(ApiModel):
    """
    Model representing the target status of a transition.

    ``statusCategory`` is kept as the raw upstream object.
    """

    id: str | int | None = None
    name: str | None = None
    status_category: Any = Field(default=None, alias="statusCategory")

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "JiraStatus":
        return cls.model_validate(pick(data, STATUS_KEYS))
