"""
Jira workflow models.
"""

from typing import Any

from ..base import ApiModel, pick
from .common import JiraStatus


class JiraTransition(ApiModel):
    """
    Model representing a workflow transition of an issue.

    The transition id differs from the id of the status it leads to.
    """

    id: str | int | None = None
    name: str | None = None
    to: JiraStatus | None = None

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "JiraTransition":
        if not isinstance(data, dict):
            return cls()

        values: dict[str, Any] = pick(data, ("id", "name"))
        if isinstance(data.get("to"), dict):
            values["to"] = JiraStatus.from_api_response(data["to"])
        return cls.model_validate(values)

    @property
    def to_status_id(self) -> str | None:
        if self.to is None or self.to.id is None:
            return None
        return str(self.to.id)
