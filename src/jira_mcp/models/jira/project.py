"""
Jira project models.
"""

from typing import Any

from pydantic import Field

from ..base import ApiModel, pick

PROJECT_KEYS = ("id", "key", "name", "projectTypeKey", "simplified", "style")


class JiraProject(ApiModel):
    """
    Model representing a Jira project.

    ``archived`` is always emitted and defaults to False.
    """

    id: str | int | None = None
    key: str | None = None
    name: str | None = None
    archived: bool = False
    project_type_key: str | None = Field(default=None, alias="projectTypeKey")
    simplified: bool | None = None
    style: str | None = None

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "JiraProject":
        """
        Create a JiraProject from a Jira API response.

        Args:
            data: A project entry of the project list response

        Returns:
            A JiraProject instance
        """
        values = pick(data, PROJECT_KEYS)
        values["archived"] = bool(data.get("archived")) if isinstance(data, dict) else False
        return cls.model_validate(values)
