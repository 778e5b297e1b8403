"""
Base models for Jira MCP.

Projections only copy what the upstream payload carries: a key missing
upstream stays unset and is left out of the simplified dictionary, while
an explicit ``null`` upstream is kept as ``None``.
"""

from collections.abc import Iterable
from typing import Any

from pydantic import BaseModel, ConfigDict


class ApiModel(BaseModel):
    """
    Base model for objects projected from Jira API responses.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "ApiModel":
        """
        Create a model instance from an API response.

        Args:
            data: The raw API response data
            **kwargs: Additional context parameters

        Returns:
            An instance of the model
        """
        raise NotImplementedError("Subclasses must implement from_api_response")

    def to_simplified_dict(self) -> dict[str, Any]:
        """Convert to the JSON-ready projection, camelCase keys, unset fields omitted."""
        return self.model_dump(mode="json", by_alias=True, exclude_unset=True)


def pick(data: dict[str, Any] | None, keys: Iterable[str]) -> dict[str, Any]:
    """Return the subset of ``data`` holding ``keys`` that are actually present."""
    if not isinstance(data, dict):
        return {}
    return {key: data[key] for key in keys if key in data}
