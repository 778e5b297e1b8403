from collections.abc import Callable
from functools import wraps
from typing import Any, TypeVar, cast

from requests.exceptions import HTTPError

from ..exceptions import JiraAuthenticationError
from ..logging_config import get_logger

logger = get_logger("jira-mcp.jira")

F = TypeVar("F", bound=Callable[..., Any])


def handle_jira_api_errors(service_name: str = "Jira API") -> Callable[[F], F]:
    """
    Decorator translating authentication failures of the Jira REST API.

    401/403 responses become :class:`JiraAuthenticationError`; every other
    error is logged and re-raised unchanged.

    Args:
        service_name: Name of the service for error messages.
    """

    def decorator(func: F) -> F:
        @wraps(func)
        def wrapper(self: Any, *args: Any, **kwargs: Any) -> Any:
            operation_name = getattr(func, "__name__", "API operation")
            try:
                return func(self, *args, **kwargs)
            except HTTPError as http_err:
                status_code = (
                    http_err.response.status_code
                    if http_err.response is not None
                    else None
                )
                if status_code in (401, 403):
                    error_msg = (
                        f"Authentication failed for {service_name} ({status_code}): "
                        f"{http_err}"
                    )
                    logger.error(error_msg)
                    raise JiraAuthenticationError(error_msg) from http_err
                logger.error(f"HTTP error during {operation_name}: {http_err}")
                raise
            except Exception as e:
                logger.error(f"Error during {operation_name}: {e}")
                raise

        return cast(F, wrapper)

    return decorator
