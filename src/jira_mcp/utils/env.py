"""Environment variable utility functions for Jira MCP."""

import os
from collections.abc import Mapping


def getenv(
    env: Mapping[str, str], env_var_name: str, default: str | None = None
) -> str | None:
    """Retrieve the value of an environment variable.

    The provided ``env`` mapping is checked first; the process environment
    is the fallback.

    Args:
        env: Mapping of explicitly provided variables.
        env_var_name: The name of the environment variable to retrieve.
        default: Value returned when the variable is set nowhere.

    Returns:
        The value of the environment variable if found, otherwise ``default``.
    """
    return env.get(env_var_name, os.getenv(env_var_name, default))


def is_env_ssl_verify(
    env: Mapping[str, str], env_var_name: str, default: str = "true"
) -> bool:
    """Check SSL verification setting with secure defaults.

    Defaults to true unless explicitly set to a false value.

    Args:
        env: Mapping of explicitly provided variables.
        env_var_name: Name of the environment variable to check
        default: Default value if environment variable is not set

    Returns:
        True unless explicitly set to 'false', '0' or 'no'
    """
    return (getenv(env, env_var_name, default) or default).lower() not in (
        "false",
        "0",
        "no",
    )
