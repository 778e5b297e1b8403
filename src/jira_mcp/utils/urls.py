"""URL-related utility functions for Jira MCP."""

import ipaddress
import re
from urllib.parse import urlparse


def normalize_host_url(host: str, protocol: str = "https") -> str:
    """Build the base URL for a Jira host.

    ``host`` may be a bare host name (``example.atlassian.net``) or already
    carry a scheme, in which case the scheme in ``host`` wins.

    Args:
        host: Jira host name, optionally with scheme, port and path
        protocol: Scheme used when ``host`` has none

    Returns:
        The base URL without a trailing slash
    """
    host = host.strip().rstrip("/")
    if re.match(r"^[a-zA-Z][a-zA-Z0-9+.-]*://", host):
        return host
    return f"{protocol}://{host}"


def is_atlassian_cloud_url(url: str | None) -> bool:
    """Determine if a URL belongs to Atlassian Cloud or Server/Data Center.

    Args:
        url: The URL to check

    Returns:
        True if the URL is for an Atlassian Cloud instance, False for Server/Data Center
    """
    if not url:
        return False

    hostname = urlparse(url).hostname or ""

    # Localhost and non-global IP addresses are always Server/Data Center
    if hostname == "localhost" or _is_non_global_ip(hostname):
        return False

    return (
        hostname.endswith(".atlassian.net")
        or hostname.endswith(".jira.com")
        or hostname.endswith(".jira-dev.com")
        or hostname == "api.atlassian.com"
        or hostname.endswith(".atlassian-us-gov-mod.net")  # FedRAMP Moderate
        or hostname.endswith(".atlassian-us-gov.net")
    )


def _is_non_global_ip(hostname: str) -> bool:
    """Check if hostname is an IP literal outside the public address space."""
    try:
        addr = ipaddress.ip_address(hostname)
    except ValueError:
        return False  # Not an IP literal

    # Handle IPv4-mapped IPv6 (e.g., ::ffff:127.0.0.1)
    if isinstance(addr, ipaddress.IPv6Address) and addr.ipv4_mapped:
        addr = addr.ipv4_mapped

    return not addr.is_global
