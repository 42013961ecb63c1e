"""
Session utilities for Nexus operations.

This module creates the shared httpx.AsyncClient used by every concurrent
listing, download and upload task of one command invocation.
"""

import importlib.util
import logging
from typing import Optional

import httpx

from .constants import DEFAULT_TIMEOUT, USER_AGENT

# ============================================================================
# HTTP Configuration Constants
# ============================================================================

# Connection-level retries done by the transport
MAX_RETRIES = 3

# Connection pool sizing; traversal fans out one request per directory
DEFAULT_MAX_CONNECTIONS = 100


def http2_available() -> bool:
    """Return True when the optional h2 package is installed."""
    try:
        return importlib.util.find_spec("h2") is not None
    except (ImportError, ValueError):
        return False


def create_async_session_with_retry(
    auth: Optional[httpx.Auth] = None,
    timeout: float = DEFAULT_TIMEOUT,
    max_connections: int = DEFAULT_MAX_CONNECTIONS,
    base_url: str = "",
) -> httpx.AsyncClient:
    """
    Create an httpx async client with retries and connection pooling.

    Redirects are not followed: Nexus answers unauthenticated writes with a
    redirect to its login page, which must surface as an error.

    Args:
        auth: Optional authentication (e.g. httpx.BasicAuth); None for anonymous access
        timeout: Total timeout in seconds
        max_connections: Maximum number of connections in the pool
        base_url: Optional base URL for relative requests

    Returns:
        Configured httpx.AsyncClient

    Example:
        >>> client = create_async_session_with_retry(auth=httpx.BasicAuth("user", "secret"))
        >>> response = await client.get("https://nexus.example.com/service/local/status")
    """
    limits = httpx.Limits(
        max_connections=max_connections,
        max_keepalive_connections=max(20, max_connections // 5),
    )
    use_http2 = http2_available()
    if not use_http2:
        logging.debug("HTTP/2 support not available (h2 package not installed)")
    transport = httpx.AsyncHTTPTransport(limits=limits, retries=MAX_RETRIES, http2=use_http2)

    return httpx.AsyncClient(
        transport=transport,
        auth=auth,
        base_url=base_url,
        timeout=httpx.Timeout(timeout, connect=10.0),
        follow_redirects=False,
        headers={"User-Agent": USER_AGENT, "Accept-Encoding": "gzip, deflate"},
    )


__all__ = ["create_async_session_with_retry", "http2_available"]
