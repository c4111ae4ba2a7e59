"""
HTTP Client Module

One pooled ``httpx.AsyncClient`` for outbound calls to Google's identity
endpoints during sign-in.

Calls are not retried. A sign-in that cannot reach Google fails with 502
and the user simply tries again.
"""

from typing import Optional

import httpx


# ============== Configuration ==============

MAX_CONNECTIONS = 50
MAX_KEEPALIVE_CONNECTIONS = 10
KEEPALIVE_EXPIRY = 30  # seconds
DEFAULT_TIMEOUT = 10.0  # seconds

USER_AGENT = "certportal/0.1"


# ============== Shared Client ==============

_http_client: Optional[httpx.AsyncClient] = None


def get_http_client() -> httpx.AsyncClient:
    """
    Return the shared client, creating it on first use.

    Returns:
        httpx.AsyncClient: Client with pool limits, timeouts and HTTP/2.
    """
    global _http_client
    if _http_client is None:
        _http_client = httpx.AsyncClient(
            limits=httpx.Limits(
                max_connections=MAX_CONNECTIONS,
                max_keepalive_connections=MAX_KEEPALIVE_CONNECTIONS,
                keepalive_expiry=KEEPALIVE_EXPIRY,
            ),
            timeout=httpx.Timeout(DEFAULT_TIMEOUT),
            headers={"User-Agent": USER_AGENT},
            http2=True,
        )
    return _http_client


async def close_http_client() -> None:
    """Close the shared client; called from the application lifespan."""
    global _http_client
    if _http_client is None:
        return
    await _http_client.aclose()
    _http_client = None
