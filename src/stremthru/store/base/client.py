from __future__ import annotations

from functools import cache

import httpx


def create_http_client(
    *,
    transport: httpx.BaseTransport | None = None,
    timeout_s: float | None = None,
) -> httpx.Client:
    """
    Store-agnostic httpx.Client factory.

    - Keep-alive is disabled so consecutive calls are not pinned to a single
      upstream connection/IP.
    - No client-level timeout by default; requests carry their own timeout
      from the request context.
    """
    return httpx.Client(
        timeout=httpx.Timeout(timeout_s),
        limits=httpx.Limits(max_keepalive_connections=0),
        transport=transport,
    )


@cache
def default_http_client() -> httpx.Client:
    """Shared client, created on first use and never mutated afterwards."""
    return create_http_client()
