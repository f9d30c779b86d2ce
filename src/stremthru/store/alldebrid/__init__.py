from __future__ import annotations

from stremthru.store.alldebrid.client import (
    DEFAULT_AGENT,
    DEFAULT_BASE_URL,
    APIClient,
    APIClientConfig,
)
from stremthru.store.alldebrid.response import (
    Response,
    ResponseError,
    process_response_body,
    upstream_error_from_request,
)

__all__ = [
    "APIClient",
    "APIClientConfig",
    "DEFAULT_AGENT",
    "DEFAULT_BASE_URL",
    "Response",
    "ResponseError",
    "process_response_body",
    "upstream_error_from_request",
]
