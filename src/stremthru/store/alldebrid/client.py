from __future__ import annotations

from dataclasses import dataclass

import httpx
from loguru import logger

from stremthru.core.config import Settings
from stremthru.store.base.client import default_http_client
from stremthru.store.base.context import DEFAULT_CTX, RequestContext
from stremthru.store.base.errors import ConfigurationError, StoreError
from stremthru.store.base.types import ResponseEnvelope, StoreName

from .response import process_response_body, upstream_error_from_request

DEFAULT_BASE_URL = "https://api.alldebrid.com"
DEFAULT_AGENT = "stremthru"


@dataclass
class APIClientConfig:
    base_url: str = ""
    api_key: str = ""
    http_client: httpx.Client | None = None
    agent: str = ""

    @classmethod
    def from_settings(cls, s: Settings, *, api_key: str | None = None) -> APIClientConfig:
        return cls(
            base_url=s.alldebrid_base_url,
            api_key=api_key or s.require_alldebrid_api_key(),
        )


def _parse_base_url(value: str) -> httpx.URL:
    try:
        url = httpx.URL(value)
    except httpx.InvalidURL as e:
        raise ConfigurationError(f"Invalid base URL {value!r}: {e}") from e

    if url.scheme not in ("http", "https") or not url.host:
        raise ConfigurationError(f"Base URL must be an absolute http(s) URL, got {value!r}")
    return url


def _join_path(base: httpx.URL, path: str) -> httpx.URL:
    return base.copy_with(path=base.path.rstrip("/") + "/" + path.lstrip("/"))


@dataclass(frozen=True, init=False)
class APIClient:
    """
    AllDebrid API client core.

    Immutable after construction, so one instance can serve concurrent calls.
    Raises ConfigurationError when the base URL is not an absolute URL.
    """

    base_url: httpx.URL
    http_client: httpx.Client
    api_key: str
    agent: str

    def __init__(self, config: APIClientConfig | None = None) -> None:
        conf = config or APIClientConfig()

        object.__setattr__(self, "base_url", _parse_base_url(conf.base_url or DEFAULT_BASE_URL))
        object.__setattr__(self, "http_client", conf.http_client or default_http_client())
        object.__setattr__(self, "api_key", conf.api_key)
        object.__setattr__(self, "agent", conf.agent or DEFAULT_AGENT)

    def __repr__(self) -> str:
        return f"APIClient(base_url={str(self.base_url)!r}, agent={self.agent!r})"

    def new_request(
        self,
        method: str,
        path: str,
        ctx: RequestContext | None = None,
    ) -> httpx.Request:
        """
        Build a request for `path` under the base URL.

        GET/HEAD parameters from `ctx` go to the query string, other verbs
        carry them as a form body. `agent` is always set, ahead of any
        parameters from `ctx`.
        """
        params = ctx if ctx is not None else DEFAULT_CTX
        method = method.upper()

        try:
            url = _join_path(self.base_url, path)

            query = [(k, v) for k, v in url.params.multi_items() if k != "agent"]
            query.append(("agent", self.agent))

            body, content_type = params.get_body(method, query)

            headers = httpx.Headers()
            params.set_auth_header(headers, self.api_key)
            headers["User-Agent"] = self.agent
            if content_type:
                headers["Content-Type"] = content_type

            return httpx.Request(
                method,
                url.copy_with(params=httpx.QueryParams(query)),
                headers=headers,
                content=body,
                extensions={"timeout": params.get_timeout().as_dict()},
            )
        except (httpx.InvalidURL, TypeError, ValueError) as e:
            raise StoreError(
                "failed to create request",
                store_name=StoreName.ALLDEBRID.value,
                cause=e,
            ) from e

    def request(
        self,
        method: str,
        path: str,
        ctx: RequestContext | None,
        envelope: ResponseEnvelope,
    ) -> httpx.Response:
        """
        Send one request and decode the body into `envelope`.

        Returns the raw response on success. Transport, decode and
        payload-reported failures all raise UpstreamError.
        """
        req = self.new_request(method, path, ctx)

        res: httpx.Response | None = None
        err: Exception | None = None
        try:
            res = self.http_client.send(req)
        except httpx.HTTPError as e:
            err = e

        err = process_response_body(res, err, envelope)
        if err is not None:
            logger.debug("alldebrid {} {} failed: {!r}", req.method, req.url.path, err)
            raise upstream_error_from_request(err, req, res) from err

        logger.debug("alldebrid {} {} -> {}", req.method, req.url.path, res.status_code)
        return res
