from __future__ import annotations

from collections.abc import Mapping, MutableSequence, Sequence
from dataclasses import dataclass
from typing import Protocol

import httpx

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"

QueryItems = MutableSequence[tuple[str, str]]


class RequestContext(Protocol):
    """
    Per-call capabilities the request builder depends on.

    Call sites provide one parameter mapping; where it ends up (query string
    or body) depends on the method of the request being built.
    """

    def get_timeout(self) -> httpx.Timeout: ...

    def get_body(self, method: str, query: QueryItems) -> tuple[bytes | None, str]: ...

    def set_auth_header(self, headers: httpx.Headers, api_key: str) -> None: ...


def _form_items(form: Mapping[str, Sequence[str]]) -> list[tuple[str, str]]:
    items: list[tuple[str, str]] = []
    for key, values in form.items():
        if isinstance(values, str):
            values = [values]
        for value in values:
            items.append((key, value))
    return items


@dataclass(frozen=True)
class Ctx:
    """
    Explicit request context.

    `Ctx()` is the default: unbounded timeout, no parameters, client's key.
    """

    api_key: str = ""
    timeout: float | httpx.Timeout | None = None
    form: Mapping[str, Sequence[str]] | None = None

    def get_timeout(self) -> httpx.Timeout:
        if isinstance(self.timeout, httpx.Timeout):
            return self.timeout
        return httpx.Timeout(self.timeout)

    def get_body(self, method: str, query: QueryItems) -> tuple[bytes | None, str]:
        if self.form is None:
            return None, ""

        items = _form_items(self.form)
        if method.upper() in ("HEAD", "GET"):
            query.extend(items)
            return None, ""

        return str(httpx.QueryParams(items)).encode("ascii"), FORM_CONTENT_TYPE

    def set_auth_header(self, headers: httpx.Headers, api_key: str) -> None:
        if self.api_key:
            api_key = self.api_key
        headers["Authorization"] = f"Bearer {api_key}"


DEFAULT_CTX = Ctx()
