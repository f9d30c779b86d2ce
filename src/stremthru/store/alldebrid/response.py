from __future__ import annotations

from dataclasses import dataclass, field
from functools import cached_property
from typing import Any

import httpx
from pydantic import TypeAdapter

from stremthru.store.base.errors import UpstreamError
from stremthru.store.base.types import ResponseEnvelope, StoreName


class ResponseError(Exception):
    """Failure reported inside an AllDebrid response body."""

    def __init__(self, code: str, message: str) -> None:
        super().__init__(f"{code}: {message}")
        self.code = code
        self.message = message


@dataclass
class Response:
    """
    AllDebrid v4 envelope.

    Success: {"status": "success", "data": {...}}
    Failure: {"status": "error", "error": {"code": "...", "message": "..."}}

    When `data_type` is set, `data` is validated against it with pydantic.
    """

    data_type: Any = None
    status: str = ""
    data: Any = None
    error: ResponseError | None = field(default=None, repr=False)

    def load(self, payload: Any) -> None:
        if not isinstance(payload, dict):
            raise TypeError(f"Expected JSON object, got {type(payload)}")

        status = payload.get("status")
        if status not in ("success", "error"):
            raise ValueError(f"Unexpected response status: {status!r}")
        self.status = status

        err = payload.get("error")
        if isinstance(err, dict):
            self.error = ResponseError(
                code=str(err.get("code") or "UNKNOWN"),
                message=str(err.get("message") or ""),
            )

        data = payload.get("data")
        if data is not None and self.data_type is not None:
            data = self._data_adapter.validate_python(data)
        self.data = data

    def get_error(self) -> Exception | None:
        if self.status != "error":
            return None
        if self.error is None:
            return ResponseError("UNKNOWN", "unknown error")
        return self.error

    @cached_property
    def _data_adapter(self) -> TypeAdapter[Any]:
        return TypeAdapter(self.data_type)


def process_response_body(
    res: httpx.Response | None,
    err: Exception | None,
    envelope: ResponseEnvelope,
) -> Exception | None:
    """Decode `res` into `envelope`; return the first failure found, if any."""
    if err is not None:
        return err
    if res is None:
        return RuntimeError("no response")

    try:
        payload = res.json()
    except ValueError as e:
        return e

    # anything raised by the envelope counts as a decode failure
    try:
        envelope.load(payload)
        return envelope.get_error()
    except Exception as e:
        return e


def upstream_error_from_request(
    cause: Exception,
    req: httpx.Request,
    res: httpx.Response | None,
) -> UpstreamError:
    code = cause.code if isinstance(cause, ResponseError) else "UNKNOWN"
    return UpstreamError(
        "upstream request failed",
        request=req,
        response=res,
        store_name=StoreName.ALLDEBRID.value,
        cause=cause,
        status_code=res.status_code if res is not None else 0,
        code=code,
    )
