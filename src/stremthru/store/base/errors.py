from __future__ import annotations

import httpx


class ConfigurationError(ValueError):
    """Client configuration is invalid; raised at construction time, never per call."""


class StoreError(RuntimeError):
    """Base exception for store-related failures."""

    def __init__(
        self,
        message: str,
        *,
        store_name: str = "",
        cause: BaseException | None = None,
        status_code: int = 0,
        code: str = "UNKNOWN",
    ) -> None:
        super().__init__(message)
        self.message = message
        self.store_name = store_name
        self.cause = cause
        self.status_code = status_code
        self.code = code
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        prefix = f"[{self.store_name}] " if self.store_name else ""
        if self.cause is None:
            return f"{prefix}{self.message}"
        return f"{prefix}{self.message}: {self.cause}"


class UpstreamError(StoreError):
    """Transport, decode, or payload-signaled failure for a request that was sent."""

    def __init__(
        self,
        message: str,
        *,
        request: httpx.Request,
        response: httpx.Response | None = None,
        store_name: str = "",
        cause: BaseException | None = None,
        status_code: int = 0,
        code: str = "UNKNOWN",
    ) -> None:
        super().__init__(
            message,
            store_name=store_name,
            cause=cause,
            status_code=status_code,
            code=code,
        )
        self.request = request
        self.response = response
