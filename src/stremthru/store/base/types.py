from __future__ import annotations

from enum import StrEnum
from typing import Any, Protocol


class StoreName(StrEnum):
    ALLDEBRID = "alldebrid"


class ResponseEnvelope(Protocol):
    """
    Decode target for a response body.

    The executor fills it in place; the envelope itself decides whether the
    decoded payload signals a failure.
    """

    def load(self, payload: Any) -> None: ...

    def get_error(self) -> Exception | None: ...
