"""Result types handed back to callers."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from .entity import RestEntity


class HttpMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"


@dataclass
class Response:
    """Normalized view of a raw transport response.

    ``http_status_code`` stays 0 when there is no response or the response
    does not carry an HTTP status.
    """

    response: Any | None = None
    http_status_code: int = 0
    headers: RestEntity = field(default_factory=RestEntity)

    @classmethod
    def from_raw(cls, response: Any | None) -> "Response":
        info = cls(response=response)
        if response is None:
            return info

        status = getattr(response, "status_code", None)
        if isinstance(status, int) and not isinstance(status, bool):
            info.http_status_code = status

        raw_headers = getattr(response, "headers", None)
        if raw_headers is not None and hasattr(raw_headers, "items"):
            for key, value in raw_headers.items():
                info.headers.add(str(key), str(value))
        return info


@dataclass
class Results:
    data: bytes | None = None
    response: Response | None = None
    error: BaseException | None = None

    @classmethod
    def from_error(cls, error: BaseException) -> "Results":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None


__all__ = ["HttpMethod", "Response", "Results"]
