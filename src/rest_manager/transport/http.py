"""HTTP transport built on top of httpx."""

from __future__ import annotations

from typing import Any

import httpx

from ..logger import BoundLogger, create_logger
from ..request import RequestDescriptor
from .base import TransportResult


class HttpTransport:
    """Sends each request through its own short-lived ``httpx.Client``.

    Keyword arguments are handed to ``httpx.Client`` unchanged, so timeouts,
    redirects and proxies follow httpx defaults unless configured here.
    """

    def __init__(self, *, logger: BoundLogger | None = None, **client_options: Any) -> None:
        self._client_options = client_options
        self._logger = (logger or create_logger()).child("http")

    def send(self, request: RequestDescriptor) -> TransportResult:
        self._logger.debug(
            "HTTP %s %s bytes=%d",
            request.method.value,
            request.url,
            len(request.body or b""),
        )
        try:
            with httpx.Client(**self._client_options) as client:
                response = client.request(
                    request.method.value,
                    request.url,
                    headers=dict(request.headers),
                    content=request.body,
                )
        except httpx.HTTPError as exc:
            self._logger.debug("HTTP %s %s failed: %r", request.method.value, request.url, exc)
            return TransportResult(error=exc)
        except (TypeError, ValueError) as exc:
            # httpx rejects headers it cannot encode before any I/O happens
            self._logger.debug("HTTP %s %s could not be encoded: %r", request.method.value, request.url, exc)
            return TransportResult(error=exc)

        body = response.content
        self._logger.debug(
            "HTTP <- %s status=%s bytes=%d",
            request.url,
            response.status_code,
            len(body),
        )
        return TransportResult(data=body, response=response)


__all__ = ["HttpTransport"]
