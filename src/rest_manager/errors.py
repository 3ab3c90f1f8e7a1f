"""Exceptions surfaced by the request pipeline."""

from __future__ import annotations

from typing import Any


class RestManagerError(Exception):
    """Base error for all failures originating in the manager itself."""

    def __init__(self, message: str, *, context: Any | None = None) -> None:
        super().__init__(message)
        self.context = context


class RequestCreationFailed(RestManagerError):
    """Raised when a usable request cannot be assembled from the given URL."""

    default_message = "Unable to create the URL Request object."

    def __init__(self, message: str | None = None, *, context: Any | None = None) -> None:
        super().__init__(message or self.default_message, context=context)


__all__ = ["RequestCreationFailed", "RestManagerError"]
