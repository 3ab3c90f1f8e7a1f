"""Common transport abstractions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ..request import RequestDescriptor


@dataclass
class TransportResult:
    """Raw outcome of one dispatch: any of the three fields may be missing."""

    data: bytes | None = None
    response: Any | None = None
    error: BaseException | None = None


@runtime_checkable
class Transport(Protocol):
    """Performs one request; network and encoding failures go on ``error``."""

    def send(self, request: RequestDescriptor) -> TransportResult: ...


__all__ = ["Transport", "TransportResult"]
