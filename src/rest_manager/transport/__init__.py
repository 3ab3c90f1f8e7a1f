"""Transport implementations exposed to users."""

from .base import Transport, TransportResult
from .http import HttpTransport

__all__ = [
    "HttpTransport",
    "Transport",
    "TransportResult",
]
