from __future__ import annotations

import threading
from dataclasses import dataclass, field

import pytest

from rest_manager.request import RequestDescriptor
from rest_manager.transport.base import TransportResult


@dataclass
class FakeRawResponse:
    status_code: int
    headers: dict[str, str] = field(default_factory=dict)


class DummyTransport:
    """Records every request and replies through ``responder``."""

    def __init__(self, responder=None) -> None:
        self.requests: list[RequestDescriptor] = []
        self.threads: list[int] = []
        self._responder = responder or (lambda request: TransportResult(data=b"", response=FakeRawResponse(200)))

    def send(self, request: RequestDescriptor) -> TransportResult:
        self.requests.append(request)
        self.threads.append(threading.get_ident())
        return self._responder(request)


def echo_with_status(status: int):
    def responder(request: RequestDescriptor) -> TransportResult:
        return TransportResult(
            data=request.body,
            response=FakeRawResponse(status, {"Content-Type": request.headers.get("Content-Type", "")}),
        )

    return responder


@pytest.fixture
def transport() -> DummyTransport:
    return DummyTransport()
