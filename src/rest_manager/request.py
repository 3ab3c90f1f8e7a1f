"""Assembly of the immutable request handed to a transport."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

import httpx

from .entity import RestEntity
from .errors import RequestCreationFailed
from .types import HttpMethod


@dataclass(frozen=True)
class RequestDescriptor:
    url: str
    method: HttpMethod
    headers: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    body: bytes | None = None


def build_request(
    url: str | None,
    method: HttpMethod,
    headers: RestEntity,
    body: bytes | None = None,
) -> RequestDescriptor:
    if not url:
        raise RequestCreationFailed(context={"url": url})

    try:
        parsed = httpx.URL(url)
    except (httpx.InvalidURL, TypeError) as exc:
        raise RequestCreationFailed(context={"url": url}) from exc
    if not parsed.scheme or not parsed.host:
        raise RequestCreationFailed(context={"url": url})

    return RequestDescriptor(
        url=url,
        method=HttpMethod(method),
        headers=MappingProxyType(headers.all_values()),
        body=body,
    )


__all__ = ["RequestDescriptor", "build_request"]
