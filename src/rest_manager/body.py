"""Content-Type driven request body encoding."""

from __future__ import annotations

import json

from .entity import RestEntity
from .logger import BoundLogger
from .url import encode_query_component

JSON_CONTENT_TYPE = "application/json"
FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


def content_type_of(headers: RestEntity) -> str | None:
    """Look up the Content-Type header regardless of how its name is cased."""
    for key, value in headers.all_values().items():
        if key.lower() == "content-type":
            return value
    return None


def get_http_body(
    headers: RestEntity,
    parameters: RestEntity,
    raw_body: bytes | None = None,
    *,
    logger: BoundLogger | None = None,
) -> bytes | None:
    content_type = content_type_of(headers)
    if content_type is None:
        return None

    lowered = content_type.lower()
    if JSON_CONTENT_TYPE in lowered:
        return _encode_json(parameters, logger)
    if FORM_CONTENT_TYPE in lowered:
        return _encode_form(parameters, logger)
    return raw_body


def _encode_json(parameters: RestEntity, logger: BoundLogger | None) -> bytes | None:
    try:
        return json.dumps(parameters.all_values(), sort_keys=True, indent=2).encode("utf-8")
    except (TypeError, ValueError) as exc:
        if logger:
            logger.debug("JSON body serialization failed, sending no body: %s", exc)
        return None


def _encode_form(parameters: RestEntity, logger: BoundLogger | None) -> bytes | None:
    try:
        pairs = [
            f"{key}={encode_query_component(value)}"
            for key, value in parameters.all_values().items()
        ]
        return "&".join(pairs).encode("utf-8")
    except (TypeError, ValueError) as exc:
        if logger:
            logger.debug("Form body encoding failed, sending no body: %s", exc)
        return None


__all__ = ["FORM_CONTENT_TYPE", "JSON_CONTENT_TYPE", "content_type_of", "get_http_body"]
