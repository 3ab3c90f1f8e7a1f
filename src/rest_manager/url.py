"""Query string augmentation for request URLs."""

from __future__ import annotations

from urllib.parse import quote, urlsplit, urlunsplit

from .entity import RestEntity


def encode_query_component(value: str) -> str:
    """Percent-encode ``value`` for use as a query name or value.

    Only the unreserved set (letters, digits, ``-._~``) is left as is; spaces
    become ``%20``.
    """
    return quote(value, safe="")


def add_url_query_parameters(url: str, parameters: RestEntity) -> str:
    """Return ``url`` with its query replaced by ``parameters``.

    Falls back to the untouched URL when it cannot be split or rebuilt.
    """
    if parameters.total_items() == 0:
        return url

    try:
        parts = urlsplit(url)
        query = "&".join(
            f"{encode_query_component(key)}={encode_query_component(value)}"
            for key, value in parameters.all_values().items()
        )
        return urlunsplit(parts._replace(query=query))
    except (TypeError, ValueError):
        return url


__all__ = ["add_url_query_parameters", "encode_query_component"]
