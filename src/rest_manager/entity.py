"""String key/value store used for headers, query and body parameters."""

from __future__ import annotations

from typing import Iterator, Mapping


class RestEntity:
    """Key-unique mapping of raw strings.

    Values are kept exactly as supplied; any percent-encoding happens when the
    store is serialized into a URL or a request body.
    """

    def __init__(self, values: Mapping[str, str] | None = None) -> None:
        self._values: dict[str, str] = {}
        for key, value in (values or {}).items():
            self.add(key, value)

    def add(self, key: str, value: str) -> None:
        self._values[key] = value

    def get(self, key: str) -> str | None:
        return self._values.get(key)

    def all_values(self) -> dict[str, str]:
        return dict(self._values)

    def total_items(self) -> int:
        return len(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._values))

    def __eq__(self, other: object) -> bool:
        if isinstance(other, RestEntity):
            return self._values == other._values
        return NotImplemented

    def __repr__(self) -> str:
        return f"RestEntity({self._values!r})"


__all__ = ["RestEntity"]
