"""In-memory stand-ins for durable storage."""

from __future__ import annotations

from typing import TYPE_CHECKING

from resumevault.adapters.persistence import CollectionAdapterFactory
from resumevault.domain.collections import StoreRegistry

if TYPE_CHECKING:
    from resumevault.domain.ports.persistence import KeyValueStorage


class InMemoryKeyValueStorage:
    """Dict-backed storage that also counts writes per key."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self.values: dict[str, str] = dict(initial or {})
        self.writes: dict[str, int] = {}

    def get(self, key: str) -> str | None:
        return self.values.get(key)

    def set(self, key: str, value: str) -> None:
        self.values[key] = value
        self.writes[key] = self.writes.get(key, 0) + 1

    def delete(self, key: str) -> None:
        self.values.pop(key, None)

    def keys(self) -> list[str]:
        return sorted(self.values)


def build_registry(storage: InMemoryKeyValueStorage | None = None) -> StoreRegistry:
    return StoreRegistry.build(CollectionAdapterFactory(storage or InMemoryKeyValueStorage()))


if TYPE_CHECKING:
    _storage_check: KeyValueStorage = InMemoryKeyValueStorage()
