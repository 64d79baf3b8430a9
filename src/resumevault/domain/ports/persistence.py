"""Ports for persisting collections."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Sequence


@runtime_checkable
class KeyValueStorage(Protocol):
    """Durable text storage addressed by key. Writes are visible once ``set`` returns."""

    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...

    def delete(self, key: str) -> None: ...

    def keys(self) -> list[str]: ...


@runtime_checkable
class CollectionPersistence[TEntity](Protocol):
    """Reads and writes one whole named collection."""

    @property
    def key(self) -> str: ...

    def read(self) -> list[TEntity] | None:
        """Return the stored records, or ``None`` when absent or unreadable."""
        ...

    def write(self, items: Sequence[TEntity]) -> None: ...
