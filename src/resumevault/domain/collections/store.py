"""Generic persisted, id-keyed collection of records."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from resumevault.domain.model import BaseEntity, new_id

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

    from resumevault.domain.ports.persistence import CollectionPersistence

log = getLogger(__name__)


class DuplicateIdError(ValueError):
    """Raised when adding a record whose id is already present in the collection."""


class CollectionStore[T: BaseEntity]:
    """In-memory list of records mirrored to durable storage on every mutation.

    Natural-key uniqueness is not enforced here; callers that need it (tag
    registry, reconciliation) check before adding.
    """

    def __init__(self, name: str, persistence: CollectionPersistence[T]) -> None:
        self.name = name
        self._persistence = persistence
        self._items: list[T] = []

    @property
    def items(self) -> tuple[T, ...]:
        return tuple(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(tuple(self._items))

    def load_items(self) -> None:
        """Replace the in-memory records with the stored ones.

        Missing or unreadable stored data leaves the collection empty.
        """

        loaded = self._persistence.read()
        self._items = loaded if loaded is not None else []
        log.debug("Loaded %s records into %s", len(self._items), self.name)

    def add_item(self, item: T) -> None:
        if any(existing.id == item.id for existing in self._items):
            raise DuplicateIdError(f"{self.name} already contains id {item.id}")
        self._items.append(item)
        self.save_to_storage()

    def update_item(self, item: T) -> bool:
        """Replace the record sharing ``item.id``. Unknown ids are ignored."""

        for index, existing in enumerate(self._items):
            if existing.id == item.id:
                self._items[index] = item
                self.save_to_storage()
                return True
        return False

    def delete_item(self, item_id: str) -> None:
        self._items = [item for item in self._items if item.id != item_id]
        self.save_to_storage()

    def delete_where(self, predicate: Callable[[T], bool]) -> int:
        """Remove every matching record and persist; return how many were removed."""

        kept = [item for item in self._items if not predicate(item)]
        removed = len(self._items) - len(kept)
        self._items = kept
        self.save_to_storage()
        return removed

    def create_id(self) -> str:
        return new_id()

    def save_to_storage(self) -> None:
        self._persistence.write(self._items)

    def get(self, item_id: str) -> T | None:
        return next((item for item in self._items if item.id == item_id), None)

    def find(self, predicate: Callable[[T], bool]) -> T | None:
        return next((item for item in self._items if predicate(item)), None)

    def filter(self, predicate: Callable[[T], bool]) -> list[T]:
        return [item for item in self._items if predicate(item)]

    def included_items(self) -> list[T]:
        return self.filter(lambda item: item.included)

    def toggle_included(self, item_id: str) -> T | None:
        item = self.get(item_id)
        if item is None:
            return None
        item.included = not item.included
        self.update_item(item)
        return item
