"""Person registry stored under its own durable key."""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from resumevault.domain.model import Person, utcnow

from .store import CollectionStore

if TYPE_CHECKING:
    from resumevault.domain.ports.persistence import CollectionPersistence

PERSONS_STORAGE_KEY: Final[str] = "users"


class PersonRegistry(CollectionStore[Person]):
    """Persons are looked up by email; the stored list lives under ``users``."""

    def __init__(self, persistence: CollectionPersistence[Person]) -> None:
        super().__init__(PERSONS_STORAGE_KEY, persistence)

    @property
    def users(self) -> tuple[Person, ...]:
        return self.items

    def find_by_email(self, email: str) -> Person | None:
        return self.find(lambda person: person.email == email)

    def save_user(self, person: Person) -> None:
        for index, existing in enumerate(self._items):
            if existing.id == person.id:
                self._items[index] = person
                break
        else:
            self._items.append(person)
        self.save_to_storage()

    def create_user(self) -> Person:
        person = Person(id=self.create_id(), create_date=utcnow(), included=False)
        self.save_user(person)
        return person
