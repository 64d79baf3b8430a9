from __future__ import annotations

import json
from dataclasses import replace

from resumevault.domain.collections import PERSONS_STORAGE_KEY, StoreRegistry
from resumevault.domain.model import Person
from tests.helpers.storage import InMemoryKeyValueStorage, build_registry


def test_persons_are_stored_under_users_key(memory_storage: InMemoryKeyValueStorage) -> None:
    registry = build_registry(memory_storage)

    registry.persons.create_user()

    assert PERSONS_STORAGE_KEY == "users"
    assert len(json.loads(memory_storage.values["users"])) == 1
    assert "persons" not in memory_storage.values


def test_create_user_allocates_excluded_person(registry: StoreRegistry) -> None:
    person = registry.persons.create_user()

    assert person.included is False
    assert registry.persons.users == (person,)


def test_save_user_replaces_by_id(registry: StoreRegistry) -> None:
    person = registry.persons.create_user()

    registry.persons.save_user(replace(person, email="jane@example.com", name="Jane"))

    assert len(registry.persons) == 1
    found = registry.persons.find_by_email("jane@example.com")
    assert found is not None
    assert found.id == person.id


def test_save_user_appends_unknown_person(registry: StoreRegistry) -> None:
    registry.persons.save_user(Person(email="a@example.com"))
    registry.persons.save_user(Person(email="b@example.com"))

    assert [p.email for p in registry.persons.users] == ["a@example.com", "b@example.com"]
    assert registry.persons.find_by_email("c@example.com") is None
