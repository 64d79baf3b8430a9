from __future__ import annotations

import json

import pytest

from resumevault.adapters.persistence import CollectionAdapter
from resumevault.domain.collections import CollectionStore, DuplicateIdError
from resumevault.domain.model import Project
from tests.helpers.storage import InMemoryKeyValueStorage


def _project_store(storage: InMemoryKeyValueStorage) -> CollectionStore[Project]:
    adapter = CollectionAdapter(storage=storage, key="projects", entity_cls=Project)
    return CollectionStore("projects", adapter)


def _stored_names(storage: InMemoryKeyValueStorage) -> list[str]:
    return [record["projectName"] for record in json.loads(storage.values["projects"])]


def test_load_items_with_nothing_stored_gives_empty_collection() -> None:
    store = _project_store(InMemoryKeyValueStorage())

    store.load_items()

    assert store.items == ()


def test_load_items_with_corrupt_value_gives_empty_collection() -> None:
    store = _project_store(InMemoryKeyValueStorage({"projects": "[{]"}))

    store.load_items()

    assert len(store) == 0


def test_every_mutation_is_persisted(memory_storage: InMemoryKeyValueStorage) -> None:
    store = _project_store(memory_storage)
    first = Project(id="p1", project_name="site")
    second = Project(id="p2", project_name="cli")

    store.add_item(first)
    store.add_item(second)
    assert _stored_names(memory_storage) == ["site", "cli"]

    first.project_name = "website"
    assert store.update_item(first) is True
    assert _stored_names(memory_storage) == ["website", "cli"]

    store.delete_item("p2")
    assert _stored_names(memory_storage) == ["website"]
    assert memory_storage.writes["projects"] == 4


def test_add_item_rejects_duplicate_ids(memory_storage: InMemoryKeyValueStorage) -> None:
    store = _project_store(memory_storage)
    store.add_item(Project(id="p1"))

    with pytest.raises(DuplicateIdError):
        store.add_item(Project(id="p1", project_name="again"))

    assert len(store) == 1


def test_update_of_unknown_id_is_ignored(memory_storage: InMemoryKeyValueStorage) -> None:
    store = _project_store(memory_storage)

    assert store.update_item(Project(id="missing")) is False
    assert "projects" not in memory_storage.values


def test_delete_of_unknown_id_still_persists(memory_storage: InMemoryKeyValueStorage) -> None:
    store = _project_store(memory_storage)
    store.add_item(Project(id="p1"))

    store.delete_item("missing")

    assert len(store) == 1
    assert memory_storage.writes["projects"] == 2


def test_create_id_is_unique() -> None:
    store = _project_store(InMemoryKeyValueStorage())

    ids = {store.create_id() for _ in range(100)}

    assert len(ids) == 100


def test_toggle_included_and_included_items(memory_storage: InMemoryKeyValueStorage) -> None:
    store = _project_store(memory_storage)
    store.add_item(Project(id="p1"))
    store.add_item(Project(id="p2"))

    toggled = store.toggle_included("p2")

    assert toggled is not None and toggled.included
    assert [item.id for item in store.included_items()] == ["p2"]
    assert store.toggle_included("missing") is None


def test_reloading_reads_back_what_was_saved(memory_storage: InMemoryKeyValueStorage) -> None:
    store = _project_store(memory_storage)
    store.add_item(Project(id="p1", project_name="site", tags=["t1"]))

    reloaded = _project_store(memory_storage)
    reloaded.load_items()

    assert reloaded.items == store.items
