from __future__ import annotations

import os
from typing import TYPE_CHECKING

import pytest
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine  # noqa: TC002
from sqlalchemy.pool import StaticPool

from resumevault.adapters.persistence import CollectionAdapterFactory
from resumevault.adapters.sqlalchemy import SqlAlchemyKeyValueStorage, open_storage
from resumevault.domain.collections import StoreRegistry
from tests.helpers.storage import InMemoryKeyValueStorage

os.environ.setdefault("DATABASE_URI", "sqlite+pysqlite:///:memory:")

if TYPE_CHECKING:
    from collections.abc import Iterator


@pytest.fixture
def sqlite_engine() -> Iterator[Engine]:
    engine = create_engine(
        "sqlite+pysqlite:///:memory:",
        future=True,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def sqlite_storage(sqlite_engine: Engine) -> SqlAlchemyKeyValueStorage:
    return open_storage(engine=sqlite_engine)


@pytest.fixture
def memory_storage() -> InMemoryKeyValueStorage:
    return InMemoryKeyValueStorage()


@pytest.fixture
def registry(memory_storage: InMemoryKeyValueStorage) -> StoreRegistry:
    return StoreRegistry.build(CollectionAdapterFactory(memory_storage))


@pytest.fixture
def sqlite_registry(sqlite_storage: SqlAlchemyKeyValueStorage) -> StoreRegistry:
    return StoreRegistry.build(CollectionAdapterFactory(sqlite_storage))
