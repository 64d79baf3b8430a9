"""Key-value storage backed by a SQLAlchemy engine."""

from __future__ import annotations

from datetime import UTC, datetime
from logging import getLogger
from typing import TYPE_CHECKING

from sqlalchemy import create_engine, delete, insert, select, update

from resumevault.adapters.sqlalchemy.mappings import create_all_tables, kv_store_table

if TYPE_CHECKING:
    from collections.abc import Callable

    from sqlalchemy.engine import Engine

    from resumevault.domain.ports.persistence import KeyValueStorage

log = getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(UTC)


class SqlAlchemyKeyValueStorage:
    """Every ``set``/``delete`` runs in its own committed transaction."""

    def __init__(self, engine: Engine, *, clock: Callable[[], datetime] = _utcnow) -> None:
        self.engine = engine
        self._clock = clock

    def get(self, key: str) -> str | None:
        stmt = select(kv_store_table.c.value).where(kv_store_table.c.key == key)
        with self.engine.connect() as connection:
            return connection.execute(stmt).scalar_one_or_none()

    def set(self, key: str, value: str) -> None:
        now = self._clock()
        with self.engine.begin() as connection:
            result = connection.execute(
                update(kv_store_table)
                .where(kv_store_table.c.key == key)
                .values(value=value, updated_at=now)
            )
            if result.rowcount == 0:
                connection.execute(
                    insert(kv_store_table).values(key=key, value=value, updated_at=now)
                )

    def delete(self, key: str) -> None:
        with self.engine.begin() as connection:
            connection.execute(delete(kv_store_table).where(kv_store_table.c.key == key))

    def keys(self) -> list[str]:
        stmt = select(kv_store_table.c.key).order_by(kv_store_table.c.key)
        with self.engine.connect() as connection:
            return list(connection.execute(stmt).scalars())

    def dispose(self) -> None:
        self.engine.dispose()


def open_storage(
    *,
    engine: Engine | None = None,
    database_uri: str | None = None,
) -> SqlAlchemyKeyValueStorage:
    """Create the engine (unless given), ensure the table exists, and wrap it."""

    if engine is None and database_uri is None:
        raise ValueError("open_storage() needs an engine or a database_uri")
    resolved_engine = engine or create_engine(str(database_uri), future=True)
    create_all_tables(resolved_engine)
    log.debug("Opened key-value storage on %s", resolved_engine.url)
    return SqlAlchemyKeyValueStorage(resolved_engine)


if TYPE_CHECKING:
    _storage_check: KeyValueStorage = SqlAlchemyKeyValueStorage(create_engine("sqlite://"))
