"""SQLAlchemy adapter package for resumevault."""

from __future__ import annotations

from .mappings import UTCDateTime, create_all_tables, kv_store_table, metadata
from .storage import SqlAlchemyKeyValueStorage, open_storage

__all__ = [
    "SqlAlchemyKeyValueStorage",
    "UTCDateTime",
    "create_all_tables",
    "kv_store_table",
    "metadata",
    "open_storage",
]
