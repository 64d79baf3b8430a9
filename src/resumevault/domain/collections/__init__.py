"""Persisted collection stores."""

from __future__ import annotations

from .jobs import JobStore, UnknownJobError
from .persons import PERSONS_STORAGE_KEY, PersonRegistry
from .registry import PersistenceFactory, StoreRegistry
from .store import CollectionStore, DuplicateIdError
from .tags import TagRegistry

__all__ = [
    "PERSONS_STORAGE_KEY",
    "CollectionStore",
    "DuplicateIdError",
    "JobStore",
    "PersistenceFactory",
    "PersonRegistry",
    "StoreRegistry",
    "TagRegistry",
    "UnknownJobError",
]
