"""Domain port definitions for adapters."""

from __future__ import annotations

from .extraction import ResumeDocument, ResumeExtractor
from .persistence import CollectionPersistence, KeyValueStorage

__all__ = [
    "CollectionPersistence",
    "KeyValueStorage",
    "ResumeDocument",
    "ResumeExtractor",
]
