"""
Base building blocks:
identity, creation timestamp, tag references and the inclusion flag.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import ClassVar
from uuid import uuid4

from resumevault.domain.model.enums import EntityKind  # noqa: TC001


def new_id() -> str:
    return str(uuid4())


def utcnow() -> datetime:
    return datetime.now(UTC)


@dataclass(kw_only=True)
class BaseEntity:
    """Shape shared by every persisted record.

    ``tags`` holds bare tag ids in insertion order without duplicates; ``included``
    marks records selected for an output document.
    """

    id: str = field(default_factory=new_id)
    create_date: datetime = field(default_factory=utcnow)
    tags: list[str] = field(default_factory=list[str])
    included: bool = False

    # class-level discriminator; subclasses must override
    ENTITY_KIND: ClassVar[EntityKind]

    @property
    def entity_kind(self) -> EntityKind:
        return self.ENTITY_KIND

    def add_tag(self, tag_id: str) -> None:
        if tag_id not in self.tags:
            self.tags.append(tag_id)

    def remove_tag(self, tag_id: str) -> None:
        if tag_id in self.tags:
            self.tags.remove(tag_id)
