"""Tag registry: name-keyed tags referenced by id from every other record."""

from __future__ import annotations

from typing import TYPE_CHECKING

from resumevault.domain.model import TagEntity

from .store import CollectionStore

if TYPE_CHECKING:
    from collections.abc import Iterable


class TagRegistry(CollectionStore[TagEntity]):
    """Tag names are unique as long as tags are only created via ``resolve_or_create``."""

    def find_by_name(self, tag_name: str) -> TagEntity | None:
        return self.find(lambda tag: tag.tag_name == tag_name)

    def resolve_or_create(self, tag_name: str) -> str:
        """Return the id of the tag named exactly ``tag_name``, creating it if needed."""

        existing = self.find_by_name(tag_name)
        if existing is not None:
            return existing.id
        tag = TagEntity(id=self.create_id(), tag_name=tag_name)
        self.add_item(tag)
        return tag.id

    def resolve_many(self, tag_names: Iterable[str]) -> list[str]:
        tag_ids: list[str] = []
        for tag_name in tag_names:
            stripped = tag_name.strip()
            if not stripped:
                continue
            tag_id = self.resolve_or_create(stripped)
            if tag_id not in tag_ids:
                tag_ids.append(tag_id)
        return tag_ids

    def search(self, query: str) -> list[str]:
        """Tag names containing ``query``, case-insensitively."""

        needle = query.lower()
        return [tag.tag_name for tag in self._items if needle in tag.tag_name.lower()]

    def names_for(self, tag_ids: Iterable[str]) -> list[str]:
        names_by_id = {tag.id: tag.tag_name for tag in self._items}
        return [names_by_id[tag_id] for tag_id in tag_ids if tag_id in names_by_id]
