"""Translate record collections to and from their durable JSON text.

Stored records use the historical camelCase layout (``createDate``, ``jobTitle``, ...).
Reading is tolerant: missing fields take their defaults, tags stored as embedded
tag objects collapse to bare ids, and anything structurally broken marks the whole
collection as corrupt so the caller can start over from an empty one.
"""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, fields
from datetime import datetime
from enum import StrEnum
from functools import cache
from logging import getLogger
from types import UnionType
from typing import TYPE_CHECKING, Any, cast, get_args, get_origin, get_type_hints

from resumevault.domain.dates import format_instant, parse_instant
from resumevault.domain.errors import StorageCorruptionError
from resumevault.domain.model import BaseEntity

if TYPE_CHECKING:
    from resumevault.domain.ports.persistence import KeyValueStorage

log = getLogger(__name__)

type RecordPayload = dict[str, object]


class FieldKind(StrEnum):
    TEXT = "text"
    FLAG = "flag"
    TEXT_LIST = "text_list"
    INSTANT = "instant"
    TAGS = "tags"


@dataclass(frozen=True, slots=True)
class FieldSpec:
    name: str
    stored_name: str
    kind: FieldKind
    optional: bool = False


def camel_case(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


def _kind_for(owner: type[BaseEntity], name: str, hint: object) -> tuple[FieldKind, bool]:
    if name == "tags":
        return FieldKind.TAGS, False
    if hint is bool:
        return FieldKind.FLAG, False
    if hint is str:
        return FieldKind.TEXT, False
    if hint is datetime:
        return FieldKind.INSTANT, False
    if isinstance(hint, UnionType) and datetime in get_args(hint):
        return FieldKind.INSTANT, type(None) in get_args(hint)
    if get_origin(hint) is list:
        return FieldKind.TEXT_LIST, False
    raise TypeError(f"Unsupported field type for {owner.__name__}.{name}: {hint!r}")


@cache
def field_specs(entity_cls: type[BaseEntity]) -> tuple[FieldSpec, ...]:
    """Describe how each dataclass field of ``entity_cls`` is stored."""

    hints = get_type_hints(entity_cls)
    specs: list[FieldSpec] = []
    for entity_field in fields(entity_cls):
        kind, optional = _kind_for(entity_cls, entity_field.name, hints[entity_field.name])
        specs.append(
            FieldSpec(
                name=entity_field.name,
                stored_name=camel_case(entity_field.name),
                kind=kind,
                optional=optional,
            )
        )
    return tuple(specs)


def normalize_tag_refs(value: object) -> list[str]:
    """Collapse stored tag references to an ordered set of bare ids.

    Elements may be ids or legacy embedded tag objects (``{"id": ..., "tagName": ...}``).
    """

    if value is None:
        return []
    if not isinstance(value, list):
        raise StorageCorruptionError(f"Tag references must be a list, got {type(value).__name__}")

    tag_ids: list[str] = []
    for element in cast(list[object], value):
        if isinstance(element, str):
            tag_id = element
        elif isinstance(element, Mapping):
            embedded = cast(Mapping[str, object], element).get("id")
            if not isinstance(embedded, str):
                raise StorageCorruptionError("Embedded tag object without a string id")
            tag_id = embedded
        else:
            raise StorageCorruptionError(f"Unsupported tag reference: {element!r}")
        if tag_id and tag_id not in tag_ids:
            tag_ids.append(tag_id)
    return tag_ids


def _decode_text(value: object, spec: FieldSpec) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, int | float) and not isinstance(value, bool):
        # phone numbers and years occasionally arrive as numbers
        return str(value)
    raise StorageCorruptionError(f"Field {spec.stored_name} must be text")


def _decode_text_list(value: object, spec: FieldSpec) -> list[str]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise StorageCorruptionError(f"Field {spec.stored_name} must be a list")
    return [_decode_text(element, spec) for element in cast(list[object], value)]


def _decode_flag(value: object, spec: FieldSpec) -> bool:
    if isinstance(value, bool):
        return value
    raise StorageCorruptionError(f"Field {spec.stored_name} must be a boolean")


def _decode_instant(value: object, spec: FieldSpec) -> datetime | None:
    if value is not None and not isinstance(value, str):
        raise StorageCorruptionError(f"Field {spec.stored_name} must be ISO-8601 text")
    try:
        return parse_instant(value)
    except ValueError as exc:
        raise StorageCorruptionError(str(exc)) from exc


def decode_record[T: BaseEntity](entity_cls: type[T], payload: object) -> T:
    """Build one record from its stored mapping."""

    if not isinstance(payload, Mapping):
        raise StorageCorruptionError(f"Stored {entity_cls.__name__} record is not an object")
    mapping = cast(Mapping[str, object], payload)

    record_id = mapping.get("id")
    if not isinstance(record_id, str) or not record_id:
        raise StorageCorruptionError(f"Stored {entity_cls.__name__} record has no id")

    values: dict[str, Any] = {}
    for spec in field_specs(entity_cls):
        if spec.stored_name in mapping:
            raw = mapping[spec.stored_name]
        elif spec.name in mapping:
            raw = mapping[spec.name]
        else:
            continue

        match spec.kind:
            case FieldKind.TAGS:
                values[spec.name] = normalize_tag_refs(raw)
            case FieldKind.TEXT:
                values[spec.name] = _decode_text(raw, spec)
            case FieldKind.TEXT_LIST:
                values[spec.name] = _decode_text_list(raw, spec)
            case FieldKind.FLAG:
                if raw is not None:
                    values[spec.name] = _decode_flag(raw, spec)
            case FieldKind.INSTANT:
                instant = _decode_instant(raw, spec)
                if instant is not None or spec.optional:
                    values[spec.name] = instant

    return entity_cls(**values)


def encode_record(item: BaseEntity) -> RecordPayload:
    """Inverse of ``decode_record``: canonical text timestamps and bare tag ids."""

    payload: RecordPayload = {}
    for spec in field_specs(type(item)):
        value = getattr(item, spec.name)
        match spec.kind:
            case FieldKind.INSTANT:
                payload[spec.stored_name] = None if value is None else format_instant(value)
            case FieldKind.TAGS:
                payload[spec.stored_name] = [str(tag_id) for tag_id in dict.fromkeys(value)]
            case FieldKind.TEXT_LIST:
                payload[spec.stored_name] = list(value)
            case _:
                payload[spec.stored_name] = value
    return payload


def decode_collection[T: BaseEntity](entity_cls: type[T], text: str) -> list[T]:
    try:
        loaded = json.loads(text)
    except json.JSONDecodeError as exc:
        raise StorageCorruptionError(f"Invalid JSON: {exc.msg}") from exc
    if not isinstance(loaded, list):
        raise StorageCorruptionError("Stored collection is not a JSON array")
    return [decode_record(entity_cls, element) for element in cast(list[object], loaded)]


def encode_collection(items: Sequence[BaseEntity]) -> str:
    return json.dumps([encode_record(item) for item in items], ensure_ascii=False)


@dataclass(slots=True)
class CollectionAdapter[T: BaseEntity]:
    """Persist one named collection of ``entity_cls`` records under ``key``."""

    storage: KeyValueStorage
    key: str
    entity_cls: type[T]

    def read(self) -> list[T] | None:
        text = self.storage.get(self.key)
        if text is None:
            log.debug("No stored value for collection %s", self.key)
            return None
        try:
            return decode_collection(self.entity_cls, text)
        except StorageCorruptionError as exc:
            exc.key = self.key
            log.warning("Discarding corrupt collection %s: %s", self.key, exc)
            return None

    def write(self, items: Sequence[T]) -> None:
        self.storage.set(self.key, encode_collection(items))
        log.debug("Saved %s records to %s", len(items), self.key)


@dataclass(frozen=True, slots=True)
class CollectionAdapterFactory:
    """Hand out one ``CollectionAdapter`` per collection, all sharing ``storage``."""

    storage: KeyValueStorage

    def __call__[T: BaseEntity](self, key: str, entity_cls: type[T]) -> CollectionAdapter[T]:
        return CollectionAdapter(storage=self.storage, key=key, entity_cls=entity_cls)
