from __future__ import annotations

import json
from datetime import UTC, datetime

import pytest

from resumevault.adapters.persistence import (
    CollectionAdapter,
    decode_collection,
    decode_record,
    encode_collection,
    encode_record,
    normalize_tag_refs,
)
from resumevault.domain.errors import StorageCorruptionError
from resumevault.domain.model import Job, JobDescription, Person, SkillName, TagEntity
from tests.helpers.storage import InMemoryKeyValueStorage


def test_encode_record_uses_camel_case_and_text_instants() -> None:
    job = Job(
        id="job-1",
        create_date=datetime(2024, 1, 2, 3, 4, 5, tzinfo=UTC),
        job_title="Engineer",
        company_name="Acme",
        start_date=datetime(2020, 1, 1, tzinfo=UTC),
        end_date=None,
        tags=["t1"],
        included=True,
    )

    payload = encode_record(job)

    assert payload == {
        "id": "job-1",
        "createDate": "2024-01-02T03:04:05Z",
        "tags": ["t1"],
        "included": True,
        "jobTitle": "Engineer",
        "companyName": "Acme",
        "startDate": "2020-01-01T00:00:00Z",
        "endDate": None,
        "location": "",
    }


def test_collection_round_trip_preserves_timestamps_and_tags() -> None:
    created = datetime(2023, 6, 1, 8, 30, 15, 250000, tzinfo=UTC)
    skills = [
        SkillName(
            id="s1",
            create_date=created,
            tags=["a", "b"],
            skill_name="Python",
            associated_skill_type_names=["Languages"],
        )
    ]

    restored = decode_collection(SkillName, encode_collection(skills))

    assert restored == skills
    assert restored[0].create_date == created


def test_decode_collapses_embedded_tag_objects() -> None:
    payload = {
        "id": "p1",
        "createDate": "2023-01-01T00:00:00.000Z",
        "tags": [{"id": "t1", "tagName": "Leadership"}, "t2", "t1"],
        "included": True,
        "email": "jane@example.com",
    }

    person = decode_record(Person, payload)

    assert person.tags == ["t1", "t2"]
    assert person.email == "jane@example.com"
    assert person.name == ""


def test_decode_accepts_snake_case_fields_and_numeric_text() -> None:
    person = decode_record(
        Person,
        {"id": "p1", "create_date": "2023-01-01", "phone": 5550100, "included": False},
    )

    assert person.phone == "5550100"
    assert person.create_date == datetime(2023, 1, 1, tzinfo=UTC)


def test_decode_missing_create_date_defaults_to_now() -> None:
    before = datetime.now(UTC)

    line = decode_record(JobDescription, {"id": "d1", "jobId": "job-1", "description": "x"})

    assert line.create_date >= before
    assert line.job_id == "job-1"
    assert line.checked is False


@pytest.mark.parametrize(
    "payload",
    [
        ["not-an-object"],
        [{"tagName": "no id"}],
        [{"id": "t1", "tags": "oops"}],
        [{"id": "t1", "createDate": "yesterday"}],
        [{"id": "t1", "included": "yes"}],
        {"id": "t1"},
    ],
)
def test_decode_collection_rejects_malformed_data(payload: object) -> None:
    with pytest.raises(StorageCorruptionError):
        decode_collection(TagEntity, json.dumps(payload))


def test_normalize_tag_refs_rejects_unknown_shapes() -> None:
    with pytest.raises(StorageCorruptionError):
        normalize_tag_refs([42])


def test_adapter_returns_none_for_absent_and_corrupt_values() -> None:
    storage = InMemoryKeyValueStorage({"tags": "{not json"})
    tags = CollectionAdapter(storage=storage, key="tags", entity_cls=TagEntity)
    jobs = CollectionAdapter(storage=storage, key="jobs", entity_cls=Job)

    assert tags.read() is None
    assert jobs.read() is None


def test_adapter_write_then_read() -> None:
    storage = InMemoryKeyValueStorage()
    adapter = CollectionAdapter(storage=storage, key="tags", entity_cls=TagEntity)
    tag = TagEntity(id="t1", tag_name="Leadership")

    adapter.write([tag])

    assert json.loads(storage.values["tags"])[0]["tagName"] == "Leadership"
    assert adapter.read() == [tag]
