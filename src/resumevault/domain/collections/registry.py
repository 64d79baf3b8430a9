"""Application-scoped set of collection stores.

Built once per process and handed to the reconciliation engine and any UI layer;
nothing in the domain reaches for module-level store instances.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Protocol

from resumevault.domain.model import (
    BaseEntity,
    Certification,
    Education,
    EntityKind,
    Job,
    JobDescription,
    Person,
    ProfessionalSummary,
    Project,
    SkillName,
    SkillType,
    TagEntity,
    Volunteer,
)

from .jobs import JobStore
from .persons import PERSONS_STORAGE_KEY, PersonRegistry
from .store import CollectionStore
from .tags import TagRegistry

if TYPE_CHECKING:
    from resumevault.domain.ports.persistence import CollectionPersistence

type JobDescriptionStore = CollectionStore[JobDescription]
type SkillNameStore = CollectionStore[SkillName]
type SkillTypeStore = CollectionStore[SkillType]
type EducationStore = CollectionStore[Education]
type CertificationStore = CollectionStore[Certification]
type VolunteerStore = CollectionStore[Volunteer]
type ProjectStore = CollectionStore[Project]
type SummaryStore = CollectionStore[ProfessionalSummary]


class PersistenceFactory(Protocol):
    """Create the persistence for one collection name and record type."""

    def __call__[T: BaseEntity](
        self, key: str, entity_cls: type[T]
    ) -> CollectionPersistence[T]: ...


def _store[T: BaseEntity](
    factory: PersistenceFactory,
    kind: EntityKind,
    entity_cls: type[T],
) -> CollectionStore[T]:
    return CollectionStore(kind.value, factory(kind.value, entity_cls))


@dataclass(slots=True, kw_only=True)
class StoreRegistry:
    persons: PersonRegistry
    jobs: JobStore
    job_descriptions: JobDescriptionStore
    skill_names: SkillNameStore
    skill_types: SkillTypeStore
    education: EducationStore
    certifications: CertificationStore
    volunteers: VolunteerStore
    projects: ProjectStore
    summaries: SummaryStore
    tags: TagRegistry

    @classmethod
    def build(cls, factory: PersistenceFactory, *, load: bool = True) -> StoreRegistry:
        job_descriptions = _store(factory, EntityKind.JOB_DESCRIPTION, JobDescription)
        registry = cls(
            persons=PersonRegistry(factory(PERSONS_STORAGE_KEY, Person)),
            jobs=JobStore(
                EntityKind.JOB.value,
                factory(EntityKind.JOB.value, Job),
                descriptions=job_descriptions,
            ),
            job_descriptions=job_descriptions,
            skill_names=_store(factory, EntityKind.SKILL_NAME, SkillName),
            skill_types=_store(factory, EntityKind.SKILL_TYPE, SkillType),
            education=_store(factory, EntityKind.EDUCATION, Education),
            certifications=_store(factory, EntityKind.CERTIFICATION, Certification),
            volunteers=_store(factory, EntityKind.VOLUNTEER, Volunteer),
            projects=_store(factory, EntityKind.PROJECT, Project),
            summaries=_store(factory, EntityKind.PROFESSIONAL_SUMMARY, ProfessionalSummary),
            tags=TagRegistry(EntityKind.TAG.value, factory(EntityKind.TAG.value, TagEntity)),
        )
        if load:
            registry.load_all()
        return registry

    def by_kind(self) -> dict[EntityKind, CollectionStore[Any]]:
        stores: dict[EntityKind, CollectionStore[Any]] = {
            EntityKind.PERSON: self.persons,
            EntityKind.JOB: self.jobs,
            EntityKind.JOB_DESCRIPTION: self.job_descriptions,
            EntityKind.SKILL_NAME: self.skill_names,
            EntityKind.SKILL_TYPE: self.skill_types,
            EntityKind.EDUCATION: self.education,
            EntityKind.CERTIFICATION: self.certifications,
            EntityKind.VOLUNTEER: self.volunteers,
            EntityKind.PROJECT: self.projects,
            EntityKind.PROFESSIONAL_SUMMARY: self.summaries,
            EntityKind.TAG: self.tags,
        }
        return stores

    def load_all(self) -> None:
        for store in self.by_kind().values():
            store.load_items()

    def counts(self) -> dict[EntityKind, int]:
        return {kind: len(store) for kind, store in self.by_kind().items()}
