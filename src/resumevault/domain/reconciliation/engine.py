"""Merge one extracted resume into the collection stores.

Every fact is matched against its target collection by natural key. Unmatched facts
become new records (with dependent records for jobs and skills); matched facts are
left alone so that earlier imports and manual edits always win. The whole merge is
synchronous: nothing else can touch the stores while one resume is being applied.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field, replace
from logging import getLogger
from typing import TYPE_CHECKING

from resumevault.domain.errors import ReconciliationError
from resumevault.domain.model import (
    BaseEntity,
    Certification,
    Education,
    EntityKind,
    Job,
    ProfessionalSummary,
    Project,
    SkillName,
    SkillType,
    Volunteer,
    utcnow,
)

from .facts import (
    CertificationFact,
    EducationFact,
    JobFact,
    PersonFact,
    ProjectFact,
    SkillFact,
    SummaryFact,
    VolunteerFact,
)
from .keys import natural_key, skill_type_key

if TYPE_CHECKING:
    from collections.abc import Callable
    from datetime import datetime

    from resumevault.domain.collections import CollectionStore, StoreRegistry

    from .facts import ExtractedResume, ResumeFact

log = getLogger(__name__)


@dataclass(slots=True)
class ReconciliationResult:
    """Per-kind tally of records created and facts that matched existing records."""

    created: Counter[EntityKind] = field(default_factory=Counter["EntityKind"])
    matched: Counter[EntityKind] = field(default_factory=Counter["EntityKind"])
    skipped: int = 0

    @property
    def total_created(self) -> int:
        return sum(self.created.values())

    @property
    def total_matched(self) -> int:
        return sum(self.matched.values())


def find_by_natural_key[T: BaseEntity](store: CollectionStore[T], subject: object) -> T | None:
    key = natural_key(subject)
    if key is None:
        return None
    return store.find(lambda record: natural_key(record) == key)


@dataclass(slots=True)
class ResumeReconciler:
    stores: StoreRegistry
    clock: Callable[[], datetime] = utcnow

    def reconcile(
        self,
        resume: ExtractedResume,
        *,
        document_name: str | None = None,
    ) -> ReconciliationResult:
        """Apply ``resume`` to the stores.

        Any failure is raised as ``ReconciliationError``; records added before the
        failure stay in place.
        """

        label = document_name or "resume payload"
        result = ReconciliationResult()
        try:
            for fact in resume.facts():
                self._apply(fact, result)
        except Exception as exc:
            log.exception("Reconciliation failed for %s", label)
            raise ReconciliationError(
                f"Failed to reconcile {label}: {exc}", document_name=document_name
            ) from exc

        log.info(
            "Reconciled %s: created=%s, matched=%s, skipped=%s",
            label,
            result.total_created,
            result.total_matched,
            result.skipped,
        )
        return result

    def _apply(self, fact: ResumeFact, result: ReconciliationResult) -> None:
        match fact:
            case PersonFact():
                self._merge_person(fact, result)
            case JobFact():
                self._merge_job(fact, result)
            case SkillFact():
                self._merge_skill(fact, result)
            case EducationFact():
                self._merge_simple(
                    self.stores.education,
                    fact,
                    result,
                    lambda: Education(
                        school_name=fact.school_name,
                        degree_name=fact.degree_name,
                        start_date=fact.start_date,
                        end_date=fact.end_date,
                        location=fact.location,
                    ),
                )
            case CertificationFact():
                self._merge_simple(
                    self.stores.certifications,
                    fact,
                    result,
                    lambda: Certification(
                        org_name=fact.org_name,
                        cert_name=fact.cert_name,
                        details=fact.details,
                    ),
                )
            case VolunteerFact():
                self._merge_simple(
                    self.stores.volunteers,
                    fact,
                    result,
                    lambda: Volunteer(org_name=fact.org_name, details=fact.details),
                )
            case ProjectFact():
                self._merge_simple(
                    self.stores.projects,
                    fact,
                    result,
                    lambda: Project(
                        project_name=fact.project_name,
                        project_details=fact.project_details,
                    ),
                )
            case SummaryFact():
                if not fact.summary.strip():
                    result.skipped += 1
                    return
                self._merge_simple(
                    self.stores.summaries,
                    fact,
                    result,
                    lambda: ProfessionalSummary(summary=fact.summary),
                )

    def _stamp[T: BaseEntity](self, record: T, store: CollectionStore[T]) -> T:
        return replace(
            record,
            id=store.create_id(),
            create_date=self.clock(),
            tags=[],
            included=True,
        )

    def _merge_simple[T: BaseEntity](
        self,
        store: CollectionStore[T],
        fact: ResumeFact,
        result: ReconciliationResult,
        build: Callable[[], T],
    ) -> T | None:
        if find_by_natural_key(store, fact) is not None:
            result.matched[EntityKind(store.name)] += 1
            return None
        record = self._stamp(build(), store)
        store.add_item(record)
        result.created[record.entity_kind] += 1
        return record

    def _merge_person(self, fact: PersonFact, result: ReconciliationResult) -> None:
        persons = self.stores.persons
        if persons.find_by_email(fact.email) is not None:
            result.matched[EntityKind.PERSON] += 1
            return

        allocated = persons.create_user()
        person = replace(
            allocated,
            name=fact.name,
            email=fact.email,
            phone=fact.phone,
            city=fact.city,
            state=fact.state,
            github=fact.github,
            linkedin=fact.linkedin,
            portfolio=fact.portfolio,
            create_date=self.clock(),
            tags=[],
            included=True,
        )
        persons.save_user(person)
        result.created[EntityKind.PERSON] += 1

    def _merge_job(self, fact: JobFact, result: ReconciliationResult) -> None:
        jobs = self.stores.jobs
        job = self._merge_simple(
            jobs,
            fact,
            result,
            lambda: Job(
                job_title=fact.job_title,
                company_name=fact.company_name,
                start_date=fact.start_date,
                end_date=fact.end_date,
                location=fact.location,
            ),
        )
        if job is None:
            return

        for line in fact.descriptions:
            if not line.strip():
                continue
            jobs.add_description(job.id, line, included=True)
            result.created[EntityKind.JOB_DESCRIPTION] += 1

    def _merge_skill(self, fact: SkillFact, result: ReconciliationResult) -> None:
        if not fact.skill_name.strip():
            result.skipped += 1
            return

        type_names = [name for name in dict.fromkeys(fact.skill_type_names) if name.strip()]
        skill = self._merge_simple(
            self.stores.skill_names,
            fact,
            result,
            lambda: SkillName(
                skill_name=fact.skill_name,
                associated_skill_type_names=type_names,
            ),
        )
        if skill is None:
            return

        for type_name in type_names:
            self._link_skill_type(type_name, skill.skill_name, result)

    def _link_skill_type(
        self,
        type_name: str,
        skill_name: str,
        result: ReconciliationResult,
    ) -> None:
        skill_types = self.stores.skill_types
        key = skill_type_key(type_name)
        existing = skill_types.find(lambda record: natural_key(record) == key)
        if existing is None:
            record = self._stamp(
                SkillType(skill_type_name=type_name, associated_skill_names=[skill_name]),
                skill_types,
            )
            skill_types.add_item(record)
            result.created[EntityKind.SKILL_TYPE] += 1
            return

        result.matched[EntityKind.SKILL_TYPE] += 1
        if skill_name not in existing.associated_skill_names:
            skill_types.update_item(
                replace(
                    existing,
                    associated_skill_names=[*existing.associated_skill_names, skill_name],
                )
            )
