"""Typed facts extracted from one resume.

Each fact kind is its own frozen dataclass; the extraction boundary validates the raw
payload and only ever hands these to the reconciliation engine.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator
    from datetime import datetime


@dataclass(frozen=True, slots=True, kw_only=True)
class PersonFact:
    email: str
    name: str = ""
    phone: str = ""
    city: str = ""
    state: str = ""
    github: str = ""
    linkedin: str = ""
    portfolio: str = ""

    def __post_init__(self) -> None:
        if not self.email.strip():
            raise ValueError("PersonFact requires an email")


@dataclass(frozen=True, slots=True, kw_only=True)
class JobFact:
    job_title: str = ""
    company_name: str = ""
    start_date: datetime | None = None
    end_date: datetime | None = None
    location: str = ""
    descriptions: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True, kw_only=True)
class SkillFact:
    skill_name: str
    skill_type_names: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True, kw_only=True)
class EducationFact:
    school_name: str = ""
    degree_name: str = ""
    start_date: datetime | None = None
    end_date: datetime | None = None
    location: str = ""


@dataclass(frozen=True, slots=True, kw_only=True)
class CertificationFact:
    org_name: str = ""
    cert_name: str = ""
    details: str = ""


@dataclass(frozen=True, slots=True, kw_only=True)
class VolunteerFact:
    org_name: str = ""
    details: str = ""


@dataclass(frozen=True, slots=True, kw_only=True)
class ProjectFact:
    project_name: str = ""
    project_details: str = ""


@dataclass(frozen=True, slots=True, kw_only=True)
class SummaryFact:
    summary: str


type ResumeFact = (
    PersonFact
    | JobFact
    | SkillFact
    | EducationFact
    | CertificationFact
    | VolunteerFact
    | ProjectFact
    | SummaryFact
)


@dataclass(frozen=True, slots=True, kw_only=True)
class ExtractedResume:
    """Everything one document yielded. ``person`` is ``None`` when no email was found."""

    person: PersonFact | None = None
    jobs: tuple[JobFact, ...] = ()
    skills: tuple[SkillFact, ...] = ()
    education: tuple[EducationFact, ...] = ()
    certifications: tuple[CertificationFact, ...] = ()
    volunteer: tuple[VolunteerFact, ...] = ()
    projects: tuple[ProjectFact, ...] = ()
    summaries: tuple[SummaryFact, ...] = ()

    def facts(self) -> Iterator[ResumeFact]:
        if self.person is not None:
            yield self.person
        yield from self.jobs
        yield from self.skills
        yield from self.education
        yield from self.certifications
        yield from self.volunteer
        yield from self.projects
        yield from self.summaries

    @property
    def is_empty(self) -> bool:
        return next(self.facts(), None) is None
