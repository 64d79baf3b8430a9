"""Resume record kinds stored in collections."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime  # noqa: TC003  # needed by get_type_hints
from typing import ClassVar

from resumevault.domain.model.base import BaseEntity
from resumevault.domain.model.enums import EntityKind


@dataclass(kw_only=True)
class Person(BaseEntity):
    ENTITY_KIND: ClassVar[EntityKind] = EntityKind.PERSON

    name: str = ""
    email: str = ""
    phone: str = ""
    city: str = ""
    state: str = ""
    github: str = ""
    linkedin: str = ""
    portfolio: str = ""


@dataclass(kw_only=True)
class Job(BaseEntity):
    ENTITY_KIND: ClassVar[EntityKind] = EntityKind.JOB

    job_title: str = ""
    company_name: str = ""
    start_date: datetime | None = None
    end_date: datetime | None = None
    location: str = ""


@dataclass(kw_only=True)
class JobDescription(BaseEntity):
    """One bullet line belonging to a job; ``job_id`` names the owning job."""

    ENTITY_KIND: ClassVar[EntityKind] = EntityKind.JOB_DESCRIPTION

    description: str = ""
    job_id: str = ""
    checked: bool = False


@dataclass(kw_only=True)
class SkillName(BaseEntity):
    ENTITY_KIND: ClassVar[EntityKind] = EntityKind.SKILL_NAME

    skill_name: str = ""
    # denormalized: skill type names, not ids
    associated_skill_type_names: list[str] = field(default_factory=list[str])


@dataclass(kw_only=True)
class SkillType(BaseEntity):
    ENTITY_KIND: ClassVar[EntityKind] = EntityKind.SKILL_TYPE

    skill_type_name: str = ""
    associated_skill_names: list[str] = field(default_factory=list[str])


@dataclass(kw_only=True)
class Education(BaseEntity):
    ENTITY_KIND: ClassVar[EntityKind] = EntityKind.EDUCATION

    school_name: str = ""
    degree_name: str = ""
    start_date: datetime | None = None
    end_date: datetime | None = None
    location: str = ""


@dataclass(kw_only=True)
class Certification(BaseEntity):
    ENTITY_KIND: ClassVar[EntityKind] = EntityKind.CERTIFICATION

    org_name: str = ""
    cert_name: str = ""
    details: str = ""


@dataclass(kw_only=True)
class Volunteer(BaseEntity):
    ENTITY_KIND: ClassVar[EntityKind] = EntityKind.VOLUNTEER

    org_name: str = ""
    details: str = ""


@dataclass(kw_only=True)
class Project(BaseEntity):
    ENTITY_KIND: ClassVar[EntityKind] = EntityKind.PROJECT

    project_name: str = ""
    project_details: str = ""


@dataclass(kw_only=True)
class ProfessionalSummary(BaseEntity):
    ENTITY_KIND: ClassVar[EntityKind] = EntityKind.PROFESSIONAL_SUMMARY

    summary: str = ""


@dataclass(kw_only=True)
class TagEntity(BaseEntity):
    ENTITY_KIND: ClassVar[EntityKind] = EntityKind.TAG

    tag_name: str = ""
