"""Pydantic models describing the resume extraction payload and Messages API replies."""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime  # noqa: TC003
from typing import cast

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from resumevault.domain.dates import parse_instant


def _none_to_blank(value: object) -> object:
    if value is None:
        return ""
    if isinstance(value, int | float) and not isinstance(value, bool):
        return str(value)
    return value


def _none_to_empty(value: object) -> object:
    if value is None:
        return []
    return value


def _lenient_instant(value: object) -> datetime | None:
    if isinstance(value, int) and not isinstance(value, bool):
        value = str(value)
    if not isinstance(value, str | datetime):
        return None
    try:
        return parse_instant(value)
    except ValueError:
        # "Present", "Summer 2019" and the like
        return None


class ExtractionBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True, alias_generator=to_camel)


class PersonPayload(ExtractionBaseModel):
    name: str = ""
    email: str = ""
    phone: str = ""
    city: str = ""
    state: str = ""
    github: str = ""
    linkedin: str = ""
    portfolio: str = ""

    _normalize_text = field_validator(
        "name",
        "email",
        "phone",
        "city",
        "state",
        "github",
        "linkedin",
        "portfolio",
        mode="before",
    )(_none_to_blank)


class JobDetailsPayload(ExtractionBaseModel):
    job_title: str = ""
    company_name: str = ""
    start_date: datetime | None = None
    end_date: datetime | None = None
    location: str = ""

    _normalize_text = field_validator(
        "job_title", "company_name", "location", mode="before"
    )(_none_to_blank)
    _normalize_dates = field_validator("start_date", "end_date", mode="before")(_lenient_instant)


class JobEntryPayload(ExtractionBaseModel):
    job: JobDetailsPayload = Field(default_factory=JobDetailsPayload)
    descriptions: list[str] = Field(default_factory=list[str])

    _normalize_descriptions = field_validator("descriptions", mode="before")(_none_to_empty)

    @field_validator("job", mode="before")
    @classmethod
    def _missing_job(cls, value: object) -> object:
        return {} if value is None else value


class SkillPayload(ExtractionBaseModel):
    skill_name: str = ""
    associated_skill_type_names: list[str] = Field(default_factory=list[str])

    _normalize_name = field_validator("skill_name", mode="before")(_none_to_blank)
    _normalize_types = field_validator("associated_skill_type_names", mode="before")(
        _none_to_empty
    )


class EducationPayload(ExtractionBaseModel):
    school_name: str = ""
    degree_name: str = ""
    start_date: datetime | None = None
    end_date: datetime | None = None
    location: str = ""

    _normalize_text = field_validator(
        "school_name", "degree_name", "location", mode="before"
    )(_none_to_blank)
    _normalize_dates = field_validator("start_date", "end_date", mode="before")(_lenient_instant)


class CertificationPayload(ExtractionBaseModel):
    org_name: str = ""
    cert_name: str = ""
    details: str = ""

    _normalize_text = field_validator("org_name", "cert_name", "details", mode="before")(
        _none_to_blank
    )


class VolunteerPayload(ExtractionBaseModel):
    org_name: str = ""
    details: str = ""

    _normalize_text = field_validator("org_name", "details", mode="before")(_none_to_blank)


class ProjectPayload(ExtractionBaseModel):
    project_name: str = ""
    project_details: str = ""

    _normalize_text = field_validator("project_name", "project_details", mode="before")(
        _none_to_blank
    )


class SummaryPayload(ExtractionBaseModel):
    summary: str = ""

    _normalize_text = field_validator("summary", mode="before")(_none_to_blank)

    @model_validator(mode="before")
    @classmethod
    def _accept_bare_text(cls, value: object) -> object:
        if isinstance(value, str):
            return {"summary": value}
        return value


class ResumePayload(ExtractionBaseModel):
    """The JSON object the extraction prompt asks for."""

    person: PersonPayload | None = None
    jobs: list[JobEntryPayload] = Field(default_factory=list[JobEntryPayload])
    skills: list[SkillPayload] = Field(default_factory=list[SkillPayload])
    education: list[EducationPayload] = Field(default_factory=list[EducationPayload])
    certifications: list[CertificationPayload] = Field(
        default_factory=list[CertificationPayload]
    )
    volunteer: list[VolunteerPayload] = Field(default_factory=list[VolunteerPayload])
    projects: list[ProjectPayload] = Field(default_factory=list[ProjectPayload])
    summaries: list[SummaryPayload] = Field(default_factory=list[SummaryPayload])

    _normalize_lists = field_validator(
        "jobs",
        "skills",
        "education",
        "certifications",
        "volunteer",
        "projects",
        "summaries",
        mode="before",
    )(_none_to_empty)

    @model_validator(mode="before")
    @classmethod
    def _fold_legacy_summary(cls, value: object) -> object:
        if not isinstance(value, Mapping):
            return value
        mapping_value = cast(Mapping[str, object], value)
        if "summary" not in mapping_value or mapping_value.get("summaries"):
            return mapping_value
        data: dict[str, object] = dict(mapping_value)
        legacy = data.pop("summary")
        data["summaries"] = [] if legacy is None else [legacy]
        return data


class ContentBlock(BaseModel):
    model_config = ConfigDict(extra="ignore")

    type: str
    text: str | None = None


class MessagesResponse(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: str | None = None
    model: str | None = None
    content: list[ContentBlock] = Field(default_factory=list[ContentBlock])
    stop_reason: str | None = None

    @property
    def text(self) -> str:
        return "".join(block.text or "" for block in self.content if block.type == "text")


class ErrorDetail(BaseModel):
    model_config = ConfigDict(extra="ignore")

    type: str = "error"
    message: str = ""


class ErrorResponse(BaseModel):
    model_config = ConfigDict(extra="ignore")

    error: ErrorDetail


ResumePayloadInput = ResumePayload | Mapping[str, object]
