"""Translate validated extraction payloads into reconciliation facts."""

from __future__ import annotations

import json
import re
from logging import getLogger

from resumevault.domain.reconciliation.facts import (
    CertificationFact,
    EducationFact,
    ExtractedResume,
    JobFact,
    PersonFact,
    ProjectFact,
    SkillFact,
    SummaryFact,
    VolunteerFact,
)

from .schema import (
    CertificationPayload,
    EducationPayload,
    JobEntryPayload,
    PersonPayload,
    ProjectPayload,
    ResumePayload,
    ResumePayloadInput,
    SkillPayload,
    SummaryPayload,
    VolunteerPayload,
)

log = getLogger(__name__)

_FENCE = re.compile(r"^```[a-zA-Z]*\s*\n?(?P<body>.*?)\n?```$", re.DOTALL)
_JSON_FINDER = re.compile(r"\{.*\}", re.DOTALL)


def extract_json(text: str) -> object:
    """Locate the JSON object in a model reply, tolerating code fences and prose.

    Raises ``json.JSONDecodeError`` when no object can be decoded.
    """

    raw = text.strip()
    if fenced := _FENCE.match(raw):
        raw = fenced.group("body").strip()
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        if m := _JSON_FINDER.search(raw):
            return json.loads(m.group())
        raise


def _ensure_payload(payload: ResumePayloadInput) -> ResumePayload:
    if isinstance(payload, ResumePayload):
        return payload
    return ResumePayload.model_validate(payload)


def parse_extracted_resume(payload: ResumePayloadInput) -> ExtractedResume:
    resume = _ensure_payload(payload)
    return ExtractedResume(
        person=_person_fact(resume.person),
        jobs=tuple(_job_fact(entry) for entry in resume.jobs),
        skills=tuple(_skill_fact(skill) for skill in resume.skills),
        education=tuple(_education_fact(entry) for entry in resume.education),
        certifications=tuple(_certification_fact(entry) for entry in resume.certifications),
        volunteer=tuple(_volunteer_fact(entry) for entry in resume.volunteer),
        projects=tuple(_project_fact(entry) for entry in resume.projects),
        summaries=tuple(_summary_fact(entry) for entry in resume.summaries),
    )


def _person_fact(payload: PersonPayload | None) -> PersonFact | None:
    if payload is None or not payload.email.strip():
        log.debug("Extracted person has no email; it will not be stored")
        return None
    return PersonFact(
        email=payload.email,
        name=payload.name,
        phone=payload.phone,
        city=payload.city,
        state=payload.state,
        github=payload.github,
        linkedin=payload.linkedin,
        portfolio=payload.portfolio,
    )


def _job_fact(entry: JobEntryPayload) -> JobFact:
    job = entry.job
    return JobFact(
        job_title=job.job_title,
        company_name=job.company_name,
        start_date=job.start_date,
        end_date=job.end_date,
        location=job.location,
        descriptions=tuple(entry.descriptions),
    )


def _skill_fact(payload: SkillPayload) -> SkillFact:
    return SkillFact(
        skill_name=payload.skill_name,
        skill_type_names=tuple(payload.associated_skill_type_names),
    )


def _education_fact(payload: EducationPayload) -> EducationFact:
    return EducationFact(
        school_name=payload.school_name,
        degree_name=payload.degree_name,
        start_date=payload.start_date,
        end_date=payload.end_date,
        location=payload.location,
    )


def _certification_fact(payload: CertificationPayload) -> CertificationFact:
    return CertificationFact(
        org_name=payload.org_name,
        cert_name=payload.cert_name,
        details=payload.details,
    )


def _volunteer_fact(payload: VolunteerPayload) -> VolunteerFact:
    return VolunteerFact(org_name=payload.org_name, details=payload.details)


def _project_fact(payload: ProjectPayload) -> ProjectFact:
    return ProjectFact(project_name=payload.project_name, project_details=payload.project_details)


def _summary_fact(payload: SummaryPayload) -> SummaryFact:
    return SummaryFact(summary=payload.summary)
