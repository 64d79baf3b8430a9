"""Natural keys: the business fields that identify the same real-world fact.

Keys are computed identically for extracted facts and stored records so that one
can be compared with the other. Dates compare as instants.
"""

from __future__ import annotations

from collections.abc import Hashable
from functools import singledispatch

from resumevault.domain.model import (
    Certification,
    Education,
    Job,
    Person,
    ProfessionalSummary,
    Project,
    SkillName,
    SkillType,
    Volunteer,
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

type NaturalKey = tuple[Hashable, ...]


@singledispatch
def natural_key(_subject: object) -> NaturalKey | None:
    """Return the natural key of a fact or record, or ``None`` for keyless kinds."""
    return None


@natural_key.register
def _(person: Person | PersonFact) -> NaturalKey:
    return ("person", person.email)


# Title and location are deliberately not part of the job key.
@natural_key.register
def _(job: Job | JobFact) -> NaturalKey:
    return ("job", job.company_name, job.start_date, job.end_date)


@natural_key.register
def _(skill: SkillName) -> NaturalKey:
    return ("skill_name", skill.skill_name)


@natural_key.register
def _(skill: SkillFact) -> NaturalKey:
    return ("skill_name", skill.skill_name)


@natural_key.register
def _(skill_type: SkillType) -> NaturalKey:
    return ("skill_type", skill_type.skill_type_name)


@natural_key.register
def _(education: Education | EducationFact) -> NaturalKey:
    return ("education", education.school_name, education.degree_name, education.start_date)


@natural_key.register
def _(certification: Certification | CertificationFact) -> NaturalKey:
    return ("certification", certification.cert_name, certification.org_name)


@natural_key.register
def _(volunteer: Volunteer | VolunteerFact) -> NaturalKey:
    return ("volunteer", volunteer.org_name, volunteer.details)


@natural_key.register
def _(project: Project | ProjectFact) -> NaturalKey:
    return ("project", project.project_name)


@natural_key.register
def _(summary: ProfessionalSummary | SummaryFact) -> NaturalKey:
    return ("summary", summary.summary)


def skill_type_key(skill_type_name: str) -> NaturalKey:
    return ("skill_type", skill_type_name)
