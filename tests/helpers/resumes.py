"""Sample extracted resumes shared across tests."""

from __future__ import annotations

from datetime import UTC, datetime

from resumevault.domain.reconciliation import (
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


def make_resume(*, email: str = "jane@example.com") -> ExtractedResume:
    """One resume touching every kind of fact."""

    return ExtractedResume(
        person=PersonFact(email=email, name="Jane Doe", city="Austin", state="TX"),
        jobs=(
            JobFact(
                job_title="Engineer",
                company_name="Acme",
                start_date=datetime(2020, 1, 1, tzinfo=UTC),
                end_date=datetime(2021, 1, 1, tzinfo=UTC),
                location="Austin, TX",
                descriptions=("Built X", "Led Y"),
            ),
        ),
        skills=(
            SkillFact(skill_name="Python", skill_type_names=("Languages",)),
            SkillFact(skill_name="Go", skill_type_names=("Languages",)),
        ),
        education=(
            EducationFact(
                school_name="State University",
                degree_name="BSc Computer Science",
                start_date=datetime(2012, 9, 1, tzinfo=UTC),
                end_date=datetime(2016, 6, 1, tzinfo=UTC),
            ),
        ),
        certifications=(CertificationFact(org_name="CNCF", cert_name="CKA"),),
        volunteer=(VolunteerFact(org_name="Food Bank", details="Weekend shifts"),),
        projects=(ProjectFact(project_name="resume-site", project_details="Static site"),),
        summaries=(SummaryFact(summary="Backend engineer with ten years of experience."),),
    )


def sample_payload() -> dict[str, object]:
    """The JSON object a well-behaved extraction reply carries."""

    return {
        "person": {
            "name": "Jane Doe",
            "email": "jane@example.com",
            "phone": "555-0100",
            "city": "Austin",
            "state": "TX",
            "github": None,
        },
        "jobs": [
            {
                "job": {
                    "jobTitle": "Engineer",
                    "companyName": "Acme",
                    "startDate": "2020-01-01",
                    "endDate": "2021-01-01",
                    "location": "Austin, TX",
                },
                "descriptions": ["Built X", "Led Y"],
            }
        ],
        "skills": [
            {"skillName": "Python", "associatedSkillTypeNames": ["Languages"]},
            {"skillName": "Go", "associatedSkillTypeNames": ["Languages"]},
        ],
        "education": [
            {
                "schoolName": "State University",
                "degreeName": "BSc Computer Science",
                "startDate": "2012-09",
                "endDate": "Present",
            }
        ],
        "certifications": [{"orgName": "CNCF", "certName": "CKA", "details": None}],
        "volunteer": [{"orgName": "Food Bank", "details": "Weekend shifts"}],
        "projects": [{"projectName": "resume-site", "projectDetails": "Static site"}],
        "summaries": [{"summary": "Backend engineer with ten years of experience."}],
    }
