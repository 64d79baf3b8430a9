"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import StrEnum


class EntityKind(StrEnum):
    """Entity kind discriminator; values double as durable collection names."""

    PERSON = "persons"
    JOB = "jobs"
    JOB_DESCRIPTION = "jobDescriptions"
    SKILL_NAME = "skillNames"
    SKILL_TYPE = "skillTypes"
    EDUCATION = "education"
    CERTIFICATION = "certifications"
    VOLUNTEER = "volunteers"
    PROJECT = "projects"
    PROFESSIONAL_SUMMARY = "professionalSummaries"
    TAG = "tags"
