"""Domain model for persisted resume records."""

from __future__ import annotations

from .base import BaseEntity, new_id, utcnow
from .enums import EntityKind
from .resume import (
    Certification,
    Education,
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

__all__ = [
    "BaseEntity",
    "Certification",
    "Education",
    "EntityKind",
    "Job",
    "JobDescription",
    "Person",
    "ProfessionalSummary",
    "Project",
    "SkillName",
    "SkillType",
    "TagEntity",
    "Volunteer",
    "new_id",
    "utcnow",
]
