"""Reconciliation of extracted resume facts into the collection stores.

Flow for one resume:
1) the extraction boundary validates the payload into typed facts
2) each fact's natural key is computed
3) the target store is scanned for a record with the same key
4) unmatched facts are added (with dependent records); matched facts are left as-is
"""

from __future__ import annotations

from .engine import ReconciliationResult, ResumeReconciler, find_by_natural_key
from .facts import (
    CertificationFact,
    EducationFact,
    ExtractedResume,
    JobFact,
    PersonFact,
    ProjectFact,
    ResumeFact,
    SkillFact,
    SummaryFact,
    VolunteerFact,
)
from .keys import NaturalKey, natural_key

__all__ = [
    "CertificationFact",
    "EducationFact",
    "ExtractedResume",
    "JobFact",
    "NaturalKey",
    "PersonFact",
    "ProjectFact",
    "ReconciliationResult",
    "ResumeFact",
    "ResumeReconciler",
    "SkillFact",
    "SummaryFact",
    "VolunteerFact",
    "find_by_natural_key",
    "natural_key",
]
