"""Application service for importing resume documents one after another."""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

from resumevault.domain.errors import ExtractionError, ReconciliationError
from resumevault.domain.ports.extraction import ResumeDocument

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

    from resumevault.domain.ports.extraction import ResumeExtractor
    from resumevault.domain.reconciliation import ReconciliationResult, ResumeReconciler

log = getLogger(__name__)


@dataclass(slots=True, frozen=True)
class FileOutcome:
    """Result for a single input document."""

    name: str
    result: ReconciliationResult | None = None
    error: ExtractionError | ReconciliationError | None = None

    @property
    def succeeded(self) -> bool:
        return self.error is None


@dataclass(slots=True)
class ImportReport:
    outcomes: list[FileOutcome] = field(default_factory=list["FileOutcome"])

    @property
    def succeeded(self) -> list[FileOutcome]:
        return [outcome for outcome in self.outcomes if outcome.succeeded]

    @property
    def failed(self) -> list[FileOutcome]:
        return [outcome for outcome in self.outcomes if not outcome.succeeded]

    @property
    def all_succeeded(self) -> bool:
        return not self.failed


async def import_resumes(
    documents: Iterable[ResumeDocument | Path],
    *,
    extractor: ResumeExtractor,
    reconciler: ResumeReconciler,
) -> ImportReport:
    """Extract and reconcile each document in order.

    Paths are read when their turn comes. The next extraction starts only after the
    previous document has been fully reconciled. A failing document is reported and
    skipped; nothing is retried and records merged before a failure are kept.
    """

    report = ImportReport()
    for document in documents:
        report.outcomes.append(
            await _import_one(document, extractor=extractor, reconciler=reconciler)
        )

    log.info(
        "Finished resume import: succeeded=%s, failed=%s",
        len(report.succeeded),
        len(report.failed),
    )
    return report


async def _import_one(
    source: ResumeDocument | Path,
    *,
    extractor: ResumeExtractor,
    reconciler: ResumeReconciler,
) -> FileOutcome:
    try:
        document = (
            source if isinstance(source, ResumeDocument) else ResumeDocument.from_path(source)
        )
    except OSError as exc:
        log.error("Cannot read %s: %s", source.name, exc)  # noqa: TRY400
        error = ExtractionError(f"Cannot read {source.name}: {exc}", document_name=source.name)
        error.__cause__ = exc
        return FileOutcome(name=source.name, error=error)

    log.info("Extracting %s", document.name)
    try:
        resume = await extractor.extract(document)
    except ExtractionError as exc:
        if exc.document_name is None:
            exc.document_name = document.name
        log.error("Extraction failed for %s: %s", document.name, exc)  # noqa: TRY400
        return FileOutcome(name=document.name, error=exc)
    except Exception as exc:
        log.exception("Unexpected error while extracting %s", document.name)
        error = ExtractionError(
            f"Extraction of {document.name} failed: {exc!r}", document_name=document.name
        )
        error.__cause__ = exc
        return FileOutcome(name=document.name, error=error)

    try:
        result = reconciler.reconcile(resume, document_name=document.name)
    except ReconciliationError as exc:
        log.error("Reconciliation failed for %s: %s", document.name, exc)  # noqa: TRY400
        return FileOutcome(name=document.name, error=exc)

    return FileOutcome(name=document.name, result=result)
