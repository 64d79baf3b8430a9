"""Application orchestration entry points."""

from __future__ import annotations

import asyncio
from logging import getLogger
from pathlib import Path
from typing import TYPE_CHECKING

from resumevault.adapters.anthropic import AnthropicResumeExtractor
from resumevault.adapters.persistence import CollectionAdapterFactory
from resumevault.adapters.sqlalchemy import open_storage
from resumevault.config import get_database_config
from resumevault.domain.collections import StoreRegistry
from resumevault.domain.reconciliation import ResumeReconciler
from resumevault.domain.resume_import import ImportReport, import_resumes

if TYPE_CHECKING:
    from collections.abc import Iterable

    from resumevault.domain.ports.extraction import ResumeExtractor

log = getLogger(__name__)


def open_registry(*, database_uri: str | None = None) -> StoreRegistry:
    """Open durable storage and load every collection into a fresh registry."""

    uri = database_uri or get_database_config().uri
    storage = open_storage(database_uri=uri)
    registry = StoreRegistry.build(CollectionAdapterFactory(storage))
    log.debug("Loaded collections: %s", {str(k): v for k, v in registry.counts().items()})
    return registry


def import_resume_files(
    paths: Iterable[Path | str],
    *,
    registry: StoreRegistry | None = None,
    extractor: ResumeExtractor | None = None,
) -> ImportReport:
    """Extract and reconcile the given resume files, one after another."""

    effective_registry = registry or open_registry()
    effective_extractor = extractor or AnthropicResumeExtractor()
    documents = [Path(path) for path in paths]
    log.info("Starting resume import: files=%s", len(documents))

    report = asyncio.run(
        import_resumes(
            documents,
            extractor=effective_extractor,
            reconciler=ResumeReconciler(effective_registry),
        )
    )

    for outcome in report.failed:
        log.warning(f"Import failed for {outcome.name}: {outcome.error}")
    return report
