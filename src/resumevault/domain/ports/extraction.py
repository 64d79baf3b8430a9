"""Ports for the upstream document-extraction service."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from resumevault.domain.reconciliation.facts import ExtractedResume

_MEDIA_TYPES = {
    ".pdf": "application/pdf",
    ".txt": "text/plain",
}


@dataclass(frozen=True, slots=True)
class ResumeDocument:
    """Raw bytes of one input document."""

    name: str
    content: bytes
    media_type: str = "application/pdf"

    @classmethod
    def from_path(cls, path: Path | str) -> ResumeDocument:
        file_path = Path(path)
        media_type = _MEDIA_TYPES.get(file_path.suffix.lower(), "application/pdf")
        return cls(name=file_path.name, content=file_path.read_bytes(), media_type=media_type)


@runtime_checkable
class ResumeExtractor(Protocol):
    """Turn one document into extracted resume facts.

    Implementations raise ``ExtractionError`` when the call fails or the reply
    cannot be parsed.
    """

    async def extract(self, document: ResumeDocument) -> ExtractedResume: ...


__all__ = ["ResumeDocument", "ResumeExtractor"]
