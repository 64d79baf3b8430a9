"""Error taxonomy for importing and storing resume data."""

from __future__ import annotations


class ResumeVaultError(RuntimeError):
    """Base class for resumevault domain errors."""


class ExtractionError(ResumeVaultError):
    """Raised when the extraction service fails or returns unusable content."""

    def __init__(
        self,
        message: str,
        *,
        document_name: str | None = None,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.document_name = document_name
        self.status_code = status_code


class StorageCorruptionError(ResumeVaultError):
    """Raised when a durable collection value cannot be decoded."""

    def __init__(self, message: str, *, key: str | None = None) -> None:
        super().__init__(message)
        self.key = key


class ReconciliationError(ResumeVaultError):
    """Raised when merging one extracted resume into the stores fails."""

    def __init__(self, message: str, *, document_name: str | None = None) -> None:
        super().__init__(message)
        self.document_name = document_name
