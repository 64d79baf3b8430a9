"""Job store whose deletes cascade to the job's description lines."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from resumevault.domain.model import Job, JobDescription

from .store import CollectionStore

if TYPE_CHECKING:
    from resumevault.domain.ports.persistence import CollectionPersistence

log = getLogger(__name__)


class UnknownJobError(LookupError):
    """Raised when a job description would reference a job that does not exist."""


class JobStore(CollectionStore[Job]):
    def __init__(
        self,
        name: str,
        persistence: CollectionPersistence[Job],
        *,
        descriptions: CollectionStore[JobDescription],
    ) -> None:
        super().__init__(name, persistence)
        self.descriptions = descriptions

    def delete_item(self, item_id: str) -> None:
        super().delete_item(item_id)
        removed = self.descriptions.delete_where(lambda description: description.job_id == item_id)
        log.debug("Deleted job %s and %s description(s)", item_id, removed)

    def descriptions_for(self, job_id: str) -> list[JobDescription]:
        return self.descriptions.filter(lambda description: description.job_id == job_id)

    def add_description(
        self,
        job_id: str,
        description: str,
        *,
        included: bool = True,
    ) -> JobDescription:
        if self.get(job_id) is None:
            raise UnknownJobError(f"No job with id {job_id}")
        line = JobDescription(
            id=self.descriptions.create_id(),
            description=description,
            job_id=job_id,
            included=included,
        )
        self.descriptions.add_item(line)
        return line
