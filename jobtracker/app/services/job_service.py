"""
Job service - business rules for tracked jobs: URL uniqueness, defaults, partial updates.
"""
from datetime import datetime
from typing import Optional

from jobtracker.app.core.config import DEFAULT_JOB_SOURCE, settings
from jobtracker.app.core.exceptions import AlreadyExistsError
from jobtracker.app.core.logging_config import get_logger
from jobtracker.app.models.job import Job, JobStatus
from jobtracker.app.repositories.job_repository import DUPLICATE_URL_MESSAGE, JobRepository
from jobtracker.app.schemas.job import JobCreateIn, JobUpdateIn

logger = get_logger("services.jobs")

# String fields where an empty value in an update means "leave unchanged"
_UPDATABLE_TEXT_FIELDS = (
    "job_title",
    "company_name",
    "location",
    "job_url",
    "description",
    "salary",
    "job_type",
    "source",
    "status",
    "notes",
)


def _job_from_input(payload: JobCreateIn) -> Job:
    return Job(
        job_title=payload.job_title,
        company_name=payload.company_name,
        location=payload.location,
        job_url=payload.job_url,
        description=payload.description,
        salary=payload.salary,
        job_type=payload.job_type,
        is_remote=payload.is_remote,
        source=payload.source or DEFAULT_JOB_SOURCE,
        status=JobStatus.NEW.value,
        notes=payload.notes,
    )


class JobService:
    def __init__(self, repo: JobRepository, legacy_remote_overwrite: Optional[bool] = None):
        self.repo = repo
        if legacy_remote_overwrite is None:
            legacy_remote_overwrite = settings.legacy_remote_overwrite
        self.legacy_remote_overwrite = legacy_remote_overwrite

    def create_job(self, payload: JobCreateIn) -> Job:
        """
        Save a new job. The existence check is advisory; the unique index on
        job_url catches concurrent creates that both pass it.
        """
        if self.repo.exists_by_url(payload.job_url):
            raise AlreadyExistsError(DUPLICATE_URL_MESSAGE)
        job = self.repo.create(_job_from_input(payload))
        logger.info("Job created id=%s source=%s url=%s", job.id, job.source, job.job_url[:80])
        return job

    def create_jobs(self, payloads: list[JobCreateIn]) -> list[Job]:
        """Batch import. Inputs whose URL is already saved (or repeated in the batch) are skipped."""
        seen: set[str] = set()
        jobs = []
        for payload in payloads:
            if payload.job_url in seen or self.repo.exists_by_url(payload.job_url):
                continue
            seen.add(payload.job_url)
            jobs.append(_job_from_input(payload))
        created = self.repo.create_batch(jobs)
        logger.info("Batch import requested=%d created=%d", len(payloads), len(created))
        return created

    def get_job(self, job_id: str) -> Job:
        return self.repo.get_by_id(job_id)

    def list_jobs(self, status: Optional[str] = None, source: Optional[str] = None) -> list[Job]:
        return self.repo.get_all(status=status, source=source)

    def update_job(self, job_id: str, payload: JobUpdateIn) -> Job:
        job = self.repo.get_by_id(job_id)
        provided = payload.model_fields_set

        for field in _UPDATABLE_TEXT_FIELDS:
            value = getattr(payload, field)
            if field in provided and value:
                setattr(job, field, value)

        if self.legacy_remote_overwrite:
            job.is_remote = bool(payload.is_remote)
        elif "is_remote" in provided and payload.is_remote is not None:
            job.is_remote = payload.is_remote

        job.updated_at = datetime.utcnow()
        return self.repo.update(job)

    def update_job_status(self, job_id: str, status: str) -> Job:
        """Overwrite status. Any string is accepted; JobStatus lists the canonical ones."""
        job = self.repo.get_by_id(job_id)
        job.status = status
        job.updated_at = datetime.utcnow()
        job = self.repo.update(job)
        logger.info("Job status changed id=%s status=%s", job.id, status)
        return job

    def delete_job(self, job_id: str) -> None:
        self.repo.delete(job_id)
        logger.info("Job deleted id=%s", job_id)
