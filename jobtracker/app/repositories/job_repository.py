"""
Job repository - row-level persistence for jobs and their attachments.

Translates "no matching row" into NotFoundError and a job_url unique-constraint
violation into AlreadyExistsError. Every other database error propagates as-is.
No business rules live here.
"""
from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from jobtracker.app.core.exceptions import AlreadyExistsError, NotFoundError
from jobtracker.app.models.attachment import Attachment
from jobtracker.app.models.job import Job

DUPLICATE_URL_MESSAGE = "Job with this URL already exists"


def _is_duplicate_url(exc: IntegrityError) -> bool:
    text = str(exc.orig).lower()
    return "job_url" in text


class JobRepository:
    def __init__(self, db: Session):
        self.db = db

    # --- jobs ---

    def get_by_id(self, job_id: str) -> Job:
        job = self.db.query(Job).filter(Job.id == job_id).first()
        if not job:
            raise NotFoundError("Job not found")
        return job

    def get_all(self, status: Optional[str] = None, source: Optional[str] = None) -> list[Job]:
        query = self.db.query(Job)
        if status:
            query = query.filter(Job.status == status)
        if source:
            query = query.filter(Job.source == source)
        return query.order_by(Job.created_at.desc()).all()

    def exists_by_url(self, url: str) -> bool:
        return self.db.query(Job.id).filter(Job.job_url == url).first() is not None

    def create(self, job: Job) -> Job:
        self.db.add(job)
        self._commit()
        self.db.refresh(job)
        return job

    def create_batch(self, jobs: list[Job]) -> list[Job]:
        if not jobs:
            return []
        self.db.add_all(jobs)
        self._commit()
        for job in jobs:
            self.db.refresh(job)
        return jobs

    def update(self, job: Job) -> Job:
        self._commit()
        self.db.refresh(job)
        return job

    def delete(self, job_id: str) -> None:
        """Delete a job and its attachments in one transaction."""
        self.db.query(Attachment).filter(Attachment.job_id == job_id).delete()
        deleted = self.db.query(Job).filter(Job.id == job_id).delete()
        if deleted == 0:
            self.db.rollback()
            raise NotFoundError("Job not found")
        self.db.commit()

    # --- attachments ---

    def create_attachment(self, attachment: Attachment) -> Attachment:
        self.db.add(attachment)
        self.db.commit()
        self.db.refresh(attachment)
        return attachment

    def get_attachment_by_id(self, attachment_id: str) -> Attachment:
        attachment = self.db.query(Attachment).filter(Attachment.id == attachment_id).first()
        if not attachment:
            raise NotFoundError("Attachment not found")
        return attachment

    def get_attachments_by_job_id(self, job_id: str) -> list[Attachment]:
        return (
            self.db.query(Attachment)
            .filter(Attachment.job_id == job_id)
            .order_by(Attachment.created_at.desc())
            .all()
        )

    def delete_attachment(self, attachment_id: str) -> None:
        deleted = (
            self.db.query(Attachment)
            .filter(Attachment.id == attachment_id)
            .delete()
        )
        if deleted == 0:
            self.db.rollback()
            raise NotFoundError("Attachment not found")
        self.db.commit()

    def _commit(self) -> None:
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            if _is_duplicate_url(e):
                raise AlreadyExistsError(DUPLICATE_URL_MESSAGE) from e
            raise
