"""
Attachment service - validates and stores resume / cover letter files for a job.
"""
from dataclasses import dataclass
from typing import Optional

from jobtracker.app.core.config import ALLOWED_FILE_TYPES, ALLOWED_MIME_TYPES, MAX_ATTACHMENT_SIZE
from jobtracker.app.core.exceptions import InvalidInputError, NotFoundError
from jobtracker.app.core.logging_config import get_logger
from jobtracker.app.models.attachment import Attachment
from jobtracker.app.repositories.job_repository import JobRepository

logger = get_logger("services.attachments")


@dataclass
class AttachmentInput:
    job_id: str
    file_name: str
    file_type: str  # resume | cover_letter
    mime_type: str
    data: bytes


class AttachmentService:
    def __init__(self, repo: JobRepository):
        self.repo = repo

    def create_attachment(self, payload: AttachmentInput) -> Attachment:
        """
        Validate then store. Checks run in order: file type, MIME type, size,
        owning job; the first failure wins.
        """
        if payload.file_type not in ALLOWED_FILE_TYPES:
            logger.warning("Rejected upload job_id=%s file_type=%s", payload.job_id, payload.file_type)
            raise InvalidInputError(
                f"invalid file type: {payload.file_type} (must be 'resume' or 'cover_letter')"
            )
        if payload.mime_type not in ALLOWED_MIME_TYPES:
            logger.warning("Rejected upload job_id=%s mime_type=%s", payload.job_id, payload.mime_type)
            raise InvalidInputError(
                f"invalid MIME type: {payload.mime_type} (allowed: {', '.join(sorted(ALLOWED_MIME_TYPES))})"
            )
        if len(payload.data) > MAX_ATTACHMENT_SIZE:
            logger.warning("Rejected upload job_id=%s size_bytes=%d", payload.job_id, len(payload.data))
            raise InvalidInputError("file too large: max size is 10MB")

        self.repo.get_by_id(payload.job_id)

        attachment = self.repo.create_attachment(
            Attachment(
                job_id=payload.job_id,
                file_name=payload.file_name,
                file_type=payload.file_type,
                mime_type=payload.mime_type,
                data=payload.data,
                file_size=len(payload.data),
            )
        )
        logger.info(
            "Attachment stored id=%s job_id=%s file_type=%s size_bytes=%d",
            attachment.id,
            attachment.job_id,
            attachment.file_type,
            attachment.file_size,
        )
        return attachment

    def get_attachment(self, attachment_id: str, job_id: Optional[str] = None) -> Attachment:
        """Fetch one attachment. With job_id, attachments of other jobs count as missing."""
        attachment = self.repo.get_attachment_by_id(attachment_id)
        if job_id is not None and attachment.job_id != job_id:
            raise NotFoundError("Attachment not found")
        return attachment

    def list_attachments(self, job_id: str) -> list[Attachment]:
        return self.repo.get_attachments_by_job_id(job_id)

    def delete_attachment(self, attachment_id: str, job_id: Optional[str] = None) -> None:
        if job_id is not None:
            self.get_attachment(attachment_id, job_id)
        self.repo.delete_attachment(attachment_id)
        logger.info("Attachment deleted id=%s", attachment_id)
