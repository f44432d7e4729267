"""
Job - a tracked job posting (saved manually or from external search)
"""
import enum
import uuid
from datetime import datetime

from sqlalchemy import Boolean, Column, DateTime, String, Text, UniqueConstraint
from sqlalchemy.orm import relationship

from jobtracker.app.db.base import Base


class JobStatus(str, enum.Enum):
    """Canonical statuses. The column itself is an open string."""

    NEW = "new"
    VIEWED = "viewed"
    APPLIED = "applied"
    REJECTED = "rejected"
    SHORTLISTED = "shortlisted"


def _new_id() -> str:
    return str(uuid.uuid4())


class Job(Base):
    __tablename__ = "jobs"
    __table_args__ = (UniqueConstraint("job_url", name="uq_jobs_job_url"),)

    id = Column(String(36), primary_key=True, default=_new_id)

    job_title = Column(String(500), nullable=False)
    company_name = Column(String(500), default="")
    location = Column(String(500), default="")
    # natural dedup key
    job_url = Column(String(2000), nullable=False)
    description = Column(Text, default="")
    salary = Column(String(200), default="")
    job_type = Column(String(100), default="")
    is_remote = Column(Boolean, default=False, nullable=False)
    source = Column(String(100), default="")  # manual, mcp, ...
    status = Column(String(50), default=JobStatus.NEW.value, nullable=False, index=True)
    notes = Column(Text, default="")

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    attachments = relationship(
        "Attachment",
        back_populates="job",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="Attachment.created_at.desc()",
    )
