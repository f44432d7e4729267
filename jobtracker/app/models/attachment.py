"""
Attachment - resume or cover letter file stored with a job
"""
import uuid
from datetime import datetime

from sqlalchemy import Column, DateTime, ForeignKey, Integer, LargeBinary, String
from sqlalchemy.orm import deferred, relationship

from jobtracker.app.db.base import Base


class Attachment(Base):
    __tablename__ = "attachments"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    job_id = Column(String(36), ForeignKey("jobs.id", ondelete="CASCADE"), nullable=False, index=True)

    file_name = Column(String(255), nullable=False)
    file_type = Column(String(50), nullable=False)  # resume, cover_letter
    mime_type = Column(String(100), nullable=False)
    # payload only loaded on access (download path)
    data = deferred(Column(LargeBinary, nullable=False))
    file_size = Column(Integer, nullable=False, default=0)

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    job = relationship("Job", back_populates="attachments")
