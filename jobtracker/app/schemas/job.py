"""
Job and attachment Pydantic schemas for request/response validation
"""
from datetime import datetime
from typing import List, Optional
from urllib.parse import urlparse

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _validate_url(value: str) -> str:
    value = (value or "").strip()
    parsed = urlparse(value)
    if not parsed.scheme or not parsed.netloc:
        raise ValueError("job_url must be an absolute URL")
    return value


class JobCreateIn(BaseModel):
    """Schema for creating a job"""
    job_title: str = Field(..., min_length=1, max_length=500)
    job_url: str = Field(..., max_length=2000)
    company_name: str = ""
    location: str = ""
    description: str = ""
    salary: str = ""
    job_type: str = ""
    is_remote: bool = False
    source: str = ""
    notes: str = ""

    @field_validator("job_url")
    @classmethod
    def check_url(cls, value: str) -> str:
        return _validate_url(value)


class JobUpdateIn(BaseModel):
    """
    Partial update. Fields left out of the body are untouched; empty strings
    also mean "leave unchanged". Use model_fields_set to tell them apart.
    """
    job_title: Optional[str] = None
    company_name: Optional[str] = None
    location: Optional[str] = None
    job_url: Optional[str] = None
    description: Optional[str] = None
    salary: Optional[str] = None
    job_type: Optional[str] = None
    is_remote: Optional[bool] = None
    source: Optional[str] = None
    status: Optional[str] = None
    notes: Optional[str] = None

    @field_validator("job_url")
    @classmethod
    def check_url(cls, value: Optional[str]) -> Optional[str]:
        if not value:
            return value
        return _validate_url(value)


class JobStatusIn(BaseModel):
    status: str


class JobBatchIn(BaseModel):
    jobs: List[JobCreateIn] = Field(default_factory=list)


class JobOut(BaseModel):
    """Schema for job response"""
    id: str
    job_title: str
    company_name: str = ""
    location: str = ""
    job_url: str
    description: str = ""
    salary: str = ""
    job_type: str = ""
    is_remote: bool = False
    source: str = ""
    status: str
    notes: str = ""
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)

    @field_validator(
        "company_name", "location", "description", "salary", "job_type", "source", "notes",
        mode="before",
    )
    @classmethod
    def none_to_empty(cls, value):
        return value or ""


class AttachmentOut(BaseModel):
    """Attachment metadata. The payload is only served by the download endpoint."""
    id: str
    job_id: str
    file_name: str
    file_type: str
    mime_type: str
    file_size: int
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
