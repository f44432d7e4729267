"""
External job search schemas - request params, raw MCP records, reconciled results
"""
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from jobtracker.app.core.config import (
    SEARCH_DEFAULT_DISTANCE,
    SEARCH_DEFAULT_FORMAT,
    SEARCH_DEFAULT_HOURS_OLD,
    SEARCH_DEFAULT_RESULTS_WANTED,
)
from jobtracker.app.models.job import JobStatus


class SearchParams(BaseModel):
    """POST /api/jobs/search body, forwarded verbatim to the MCP server."""
    site_names: str = ""
    search_term: str = ""
    location: str = ""
    country_indeed: str = ""
    distance: int = SEARCH_DEFAULT_DISTANCE
    job_type: str = ""
    results_wanted: int = SEARCH_DEFAULT_RESULTS_WANTED
    hours_old: int = SEARCH_DEFAULT_HOURS_OLD
    is_remote: bool = False
    format: str = SEARCH_DEFAULT_FORMAT

    # Zero / empty / null counts as "not given"
    @field_validator("distance", mode="before")
    @classmethod
    def default_distance(cls, value):
        return value or SEARCH_DEFAULT_DISTANCE

    @field_validator("results_wanted", mode="before")
    @classmethod
    def default_results_wanted(cls, value):
        return value or SEARCH_DEFAULT_RESULTS_WANTED

    @field_validator("hours_old", mode="before")
    @classmethod
    def default_hours_old(cls, value):
        return value or SEARCH_DEFAULT_HOURS_OLD

    @field_validator("format", mode="before")
    @classmethod
    def default_format(cls, value):
        return value or SEARCH_DEFAULT_FORMAT

    @field_validator("site_names", "search_term", "location", "country_indeed", "job_type", mode="before")
    @classmethod
    def none_to_empty(cls, value):
        return value or ""


class McpJob(BaseModel):
    """
    One record from the MCP server. The upstream scrapers disagree on field
    names, so the same logical value may arrive under several aliases.
    """
    jobTitle: Optional[str] = None
    title: Optional[str] = None
    summary: Optional[str] = None
    jobSummary: Optional[str] = None
    description: Optional[str] = None

    jobUrl: Optional[str] = None
    jobUrlDirect: Optional[str] = None
    url: Optional[str] = None

    companyName: Optional[str] = None
    company: Optional[str] = None
    companyIndustry: Optional[str] = None
    companyUrl: Optional[str] = None
    companyLogo: Optional[str] = None

    location: Optional[str] = None
    country: Optional[str] = None
    state: Optional[str] = None
    city: Optional[str] = None

    datePosted: Optional[str] = None
    jobType: Optional[str] = None
    salary: Optional[str] = None
    salaryPeriod: Optional[str] = None
    minAmount: Optional[float] = None
    maxAmount: Optional[float] = None
    isRemote: Optional[bool] = None
    source: Optional[str] = None

    model_config = ConfigDict(extra="ignore")


class McpSearchResponse(BaseModel):
    count: int = 0
    message: str = ""
    jobs: List[McpJob] = Field(default_factory=list)

    model_config = ConfigDict(extra="ignore")

    @field_validator("jobs", mode="before")
    @classmethod
    def none_to_list(cls, value):
        # null records are dropped here; they would be discarded as untitled anyway
        return [job for job in (value or []) if job is not None]

    @field_validator("message", mode="before")
    @classmethod
    def none_to_empty(cls, value):
        return value or ""

    @field_validator("count", mode="before")
    @classmethod
    def none_to_zero(cls, value):
        return value or 0


class SearchResult(BaseModel):
    """Job-shaped projection of an external posting. Never persisted here."""
    job_title: str
    company_name: str = ""
    location: str = ""
    job_url: str = ""
    description: str = ""
    salary: str = ""
    job_type: str = ""
    is_remote: bool = False
    source: str = ""
    status: str = JobStatus.NEW.value
    is_saved: bool = False


class SearchResponse(BaseModel):
    count: int
    jobs: List[SearchResult]
