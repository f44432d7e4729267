"""
Jobs API - CRUD for tracked jobs, status changes, batch import and external search.
Domain errors (NotFound, AlreadyExists, ...) are mapped to status codes in main.py.
"""
from typing import Optional

from fastapi import APIRouter, Depends, status

from jobtracker.app.core.dependencies import get_job_service, get_search_service
from jobtracker.app.core.exceptions import GatewayError
from jobtracker.app.core.logging_config import get_logger
from jobtracker.app.schemas.job import JobBatchIn, JobCreateIn, JobOut, JobStatusIn, JobUpdateIn
from jobtracker.app.schemas.search import SearchParams, SearchResponse
from jobtracker.app.services.job_service import JobService
from jobtracker.app.services.search_service import SearchService
from jobtracker.app.utils import response

logger = get_logger("api.jobs")
router = APIRouter(prefix="/jobs", tags=["jobs"])


def _out(job) -> JobOut:
    return JobOut.model_validate(job)


@router.get("")
def list_jobs(
    status: Optional[str] = None,
    source: Optional[str] = None,
    service: JobService = Depends(get_job_service),
):
    """List saved jobs, newest first. Optional exact-match filters: status, source."""
    jobs = service.list_jobs(status=status, source=source)
    return response.success([_out(j) for j in jobs])


@router.post("")
def create_job(payload: JobCreateIn, service: JobService = Depends(get_job_service)):
    """
    Save a job.

    - **job_title**: required
    - **job_url**: required, absolute URL, must not already be saved (409)
    - **source**: defaults to "manual"
    """
    job = service.create_job(payload)
    return response.success(_out(job), status_code=status.HTTP_201_CREATED)


@router.post("/batch")
def create_jobs(payload: JobBatchIn, service: JobService = Depends(get_job_service)):
    """Save several jobs at once. Already-saved URLs are skipped, not reported as errors."""
    jobs = service.create_jobs(payload.jobs)
    return response.success([_out(j) for j in jobs], status_code=status.HTTP_201_CREATED)


@router.post("/search")
def search_jobs(params: SearchParams, service: SearchService = Depends(get_search_service)):
    """
    Query the MCP job search server. Results carry is_saved when the URL is
    already tracked; nothing is saved by this call.
    """
    try:
        results = service.search_jobs(params)
    except GatewayError as e:
        logger.error("Job search failed search_term=%s error=%s", params.search_term[:60], e.message[:200])
        return response.error(f"Failed to search jobs: {e.message}", e.status_code)
    return response.success(SearchResponse(count=len(results), jobs=results))


@router.get("/{job_id}")
def get_job(job_id: str, service: JobService = Depends(get_job_service)):
    return response.success(_out(service.get_job(job_id)))


@router.put("/{job_id}")
def update_job(job_id: str, payload: JobUpdateIn, service: JobService = Depends(get_job_service)):
    """Partial update: omitted or empty fields keep their current value."""
    return response.success(_out(service.update_job(job_id, payload)))


@router.patch("/{job_id}/status")
def update_job_status(job_id: str, payload: JobStatusIn, service: JobService = Depends(get_job_service)):
    return response.success(_out(service.update_job_status(job_id, payload.status)))


@router.delete("/{job_id}")
def delete_job(job_id: str, service: JobService = Depends(get_job_service)):
    """Delete a job together with its attachments."""
    service.delete_job(job_id)
    return response.success_message("Job deleted successfully")
