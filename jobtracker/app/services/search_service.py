"""
Search service - forwards a query to the MCP server and reconciles the raw records
against saved jobs.

Reconciliation per record, in upstream order:
1. url = jobUrl | jobUrlDirect | url (first non-empty)
2. title = jobTitle | title | summary; drop the record when all are empty
3. drop repeats of a non-empty url already seen in this batch (first wins)
4. company = companyName | company
5. salary = salary, else "{min}-{max}" when either amount is positive
6. is_saved = url is non-empty and a job with that url exists
Nothing is written to storage; the caller saves results via the normal create path.
"""
from typing import Callable, Iterable, Optional

from jobtracker.app.core.logging_config import get_logger
from jobtracker.app.models.job import JobStatus
from jobtracker.app.repositories.job_repository import JobRepository
from jobtracker.app.schemas.search import McpJob, SearchParams, SearchResult
from jobtracker.app.services.mcp_client import McpClient

logger = get_logger("services.search")


def first_non_empty(*values: Optional[str]) -> str:
    for value in values:
        if value:
            return value
    return ""


def format_salary(salary: Optional[str], min_amount: Optional[float], max_amount: Optional[float]) -> str:
    if salary:
        return salary
    low = min_amount or 0.0
    high = max_amount or 0.0
    if low > 0 or high > 0:
        return f"{low:.0f}-{high:.0f}"
    return ""


def reconcile(records: Iterable[McpJob], exists_by_url: Callable[[str], bool]) -> list[SearchResult]:
    """Dedup, coalesce aliased fields and flag already-saved postings."""
    results = []
    seen_urls: set[str] = set()
    for record in records:
        job_url = first_non_empty(record.jobUrl, record.jobUrlDirect, record.url)
        job_title = first_non_empty(record.jobTitle, record.title, record.summary)
        # untitled records are discarded before they can claim their url
        if not job_title:
            continue
        if job_url:
            if job_url in seen_urls:
                continue
            seen_urls.add(job_url)

        results.append(
            SearchResult(
                job_title=job_title,
                company_name=first_non_empty(record.companyName, record.company),
                location=record.location or "",
                job_url=job_url,
                description=record.description or "",
                salary=format_salary(record.salary, record.minAmount, record.maxAmount),
                job_type=record.jobType or "",
                is_remote=bool(record.isRemote),
                source=record.source or "",
                status=JobStatus.NEW.value,
                is_saved=bool(job_url) and exists_by_url(job_url),
            )
        )
    return results


class SearchService:
    def __init__(self, repo: JobRepository, client: McpClient):
        self.repo = repo
        self.client = client

    def search_jobs(self, params: SearchParams) -> list[SearchResult]:
        response = self.client.search_jobs(params)
        results = reconcile(response.jobs, self.repo.exists_by_url)
        logger.info(
            "Search reconciled records=%d results=%d saved=%d",
            len(response.jobs),
            len(results),
            sum(1 for r in results if r.is_saved),
        )
        return results
