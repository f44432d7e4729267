"""
Dependency injection utilities
"""
from fastapi import Depends
from sqlalchemy.orm import Session

from jobtracker.app.db.session import SessionLocal
from jobtracker.app.repositories.job_repository import JobRepository
from jobtracker.app.services.attachment_service import AttachmentService
from jobtracker.app.services.job_service import JobService
from jobtracker.app.services.mcp_client import McpClient
from jobtracker.app.services.search_service import SearchService


def get_db() -> Session:
    """Get database session"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_job_repository(db: Session = Depends(get_db)) -> JobRepository:
    return JobRepository(db)


def get_mcp_client() -> McpClient:
    """MCP client built from settings (mcp_server_url, http_request_timeout)"""
    return McpClient()


def get_job_service(repo: JobRepository = Depends(get_job_repository)) -> JobService:
    return JobService(repo)


def get_attachment_service(repo: JobRepository = Depends(get_job_repository)) -> AttachmentService:
    return AttachmentService(repo)


def get_search_service(
    repo: JobRepository = Depends(get_job_repository),
    client: McpClient = Depends(get_mcp_client),
) -> SearchService:
    return SearchService(repo, client)
