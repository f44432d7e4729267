"""
Attachments API - upload, list, fetch, download and delete resume / cover letter files of a job.
Binary payload is only returned by the download endpoint.
"""
from urllib.parse import quote

from fastapi import APIRouter, Depends, File, Form, UploadFile, status
from fastapi.responses import Response

from jobtracker.app.core.config import FILE_TYPE_RESUME, MAX_ATTACHMENT_SIZE
from jobtracker.app.core.dependencies import get_attachment_service
from jobtracker.app.schemas.job import AttachmentOut
from jobtracker.app.services.attachment_service import AttachmentInput, AttachmentService
from jobtracker.app.utils import response

router = APIRouter(prefix="/jobs/{job_id}/attachments", tags=["attachments"])


def _content_disposition(file_name: str) -> str:
    """attachment; filename="..." with an RFC 5987 fallback for non-latin-1 names."""
    safe = (file_name or "attachment").replace('"', "").replace("\r", "").replace("\n", "")
    try:
        safe.encode("latin-1")
        return f'attachment; filename="{safe}"'
    except UnicodeEncodeError:
        return f"attachment; filename*=UTF-8''{quote(safe)}"


@router.post("")
async def upload_attachment(
    job_id: str,
    file: UploadFile = File(...),
    file_type: str = Form(""),
    service: AttachmentService = Depends(get_attachment_service),
):
    """
    Upload a resume or cover letter (PDF, DOC, DOCX; max 10MB).

    - **file**: multipart file part; its Content-Type must be an allowed MIME type
    - **file_type**: "resume" (default) or "cover_letter"
    """
    # one byte past the limit is enough for the size check to reject it
    data = await file.read(MAX_ATTACHMENT_SIZE + 1)
    attachment = service.create_attachment(
        AttachmentInput(
            job_id=job_id,
            file_name=file.filename or "",
            file_type=file_type or FILE_TYPE_RESUME,
            mime_type=file.content_type or "",
            data=data,
        )
    )
    return response.success(AttachmentOut.model_validate(attachment), status_code=status.HTTP_201_CREATED)


@router.get("")
def list_attachments(job_id: str, service: AttachmentService = Depends(get_attachment_service)):
    attachments = service.list_attachments(job_id)
    return response.success([AttachmentOut.model_validate(a) for a in attachments])


@router.get("/{attachment_id}")
def get_attachment(
    job_id: str,
    attachment_id: str,
    service: AttachmentService = Depends(get_attachment_service),
):
    attachment = service.get_attachment(attachment_id, job_id=job_id)
    return response.success(AttachmentOut.model_validate(attachment))


@router.get("/{attachment_id}/download")
def download_attachment(
    job_id: str,
    attachment_id: str,
    service: AttachmentService = Depends(get_attachment_service),
):
    """Raw file bytes with Content-Type, Content-Disposition and Content-Length from stored metadata."""
    attachment = service.get_attachment(attachment_id, job_id=job_id)
    return Response(
        content=attachment.data,
        media_type=attachment.mime_type,
        headers={
            "Content-Disposition": _content_disposition(attachment.file_name),
            "Content-Length": str(attachment.file_size),
        },
    )


@router.delete("/{attachment_id}")
def delete_attachment(
    job_id: str,
    attachment_id: str,
    service: AttachmentService = Depends(get_attachment_service),
):
    service.delete_attachment(attachment_id, job_id=job_id)
    return response.success_message("Attachment deleted successfully")
