"""Tests for /api/jobs/{id}/attachments upload, list, get, download, delete"""
from unittest.mock import patch

from jobtracker.app.core.config import MAX_ATTACHMENT_SIZE
from jobtracker.app.core.exceptions import InvalidInputError
from jobtracker.app.models.attachment import Attachment
from jobtracker.app.services.attachment_service import AttachmentService

PDF_BYTES = b"%PDF-1.4 fake resume"
DOCX_MIME = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"


def _upload(client, job_id, data=PDF_BYTES, mime="application/pdf", name="resume.pdf", file_type="resume"):
    form = {"file_type": file_type} if file_type is not None else {}
    return client.post(
        f"/api/jobs/{job_id}/attachments",
        files={"file": (name, data, mime)},
        data=form,
    )


def test_upload_pdf_returns_metadata_without_payload(client, created_job):
    r = _upload(client, created_job["id"])
    assert r.status_code == 201
    body = r.json()
    assert body["success"] is True
    data = body["data"]
    assert data["id"]
    assert data["job_id"] == created_job["id"]
    assert data["file_name"] == "resume.pdf"
    assert data["file_type"] == "resume"
    assert data["mime_type"] == "application/pdf"
    assert data["file_size"] == len(PDF_BYTES)
    assert "data" not in data


def test_upload_defaults_file_type_to_resume(client, created_job):
    r = _upload(client, created_job["id"], file_type=None)
    assert r.status_code == 201
    assert r.json()["data"]["file_type"] == "resume"


def test_upload_cover_letter_docx(client, created_job):
    r = _upload(client, created_job["id"], mime=DOCX_MIME, name="letter.docx", file_type="cover_letter")
    assert r.status_code == 201
    assert r.json()["data"]["file_type"] == "cover_letter"


def test_upload_rejects_text_plain(client, created_job):
    r = _upload(client, created_job["id"], data=b"hello", mime="text/plain", name="notes.txt")
    assert r.status_code == 400
    assert "invalid MIME type" in r.json()["error"]


def test_upload_rejects_unknown_file_type(client, created_job):
    r = _upload(client, created_job["id"], file_type="portfolio")
    assert r.status_code == 400
    assert "invalid file type" in r.json()["error"]


def test_upload_rejects_oversized_file(client, created_job):
    r = _upload(client, created_job["id"], data=b"0" * (MAX_ATTACHMENT_SIZE + 1))
    assert r.status_code == 400
    assert "too large" in r.json()["error"]


def test_upload_accepts_file_at_size_limit(client, created_job):
    r = _upload(client, created_job["id"], data=b"0" * MAX_ATTACHMENT_SIZE)
    assert r.status_code == 201
    assert r.json()["data"]["file_size"] == MAX_ATTACHMENT_SIZE


def test_upload_missing_file_returns_400(client, created_job):
    r = client.post(f"/api/jobs/{created_job['id']}/attachments", data={"file_type": "resume"})
    assert r.status_code == 400


def test_upload_for_missing_job_returns_404(client):
    r = _upload(client, "missing-job")
    assert r.status_code == 404
    assert r.json()["error"] == "Job not found"


def test_list_attachments_newest_first(client, created_job):
    first = _upload(client, created_job["id"], name="a.pdf").json()["data"]
    second = _upload(client, created_job["id"], name="b.pdf").json()["data"]
    r = client.get(f"/api/jobs/{created_job['id']}/attachments")
    assert r.status_code == 200
    data = r.json()["data"]
    assert [a["id"] for a in data] == [second["id"], first["id"]]
    assert all("data" not in a for a in data)


def test_list_attachments_empty(client, created_job):
    r = client.get(f"/api/jobs/{created_job['id']}/attachments")
    assert r.json() == {"success": True, "data": []}


def test_get_attachment_metadata(client, created_job):
    att = _upload(client, created_job["id"]).json()["data"]
    r = client.get(f"/api/jobs/{created_job['id']}/attachments/{att['id']}")
    assert r.status_code == 200
    assert r.json()["data"] == att


def test_get_attachment_not_found(client, created_job):
    r = client.get(f"/api/jobs/{created_job['id']}/attachments/missing")
    assert r.status_code == 404
    assert r.json()["error"] == "Attachment not found"


def test_get_attachment_of_other_job_is_not_found(client, job_payload, created_job):
    other = client.post("/api/jobs", json={**job_payload, "job_url": "http://a.com/other"}).json()["data"]
    att = _upload(client, created_job["id"]).json()["data"]
    r = client.get(f"/api/jobs/{other['id']}/attachments/{att['id']}")
    assert r.status_code == 404


def test_download_attachment_headers_and_bytes(client, created_job):
    att = _upload(client, created_job["id"], name="my resume.pdf").json()["data"]
    r = client.get(f"/api/jobs/{created_job['id']}/attachments/{att['id']}/download")
    assert r.status_code == 200
    assert r.content == PDF_BYTES
    assert r.headers["content-type"] == "application/pdf"
    assert r.headers["content-disposition"] == 'attachment; filename="my resume.pdf"'
    assert r.headers["content-length"] == str(len(PDF_BYTES))


def test_download_attachment_not_found(client, created_job):
    r = client.get(f"/api/jobs/{created_job['id']}/attachments/missing/download")
    assert r.status_code == 404


def test_delete_attachment(client, created_job):
    att = _upload(client, created_job["id"]).json()["data"]
    r = client.delete(f"/api/jobs/{created_job['id']}/attachments/{att['id']}")
    assert r.status_code == 200
    assert r.json() == {"success": True, "message": "Attachment deleted successfully"}
    assert client.get(f"/api/jobs/{created_job['id']}/attachments/{att['id']}").status_code == 404


def test_delete_attachment_not_found(client, created_job):
    r = client.delete(f"/api/jobs/{created_job['id']}/attachments/missing")
    assert r.status_code == 404


def test_delete_job_removes_attachments(client, created_job, db_session):
    _upload(client, created_job["id"])
    _upload(client, created_job["id"], name="second.pdf")
    assert db_session.query(Attachment).count() == 2

    r = client.delete(f"/api/jobs/{created_job['id']}")
    assert r.status_code == 200
    assert db_session.query(Attachment).count() == 0


def test_upload_reads_at_most_one_byte_past_limit(client, created_job):
    with patch.object(
        AttachmentService, "create_attachment", autospec=True,
        side_effect=InvalidInputError("file too large: max size is 10MB"),
    ) as mock_create:
        r = _upload(client, created_job["id"], data=b"0" * (MAX_ATTACHMENT_SIZE + 4096))
    assert r.status_code == 400
    sent = mock_create.call_args.args[1]
    assert len(sent.data) == MAX_ATTACHMENT_SIZE + 1
