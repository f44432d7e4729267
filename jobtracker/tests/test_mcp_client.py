"""Tests for the MCP server client (urlopen patched)"""
import io
import json
from unittest.mock import MagicMock, patch
from urllib.error import HTTPError, URLError

import pytest

from jobtracker.app.core.exceptions import GatewayError
from jobtracker.app.schemas.search import SearchParams
from jobtracker.app.services.mcp_client import McpClient


def _fake_response(body: bytes, status: int = 200):
    resp = MagicMock()
    resp.status = status
    resp.read.return_value = body
    cm = MagicMock()
    cm.__enter__.return_value = resp
    cm.__exit__.return_value = False
    return cm


def test_search_jobs_posts_method_and_params():
    payload = {"count": 1, "message": "ok", "jobs": [{"jobTitle": "Dev", "jobUrl": "http://x/1"}]}
    with patch("jobtracker.app.services.mcp_client.urlopen", return_value=_fake_response(json.dumps(payload).encode())) as mock_open:
        client = McpClient(base_url="http://mcp.local:9423/", timeout=7)
        result = client.search_jobs(SearchParams(search_term="python", location="Berlin"))

    assert result.count == 1
    assert result.jobs[0].jobTitle == "Dev"

    req = mock_open.call_args.args[0]
    assert req.full_url == "http://mcp.local:9423/api"
    assert req.get_method() == "POST"
    assert req.get_header("Content-type") == "application/json"
    assert mock_open.call_args.kwargs["timeout"] == 7
    sent = json.loads(req.data)
    assert sent["method"] == "search_jobs"
    assert sent["params"]["search_term"] == "python"
    assert sent["params"]["results_wanted"] == 20
    assert sent["params"]["format"] == "json"


def test_search_jobs_tolerates_null_jobs():
    with patch("jobtracker.app.services.mcp_client.urlopen", return_value=_fake_response(b'{"count": 0, "jobs": null}')):
        result = McpClient(base_url="http://mcp.local").search_jobs(SearchParams())
    assert result.jobs == []


def test_search_jobs_http_error_embeds_status_and_body():
    err = HTTPError("http://mcp.local/api", 503, "Service Unavailable", {}, io.BytesIO(b"overloaded"))
    with patch("jobtracker.app.services.mcp_client.urlopen", side_effect=err):
        with pytest.raises(GatewayError) as exc_info:
            McpClient(base_url="http://mcp.local").search_jobs(SearchParams())
    assert "503" in exc_info.value.message
    assert "overloaded" in exc_info.value.message


def test_search_jobs_network_error():
    with patch("jobtracker.app.services.mcp_client.urlopen", side_effect=URLError("connection refused")):
        with pytest.raises(GatewayError) as exc_info:
            McpClient(base_url="http://mcp.local").search_jobs(SearchParams())
    assert "failed to call MCP server" in exc_info.value.message


def test_search_jobs_undecodable_body():
    with patch("jobtracker.app.services.mcp_client.urlopen", return_value=_fake_response(b"<html>oops</html>")):
        with pytest.raises(GatewayError) as exc_info:
            McpClient(base_url="http://mcp.local").search_jobs(SearchParams())
    assert "failed to decode MCP response" in exc_info.value.message


def test_search_jobs_non_200_status():
    with patch("jobtracker.app.services.mcp_client.urlopen", return_value=_fake_response(b"accepted", status=202)):
        with pytest.raises(GatewayError) as exc_info:
            McpClient(base_url="http://mcp.local").search_jobs(SearchParams())
    assert "status 202" in exc_info.value.message


def test_search_jobs_skips_null_records():
    body = b'{"count": 2, "jobs": [null, {"jobTitle": "A", "jobUrl": "http://x/1"}]}'
    with patch("jobtracker.app.services.mcp_client.urlopen", return_value=_fake_response(body)):
        result = McpClient(base_url="http://mcp.local").search_jobs(SearchParams())
    assert [job.jobTitle for job in result.jobs] == ["A"]
