"""
MCP server client - one synchronous JSON call to the external job search service.
No retries; failures surface as GatewayError with upstream status/body for diagnostics.
"""
import json
from urllib.error import HTTPError, URLError
from urllib.request import Request, urlopen

from pydantic import ValidationError

from jobtracker.app.core.config import MCP_SEARCH_METHOD, settings
from jobtracker.app.core.exceptions import GatewayError
from jobtracker.app.core.logging_config import get_logger
from jobtracker.app.schemas.search import McpSearchResponse, SearchParams

logger = get_logger("services.mcp_client")


class McpClient:
    def __init__(self, base_url: str | None = None, timeout: int | None = None):
        self.base_url = (base_url or settings.mcp_server_url).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.http_request_timeout

    def search_jobs(self, params: SearchParams) -> McpSearchResponse:
        """POST {base_url}/api with {"method": "search_jobs", "params": ...}."""
        url = f"{self.base_url}/api"
        body = json.dumps({"method": MCP_SEARCH_METHOD, "params": params.model_dump()}).encode("utf-8")
        req = Request(
            url,
            data=body,
            headers={"Content-Type": "application/json", "Accept": "application/json"},
            method="POST",
        )
        logger.info(
            "MCP search started url=%s search_term=%s location=%s results_wanted=%d",
            url,
            params.search_term[:60],
            params.location[:60],
            params.results_wanted,
        )

        try:
            with urlopen(req, timeout=self.timeout) as resp:
                status = resp.status
                raw = resp.read()
        except HTTPError as e:
            detail = e.read().decode("utf-8", errors="replace")
            logger.error("MCP search failed url=%s status=%s body=%s", url, e.code, detail[:200])
            raise GatewayError(f"MCP server returned status {e.code}: {detail}") from e
        except (URLError, TimeoutError, OSError) as e:
            logger.error("MCP search failed url=%s error=%s", url, e)
            raise GatewayError(f"failed to call MCP server: {e}") from e

        if status != 200:
            detail = raw.decode("utf-8", errors="replace")
            logger.error("MCP search failed url=%s status=%s body=%s", url, status, detail[:200])
            raise GatewayError(f"MCP server returned status {status}: {detail}")

        try:
            result = McpSearchResponse.model_validate(json.loads(raw))
        except (ValueError, ValidationError) as e:
            logger.error("MCP response undecodable url=%s error=%s", url, e)
            raise GatewayError(f"failed to decode MCP response: {e}") from e

        logger.info("MCP search returned url=%s count=%d records=%d", url, result.count, len(result.jobs))
        return result
