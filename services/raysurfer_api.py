"""Raysurfer REST API client.

Every call opens its own httpx client and makes exactly one request.
Failures are raised as typed exceptions; there is no retry.
"""

from typing import Any, Dict, Optional

import httpx

from config import (
    API_KEY_ENV,
    API_TIMEOUT_SECONDS,
    BASE_URL,
    HEALTH_PATH,
    HEALTH_TIMEOUT_SECONDS,
    PATTERNS_PATH,
    PUBLIC_SNIPS_HEADER,
    SDK_VERSION_HEADER,
    SEARCH_PATH,
    SIGNUP_URL,
    UPLOAD_PATH,
    VERSION,
    VOTE_PATH,
    get_api_key,
)
from exceptions import ConfigurationError, RaysurferAPIError, RaysurferTransportError
from models import (
    FileWritten,
    PatternsRequest,
    PatternsResponse,
    SearchRequest,
    SearchResponse,
    UploadRequest,
    UploadResponse,
    VoteRequest,
    VoteResponse,
)
from utils.logging_ import logger


class RaysurferClient:
    """Thin async client for the Raysurfer code-caching API.

    Args:
        base_url: API root, defaults to ``config.BASE_URL``
        transport: Optional httpx transport (tests pass ``httpx.MockTransport``)
    """

    def __init__(self, base_url: str = BASE_URL, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.base_url = base_url
        self._transport = transport

    def _headers(self, api_key: str, extra_headers: Optional[Dict[str, str]] = None) -> Dict[str, str]:
        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {api_key}",
            SDK_VERSION_HEADER: f"mcp/{VERSION}",
        }
        if extra_headers:
            headers.update(extra_headers)
        return headers

    def _http(self, timeout: Optional[float]) -> httpx.AsyncClient:
        return httpx.AsyncClient(base_url=self.base_url, timeout=timeout, transport=self._transport)

    async def post(self, path: str, body: Dict[str, Any], extra_headers: Optional[Dict[str, str]] = None) -> Dict[str, Any]:
        """Make an authenticated POST request and return the parsed JSON body."""
        api_key = get_api_key()
        if not api_key:
            raise ConfigurationError(
                f"{API_KEY_ENV} environment variable is not set. "
                f"Get your key at {SIGNUP_URL}"
            )

        try:
            async with self._http(API_TIMEOUT_SECONDS) as http:
                r = await http.post(path, json=body, headers=self._headers(api_key, extra_headers))
        except httpx.RequestError as e:
            logger.warning(f"Raysurfer request to {path} failed: {e!r}")
            raise RaysurferTransportError(f"Could not reach Raysurfer API at {self.base_url}: {e}") from e

        if not r.is_success:
            logger.warning(f"Raysurfer API {path} returned HTTP {r.status_code}")
            raise RaysurferAPIError(r.status_code, r.text)

        return r.json()

    async def search(self, task: str, top_k: int = 5, min_score: float = 0.3, public_snips: bool = False) -> SearchResponse:
        """Search cached code for a task description."""
        request = SearchRequest(task=task, top_k=top_k, min_verdict_score=min_score)
        extra_headers = {PUBLIC_SNIPS_HEADER: "true"} if public_snips else None
        data = await self.post(SEARCH_PATH, request.model_dump(), extra_headers)
        return SearchResponse.model_validate(data)

    async def upload(self, task: str, file: FileWritten, succeeded: bool = True) -> UploadResponse:
        """Store a file from an execution result."""
        request = UploadRequest(task=task, file_written=file, succeeded=succeeded)
        data = await self.post(UPLOAD_PATH, request.model_dump())
        return UploadResponse.model_validate(data)

    async def vote(
        self,
        code_block_id: str,
        code_block_name: str,
        code_block_description: str,
        task: str,
        up: bool = True,
    ) -> VoteResponse:
        """Record whether a cached code block worked."""
        request = VoteRequest(
            code_block_id=code_block_id,
            code_block_name=code_block_name,
            code_block_description=code_block_description,
            succeeded=up,
            task=task,
        )
        data = await self.post(VOTE_PATH, request.model_dump())
        return VoteResponse.model_validate(data)

    async def patterns(self, task: Optional[str] = None, top_k: int = 10) -> PatternsResponse:
        """Fetch proven task-to-code patterns."""
        request = PatternsRequest(task=task, top_k=top_k)
        data = await self.post(PATTERNS_PATH, request.model_dump())
        return PatternsResponse.model_validate(data)

    async def check_health(self) -> bool:
        """Unauthenticated liveness probe. Any failure reads as unreachable."""
        try:
            async with self._http(HEALTH_TIMEOUT_SECONDS) as http:
                r = await http.get(HEALTH_PATH)
            return r.is_success
        except Exception as e:
            logger.debug(f"Health probe failed: {e!r}")
            return False
