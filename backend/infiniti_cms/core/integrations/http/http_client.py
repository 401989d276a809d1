"""
Async JSON client for the Infiniti CMS API, used by the bulk-import CLI.
Requests are sent once; failures surface as HttpClientError with the decoded body.
"""

import asyncio
from typing import Optional, Dict, Any
import aiohttp
import logging

logger = logging.getLogger(__name__)


class HttpClientError(Exception):
    """Non-2xx response or transport failure."""

    def __init__(self, message: str, status: Optional[int] = None, body: Any = None):
        self.message = message
        self.status = status
        self.body = body
        super().__init__(message)


class HttpClient:
    """
    Async HTTP client wrapper using aiohttp.
    One session per client; call close() when done.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        token: Optional[str] = None,
        timeout: int = 30,
    ):
        """
        Initialize HTTP client.

        Args:
            base_url: Optional base URL for all requests
            token: Bearer token sent with every request
            timeout: Request timeout in seconds
        """
        self.base_url = base_url
        self.token = token
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self._session: Optional[aiohttp.ClientSession] = None

    async def _get_session(self) -> aiohttp.ClientSession:
        """Get or create aiohttp session."""
        if self._session is None or self._session.closed:
            headers = {"Accept": "application/json"}
            if self.token:
                headers["Authorization"] = f"Bearer {self.token}"
            self._session = aiohttp.ClientSession(timeout=self.timeout, headers=headers)
        return self._session

    async def close(self) -> None:
        """Close the HTTP session."""
        if self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self) -> "HttpClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    def _build_url(self, endpoint: str) -> str:
        """Build full URL from endpoint."""
        if self.base_url:
            return f"{self.base_url.rstrip('/')}/{endpoint.lstrip('/')}"
        return endpoint

    async def _request(self, method: str, endpoint: str, **kwargs: Any) -> Any:
        """
        Send a single request and decode the body.

        The body is read inside the response context; JSON is decoded when the
        server says so, otherwise the raw text is returned.
        """
        session = await self._get_session()
        url = self._build_url(endpoint)
        try:
            async with session.request(method, url, **kwargs) as response:
                if response.content_type == "application/json":
                    body = await response.json()
                else:
                    body = await response.text()
                if response.status >= 400:
                    logger.warning(
                        f"{method} {url} failed with status {response.status}",
                        extra={"status": response.status, "url": url},
                    )
                    raise HttpClientError(
                        f"Request failed with status {response.status}",
                        status=response.status,
                        body=body,
                    )
                return body
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.error(f"{method} {url} failed: {e}")
            raise HttpClientError(str(e) or type(e).__name__) from e

    async def get(
        self,
        endpoint: str,
        params: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """Make GET request and return the decoded body."""
        return await self._request("GET", endpoint, params=params)

    async def post(
        self,
        endpoint: str,
        json: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """Make POST request with a JSON body and return the decoded response."""
        return await self._request("POST", endpoint, json=json)
