import logging
from typing import Optional

import httpx  # type: ignore

from meetingsdk.sources.client.http.http_request import HTTPRequest
from meetingsdk.sources.client.http.http_response import HTTPResponse
from meetingsdk.sources.client.iclient import IClient


class HTTPClient(IClient):
    """
    Async HTTP client.

    Authentication is carried in per-request headers; the client itself
    holds no credentials.

    No retries or rate limiting happen at this layer; a failed request
    surfaces to the caller immediately.

    Args:
        timeout: Request timeout in seconds (default: 30.0)
        follow_redirects: Whether to follow HTTP redirects (default: True)
        transport: Optional httpx transport, e.g. httpx.MockTransport in tests
        logger: Optional logger instance
    """
    def __init__(
        self,
        timeout: float = 30.0,
        follow_redirects: bool = True,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        logger: Optional[logging.Logger] = None
    ) -> None:
        self.timeout = timeout
        self.follow_redirects = follow_redirects
        self.transport = transport
        self.logger = logger or logging.getLogger(__name__)
        self.client: Optional[httpx.AsyncClient] = None

    def get_client(self) -> "HTTPClient":
        """Get the client"""
        return self

    async def _ensure_client(self) -> httpx.AsyncClient:
        """Create the underlying httpx client on first use."""
        if self.client is None:
            self.client = httpx.AsyncClient(
                transport=self.transport,
                timeout=self.timeout,
                follow_redirects=self.follow_redirects
            )
        return self.client

    async def execute(self, request: HTTPRequest, **kwargs) -> HTTPResponse:
        """Execute an HTTP request
        Args:
            request: The HTTP request to execute
            kwargs: Additional keyword arguments to pass to the request
        Returns:
            A HTTPResponse object containing the response from the server
        """
        url = f"{request.url.format(**request.path_params)}"
        client = await self._ensure_client()

        request_kwargs = {
            "params": request.query_params,
            "headers": request.headers,
            **kwargs
        }

        if isinstance(request.body, (dict, list)):
            request_kwargs["json"] = request.body
        elif isinstance(request.body, bytes):
            request_kwargs["content"] = request.body

        self.logger.debug(f"HTTP {request.method.upper()} {url}")
        response = await client.request(request.method.upper(), url, **request_kwargs)
        self.logger.debug(f"HTTP {response.status_code} {url}")
        return HTTPResponse(response)

    async def close(self) -> None:
        """Close the client"""
        if self.client:
            await self.client.aclose()
            self.client = None

    async def __aenter__(self) -> "HTTPClient":
        """Async context manager entry"""
        await self._ensure_client()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit"""
        await self.close()
