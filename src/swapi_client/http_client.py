from __future__ import annotations
import logging
from typing import Optional

import httpx

from .config import ClientConfig
from .errors import normalize_error

logger = logging.getLogger(__name__)

class HttpClient:
    """
    - Async GET transport for the Star Wars API:
      - one httpx.AsyncClient per `async with` block, owned by the caller
      - timeouts, headers and redirect policy from ClientConfig
      - non-2xx and network errors raised as TransportError
      - no retries
    """

    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.config = config or ClientConfig()
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    async def __aenter__(self):
        self._client = httpx.AsyncClient(
            timeout=self.config.timeout(),
            headers=self.config.request_headers(),
            follow_redirects=self.config.follow_redirects,
            transport=self._transport,
        )
        return self

    async def __aexit__(self, exc_type, exc, tb):
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def get(self, url: str) -> bytes:
        """GET `url` and return the raw body of a 2xx response."""
        assert self._client is not None, "HttpClient must be used inside 'async with'"
        logger.debug("GET %s", url)
        try:
            resp = await self._client.get(url)
            resp.raise_for_status()
        except httpx.HTTPError as e:
            logger.debug("GET %s failed: %s", url, e)
            raise normalize_error(e) from e
        return resp.content
