"""HTTP client adapter for alert delivery."""

import logging
from types import TracebackType
from typing import Any

import aiohttp
from aiohttp import ClientTimeout

__all__ = ["HttpClient"]

logger = logging.getLogger(__name__)

POST_TIMEOUT = 10


class HttpClient:
    """Shared HTTP client for alert delivery.

    One aiohttp session is reused across all POSTs and closed through the
    async context manager. No retries: every call is a single attempt.
    """

    def __init__(self, timeout: float = POST_TIMEOUT) -> None:
        """Initialize HTTP client.

        Args:
            timeout: Total seconds allowed per request.
        """
        self.timeout = timeout
        self.session: aiohttp.ClientSession | None = None

    async def __aenter__(self) -> "HttpClient":
        self.session = aiohttp.ClientSession(timeout=ClientTimeout(total=self.timeout))
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if self.session:
            await self.session.close()

    async def post_json(self, url: str, payload: dict[str, Any]) -> int:
        """Send one JSON POST.

        The body is serialized by aiohttp, which also sets
        ``Content-Type: application/json``. The response body is discarded.

        Args:
            url: Target endpoint.
            payload: JSON-serializable request body.

        Returns:
            HTTP status code of the response.

        Raises:
            RuntimeError: If session not initialized.
            aiohttp exceptions: Network/timeout errors.
            TypeError: If payload is not JSON-serializable.
        """
        if self.session is None:
            raise RuntimeError("Session not initialized; use 'async with' context manager")

        async with self.session.post(url, json=payload) as resp:
            logger.debug(f"POST {url} -> {resp.status}")
            return resp.status
