# ABOUTME: Async HTTP client abstraction for catalog API calls.
# ABOUTME: Rate limiting, retry with backoff, distinct failure kinds, and injectable transport.

import asyncio
import logging
import time
from typing import Any, Protocol, runtime_checkable

import httpx

from bookbank import __version__

logger = logging.getLogger(__name__)

_RETRYABLE_STATUS_CODES = {429, 500, 502, 503, 504}


class CatalogFetchError(Exception):
    """Base class for failures talking to the catalog API."""


class TransportError(CatalogFetchError):
    """The request never produced a response (DNS, connection, timeout)."""


class HttpStatusError(CatalogFetchError):
    """The catalog answered with a status outside 200-299."""

    def __init__(self, status_code: int, url: str) -> None:
        super().__init__(f"HTTP {status_code} from {url}")
        self.status_code = status_code
        self.url = url


class DecodeError(CatalogFetchError):
    """The response body could not be read as the expected JSON shape."""


@runtime_checkable
class HttpClient(Protocol):
    """Protocol for async HTTP GET operations against the catalog API."""

    async def get(self, url: str, params: dict[str, str] | None = None) -> Any: ...


class BookBankHttpClient:
    """Async HTTP client with rate limiting and retry for catalog API calls.

    Wraps httpx.AsyncClient with a minimum interval between requests and
    retry logic for transient failures (429, 5xx). The interval is shared by
    every coroutine using the client, so concurrent lanes still respect it.
    """

    def __init__(
        self,
        *,
        min_request_interval: float = 0.1,
        max_retries: int = 3,
        retry_delay: float = 1.0,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        client_kwargs: dict[str, Any] = {
            "headers": {"User-Agent": f"bookbank/{__version__}"},
            "timeout": timeout,
        }
        if transport is not None:
            client_kwargs["transport"] = transport
        self._client = httpx.AsyncClient(**client_kwargs)
        self._min_interval = min_request_interval
        self._max_retries = max_retries
        self._retry_delay = retry_delay
        self._last_request_time: float = 0.0
        self._rate_lock = asyncio.Lock()

    async def __aenter__(self) -> "BookBankHttpClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def get(self, url: str, params: dict[str, str] | None = None) -> Any:
        """Send a GET request with rate limiting and retry.

        Args:
            url: The URL to request.
            params: Optional query parameters.

        Returns:
            Parsed JSON response body.

        Raises:
            TransportError: When the request fails before a response arrives.
            HttpStatusError: On non-retryable statuses or exhausted retries.
            DecodeError: When a 2xx body is not valid JSON.
        """
        attempts = 1 + self._max_retries
        last_status = 0
        for attempt in range(attempts):
            await self._rate_limit()
            try:
                response = await self._client.get(url, params=params)
            except httpx.HTTPError as exc:
                raise TransportError(f"Request failed: {url}: {exc}") from exc

            last_status = response.status_code
            if response.is_success:
                try:
                    return response.json()
                except ValueError as exc:
                    raise DecodeError(f"Invalid JSON from {url}: {exc}") from exc

            if response.status_code not in _RETRYABLE_STATUS_CODES:
                raise HttpStatusError(response.status_code, url)

            if attempt < attempts - 1:
                delay = self._retry_delay * (2**attempt)
                logger.warning(
                    "HTTP %d from %s, retrying in %.1fs (attempt %d/%d)",
                    response.status_code,
                    url,
                    delay,
                    attempt + 1,
                    self._max_retries,
                )
                await asyncio.sleep(delay)

        raise HttpStatusError(last_status, url)

    async def _rate_limit(self) -> None:
        """Sleep if needed to maintain minimum interval between requests."""
        if self._min_interval <= 0:
            return
        async with self._rate_lock:
            now = time.monotonic()
            elapsed = now - self._last_request_time
            if elapsed < self._min_interval and self._last_request_time > 0:
                await asyncio.sleep(self._min_interval - elapsed)
            self._last_request_time = time.monotonic()
