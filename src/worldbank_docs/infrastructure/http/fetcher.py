"""
Rate-Limited Fetcher - the only gateway to the World Bank Documents API.

Provides:
- A minimum spacing between request starts (default 300 ms, process-wide
  for one fetcher instance)
- Query-string building (drops empty values, comma-joins lists, forces
  ``format=json``)
- Consistent error mapping to the shared exception hierarchy

The upstream API documents no rate limit; 200-500 ms spacing is the
recommended courtesy, so we pick 300 ms. No retries are attempted: a failed
call surfaces immediately and the caller may re-invoke the tool.

Usage:
    async with RateLimitedFetcher(WORLDBANK_API_URL) as fetcher:
        payload = await fetcher.fetch({"qterm": "energy", "rows": 5})
"""

from __future__ import annotations

import asyncio
import json
import logging
import time
from typing import Any

import httpx
from typing_extensions import Self

from worldbank_docs.shared.exceptions import NetworkError, ParseError

logger = logging.getLogger(__name__)

WORLDBANK_API_URL = "https://search.worldbank.org/api/v3/wds"
DEFAULT_MIN_INTERVAL = 0.3  # seconds
DEFAULT_TIMEOUT = 30.0
USER_AGENT = "worldbank-docs-mcp/1.0"


def build_query_params(params: dict[str, Any]) -> dict[str, str]:
    """
    Serialize tool-level parameters into a flat query-string mapping.

    ``None`` and ``""`` are dropped, lists/tuples are comma-joined and
    ``format`` is always forced to ``json``.
    """
    query: dict[str, str] = {}
    for key, value in params.items():
        if value is None or value == "":
            continue
        if isinstance(value, (list, tuple)):
            query[key] = ",".join(str(v) for v in value)
        else:
            query[key] = str(value)
    query["format"] = "json"
    return query


class RateLimitedFetcher:
    """
    Serializes GET calls to one JSON endpoint with a minimum inter-request
    spacing.

    The timestamp of the last request start is owned by the instance. The
    delay gate is held under an ``asyncio.Lock`` so concurrent tool calls
    still start at least ``min_interval`` apart.
    """

    def __init__(
        self,
        base_url: str = WORLDBANK_API_URL,
        min_interval: float = DEFAULT_MIN_INTERVAL,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Initialize fetcher.

        Args:
            base_url: Endpoint URL (query string is appended)
            min_interval: Minimum seconds between request starts
            timeout: Request timeout in seconds
            transport: Optional httpx transport (tests use ``httpx.MockTransport``)
        """
        self._base_url = base_url
        self._min_interval = min_interval
        self._timeout = timeout
        self._last_request_time = 0.0
        self._lock = asyncio.Lock()
        self._client = httpx.AsyncClient(
            timeout=self._timeout,
            headers={"User-Agent": USER_AGENT, "Accept": "application/json"},
            transport=transport,
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def min_interval(self) -> float:
        return self._min_interval

    async def _rate_limit(self) -> None:
        """Wait out the remainder of the minimum interval, then stamp."""
        async with self._lock:
            elapsed = time.monotonic() - self._last_request_time
            if elapsed < self._min_interval:
                wait_time = self._min_interval - elapsed
                logger.debug(f"Rate limiting: waiting {wait_time:.3f}s")
                await asyncio.sleep(wait_time)
            self._last_request_time = time.monotonic()

    def reset(self) -> None:
        """Forget the last request time (next call is not delayed)."""
        self._last_request_time = 0.0

    async def fetch(self, params: dict[str, Any]) -> dict[str, Any]:
        """
        Issue a rate-limited GET and return the parsed JSON body.

        Args:
            params: Wire parameters (values may be str, int or list)

        Returns:
            Parsed JSON object

        Raises:
            NetworkError: Non-success HTTP status or transport failure
            ParseError: Body is not valid JSON
        """
        query = build_query_params(params)
        await self._rate_limit()

        logger.debug(f"GET {self._base_url} params={query}")
        try:
            response = await self._client.get(self._base_url, params=query)
        except httpx.TimeoutException as e:
            logger.exception(f"Timeout for {self._base_url}")
            raise NetworkError(f"Request timeout after {self._timeout}s") from e
        except httpx.RequestError as e:
            logger.exception(f"Request error: {e}")
            raise NetworkError(f"Connection failed: {e}") from e

        if not response.is_success:
            logger.error(f"HTTP error {response.status_code}: {response.reason_phrase} for {response.url}")
            raise NetworkError.from_status(response.status_code, response.reason_phrase)

        try:
            return response.json()
        except json.JSONDecodeError as e:
            logger.exception(f"JSON decode error: {e}")
            raise ParseError("Invalid JSON response", source="World Bank API") from e

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        await self._client.aclose()

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.close()
