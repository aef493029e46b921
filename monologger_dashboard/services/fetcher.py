"""
Dashboard Fetcher - pulls the four statistics summaries from the reporting service.

The requests run concurrently and the fetch waits for all of them to settle
before looking at any result. One failed request fails the whole fetch.
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

import httpx

from .errors import DecodeError, TransportError

logger = logging.getLogger(__name__)

ENDPOINTS: Dict[str, str] = {
    "summary": "/api/stats/messages/summary",
    "users": "/api/stats/messages/by-user",
    "activity": "/api/stats/messages/by-day",
    "top_users": "/api/stats/messages/top-users",
}


@dataclass(frozen=True)
class RawDashboardData:
    """Decoded JSON bodies of one fetch, not yet validated."""
    summary: Any
    users: Any
    activity: Any
    top_users: Any


class DashboardFetcher:
    """Fetches the raw dashboard datasets in parallel."""

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        client: Optional[httpx.AsyncClient] = None,
    ):
        """Initialize the fetcher.

        Args:
            base_url: Address of the reporting service, e.g. http://localhost:5151
            timeout: Per-request timeout in seconds
            client: Shared client to use instead of opening one per fetch
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._client = client

    async def fetch(self) -> RawDashboardData:
        """Fetch all four datasets.

        Returns:
            RawDashboardData with the decoded bodies

        Raises:
            TransportError: If any request failed or returned a non-success status
            DecodeError: If all requests succeeded but a body is not JSON
        """
        if self._client is not None:
            return await self._fetch_all(self._client)

        async with httpx.AsyncClient(timeout=self.timeout) as client:
            return await self._fetch_all(client)

    async def _fetch_all(self, client: httpx.AsyncClient) -> RawDashboardData:
        names = list(ENDPOINTS)
        results = await asyncio.gather(
            *(self._get_json(client, ENDPOINTS[name]) for name in names),
            return_exceptions=True,
        )

        failures = []
        for name, result in zip(names, results):
            if isinstance(result, Exception):
                logger.warning(f"Dashboard request '{name}' failed: {result}")
                failures.append(result)
            elif isinstance(result, BaseException):
                raise result

        if any(not isinstance(exc, DecodeError) for exc in failures):
            raise TransportError("Could not retrieve dashboard data")
        if failures:
            raise DecodeError("Could not decode dashboard data")

        return RawDashboardData(**dict(zip(names, results)))

    async def _get_json(self, client: httpx.AsyncClient, path: str) -> Any:
        url = f"{self.base_url}{path}"
        try:
            response = await client.get(url, timeout=self.timeout)
            response.raise_for_status()
        except httpx.HTTPError as e:
            raise TransportError(f"GET {url}: {e}") from e

        try:
            return response.json()
        except ValueError as e:
            raise DecodeError(f"GET {url} returned a body that is not JSON") from e
