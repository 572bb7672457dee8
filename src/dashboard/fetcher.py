"""Data fetching for dashboard metrics.

``MetricsFetcher`` performs the HTTP request; ``SWRCache`` is the
stale-while-revalidate hook widgets read from. A widget reads whatever state
the cache holds for its key, which is pending until a revalidation resolves.

Usage:
    data = SWRCache(MetricsFetcher(base_url="https://gpanga.dev"))
    await data.revalidate_all(["/api/views", "/api/github"])
    state = data.use("/api/views")
"""

from __future__ import annotations

import asyncio
from typing import Any, Iterable

import httpx

from src.common.config import MetricsSettings, settings
from src.common.logging import setup_logging

from .models import FetchState

logger = setup_logging(module_name="dashboard.fetcher")


class MetricsFetcher:
    """Async JSON fetcher for the metrics API."""

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        config: MetricsSettings | None = None,
    ):
        """Initialize the fetcher.

        Args:
            base_url: Metrics API origin. Defaults to settings.
            timeout: Request timeout in seconds. Defaults to settings.
            transport: Optional httpx transport (used by tests).
            config: Metrics settings override.
        """
        config = config or settings.metrics
        self.base_url = (base_url or config.api_base_url).rstrip("/")
        self.timeout = timeout if timeout is not None else config.request_timeout_seconds
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                transport=self._transport,
                headers={"Accept": "application/json"},
            )
        return self._client

    async def fetch(self, key: str) -> Any:
        """GET ``key`` relative to the API origin and decode the JSON body.

        Raises:
            httpx.HTTPError: On transport failure or non-2xx status.
            ValueError: If the body is not JSON.
        """
        response = await self._get_client().get(key)
        response.raise_for_status()
        return response.json()

    async def aclose(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> MetricsFetcher:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()


class SWRCache:
    """Keyed ``{data, error}`` state that survives across renders.

    Failed revalidations keep the last good data and record the error.
    Nothing here retries.
    """

    def __init__(self, fetcher: MetricsFetcher | None = None):
        self._fetcher = fetcher
        self._states: dict[str, FetchState] = {}

    @property
    def fetcher(self) -> MetricsFetcher:
        if self._fetcher is None:
            self._fetcher = MetricsFetcher()
        return self._fetcher

    def use(self, key: str) -> FetchState:
        """Current state for ``key``; pending if never revalidated."""
        return self._states.get(key, FetchState())

    def mutate(self, key: str, data: Any) -> FetchState:
        """Set local data for ``key`` without fetching."""
        state = FetchState(data=data)
        self._states[key] = state
        return state

    async def revalidate(self, key: str) -> FetchState:
        """Fetch ``key`` and store the outcome. Never raises on fetch failure."""
        previous = self.use(key)
        try:
            data = await self.fetcher.fetch(key)
        except (httpx.HTTPError, httpx.InvalidURL, ValueError) as e:
            logger.warning("Fetch failed for %s: %s", key, e)
            state = FetchState(data=previous.data, error=e)
        else:
            state = FetchState(data=data)
            logger.debug("Fetched %s", key)

        self._states[key] = state
        return state

    async def revalidate_all(self, keys: Iterable[str]) -> dict[str, FetchState]:
        """Revalidate several keys concurrently; requests are independent."""
        unique = list(dict.fromkeys(keys))
        states = await asyncio.gather(*(self.revalidate(k) for k in unique))
        return dict(zip(unique, states))
