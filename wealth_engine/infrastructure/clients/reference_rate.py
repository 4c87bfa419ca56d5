"""Reference rate (CDI/Selic) HTTP client and fallback-safe provider"""

import asyncio
import logging
import time
from typing import Protocol

import httpx

from wealth_engine.config import settings
from wealth_engine.domain.exceptions import ReferenceRateError
from wealth_engine.infrastructure.cache import RateCache
from wealth_engine.infrastructure.observability.logging import log_rate_fetch
from wealth_engine.infrastructure.observability.metrics import (
    reference_rate_failures_counter,
    reference_rate_fetch_counter,
    reference_rate_latency_histogram,
)

logger = logging.getLogger(__name__)


class ReferenceRateSource(Protocol):
    async def fetch_current_annual_rate(self) -> float: ...


class ReferenceRateClient:
    """Client for the Banco Central do Brasil SGS time-series API"""

    def __init__(self, url: str | None = None, timeout: float | None = None, transport: httpx.AsyncBaseTransport | None = None):
        self.url = url or settings.reference_rate_url
        self.timeout = timeout or settings.http_timeout_seconds
        self.transport = transport

    async def get_latest_rate(self) -> float:
        """
        Fetch the latest annual reference rate in percent (e.g. 14.90).

        The API answers with a list of observations:
            [{"data": "18/10/2026", "valor": "14.90"}]

        Raises:
            ReferenceRateError: On timeout, HTTP errors, or invalid response
        """
        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            try:
                with reference_rate_latency_histogram.time():
                    response = await client.get(self.url)
                    response.raise_for_status()
                data = response.json()

                if not data:
                    raise ReferenceRateError("Reference rate series returned no observations")

                return float(str(data[-1]["valor"]).replace(",", "."))

            except httpx.TimeoutException as e:
                raise ReferenceRateError(f"Reference rate API timeout after {self.timeout}s") from e
            except httpx.HTTPStatusError as e:
                raise ReferenceRateError(f"Reference rate API error: {e.response.status_code}") from e
            except httpx.RequestError as e:
                raise ReferenceRateError(f"Reference rate API unreachable: {e}") from e
            except (KeyError, IndexError, ValueError, TypeError) as e:
                raise ReferenceRateError(f"Invalid reference rate data: {e}") from e


class ReferenceRateProvider:
    """
    Cached, never-failing source of the current annual reference rate.

    Lookup order:
    1. Cached value younger than the TTL
    2. Fresh value from the API (stored in the cache)
    3. Fallback constant when the API fails (not cached, so the next call retries)

    Concurrent misses share one in-flight fetch and all receive its result,
    the fallback included.
    """

    def __init__(
        self,
        client: ReferenceRateClient | None = None,
        cache: RateCache | None = None,
        fallback_rate: float | None = None,
    ):
        self.client = client or ReferenceRateClient()
        self.cache = cache or RateCache(settings.reference_rate_cache_ttl_seconds)
        self.fallback_rate = settings.reference_rate_fallback if fallback_rate is None else fallback_rate
        self._lock = asyncio.Lock()
        self._inflight: asyncio.Future | None = None
        self._refresh_task: asyncio.Task | None = None

    async def fetch_current_annual_rate(self) -> float:
        cached = self.cache.get()
        if cached is not None:
            reference_rate_fetch_counter.labels(source="cache").inc()
            return cached

        async with self._lock:
            cached = self.cache.get()
            if cached is not None:
                reference_rate_fetch_counter.labels(source="cache").inc()
                return cached

            if self._inflight is None:
                self._inflight = asyncio.get_running_loop().create_future()
                self._refresh_task = asyncio.create_task(self._refresh(self._inflight))
            future = self._inflight

        # A cancelled caller must not cancel the fetch the others are waiting on
        return await asyncio.shield(future)

    async def _refresh(self, future: asyncio.Future) -> None:
        rate = self.fallback_rate
        try:
            rate = await self._fetch_or_fallback()
        finally:
            self._inflight = None
            future.set_result(rate)

    async def _fetch_or_fallback(self) -> float:
        start_time = time.time()
        try:
            rate = await self.client.get_latest_rate()
        except Exception as e:
            reference_rate_failures_counter.inc()
            reference_rate_fetch_counter.labels(source="fallback").inc()
            logger.warning(f"Reference rate unavailable, using fallback {self.fallback_rate}: {e}")
            return self.fallback_rate

        self.cache.put(rate)
        reference_rate_fetch_counter.labels(source="api").inc()
        log_rate_fetch(rate, "api", (time.time() - start_time) * 1000)
        return rate
