"""Dependency injection for FastAPI endpoints"""

from functools import lru_cache

from fastapi import Request
from wealth_engine.infrastructure.clients.reference_rate import ReferenceRateProvider, ReferenceRateSource


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


@lru_cache(maxsize=1)
def get_rate_provider() -> ReferenceRateProvider:
    """Provide the process-wide reference rate provider (created on first use)"""
    return ReferenceRateProvider()


async def resolve_reference_rate(explicit_rate: float | None, provider: ReferenceRateSource) -> float:
    """Use the caller's rate when given, otherwise the provider's current rate"""
    if explicit_rate is not None:
        return explicit_rate
    return await provider.fetch_current_annual_rate()
