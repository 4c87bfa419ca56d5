"""GET /v1/reference-rate - Current reference rate and its equivalents"""

from fastapi import APIRouter, Depends

from wealth_engine.api.v1.schemas import ReferenceRateResponse
from wealth_engine.api.dependencies import get_rate_provider
from wealth_engine.domain.rates import annual_to_daily, annual_to_monthly
from wealth_engine.infrastructure.clients.reference_rate import ReferenceRateProvider

router = APIRouter()


@router.get("/reference-rate", response_model=ReferenceRateResponse)
async def get_reference_rate(provider: ReferenceRateProvider = Depends(get_rate_provider)):
    """
    Current annual reference rate with daily (252-day) and monthly equivalents.

    Falls back to the configured constant when the upstream API fails.
    """
    annual = await provider.fetch_current_annual_rate()
    return ReferenceRateResponse(
        annual_rate=annual,
        daily_rate=annual_to_daily(annual),
        monthly_rate=annual_to_monthly(annual),
    )
