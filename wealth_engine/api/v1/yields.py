"""POST /v1/yield and POST /v1/simulation - Position valuation endpoints"""

from dataclasses import asdict
from datetime import date

from fastapi import APIRouter, Depends

from wealth_engine.api.v1.schemas import (
    SimulationRequest,
    SimulationResponse,
    YieldBreakdownSchema,
    YieldRequest,
    YieldResponse,
)
from wealth_engine.api.dependencies import get_rate_provider, resolve_reference_rate
from wealth_engine.domain.portfolio import simulate_investment
from wealth_engine.domain.yields import evaluate
from wealth_engine.infrastructure.clients.reference_rate import ReferenceRateProvider

router = APIRouter()


@router.post("/yield", response_model=YieldResponse)
async def evaluate_position(
    request_body: YieldRequest,
    provider: ReferenceRateProvider = Depends(get_rate_provider),
):
    """
    Gross, taxed and annualized yield of one position at a valuation date.

    Compounds on estimated business days, taxes on calendar days.
    """
    rate = await resolve_reference_rate(request_body.reference_annual_rate, provider)
    valuation_date = request_body.valuation_date or date.today()

    breakdown = evaluate(request_body.position.to_domain(), valuation_date, rate)

    return YieldResponse(
        position_id=request_body.position.position_id,
        valuation_date=valuation_date,
        reference_annual_rate=rate,
        breakdown=YieldBreakdownSchema(**asdict(breakdown)),
    )


@router.post("/simulation", response_model=SimulationResponse)
async def simulate(
    request_body: SimulationRequest,
    provider: ReferenceRateProvider = Depends(get_rate_provider),
):
    """Value a deposit made today after one and two years"""
    rate = await resolve_reference_rate(request_body.reference_annual_rate, provider)

    result = simulate_investment(
        principal=request_body.principal,
        rate_multiplier_percent=request_body.rate_multiplier_percent,
        reference_annual_rate=rate,
        tax_exempt=request_body.tax_exempt,
    )

    return SimulationResponse(
        reference_annual_rate=rate,
        year1=YieldBreakdownSchema(**asdict(result["year1"])),
        year2=YieldBreakdownSchema(**asdict(result["year2"])),
    )
