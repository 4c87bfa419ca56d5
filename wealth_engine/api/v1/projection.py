"""POST /v1/projection - Month-by-month wealth projection"""

import time
import logging
from dataclasses import asdict
from fastapi import APIRouter, Depends, HTTPException, Request

from wealth_engine.api.v1.schemas import ProjectionPointSchema, ProjectionRequest, ProjectionResponse
from wealth_engine.api.dependencies import get_rate_provider, get_request_id, resolve_reference_rate
from wealth_engine.config import settings
from wealth_engine.domain.exceptions import InvalidProjectionHorizonError
from wealth_engine.domain.projection import project
from wealth_engine.infrastructure.clients.reference_rate import ReferenceRateProvider
from wealth_engine.infrastructure.observability.logging import log_projection
from wealth_engine.infrastructure.observability.metrics import record_projection

router = APIRouter()


def check_horizon(months: int) -> None:
    """Reject horizons beyond the supported maximum"""
    if months > settings.projection_max_months:
        raise InvalidProjectionHorizonError(
            f"Projection horizon of {months} months exceeds the maximum of {settings.projection_max_months}"
        )


@router.post("/projection", response_model=ProjectionResponse)
async def create_projection(
    request_body: ProjectionRequest,
    request: Request,
    provider: ReferenceRateProvider = Depends(get_rate_provider),
):
    """
    Project net worth for months 0..N.

    Flow:
    1. Validate horizon
    2. Resolve reference rate (request value or provider)
    3. Recompute positions, contributions and expenses for every month
    4. Record metrics and logs
    """
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        check_horizon(request_body.months)
    except InvalidProjectionHorizonError as e:
        logging.warning(f"Invalid horizon: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))

    rate = await resolve_reference_rate(request_body.reference_annual_rate, provider)

    points = project(
        positions=[p.to_domain() for p in request_body.positions],
        obligations=[o.to_domain() for o in request_body.obligations],
        months=request_body.months,
        reference_annual_rate=rate,
        monthly_contribution=request_body.monthly_contribution,
        start_date=request_body.start_date,
    )

    duration_ms = (time.time() - start_time) * 1000
    record_projection(request_body.months)
    log_projection(
        request_id,
        request_body.months,
        len(request_body.positions),
        len(request_body.obligations),
        duration_ms,
    )

    return ProjectionResponse(
        reference_annual_rate=rate,
        points=[ProjectionPointSchema(**asdict(point)) for point in points],
    )
