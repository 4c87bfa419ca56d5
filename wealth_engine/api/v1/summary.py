"""POST /v1/summary and POST /v1/goals/progress - Dashboard figures"""

from datetime import date
from fastapi import APIRouter, Depends

from wealth_engine.api.v1.schemas import (
    GoalProgressSchema,
    GoalsRequest,
    GoalsResponse,
    SummaryRequest,
    SummaryResponse,
)
from wealth_engine.api.dependencies import get_rate_provider, resolve_reference_rate
from wealth_engine.domain.goals import goal_progress, overall_progress, settle_goal
from wealth_engine.domain.installments import remaining_installments
from wealth_engine.domain.portfolio import summarize
from wealth_engine.infrastructure.clients.reference_rate import ReferenceRateProvider

router = APIRouter()


@router.post("/summary", response_model=SummaryResponse)
async def get_summary(
    request_body: SummaryRequest,
    provider: ReferenceRateProvider = Depends(get_rate_provider),
):
    """Totals for the dashboard, valued today"""
    rate = await resolve_reference_rate(request_body.reference_annual_rate, provider)
    today = date.today()

    obligations = [o.to_domain() for o in request_body.obligations]
    summary = summarize(
        positions=[p.to_domain() for p in request_body.positions],
        obligations=obligations,
        goals=[g.to_domain() for g in request_body.goals],
        reference_annual_rate=rate,
        today=today,
    )

    return SummaryResponse(
        reference_annual_rate=rate,
        total_invested=summary.total_invested,
        total_net_return=summary.total_net_return,
        current_value=summary.current_value,
        total_pending_expenses=summary.total_pending_expenses,
        monthly_commitment=summary.monthly_commitment,
        active_goals=summary.active_goals,
        remaining_installments={o.obligation_id: remaining_installments(o, today) for o in obligations},
    )


@router.post("/goals/progress", response_model=GoalsResponse)
def get_goals_progress(request_body: GoalsRequest):
    """
    Progress of each goal, completing any goal whose target has been reached.

    The overall figure only counts goals still active after settlement.
    """
    today = date.today()
    goals = [settle_goal(g.to_domain(), today) for g in request_body.goals]

    items = []
    for goal in goals:
        progress = goal_progress(goal, today)
        items.append(
            GoalProgressSchema(
                goal_id=progress.goal_id,
                progress_percent=progress.progress_percent,
                remaining_amount=progress.remaining_amount,
                days_until_deadline=progress.days_until_deadline,
                completed=progress.completed,
                completed_at=goal.completed_at,
            )
        )

    return GoalsResponse(overall_progress_percent=overall_progress(goals), goals=items)
