"""Portfolio-level figures: dashboard summary and deposit simulation"""

from datetime import date
from typing import Dict, Sequence

from wealth_engine.domain.installments import monthly_commitment, total_pending
from wealth_engine.domain.models import (
    FinancialGoal,
    Obligation,
    PortfolioSummary,
    Position,
    PositionCategory,
    YieldBreakdown,
)
from wealth_engine.domain.yields import evaluate
from wealth_engine.utils.date_utils import add_months


def summarize(
    positions: Sequence[Position],
    obligations: Sequence[Obligation],
    goals: Sequence[FinancialGoal],
    reference_annual_rate: float,
    today: date,
) -> PortfolioSummary:
    """Totals shown on the dashboard, valued at today"""
    total_invested = sum((p.principal for p in positions), 0.0)
    total_net_return = sum(
        (evaluate(p, today, reference_annual_rate).net_return for p in positions),
        0.0,
    )

    return PortfolioSummary(
        total_invested=total_invested,
        total_net_return=total_net_return,
        current_value=total_invested + total_net_return,
        total_pending_expenses=total_pending(obligations),
        monthly_commitment=monthly_commitment(obligations),
        active_goals=sum(1 for g in goals if not g.completed),
    )


def simulate_investment(
    principal: float,
    rate_multiplier_percent: float,
    reference_annual_rate: float,
    tax_exempt: bool = False,
    today: date | None = None,
) -> Dict[str, YieldBreakdown]:
    """
    Value a hypothetical deposit made today after one and two years.

    Exempt simulations are modelled as an LCI, taxable ones as a CDB.
    """
    if today is None:
        today = date.today()

    position = Position(
        position_id="simulation",
        name="Simulation",
        category=PositionCategory.LCI if tax_exempt else PositionCategory.CDB,
        principal=principal,
        rate_multiplier_percent=rate_multiplier_percent,
        deposit_date=today,
        tax_exempt=tax_exempt,
    )

    return {
        "year1": evaluate(position, add_months(today, 12), reference_annual_rate),
        "year2": evaluate(position, add_months(today, 24), reference_annual_rate),
    }
