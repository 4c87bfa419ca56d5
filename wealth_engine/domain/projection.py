"""Wealth projection engine - month-by-month net worth series"""

from datetime import date
from typing import List, Sequence

from wealth_engine.domain.installments import monthly_expenses
from wealth_engine.domain.models import Obligation, Position, ProjectionPoint
from wealth_engine.domain.rates import annual_to_monthly
from wealth_engine.domain.yields import evaluate
from wealth_engine.utils.date_utils import add_months, month_label


def contributions_value(monthly_contribution: float, monthly_rate: float, month_index: int) -> float:
    """
    Value at month i of contributions made at months 1..i.

    Each contribution compounds on its own for the months left after it:
        sum_{j=1..i} c * (1 + m)^(i - j)
    """
    return sum(
        (monthly_contribution * (1 + monthly_rate) ** (month_index - j) for j in range(1, month_index + 1)),
        0.0,
    )


def project(
    positions: Sequence[Position],
    obligations: Sequence[Obligation],
    months: int,
    reference_annual_rate: float,
    monthly_contribution: float = 0.0,
    start_date: date | None = None,
) -> List[ProjectionPoint]:
    """
    Project net worth for months 0..months inclusive (index 0 = start date).

    Every month is recomputed from scratch:
    - positions are revalued at the target date (net of taxes)
    - past contributions compound at the monthly equivalent rate
    - obligation charges accumulate and are never released

    The monthly return is clamped at zero, so a month where expenses exceed
    growth shows 0 rather than a loss.
    """
    if start_date is None:
        start_date = date.today()

    monthly_rate = annual_to_monthly(reference_annual_rate) / 100

    points: List[ProjectionPoint] = []
    cumulative_expenses = 0.0

    for i in range(months + 1):
        target_date = add_months(start_date, i)

        positions_value = sum(
            (evaluate(p, target_date, reference_annual_rate).net_value for p in positions),
            0.0,
        )
        contributions = contributions_value(monthly_contribution, monthly_rate, i)

        month_expenses = monthly_expenses(obligations, target_date)
        cumulative_expenses += month_expenses

        net_worth = positions_value + contributions - cumulative_expenses

        if i > 0:
            monthly_return = max(0.0, net_worth - points[-1].net_worth + monthly_contribution * monthly_rate)
        else:
            monthly_return = 0.0

        points.append(
            ProjectionPoint(
                month=month_label(target_date),
                date=target_date,
                net_worth=net_worth,
                monthly_expenses=month_expenses,
                monthly_return=monthly_return,
                positions_value=positions_value,
                contributions_value=contributions,
                cumulative_expenses=cumulative_expenses,
            )
        )

    return points
