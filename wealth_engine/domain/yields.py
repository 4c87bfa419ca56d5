"""Yield engine - gross, taxed and annualized figures for one position"""

from datetime import date

from wealth_engine.domain.business_days import calendar_days, estimate_business_days
from wealth_engine.domain.models import Position, YieldBreakdown
from wealth_engine.domain.rates import CALENDAR_DAYS_PER_YEAR, annual_to_daily
from wealth_engine.domain.taxes import withhold


def evaluate(position: Position, valuation_date: date, reference_annual_rate: float) -> YieldBreakdown:
    """
    Value a position at a date against the reference annual rate (percent).

    Compounding runs on business days (estimated from calendar days with the
    252/365 ratio); taxation runs on calendar days. A valuation date before
    the deposit yields no growth and no tax.
    """
    days = calendar_days(position.deposit_date, valuation_date)
    business_days = estimate_business_days(days)

    reference_daily = annual_to_daily(reference_annual_rate) / 100
    effective_daily = reference_daily * (position.rate_multiplier_percent / 100)

    gross_value = position.principal * (1 + effective_daily) ** business_days
    gross_return = gross_value - position.principal

    taxes = withhold(gross_return, days, exempt=position.tax_exempt)

    net_value = gross_value - taxes.total
    net_return = net_value - position.principal

    # Annualized net rate; undefined for zero days or zero principal
    if days > 0 and position.principal > 0:
        effective_annual_rate = ((net_value / position.principal) ** (CALENDAR_DAYS_PER_YEAR / days) - 1) * 100
    else:
        effective_annual_rate = 0.0

    return YieldBreakdown(
        gross_value=gross_value,
        gross_return=gross_return,
        iof_amount=taxes.iof_amount,
        iof_rate=taxes.iof_rate,
        ir_amount=taxes.ir_amount,
        ir_rate=taxes.ir_rate,
        net_value=net_value,
        net_return=net_return,
        effective_annual_rate=effective_annual_rate,
        calendar_days=days,
        business_days=business_days,
    )
