"""Unit tests for position yield evaluation"""

import pytest
from datetime import date
from wealth_engine.domain.models import Position, PositionCategory
from wealth_engine.domain.rates import annual_to_daily
from wealth_engine.domain.yields import evaluate


def make_position(**overrides) -> Position:
    fields = dict(
        position_id="p1",
        name="CDB",
        category=PositionCategory.CDB,
        principal=10000.0,
        rate_multiplier_percent=100.0,
        deposit_date=date(2025, 1, 1),
        tax_exempt=False,
    )
    fields.update(overrides)
    return Position(**fields)


def test_one_year_at_reference_rate():
    """365 calendar days → 252 business days, IR at 17.5%"""
    result = evaluate(make_position(), date(2026, 1, 1), 14.90)

    assert result.calendar_days == 365
    assert result.business_days == 252
    assert result.gross_value == pytest.approx(
        10000 * (1 + annual_to_daily(14.90) / 100) ** 252, rel=1e-12
    )
    assert result.gross_value == pytest.approx(11490.0, rel=1e-9)
    assert result.gross_return == pytest.approx(1490.0, rel=1e-8)
    assert result.iof_amount == 0.0
    assert result.iof_rate == 0.0
    assert result.ir_rate == 17.5
    assert result.ir_amount == pytest.approx(0.175 * 1490.0, rel=1e-8)
    assert result.net_value == pytest.approx(11490.0 - 260.75, rel=1e-9)
    assert result.net_return == pytest.approx(1229.25, rel=1e-8)
    assert result.effective_annual_rate == pytest.approx(12.2925, rel=1e-7)


def test_rate_multiplier_scales_daily_rate():
    base = evaluate(make_position(), date(2026, 1, 1), 14.90)
    boosted = evaluate(make_position(rate_multiplier_percent=110.0), date(2026, 1, 1), 14.90)

    daily = annual_to_daily(14.90) / 100 * 1.10
    assert boosted.gross_value == pytest.approx(10000 * (1 + daily) ** 252, rel=1e-12)
    assert boosted.gross_return > base.gross_return


def test_short_holding_pays_iof_first():
    """10 days: IOF at 66% of the return, IR at 22.5% on the rest"""
    result = evaluate(make_position(), date(2025, 1, 11), 14.90)

    assert result.calendar_days == 10
    assert result.business_days == 7
    assert result.iof_rate == 66
    assert result.iof_amount == pytest.approx(result.gross_return * 0.66)
    assert result.ir_rate == 22.5
    assert result.ir_amount == pytest.approx((result.gross_return - result.iof_amount) * 0.225)
    assert result.net_value == pytest.approx(result.gross_value - result.iof_amount - result.ir_amount)


def test_exempt_position_has_no_tax():
    result = evaluate(make_position(category=PositionCategory.LCI, tax_exempt=True), date(2025, 1, 11), 14.90)

    assert result.iof_amount == 0.0
    assert result.iof_rate == 0.0
    assert result.ir_amount == 0.0
    assert result.ir_rate == 0.0
    assert result.net_value == result.gross_value


def test_valuation_before_deposit_has_no_growth():
    result = evaluate(make_position(), date(2024, 6, 1), 14.90)

    assert result.calendar_days == 0
    assert result.business_days == 0
    assert result.gross_value == 10000.0
    assert result.gross_return == 0.0
    assert result.iof_amount == 0.0
    assert result.ir_amount == 0.0
    assert result.net_value == 10000.0
    assert result.effective_annual_rate == 0.0


def test_valuation_on_deposit_date():
    result = evaluate(make_position(), date(2025, 1, 1), 14.90)

    assert result.net_value == 10000.0
    assert result.net_return == 0.0
    assert result.effective_annual_rate == 0.0


def test_zero_principal_does_not_divide_by_zero():
    result = evaluate(make_position(principal=0.0), date(2026, 1, 1), 14.90)

    assert result.gross_value == 0.0
    assert result.net_value == 0.0
    assert result.effective_annual_rate == 0.0
