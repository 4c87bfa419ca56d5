"""Unit tests for the wealth projection"""

import pytest
from dataclasses import asdict
from datetime import date
from wealth_engine.domain.models import Obligation
from wealth_engine.domain.projection import contributions_value, project
from wealth_engine.domain.rates import annual_to_monthly
from wealth_engine.domain.yields import evaluate


def test_projection_length_and_order(start_date, sample_positions, sample_obligations):
    points = project(sample_positions, sample_obligations, 12, 14.90, 500.0, start_date=start_date)

    assert len(points) == 13
    assert points[0].date == start_date
    assert points[0].month == "2026-10"
    assert points[3].month == "2027-01"
    assert [p.date for p in points] == sorted(p.date for p in points)


def test_projection_index_zero(start_date, sample_positions):
    """Month 0 values positions today and has no contributions or return"""
    points = project(sample_positions, [], 0, 14.90, 1000.0, start_date=start_date)

    assert len(points) == 1
    expected = sum(evaluate(p, start_date, 14.90).net_value for p in sample_positions)
    assert points[0].positions_value == pytest.approx(expected)
    assert points[0].contributions_value == 0.0
    assert points[0].monthly_return == 0.0
    assert points[0].net_worth == pytest.approx(expected)


def test_contributions_compound_independently():
    m = annual_to_monthly(12.0) / 100

    assert contributions_value(1000.0, m, 0) == 0.0
    assert contributions_value(1000.0, m, 1) == pytest.approx(1000.0)
    assert contributions_value(1000.0, m, 3) == pytest.approx(1000.0 * ((1 + m) ** 2 + (1 + m) + 1))


def test_contribution_only_projection(start_date):
    m = annual_to_monthly(12.0) / 100
    points = project([], [], 2, 12.0, 1000.0, start_date=start_date)

    assert points[1].net_worth == pytest.approx(1000.0)
    assert points[2].net_worth == pytest.approx(1000.0 * (1 + m) + 1000.0)
    assert points[1].monthly_return == pytest.approx(1000.0 + 1000.0 * m)


def test_expenses_accumulate_and_never_roll_off(start_date):
    obligation = Obligation(
        obligation_id="o1",
        description="Phone",
        total_amount=1200.0,
        installments=12,
        current_installment=1,
        start_date=start_date,
    )
    points = project([], [obligation], 14, 14.90, 0.0, start_date=start_date)

    assert points[0].monthly_expenses == 100.0
    assert points[0].net_worth == pytest.approx(-100.0)
    assert points[11].cumulative_expenses == pytest.approx(1200.0)
    assert points[12].monthly_expenses == 0.0
    assert points[12].net_worth == pytest.approx(-1200.0)
    assert points[14].net_worth == pytest.approx(-1200.0)


def test_monthly_return_clamped_at_zero(start_date):
    """A month with a net loss reports zero, not a negative return"""
    obligation = Obligation(
        obligation_id="o1",
        description="Rent",
        total_amount=12000.0,
        installments=12,
        current_installment=1,
        start_date=start_date,
    )
    points = project([], [obligation], 3, 14.90, 0.0, start_date=start_date)

    assert points[2].net_worth < points[1].net_worth
    assert all(p.monthly_return == 0.0 for p in points)


def test_projection_deterministic(start_date, sample_positions, sample_obligations):
    first = project(sample_positions, sample_obligations, 24, 14.90, 750.0, start_date=start_date)
    second = project(sample_positions, sample_obligations, 24, 14.90, 750.0, start_date=start_date)

    assert first == second
    assert repr([asdict(p) for p in first]) == repr([asdict(p) for p in second])


def test_projection_month_end_start_date():
    points = project([], [], 2, 14.90, start_date=date(2026, 1, 31))

    assert points[1].date == date(2026, 2, 28)
    assert points[2].date == date(2026, 3, 31)


def test_projection_defaults_to_today():
    before = date.today()
    points = project([], [], 0, 14.90)
    after = date.today()

    assert before <= points[0].date <= after
