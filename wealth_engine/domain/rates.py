"""Compounding-rate conversions between annual, daily and monthly bases"""

BUSINESS_DAYS_PER_YEAR = 252
CALENDAR_DAYS_PER_YEAR = 365
MONTHS_PER_YEAR = 12


def annual_to_daily(annual_percent: float) -> float:
    """
    Convert an annual rate to its daily equivalent over 252 business days.

    Formula: daily = (1 + annual)^(1/252) - 1, both in percent.
    """
    annual = annual_percent / 100
    return ((1 + annual) ** (1 / BUSINESS_DAYS_PER_YEAR) - 1) * 100


def daily_to_annual(daily_percent: float) -> float:
    """Inverse of annual_to_daily"""
    daily = daily_percent / 100
    return ((1 + daily) ** BUSINESS_DAYS_PER_YEAR - 1) * 100


def annual_to_monthly(annual_percent: float) -> float:
    annual = annual_percent / 100
    return ((1 + annual) ** (1 / MONTHS_PER_YEAR) - 1) * 100
