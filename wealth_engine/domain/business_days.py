"""Business-day calendar: calendar vs. trading day counts"""

import math
from datetime import date
from typing import FrozenSet, Tuple

from wealth_engine.domain.rates import BUSINESS_DAYS_PER_YEAR, CALENDAR_DAYS_PER_YEAR
from wealth_engine.utils.date_utils import generate_date_range

# National fixed holidays as (month, day). Movable holidays (Carnival, Good
# Friday, Corpus Christi) are not modelled.
FIXED_HOLIDAYS: FrozenSet[Tuple[int, int]] = frozenset(
    {
        (1, 1),    # New Year
        (4, 21),   # Tiradentes
        (5, 1),    # Labour Day
        (9, 7),    # Independence
        (10, 12),  # Nossa Senhora Aparecida
        (11, 2),   # All Souls
        (11, 15),  # Proclamation of the Republic
        (12, 25),  # Christmas
    }
)


def is_business_day(day: date) -> bool:
    """Weekday that is not a fixed holiday"""
    if day.weekday() >= 5:
        return False
    return (day.month, day.day) not in FIXED_HOLIDAYS


def calendar_days(start: date, end: date) -> int:
    """Whole calendar days from start to end, never negative"""
    return max(0, (end - start).days)


def business_days_exact(start: date, end: date) -> int:
    """Count business days in (start, end] by walking every day"""
    return sum(1 for day in generate_date_range(start, end) if is_business_day(day))


def estimate_business_days(days: int) -> int:
    """
    Approximate business days from calendar days using the 252/365 ratio.

    Rounds half up. This is what the yield path uses instead of
    business_days_exact.
    """
    return math.floor(days * BUSINESS_DAYS_PER_YEAR / CALENDAR_DAYS_PER_YEAR + 0.5)
