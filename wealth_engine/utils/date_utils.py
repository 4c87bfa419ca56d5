"""Date manipulation utilities"""

import calendar
from datetime import date, timedelta
from typing import List


def generate_date_range(start: date, end: date) -> List[date]:
    """Generate list of dates after start up to end (inclusive)"""
    days = (end - start).days
    return [start + timedelta(days=i) for i in range(1, days + 1)]


def add_months(from_date: date, months: int) -> date:
    """Add calendar months, clamping the day to the end of the target month"""
    month_index = from_date.month - 1 + months
    year = from_date.year + month_index // 12
    month = month_index % 12 + 1
    day = min(from_date.day, calendar.monthrange(year, month)[1])
    return date(year, month, day)


def months_between(start: date, end: date) -> int:
    """Whole-month difference from year and month components only (day ignored)"""
    return (end.year - start.year) * 12 + (end.month - start.month)


def month_label(day: date) -> str:
    return f"{day.year:04d}-{day.month:02d}"
