"""Calendar helpers shared by the dashboards and reports."""

from __future__ import annotations

from datetime import date, datetime, time, timedelta
from typing import List, Tuple

MONTH_NAMES = [
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
]


def shift_month(year: int, month: int, delta: int) -> Tuple[int, int]:
    """Move a (year, month) pair by ``delta`` months."""
    index = year * 12 + (month - 1) + delta
    return index // 12, index % 12 + 1


def month_bounds(year: int, month: int) -> Tuple[datetime, datetime]:
    """Return the first moment of a month and of the following month."""
    next_year, next_month = shift_month(year, month, 1)
    return datetime(year, month, 1), datetime(next_year, next_month, 1)


def last_months(now: datetime, count: int) -> List[Tuple[int, int]]:
    """The ``count`` most recent (year, month) pairs, oldest first, ending with the month of ``now``."""
    return [shift_month(now.year, now.month, offset) for offset in range(-(count - 1), 1)]


def day_bounds(day: date) -> Tuple[datetime, datetime]:
    start = datetime.combine(day, time.min)
    return start, start + timedelta(days=1)


def percent_change(current: float, previous: float) -> float:
    """Percentage change from ``previous`` to ``current``; 0 without a positive previous value."""
    if previous <= 0:
        return 0.0
    return round((current - previous) / previous * 100.0, 2)
