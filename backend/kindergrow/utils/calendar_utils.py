"""
Calendar helpers for period bucketing and month navigation.
"""

import calendar
import math
from datetime import date
from typing import List, Tuple

WEEKDAY_ABBREVIATIONS = ['Mon', 'Tue', 'Wed', 'Thu', 'Fri', 'Sat', 'Sun']
MONTH_ABBREVIATIONS = ['Jan', 'Feb', 'Mar', 'Apr', 'May', 'Jun',
                       'Jul', 'Aug', 'Sep', 'Oct', 'Nov', 'Dec']


def validate_month(month: int) -> None:
    if not isinstance(month, int) or isinstance(month, bool) or not 1 <= month <= 12:
        raise ValueError(f"Month must be an integer between 1 and 12, got {month!r}")


def format_date_key(year: int, month: int, day: int) -> str:
    return f"{year:04d}-{month:02d}-{day:02d}"


def days_in_month(year: int, month: int) -> int:
    """Number of days in a month (the last day, leap years included)."""
    validate_month(month)
    # Valid through December 9999
    _, last_day = calendar.monthrange(year, month)
    return last_day


def shift_month(year: int, month: int, delta: int) -> Tuple[int, int]:
    """
    Move a (year, month) pair by delta months, rolling over year boundaries.

    shift_month(2024, 12, 1) -> (2025, 1)
    shift_month(2024, 1, -1) -> (2023, 12)
    """
    validate_month(month)
    index = year * 12 + (month - 1) + delta
    return index // 12, index % 12 + 1


def month_start_keys(reference_date: date, count: int = 12) -> List[Tuple[int, int]]:
    # Oldest first, ending at the reference month
    return [
        shift_month(reference_date.year, reference_date.month, offset)
        for offset in range(-(count - 1), 1)
    ]


def round_half_up(value: float) -> int:
    # Halves round towards +infinity (2.5 -> 3, -2.5 -> -2), unlike round()
    return int(math.floor(value + 0.5))
