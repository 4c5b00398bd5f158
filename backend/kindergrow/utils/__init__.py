"""Utility functions and helpers for activity charting."""

from .calendar_utils import (
    WEEKDAY_ABBREVIATIONS,
    MONTH_ABBREVIATIONS,
    validate_month,
    format_date_key,
    days_in_month,
    shift_month,
    month_start_keys,
    round_half_up
)

__all__ = [
    'WEEKDAY_ABBREVIATIONS',
    'MONTH_ABBREVIATIONS',
    'validate_month',
    'format_date_key',
    'days_in_month',
    'shift_month',
    'month_start_keys',
    'round_half_up'
]
