"""
Constants and utility functions for activity domains and chart periods.
Extracted to avoid circular dependencies.
"""

# Activity domains charted by the pipeline
SLEEP = 'sleep'
DIAPER = 'diaper'
FEEDING = 'feeding'
ACTIVITY_DOMAINS = [SLEEP, DIAPER, FEEDING]

# Period kinds
PERIOD_WEEK = 'week'
PERIOD_MONTH = 'month'
PERIOD_YEAR = 'year'
PERIODS = [PERIOD_WEEK, PERIOD_MONTH, PERIOD_YEAR]

WEEK_LENGTH_DAYS = 7
YEAR_LENGTH_MONTHS = 12

# Allowed values of the 'type' field per domain
DIAPER_TYPES = ['wet', 'dirty', 'both']
FEEDING_TYPES = ['breast', 'bottle', 'solid']

# Range accepted for a single sleep entry, in hours
MAX_SLEEP_HOURS = 24


def is_valid_period(period: str) -> bool:
    return period in PERIODS


def is_activity_domain(domain: str) -> bool:
    return domain in ACTIVITY_DOMAINS
