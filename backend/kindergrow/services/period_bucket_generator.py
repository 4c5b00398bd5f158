"""
Period Bucket Generator

Builds the complete, gapless bucket skeleton of a chart period. Buckets exist
whether or not any record lands in them, so an empty period still renders as
a correctly shaped grid.
"""

from datetime import date, timedelta
from typing import Iterable, List, Optional

from kindergrow.models.bucket import Bucket
from kindergrow.services.activity_constants import (
    PERIOD_WEEK,
    PERIOD_MONTH,
    PERIOD_YEAR,
    PERIODS,
    WEEK_LENGTH_DAYS,
    YEAR_LENGTH_MONTHS
)
from kindergrow.utils.calendar_utils import (
    WEEKDAY_ABBREVIATIONS,
    MONTH_ABBREVIATIONS,
    days_in_month,
    format_date_key,
    month_start_keys,
    validate_month
)


class PeriodBucketGenerator:
    """Generates ordered bucket skeletons for week, month and year periods."""

    @staticmethod
    def generate(
        period: str,
        anchor_year: Optional[int] = None,
        anchor_month: Optional[int] = None,
        reference_date: Optional[date] = None,
        metric_names: Iterable[str] = ()
    ) -> List[Bucket]:
        """
        Generate the bucket skeleton for a period.

        Args:
            period: 'week', 'month' or 'year'
            anchor_year: Year of a 'month' period
            anchor_month: Month (1-12) of a 'month' period
            reference_date: "Today" for 'week' and 'year' periods; also the
                fallback anchor for 'month'
            metric_names: Metrics to zero-fill in every bucket

        Returns:
            Buckets in chronological order, oldest first
        """
        metric_names = list(metric_names)

        if period == PERIOD_WEEK:
            PeriodBucketGenerator._require_reference_date(period, reference_date)
            return PeriodBucketGenerator._week_buckets(reference_date, metric_names)

        if period == PERIOD_MONTH:
            if anchor_year is None or anchor_month is None:
                PeriodBucketGenerator._require_reference_date(period, reference_date)
                anchor_year = reference_date.year if anchor_year is None else anchor_year
                anchor_month = reference_date.month if anchor_month is None else anchor_month
            return PeriodBucketGenerator._month_buckets(anchor_year, anchor_month, metric_names)

        if period == PERIOD_YEAR:
            PeriodBucketGenerator._require_reference_date(period, reference_date)
            return PeriodBucketGenerator._year_buckets(reference_date, metric_names)

        raise ValueError(f"Invalid period: {period}. Expected one of: {', '.join(PERIODS)}")

    @staticmethod
    def _week_buckets(reference_date: date, metric_names: List[str]) -> List[Bucket]:
        """Trailing 7 days ending at the reference date."""
        buckets = []
        for offset in range(WEEK_LENGTH_DAYS - 1, -1, -1):
            day = reference_date - timedelta(days=offset)
            buckets.append(Bucket(
                label=WEEKDAY_ABBREVIATIONS[day.weekday()],
                date_key=day.isoformat(),
                metrics={metric: 0 for metric in metric_names}
            ))
        return buckets

    @staticmethod
    def _month_buckets(year: int, month: int, metric_names: List[str]) -> List[Bucket]:
        """One bucket per calendar day of (year, month), labeled 1..N."""
        validate_month(month)
        return [
            Bucket(
                label=str(day),
                date_key=format_date_key(year, month, day),
                metrics={metric: 0 for metric in metric_names}
            )
            for day in range(1, days_in_month(year, month) + 1)
        ]

    @staticmethod
    def _year_buckets(reference_date: date, metric_names: List[str]) -> List[Bucket]:
        """Trailing 12 calendar months; each bucket is keyed by the month's first day."""
        return [
            Bucket(
                label=MONTH_ABBREVIATIONS[month - 1],
                date_key=format_date_key(year, month, 1),
                metrics={metric: 0 for metric in metric_names}
            )
            for year, month in month_start_keys(reference_date, YEAR_LENGTH_MONTHS)
        ]

    @staticmethod
    def _require_reference_date(period: str, reference_date: Optional[date]) -> None:
        if reference_date is None:
            raise ValueError(f"reference_date is required for the '{period}' period")
