"""
Activity Chart Service

Chains the pipeline stages for one activity domain and one period selection:
load -> (monthly rollup) -> bucket -> aggregate -> summarize -> trend.
"""

import logging
from datetime import date
from typing import Any, Dict, Iterable, List, Optional

from kindergrow.config.activity_config import ActivityConfig, activity_config
from kindergrow.config.settings import Config
from kindergrow.models.activity_chart import ActivityChart
from kindergrow.models.activity_record import RawActivityRecord
from kindergrow.models.aggregated_series import AggregatedSeries, TrendResult
from kindergrow.models.bucket import Bucket
from kindergrow.schemas.period_schemas import PeriodSelectionSchema
from kindergrow.services.activity_constants import PERIOD_MONTH, PERIOD_YEAR, is_valid_period, PERIODS
from kindergrow.services.activity_record_loader import ActivityRecordLoader
from kindergrow.services.date_key_extractor import DateKeyExtractor
from kindergrow.services.monthly_rollup_service import MonthlyRollup
from kindergrow.services.period_bucket_generator import PeriodBucketGenerator
from kindergrow.services.record_aggregator import RecordAggregator
from kindergrow.services.summary_composer import SummaryComposer
from kindergrow.services.trend_analyzer import TrendAnalyzer

logger = logging.getLogger(__name__)


class ActivityChartService:
    """
    Builds renderer-ready charts for sleep, diaper and feeding logs.

    The service holds configuration only; every call is independent.
    """

    def __init__(self, settings=None, schemas: Optional[ActivityConfig] = None):
        self.settings = settings or Config
        self.schemas = schemas or activity_config

    @property
    def offset_hours(self) -> int:
        return self.settings.TARGET_UTC_OFFSET_HOURS

    @property
    def trend_min_populated(self) -> int:
        return self.settings.TREND_MIN_POPULATED

    def today(self) -> date:
        """Reference date used when the caller supplies none."""
        return DateKeyExtractor.today(self.offset_hours)

    def build_chart(
        self,
        domain: str,
        payloads: Iterable[Dict[str, Any]],
        period: str,
        year: Optional[int] = None,
        month: Optional[int] = None,
        reference_date: Optional[date] = None
    ) -> ActivityChart:
        """
        Build the chart for one domain and period.

        Args:
            domain: 'sleep', 'diaper' or 'feeding'
            payloads: Raw records from the data source
            period: 'week', 'month' or 'year'
            year: Year of a 'month' chart (defaults to the reference date's)
            month: Month of a 'month' chart (defaults to the reference date's)
            reference_date: "Today"; defaults to the current date at the
                configured UTC offset

        Returns:
            ActivityChart with zero-filled series, trend and statistics

        Raises:
            ValueError: Unknown domain, unknown period or month outside 1..12
        """
        if not is_valid_period(period):
            raise ValueError(f"Invalid period: {period}. Expected one of: {', '.join(PERIODS)}")

        activity_schema = self.schemas.get_schema(domain)

        if reference_date is None:
            reference_date = self.today()

        records, skipped = ActivityRecordLoader.load_with_errors(
            domain, payloads, self.offset_hours, activity_schema
        )

        buckets = PeriodBucketGenerator.generate(
            period,
            anchor_year=year,
            anchor_month=month,
            reference_date=reference_date,
            metric_names=activity_schema.metric_names
        )

        bucketed = self._count_bucketed(records, buckets, period)

        if period == PERIOD_YEAR:
            records = MonthlyRollup.rollup(records, activity_schema)

        aggregated = RecordAggregator.aggregate(buckets, records, activity_schema)
        summary = SummaryComposer.summarize(aggregated, activity_schema)

        series = AggregatedSeries(
            buckets=aggregated,
            totals=summary['totals'],
            populated_average=summary['populated_average'],
            distribution=summary['distribution'],
            domain=domain,
            period=period
        )

        trend_metric = activity_schema.trend_metric
        if trend_metric is not None:
            trend = TrendAnalyzer.trend(series.values(trend_metric), self.trend_min_populated)
        else:
            trend = TrendResult.stable()

        statistics = {
            metric: SummaryComposer.describe([v for v in series.values(metric) if v > 0])
            for metric in activity_schema.metric_names
        }

        metadata = {
            'reference_date': reference_date.isoformat(),
            'loaded': bucketed['loaded'],
            'skipped': len(skipped),
            'bucketed': bucketed['bucketed']
        }
        if period == PERIOD_MONTH:
            metadata['year'], metadata['month'] = self._month_anchor(buckets)

        logger.info(
            "Built %s %s chart: %d bucket(s), %d record(s) bucketed, %d skipped",
            domain, period, len(aggregated), metadata['bucketed'], metadata['skipped']
        )

        return ActivityChart(
            series=series,
            trend=trend,
            trend_metric=trend_metric,
            statistics=statistics,
            metadata=metadata
        )

    def build_chart_from_query(
        self,
        domain: str,
        payloads: Iterable[Dict[str, Any]],
        query: Dict[str, Any]
    ) -> ActivityChart:
        """
        Validate a period-selection query, then build the chart.

        Raises:
            marshmallow.ValidationError: The query is invalid
        """
        selection = PeriodSelectionSchema().load(query)
        return self.build_chart(
            domain,
            payloads,
            selection['period'],
            year=selection.get('year'),
            month=selection.get('month'),
            reference_date=selection.get('reference_date')
        )

    @staticmethod
    def _count_bucketed(
        records: List[RawActivityRecord],
        buckets: List[Bucket],
        period: str
    ) -> Dict[str, int]:
        keys = {bucket.date_key for bucket in buckets}
        bucketed = 0
        for record in records:
            if record.date_key is None:
                continue
            key = MonthlyRollup.month_key(record.date_key) if period == PERIOD_YEAR else record.date_key
            if key in keys:
                bucketed += 1
        return {'loaded': len(records), 'bucketed': bucketed}

    @staticmethod
    def _month_anchor(buckets: List[Bucket]):
        year, month, _ = buckets[0].date_key.split('-')
        return int(year), int(month)
