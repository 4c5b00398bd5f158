"""
Summary Composer

Derives totals, populated-bucket averages and category distributions from
aggregated buckets, plus descriptive statistics for a single metric.
"""

from typing import Any, Dict, List

import numpy as np

from kindergrow.models.activity_schema import ActivitySchema
from kindergrow.models.bucket import Bucket
from kindergrow.utils.calendar_utils import round_half_up


class SummaryComposer:
    """Summary figures shown next to activity charts."""

    @staticmethod
    def summarize(buckets: List[Bucket], activity_schema: ActivitySchema) -> Dict[str, Dict]:
        """
        Compute totals, populated averages and distribution.

        A bucket is populated for a metric when that metric's value is > 0, so
        empty days never drag an average down.

        Args:
            buckets: Aggregated buckets
            activity_schema: Metric set and distribution categories

        Returns:
            Dict with 'totals', 'populated_average' and 'distribution'
        """
        totals = {}
        populated_average = {}

        for metric in activity_schema.metric_names:
            values = [bucket.metrics.get(metric, 0) for bucket in buckets]
            total = sum(values)
            populated = sum(1 for value in values if value > 0)

            totals[metric] = total
            populated_average[metric] = total / populated if populated else 0

        return {
            'totals': totals,
            'populated_average': populated_average,
            'distribution': SummaryComposer.distribution(totals, activity_schema.categories)
        }

    @staticmethod
    def distribution(totals: Dict[str, float], categories: Dict[str, str]) -> Dict[str, int]:
        """
        Percentage share of each category, rounded half-up.

        Percentages are not reconciled to 100 (1/1/1 gives 33/33/33).
        """
        category_totals = {
            category: totals.get(metric, 0)
            for category, metric in categories.items()
        }
        grand_total = sum(category_totals.values())

        if grand_total <= 0:
            return {category: 0 for category in categories}

        return {
            category: round_half_up(100 * value / grand_total)
            for category, value in category_totals.items()
        }

    @staticmethod
    def describe(values: List[float]) -> Dict[str, Any]:
        """
        Descriptive statistics over a list of numeric values.

        Returns an empty dict when there is nothing numeric to describe.
        """
        numeric_values = [
            v for v in values
            if v is not None and isinstance(v, (int, float)) and not isinstance(v, bool)
        ]

        if not numeric_values:
            return {}

        arr = np.array(numeric_values, dtype=float)

        return {
            'count': len(numeric_values),
            'mean': round(float(np.mean(arr)), 2),
            'median': round(float(np.median(arr)), 2),
            'min': round(float(np.min(arr)), 2),
            'max': round(float(np.max(arr)), 2),
            'std_dev': round(float(np.std(arr)), 2)
        }
