from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from kindergrow.models.aggregated_series import AggregatedSeries, TrendResult


@dataclass
class ActivityChart:
    """Everything a chart component needs to render one activity/period view."""
    series: AggregatedSeries
    trend: TrendResult
    trend_metric: Optional[str] = None
    statistics: Dict[str, Any] = field(default_factory=dict)
    metadata: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self):
        data = self.series.to_dict()
        data.update({
            'trend_metric': self.trend_metric,
            'trend': self.trend.to_dict(),
            'statistics': dict(self.statistics),
            'metadata': dict(self.metadata)
        })
        return data

    def __repr__(self):
        return f'<ActivityChart {self.series.domain} - {self.series.period} - {self.trend.label}>'
