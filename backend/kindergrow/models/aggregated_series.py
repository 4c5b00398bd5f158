from dataclasses import dataclass, field
from typing import Dict, List, Optional

from kindergrow.models.bucket import Bucket

TREND_STABLE_LABEL = 'Stable'


@dataclass
class TrendResult:
    """Signed percentage change between the early and late half of a series."""
    percentage: int = 0
    label: str = TREND_STABLE_LABEL

    @classmethod
    def stable(cls) -> 'TrendResult':
        return cls(percentage=0, label=TREND_STABLE_LABEL)

    @classmethod
    def from_percentage(cls, percentage: int) -> 'TrendResult':
        if percentage > 0:
            return cls(percentage=percentage, label=f'+{percentage}%')
        if percentage < 0:
            return cls(percentage=percentage, label=f'-{abs(percentage)}%')
        return cls.stable()

    @property
    def direction(self) -> str:
        if self.percentage > 0:
            return 'increasing'
        if self.percentage < 0:
            return 'decreasing'
        return 'stable'

    def to_dict(self):
        return {
            'percentage': self.percentage,
            'label': self.label,
            'direction': self.direction
        }

    def __repr__(self):
        return f'<TrendResult {self.label}>'


@dataclass
class AggregatedSeries:
    """
    Bucketed, summarized activity data for one domain and one period.

    Always fully shaped: an empty period still has every bucket, with all
    metrics, totals and averages at 0.
    """
    buckets: List[Bucket] = field(default_factory=list)
    totals: Dict[str, float] = field(default_factory=dict)
    populated_average: Dict[str, float] = field(default_factory=dict)
    distribution: Dict[str, int] = field(default_factory=dict)
    domain: Optional[str] = None
    period: Optional[str] = None

    @property
    def labels(self) -> List[str]:
        return [bucket.label for bucket in self.buckets]

    @property
    def date_keys(self) -> List[str]:
        return [bucket.date_key for bucket in self.buckets]

    def values(self, metric: str) -> List[float]:
        """Ordered per-bucket values of one metric (0 where a bucket lacks it)."""
        return [bucket.metrics.get(metric, 0) for bucket in self.buckets]

    def bucket_for(self, date_key: str) -> Optional[Bucket]:
        for bucket in self.buckets:
            if bucket.date_key == date_key:
                return bucket
        return None

    @property
    def has_data(self) -> bool:
        return any(bucket.record_count > 0 for bucket in self.buckets)

    def to_dict(self):
        return {
            'domain': self.domain,
            'period': self.period,
            'labels': self.labels,
            'buckets': [bucket.to_dict() for bucket in self.buckets],
            'totals': dict(self.totals),
            'populated_average': dict(self.populated_average),
            'distribution': dict(self.distribution)
        }

    def __repr__(self):
        return f'<AggregatedSeries {self.domain} - {self.period} ({len(self.buckets)} buckets)>'
