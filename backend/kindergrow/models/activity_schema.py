from dataclasses import dataclass, field
from typing import Dict, List, Optional

MERGE_SUM = 'sum'
MERGE_AVERAGE = 'average'
MERGE_POLICIES = {MERGE_SUM, MERGE_AVERAGE}


@dataclass(frozen=True)
class ActivitySchema:
    """
    Describes one activity domain to the aggregation engine.

    The engine itself knows nothing about sleep, diapers or feedings. Each
    domain only supplies:
    - metrics: metric name -> merge policy ('sum' or 'average'), in chart order
    - categories: distribution category -> metric that holds its count/amount
    - trend_metric: metric whose per-bucket values feed the trend
    - date_fields: payload fields to read the date from, in precedence order
    """
    name: str
    display_name: str
    metrics: Dict[str, str]
    categories: Dict[str, str] = field(default_factory=dict)
    trend_metric: Optional[str] = None
    date_fields: List[str] = field(default_factory=lambda: ['date', 'timestamp'])

    def __post_init__(self):
        for metric, policy in self.metrics.items():
            if policy not in MERGE_POLICIES:
                raise ValueError(
                    f"Invalid merge policy '{policy}' for metric '{metric}' in '{self.name}'"
                )

        for category, metric in self.categories.items():
            if metric not in self.metrics:
                raise ValueError(
                    f"Category '{category}' references unknown metric '{metric}' in '{self.name}'"
                )

        if self.trend_metric is not None and self.trend_metric not in self.metrics:
            raise ValueError(
                f"Trend metric '{self.trend_metric}' is not a metric of '{self.name}'"
            )

    @property
    def metric_names(self) -> List[str]:
        return list(self.metrics.keys())

    def averaged_metrics(self) -> List[str]:
        return [m for m, policy in self.metrics.items() if policy == MERGE_AVERAGE]

    def empty_metrics(self) -> Dict[str, float]:
        return {metric: 0 for metric in self.metrics}

    @classmethod
    def from_dict(cls, name: str, data: Dict) -> 'ActivitySchema':
        return cls(
            name=name,
            display_name=data.get('display_name', name.title()),
            metrics=dict(data['metrics']),
            categories=dict(data.get('categories', {})),
            trend_metric=data.get('trend_metric'),
            date_fields=list(data.get('date_fields', ['date', 'timestamp']))
        )

    def to_dict(self):
        return {
            'name': self.name,
            'display_name': self.display_name,
            'metrics': dict(self.metrics),
            'categories': dict(self.categories),
            'trend_metric': self.trend_metric,
            'date_fields': list(self.date_fields)
        }

    def __repr__(self):
        return f'<ActivitySchema {self.name} - {len(self.metrics)} metrics>'
