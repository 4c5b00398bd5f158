from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class RawActivityRecord:
    """
    One logged care event, reduced to what the aggregation engine needs.

    date_key is derived (never taken as input) from the payload's date or
    timestamp; it is None when neither could be parsed, and such records
    contribute to no bucket.
    """
    date_key: Optional[str]
    metrics: Dict[str, float] = field(default_factory=dict)
    record_id: Optional[Any] = None

    def metric(self, name: str) -> float:
        return self.metrics.get(name, 0)

    def to_dict(self):
        return {
            'id': self.record_id,
            'date_key': self.date_key,
            'metrics': dict(self.metrics)
        }

    def __repr__(self):
        return f'<RawActivityRecord {self.record_id} - {self.date_key}>'
