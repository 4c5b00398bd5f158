from dataclasses import dataclass, field
from typing import Dict


@dataclass
class Bucket:
    """One period-aligned chart slot (a day, or a month for yearly charts)."""
    label: str
    date_key: str
    metrics: Dict[str, float] = field(default_factory=dict)
    record_count: int = 0

    def copy(self) -> 'Bucket':
        return Bucket(
            label=self.label,
            date_key=self.date_key,
            metrics=dict(self.metrics),
            record_count=self.record_count
        )

    @property
    def is_empty(self) -> bool:
        return self.record_count == 0

    def to_dict(self):
        return {
            'label': self.label,
            'date_key': self.date_key,
            'metrics': dict(self.metrics),
            'record_count': self.record_count
        }

    def __repr__(self):
        return f'<Bucket {self.label} - {self.date_key} ({self.record_count} records)>'
