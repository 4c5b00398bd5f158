from .activity_record_schemas import (
    ActivityRecordSchema,
    SleepRecordSchema,
    DiaperRecordSchema,
    FeedingRecordSchema
)
from .period_schemas import PeriodSelectionSchema

__all__ = [
    'ActivityRecordSchema', 'SleepRecordSchema', 'DiaperRecordSchema',
    'FeedingRecordSchema', 'PeriodSelectionSchema'
]
