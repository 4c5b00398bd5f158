from .activity_schema import ActivitySchema
from .activity_record import RawActivityRecord
from .bucket import Bucket
from .aggregated_series import AggregatedSeries, TrendResult
from .activity_chart import ActivityChart

__all__ = ['ActivitySchema', 'RawActivityRecord', 'Bucket', 'AggregatedSeries', 'TrendResult', 'ActivityChart']
