"""
Record Aggregator

Folds raw activity records into period buckets by date key.
"""

import logging
from typing import Iterable, List, Optional

from kindergrow.models.activity_record import RawActivityRecord
from kindergrow.models.activity_schema import ActivitySchema
from kindergrow.models.bucket import Bucket

logger = logging.getLogger(__name__)


class RecordAggregator:
    """
    Merges records into the bucket whose date key they carry.

    Merge policy per metric comes from the activity schema:
    - 'sum': additive quantities (counts, minutes, ml, grams, hours)
    - 'average': snapshot values (e.g. daily sleep progress), averaged over
      the records landing in the bucket
    Without a schema every metric a record carries is summed.
    """

    @staticmethod
    def aggregate(
        buckets: List[Bucket],
        records: Iterable[RawActivityRecord],
        activity_schema: Optional[ActivitySchema] = None
    ) -> List[Bucket]:
        """
        Aggregate records into copies of the given buckets.

        Records without a date key and records outside the period are
        ignored; neither is an error.

        Args:
            buckets: Skeleton from PeriodBucketGenerator (left untouched)
            records: Records to merge
            activity_schema: Metric set and merge policies of the domain

        Returns:
            New list of buckets with accumulated metrics and record counts
        """
        aggregated = [bucket.copy() for bucket in buckets]

        if activity_schema is not None:
            for bucket in aggregated:
                for metric in activity_schema.metric_names:
                    bucket.metrics.setdefault(metric, 0)

        # Date key -> bucket position, built once per call
        index = {bucket.date_key: position for position, bucket in enumerate(aggregated)}

        undated = 0
        unmatched = 0
        for record in records:
            if record.date_key is None:
                undated += 1
                continue

            position = index.get(record.date_key)
            if position is None:
                unmatched += 1
                continue

            RecordAggregator._merge(aggregated[position], record, activity_schema)

        if activity_schema is not None:
            RecordAggregator._apply_averages(aggregated, activity_schema)

        if undated or unmatched:
            logger.debug(
                "Aggregation ignored %d undated and %d out-of-period record(s)",
                undated, unmatched
            )

        return aggregated

    @staticmethod
    def _merge(
        bucket: Bucket,
        record: RawActivityRecord,
        activity_schema: Optional[ActivitySchema]
    ) -> None:
        for metric, value in record.metrics.items():
            if activity_schema is not None and metric not in activity_schema.metrics:
                continue
            if value is None:
                continue
            bucket.metrics[metric] = bucket.metrics.get(metric, 0) + value

        bucket.record_count += 1

    @staticmethod
    def _apply_averages(buckets: List[Bucket], activity_schema: ActivitySchema) -> None:
        averaged = activity_schema.averaged_metrics()
        if not averaged:
            return

        for bucket in buckets:
            # A single record is already its own average
            if bucket.record_count <= 1:
                continue
            for metric in averaged:
                bucket.metrics[metric] = bucket.metrics[metric] / bucket.record_count
