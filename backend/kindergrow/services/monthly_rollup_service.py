"""
Monthly Rollup

Pre-aggregates daily records into one record per calendar month, so that
yearly charts can reuse the day-keyed aggregation stages unchanged.
"""

from collections import OrderedDict
from typing import Dict, Iterable, List

from kindergrow.models.activity_record import RawActivityRecord
from kindergrow.models.activity_schema import ActivitySchema, MERGE_AVERAGE


class MonthlyRollup:

    @staticmethod
    def month_key(date_key: str) -> str:
        """'2024-03-17' -> '2024-03-01'"""
        return f"{date_key[:7]}-01"

    @staticmethod
    def rollup(
        records: Iterable[RawActivityRecord],
        activity_schema: ActivitySchema
    ) -> List[RawActivityRecord]:
        """
        Collapse records into one record per month, keyed by the month's first day.

        'sum' metrics are summed; 'average' metrics are averaged over the
        records of the month. Undated records are dropped.

        Returns:
            Monthly records in order of first appearance
        """
        groups: Dict[str, List[RawActivityRecord]] = OrderedDict()
        for record in records:
            if record.date_key is None:
                continue
            groups.setdefault(MonthlyRollup.month_key(record.date_key), []).append(record)

        monthly = []
        for key, month_records in groups.items():
            metrics = {}
            for metric, policy in activity_schema.metrics.items():
                total = sum(record.metric(metric) or 0 for record in month_records)
                if policy == MERGE_AVERAGE:
                    total = total / len(month_records)
                metrics[metric] = total

            monthly.append(RawActivityRecord(date_key=key, metrics=metrics))

        return monthly
