"""
Activity Record Loader

Validates raw care-log payloads and turns them into RawActivityRecords.
Invalid payloads are skipped, never raised.
"""

import logging
from typing import Any, Dict, Iterable, List, Optional, Tuple

import marshmallow as ma

from kindergrow.models.activity_record import RawActivityRecord
from kindergrow.models.activity_schema import ActivitySchema
from kindergrow.schemas.activity_record_schemas import (
    DiaperRecordSchema,
    FeedingRecordSchema,
    SleepRecordSchema
)
from kindergrow.services.activity_constants import SLEEP, DIAPER, FEEDING

logger = logging.getLogger(__name__)

RECORD_SCHEMAS = {
    SLEEP: SleepRecordSchema,
    DIAPER: DiaperRecordSchema,
    FEEDING: FeedingRecordSchema
}


class ActivityRecordLoader:

    @staticmethod
    def load_records(
        domain: str,
        payloads: Iterable[Dict[str, Any]],
        offset_hours: int,
        activity_schema: Optional[ActivitySchema] = None
    ) -> List[RawActivityRecord]:
        """Load payloads of one domain, dropping the ones that fail validation."""
        records, _ = ActivityRecordLoader.load_with_errors(
            domain, payloads, offset_hours, activity_schema
        )
        return records

    @staticmethod
    def load_with_errors(
        domain: str,
        payloads: Iterable[Dict[str, Any]],
        offset_hours: int,
        activity_schema: Optional[ActivitySchema] = None
    ) -> Tuple[List[RawActivityRecord], List[Dict[str, Any]]]:
        """
        Load payloads of one domain and report what was skipped.

        Args:
            domain: 'sleep', 'diaper' or 'feeding'
            payloads: JSON-shaped dicts from the data source
            offset_hours: UTC offset applied to aware timestamps
            activity_schema: Domain schema; looked up in activity_config if omitted

        Returns:
            (records, skipped) where skipped holds {'index', 'errors'} entries
        """
        schema_class = RECORD_SCHEMAS.get(domain)
        if schema_class is None:
            raise ValueError(
                f"Unknown activity domain: {domain}. Expected one of: {', '.join(RECORD_SCHEMAS)}"
            )

        if activity_schema is None:
            from kindergrow.config.activity_config import activity_config
            activity_schema = activity_config.get_schema(domain)

        record_schema = schema_class(activity_schema=activity_schema, offset_hours=offset_hours)

        records = []
        skipped = []
        for index, payload in enumerate(payloads or []):
            if not isinstance(payload, dict):
                skipped.append({'index': index, 'errors': {'_schema': ['Payload must be an object']}})
                continue
            try:
                records.append(record_schema.load(payload))
            except ma.ValidationError as e:
                skipped.append({'index': index, 'errors': e.messages})

        if skipped:
            logger.warning(
                "Skipped %d invalid %s record(s) out of %d",
                len(skipped), domain, len(records) + len(skipped)
            )

        undated = sum(1 for record in records if record.date_key is None)
        if undated:
            logger.debug("%d %s record(s) have no parseable date", undated, domain)

        return records, skipped
