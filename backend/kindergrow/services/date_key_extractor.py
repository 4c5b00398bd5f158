"""
Date Key Extractor

Normalizes the timestamp encodings produced by the data source into the
canonical YYYY-MM-DD key used to match records to chart buckets.
"""

import logging
from datetime import datetime, date, timedelta, timezone
from typing import Any, Optional

logger = logging.getLogger(__name__)


class DateKeyExtractor:
    """
    Turns raw date/timestamp values into date keys.

    Supported encodings:
    - Bare date: "2025-06-03"
    - Date-time separated by a space: "2025-06-03 12:28:14"
    - ISO-8601 with a 'T': "2025-05-19T10:05:54.000Z"
    """

    DATE_KEY_FORMAT = '%Y-%m-%d'

    @staticmethod
    def extract(raw: Any) -> Optional[str]:
        """
        Extract the calendar date portion of a raw value.

        No timezone shifting happens here; aware timestamps must already have
        been moved to the target offset (see localize).

        Args:
            raw: String in one of the supported encodings, or a date/datetime

        Returns:
            "YYYY-MM-DD" key, or None for empty or unparseable input
        """
        if raw is None:
            return None

        # datetime first: it is a subclass of date
        if isinstance(raw, datetime):
            return raw.date().isoformat()
        if isinstance(raw, date):
            return raw.isoformat()

        if not isinstance(raw, str):
            return None

        value = raw.strip()
        if not value:
            return None

        if 'T' in value:
            candidate = value.split('T', 1)[0]
        elif ' ' in value:
            candidate = value.split(' ', 1)[0]
        else:
            candidate = value

        try:
            parsed = datetime.strptime(candidate, DateKeyExtractor.DATE_KEY_FORMAT)
        except ValueError:
            logger.debug("Unparseable date value %r", raw)
            return None

        return parsed.date().isoformat()

    @staticmethod
    def localize(raw: Any, offset_hours: int) -> Any:
        """
        Move a timezone-aware timestamp ("T" or space separated) to the fixed
        target offset.

        Naive values, bare dates and anything that does not parse are returned
        unchanged so that extract() makes the final call on them.
        """
        if isinstance(raw, datetime):
            moment = raw
        elif isinstance(raw, str) and ('T' in raw or ' ' in raw.strip()):
            try:
                moment = datetime.fromisoformat(raw.strip().replace('Z', '+00:00'))
            except ValueError:
                return raw
        else:
            return raw

        if moment.tzinfo is None:
            return raw

        target = timezone(timedelta(hours=offset_hours))
        return moment.astimezone(target).isoformat()

    @staticmethod
    def key_for(raw: Any, offset_hours: int) -> Optional[str]:
        """Localize then extract: the key a freshly constructed record gets."""
        return DateKeyExtractor.extract(DateKeyExtractor.localize(raw, offset_hours))

    @staticmethod
    def today(offset_hours: int) -> date:
        """Current calendar date at the target offset."""
        target = timezone(timedelta(hours=offset_hours))
        return datetime.now(timezone.utc).astimezone(target).date()
