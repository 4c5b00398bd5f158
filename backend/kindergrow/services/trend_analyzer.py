"""
Trend Analyzer

Compares the early half of a series with the late half.
"""

import logging
from typing import List

from kindergrow.models.aggregated_series import TrendResult
from kindergrow.utils.calendar_utils import round_half_up

logger = logging.getLogger(__name__)


class TrendAnalyzer:

    @staticmethod
    def trend(values: List[float], min_populated: int = 2) -> TrendResult:
        """
        Signed percentage change from the early window to the late window.

        The series is split at len(values) // 2. Zeros are dropped from both
        windows because they mean "nothing logged", not "a value of zero".

        Args:
            values: Ordered per-bucket values of the trend metric
            min_populated: Non-zero values each window needs for a trend

        Returns:
            TrendResult; 'Stable' with 0% when either window is too sparse
        """
        mid = len(values) // 2
        early = [v for v in values[:mid] if v]
        late = [v for v in values[mid:] if v]

        required = max(min_populated, 1)
        if len(early) < required or len(late) < required:
            logger.debug(
                "Not enough populated buckets for a trend (early=%d, late=%d, required=%d)",
                len(early), len(late), required
            )
            return TrendResult.stable()

        early_average = sum(early) / len(early)
        late_average = sum(late) / len(late)

        # Early values may still cancel out to zero if negatives slip in
        if early_average == 0:
            return TrendResult.stable()

        percentage = round_half_up(100 * (late_average - early_average) / early_average)
        return TrendResult.from_percentage(percentage)
