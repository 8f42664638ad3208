# core/quick_ranges.py
"""Today-anchored ranges for the quick option shortcuts."""

from datetime import datetime
from typing import Callable, Dict, Optional, Tuple

import pandas as pd

from core.types import QuickOption
from utils.date_manager import DateManager

# Month and year offsets are calendar-aware and clamp to the month end
QUICK_OPTION_OFFSETS: Dict[QuickOption, pd.DateOffset] = {
    QuickOption.LAST_24_HOURS: pd.DateOffset(days=0),
    QuickOption.LAST_WEEK: pd.DateOffset(days=7),
    QuickOption.LAST_30_DAYS: pd.DateOffset(days=30),
    QuickOption.LAST_3_MONTHS: pd.DateOffset(months=3),
    QuickOption.LAST_6_MONTHS: pd.DateOffset(months=6),
    QuickOption.LAST_YEAR: pd.DateOffset(years=1),
}


class QuickRangeCalculator:
    """Computes (start, end) datetimes for quick options."""

    def __init__(self, clock: Optional[Callable[[], datetime]] = None):
        """
        Initialize calculator.

        Args:
            clock: Returns the current local datetime; defaults to datetime.now
        """
        self.clock = clock or datetime.now

    def today(self) -> datetime:
        """Current day at local midnight."""
        return DateManager.start_of_day(self.clock())

    def get_range(
            self,
            option: QuickOption,
            today: Optional[datetime] = None
    ) -> Tuple[datetime, datetime]:
        """
        Range for one option, both ends at midnight.

        Args:
            option: Quick option (or its key, e.g. "week")
            today: Pre-sampled midnight to anchor on; sampled if omitted

        Returns:
            (start, end) where end is today
        """
        option = QuickOption(option)
        end = today if today is not None else self.today()
        start = (pd.Timestamp(end) - QUICK_OPTION_OFFSETS[option]).to_pydatetime()
        return start, end
