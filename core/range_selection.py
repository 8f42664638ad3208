# core/range_selection.py
"""Range selection state machine."""

from datetime import datetime
from typing import Callable, Iterable, Optional

from core.date_info import DateInfo
from core.quick_ranges import QuickRangeCalculator
from core.types import DEFAULT_LOCALE, QuickOption, SelectionState
from logger.logger import Logger
from utils.date_manager import DateManager


class RangeSelectionEngine:
    """
    Turns successive day picks into an ordered (start, end) pair.

    Once both ends are set, every further pick moves one end and the
    selection stays complete; only ``clear`` returns it to empty.
    """

    def __init__(
            self,
            max_date: Optional[DateInfo] = None,
            locale: str = DEFAULT_LOCALE,
            clock: Optional[Callable[[], datetime]] = None
    ):
        """
        Initialize an empty selection.

        Args:
            max_date: Picks after this instant are refused
            locale: Locale tag for dates created by quick options
            clock: Returns the current local datetime; defaults to datetime.now
        """
        self.max_date = max_date
        self.locale = locale
        self.quick_ranges = QuickRangeCalculator(clock)
        self.start_date: Optional[DateInfo] = None
        self.end_date: Optional[DateInfo] = None

    @property
    def state(self) -> SelectionState:
        if self.start_date is None:
            return SelectionState.EMPTY
        if self.end_date is None:
            return SelectionState.PENDING
        return SelectionState.COMPLETE

    @property
    def is_complete(self) -> bool:
        return self.state == SelectionState.COMPLETE

    def is_selectable(self, day: DateInfo) -> bool:
        """False for days after the max date."""
        return self.max_date is None or day.timestamp <= self.max_date.timestamp

    def pick(self, day: DateInfo) -> bool:
        """
        Feed one picked day into the state machine.

        Args:
            day: Picked day

        Returns:
            True if the selection changed, False if the day was refused
        """
        if not self.is_selectable(day):
            Logger.debug(f"Ignoring pick after max date: {day.value:%Y-%m-%d}")
            return False

        state = self.state
        if state == SelectionState.EMPTY:
            self.start_date = day
        elif state == SelectionState.PENDING:
            if day.timestamp >= self.start_date.timestamp:
                self.end_date = day
            else:
                self.end_date = self.start_date
                self.start_date = day
        elif day.timestamp <= self.end_date.timestamp:
            self.start_date = day
        else:
            self.end_date = day

        Logger.debug(f"Selection {self.state.value}: {self._describe()}")
        return True

    def clear(self):
        """Drop both dates."""
        self.start_date = None
        self.end_date = None

    def restore(self, start_date: DateInfo, end_date: DateInfo):
        """
        Install a previously emitted range.

        Args:
            start_date: Range start
            end_date: Range end; swapped with start if earlier
        """
        if end_date.timestamp < start_date.timestamp:
            start_date, end_date = end_date, start_date
        self.start_date = start_date
        self.end_date = end_date

    def apply_quick_option(self, option: QuickOption):
        """Replace the selection with a quick option range."""
        start, end = self.quick_ranges.get_range(option)
        self.start_date = DateInfo.from_date(start, self.locale)
        self.end_date = DateInfo.from_date(end, self.locale)
        Logger.debug(f"Quick option {QuickOption(option).value}: {self._describe()}")

    def active_quick_option(
            self,
            options: Iterable[QuickOption]
    ) -> Optional[QuickOption]:
        """
        First option whose range is exactly the current selection.

        The start must equal the option's computed start and the end must
        be today at midnight, so a range applied on an earlier day never
        matches again.

        Args:
            options: Options in display order

        Returns:
            Matching option or None
        """
        if not self.is_complete:
            return None

        today = self.quick_ranges.today()
        today_timestamp = DateManager.to_timestamp(today)
        for option in options:
            start, _ = self.quick_ranges.get_range(option, today)
            start_match = DateManager.to_timestamp(start) == self.start_date.timestamp
            end_match = today_timestamp == self.end_date.timestamp
            if start_match and end_match:
                return QuickOption(option)
        return None

    def _describe(self) -> str:
        start = self.start_date.value.date() if self.start_date else None
        end = self.end_date.value.date() if self.end_date else None
        return f"{start} -> {end}"
