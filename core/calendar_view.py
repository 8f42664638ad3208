# core/calendar_view.py
"""Navigable year/month cursor backing one picker pane."""

from typing import Iterator, List, Optional

from core.date_info import DateInfo
from core.month_info import MonthInfo
from core.types import DEFAULT_LOCALE
from utils.date_manager import DateManager


class CalendarView:
    """Cursor over one month with localized weekday headers."""

    def __init__(
            self,
            year: Optional[int] = None,
            month_number: Optional[int] = None,
            locale: str = DEFAULT_LOCALE
    ):
        """
        Initialize the cursor, defaulting to the current month.

        Args:
            year: Calendar year
            month_number: Month number (1-12)
            locale: Locale tag used for names
        """
        self.locale = locale
        self.today = DateInfo.today(locale)
        self.year = year if year is not None else self.today.year
        self.month = MonthInfo(
            self.year,
            month_number if month_number is not None else self.today.month,
            locale,
        )
        self.week_days: List[Optional[str]] = []
        self._discover_week_days()

    def _discover_week_days(self):
        """Fill weekday headers, Sunday first, from the month's first week."""
        self.week_days = [None] * 7
        for day_of_month in range(1, 8):
            day = self.month.get_day(day_of_month)
            if day.weekday_name not in self.week_days:
                self.week_days[day.weekday_number - 1] = day.weekday_name

    def _set_month(self, year: int, month_number: int):
        self.year = year
        self.month = MonthInfo(year, month_number, self.locale)
        self._discover_week_days()

    @property
    def is_leap_year(self) -> bool:
        return DateManager.is_leap_year(self.year)

    def get_month(self, month_number: int) -> MonthInfo:
        """Month of the cursor's year, without moving the cursor."""
        return MonthInfo(self.year, month_number, self.locale)

    def get_previous_month(self) -> MonthInfo:
        """Month before the cursor, without moving it."""
        year, month_number = DateManager.get_previous_month(
            self.year, self.month.number
        )
        return MonthInfo(year, month_number, self.locale)

    def get_next_month(self) -> MonthInfo:
        """Month after the cursor, without moving it."""
        year, month_number = DateManager.get_next_month(
            self.year, self.month.number
        )
        return MonthInfo(year, month_number, self.locale)

    def go_to_date(self, month_number: int, year: int):
        """Jump straight to a month."""
        self._set_month(year, month_number)

    def go_to_next_year(self):
        """Move to January of the following year."""
        self._set_month(self.year + 1, 1)

    def go_to_previous_year(self):
        """Move to December of the preceding year."""
        self._set_month(self.year - 1, 12)

    def go_to_next_month(self):
        if self.month.number == 12:
            return self.go_to_next_year()
        self._set_month(self.year, self.month.number + 1)

    def go_to_previous_month(self):
        if self.month.number == 1:
            return self.go_to_previous_year()
        self._set_month(self.year, self.month.number - 1)

    def month_grid(self) -> List[Optional[DateInfo]]:
        """
        Day cells for the current month, Sunday-first.

        Leading blanks before the first day are returned as ``None`` so the
        first real day lands in its weekday column.

        Returns:
            Filler cells followed by every day of the month
        """
        leading_blanks = self.month.first_day.weekday_number - 1
        return [None] * leading_blanks + list(self.month)

    def __iter__(self) -> Iterator[MonthInfo]:
        for month_number in range(1, 13):
            yield self.get_month(month_number)

    def __repr__(self) -> str:
        return f"CalendarView({self.year}-{self.month.number:02d}, locale={self.locale!r})"
