# core/month_info.py
"""One calendar month and its days."""

from datetime import date
from typing import Iterator

from core.date_info import DateInfo
from core.types import DEFAULT_LOCALE, OutOfRangeError
from formatters import get_formatter
from utils.date_manager import DateManager


class MonthInfo:
    """
    A single (year, month) pair.

    Navigation never mutates an instance; CalendarView builds a new one
    for every move.
    """

    def __init__(self, year: int, number: int, locale: str = DEFAULT_LOCALE):
        """
        Initialize month details.

        Args:
            year: Calendar year
            number: Month number (1-12)
            locale: Locale tag used for names
        """
        self.year = year
        self.number = number
        self.locale = locale
        self.number_of_days = DateManager.get_days_in_month(year, number)
        self.name = get_formatter(locale).month_name(date(year, number, 1))

    @classmethod
    def from_date(cls, value: date, locale: str = DEFAULT_LOCALE) -> "MonthInfo":
        """Month containing ``value``."""
        return cls(value.year, value.month, locale)

    def get_day(self, day_of_month: int) -> DateInfo:
        """
        DateInfo for a day of this month at local midnight.

        Args:
            day_of_month: 1-based day index

        Returns:
            DateInfo for that day

        Raises:
            OutOfRangeError: If the index is outside 1..number_of_days
        """
        day_of_month = int(day_of_month)
        if not 1 <= day_of_month <= self.number_of_days:
            raise OutOfRangeError(
                f"Day {day_of_month} is outside {self.name} {self.year} "
                f"(1-{self.number_of_days})"
            )
        return DateInfo.from_date(
            date(self.year, self.number, day_of_month), self.locale
        )

    @property
    def first_day(self) -> DateInfo:
        return self.get_day(1)

    @property
    def last_day(self) -> DateInfo:
        return self.get_day(self.number_of_days)

    def __iter__(self) -> Iterator[DateInfo]:
        for day_of_month in range(1, self.number_of_days + 1):
            yield self.get_day(day_of_month)

    def __len__(self) -> int:
        return self.number_of_days

    def __eq__(self, other) -> bool:
        if not isinstance(other, MonthInfo):
            return NotImplemented
        return (self.year, self.number) == (other.year, other.number)

    def __hash__(self) -> int:
        return hash((self.year, self.number))

    def __repr__(self) -> str:
        return f"MonthInfo({self.year}-{self.number:02d}, locale={self.locale!r})"
