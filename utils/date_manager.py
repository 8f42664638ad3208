# utils/date_manager.py
"""Calendar arithmetic utilities."""

import math
from datetime import date, datetime, timedelta
from typing import Tuple, Union

MONTH_SIZES = [31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31]


class DateManager:
    """Manages calendar calculations for the date range picker."""

    @staticmethod
    def is_leap_year(year: int) -> bool:
        """
        Check the Gregorian leap year rule.

        Args:
            year: Target year

        Returns:
            True if February has 29 days in ``year``
        """
        if year % 100 == 0:
            return year % 400 == 0
        return year % 4 == 0

    @staticmethod
    def get_days_in_month(year: int, month: int) -> int:
        """
        Number of days in a month.

        Args:
            year: Target year
            month: Target month (1-12)

        Returns:
            Day count between 28 and 31
        """
        if not 1 <= month <= 12:
            raise ValueError(f"Month must be 1-12, got {month}")

        days = MONTH_SIZES[month - 1]
        if month == 2 and DateManager.is_leap_year(year):
            days += 1
        return days

    @staticmethod
    def get_previous_month(year: int, month: int) -> Tuple[int, int]:
        """Return (year, month) for one month earlier."""
        if month == 1:
            return year - 1, 12
        return year, month - 1

    @staticmethod
    def get_next_month(year: int, month: int) -> Tuple[int, int]:
        """Return (year, month) for one month later."""
        if month == 12:
            return year + 1, 1
        return year, month + 1

    @staticmethod
    def get_weekday_number(value: Union[date, datetime]) -> int:
        """
        Weekday ordinal with Sunday first.

        Args:
            value: Date to inspect

        Returns:
            1 for Sunday through 7 for Saturday
        """
        return (value.weekday() + 1) % 7 + 1

    @staticmethod
    def calculate_week_number(value: Union[date, datetime]) -> int:
        """
        Simple week-of-year count.

        Week 1 is the row containing January 1st when weeks start on
        Sunday, so this is not the ISO-8601 week.

        Args:
            value: Date to inspect

        Returns:
            1-based week number
        """
        day = value.date() if isinstance(value, datetime) else value
        first_day_of_year = date(day.year, 1, 1)
        past_days_of_year = (day - first_day_of_year).days
        first_weekday = DateManager.get_weekday_number(first_day_of_year) - 1

        return math.ceil((past_days_of_year + first_weekday + 1) / 7)

    @staticmethod
    def to_timestamp(value: datetime) -> int:
        """
        Milliseconds since the epoch for a naive local datetime.

        Args:
            value: Local datetime

        Returns:
            Integer millisecond timestamp
        """
        whole_seconds = int(value.replace(microsecond=0).timestamp())
        return whole_seconds * 1000 + value.microsecond // 1000

    @staticmethod
    def from_timestamp(timestamp: int) -> datetime:
        """
        Naive local datetime for a millisecond timestamp.

        Args:
            timestamp: Milliseconds since the epoch

        Returns:
            Local datetime with millisecond precision
        """
        seconds, millis = divmod(int(timestamp), 1000)
        return datetime.fromtimestamp(seconds) + timedelta(milliseconds=millis)

    @staticmethod
    def start_of_day(value: Union[date, datetime]) -> datetime:
        """Local midnight of the given calendar day."""
        return datetime(value.year, value.month, value.day)

    @staticmethod
    def end_of_day(value: Union[date, datetime]) -> datetime:
        """Last millisecond (23:59:59.999) of the given calendar day."""
        return datetime(value.year, value.month, value.day, 23, 59, 59, 999000)
