# core/date_info.py
"""Immutable calendar date snapshot with locale-aware labels."""

import re
from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional, Union

from core.types import DEFAULT_LOCALE
from formatters import get_formatter
from utils.date_manager import DateManager

# Longest tokens first so "YYYY" is never read as "YYY" + "Y".
# ASCII word boundaries so tokens next to letters like Hangul still match
_FORMAT_TOKENS = re.compile(
    r"\b(YYYY|YYY|WW|W|DDDD|DDD|DD|D|MMMM|MMM|MM|M)\b",
    re.ASCII,
)


@dataclass(frozen=True, eq=False)
class DateInfo:
    """
    A single calendar day plus every derived field the picker displays.

    Instances are built through the ``from_*`` constructors, which compute
    all fields eagerly. Equality and hashing only look at the calendar
    date, so the same day at midnight and at 23:59:59.999 compare equal.
    """

    value: datetime
    locale: str
    year: int
    month: int
    day: int
    weekday_number: int
    week: int
    timestamp: int
    weekday_name: str
    weekday_short: str
    month_name: str
    month_short: str
    year_short: str

    @classmethod
    def from_date(
            cls,
            value: Union[date, datetime],
            locale: str = DEFAULT_LOCALE
    ) -> "DateInfo":
        """
        Build a snapshot for a date or local datetime.

        Args:
            value: Calendar date (taken at midnight) or local datetime
            locale: Locale tag used for names

        Returns:
            Fully populated DateInfo
        """
        if not isinstance(value, datetime):
            value = DateManager.start_of_day(value)

        formatter = get_formatter(locale)
        return cls(
            value=value,
            locale=locale,
            year=value.year,
            month=value.month,
            day=value.day,
            weekday_number=DateManager.get_weekday_number(value),
            week=DateManager.calculate_week_number(value),
            timestamp=DateManager.to_timestamp(value),
            weekday_name=formatter.weekday_name(value),
            weekday_short=formatter.weekday_short(value),
            month_name=formatter.month_name(value),
            month_short=formatter.month_short(value),
            year_short=formatter.year_short(value),
        )

    @classmethod
    def from_timestamp(cls, timestamp: int, locale: str = DEFAULT_LOCALE) -> "DateInfo":
        """Build from milliseconds since the epoch."""
        return cls.from_date(DateManager.from_timestamp(timestamp), locale)

    @classmethod
    def now(cls, locale: str = DEFAULT_LOCALE) -> "DateInfo":
        """Snapshot of the current instant, time of day included."""
        return cls.from_date(datetime.now(), locale)

    @classmethod
    def today(cls, locale: str = DEFAULT_LOCALE) -> "DateInfo":
        """Today at local midnight."""
        return cls.from_date(date.today(), locale)

    @property
    def calendar_date(self) -> date:
        return self.value.date()

    def is_today(self, now: Optional[datetime] = None) -> bool:
        """True if this is the current calendar day, ignoring the time."""
        return self.equals_calendar_date(now or datetime.now())

    def equals_calendar_date(self, other: Union["DateInfo", date, datetime]) -> bool:
        """
        Compare year, month and day only.

        Args:
            other: DateInfo, date or datetime

        Returns:
            True when both fall on the same calendar day
        """
        return (
            other.day == self.day
            and other.month == self.month
            and other.year == self.year
        )

    def end_of_day(self) -> "DateInfo":
        """Same calendar day at 23:59:59.999."""
        return DateInfo.from_date(DateManager.end_of_day(self.value), self.locale)

    def format(self, pattern: str) -> str:
        """
        Substitute date tokens in a pattern.

        Tokens only match as whole words and each one is replaced at its
        first occurrence; unknown text is kept as is.

        Args:
            pattern: Format string such as "MMM DD, YYY"

        Returns:
            Formatted label
        """
        values = {
            "YYYY": str(self.year),
            "YYY": self.year_short,
            "WW": f"{self.week:02d}",
            "W": str(self.week),
            "DDDD": self.weekday_name,
            "DDD": self.weekday_short,
            "DD": f"{self.day:02d}",
            "D": str(self.day),
            "MMMM": self.month_name,
            "MMM": self.month_short,
            "MM": f"{self.month:02d}",
            "M": str(self.month),
        }
        used = set()

        def substitute(match: "re.Match") -> str:
            token = match.group(1)
            if token in used:
                return token
            used.add(token)
            return values[token]

        return _FORMAT_TOKENS.sub(substitute, pattern)

    def __eq__(self, other) -> bool:
        if not isinstance(other, DateInfo):
            return NotImplemented
        return self.equals_calendar_date(other)

    def __hash__(self) -> int:
        return hash((self.year, self.month, self.day))

    def __repr__(self) -> str:
        return f"DateInfo({self.value.isoformat()}, locale={self.locale!r})"
