"""German date names."""

from datetime import date
from typing import Tuple

from .base import BaseFormatter

# Monday first, matching date.weekday()
WEEKDAYS = [
    "Montag",
    "Dienstag",
    "Mittwoch",
    "Donnerstag",
    "Freitag",
    "Samstag",
    "Sonntag",
]
WEEKDAYS_SHORT = ["Mo", "Di", "Mi", "Do", "Fr", "Sa", "So"]
MONTHS = [
    "Januar",
    "Februar",
    "März",
    "April",
    "Mai",
    "Juni",
    "Juli",
    "August",
    "September",
    "Oktober",
    "November",
    "Dezember",
]
MONTHS_SHORT = [
    "Jan", "Feb", "Mär", "Apr", "Mai", "Jun",
    "Jul", "Aug", "Sep", "Okt", "Nov", "Dez",
]


class GermanFormatter(BaseFormatter):
    """Table-driven German names."""

    @property
    def languages(self) -> Tuple[str, ...]:
        return ("de",)

    def weekday_name(self, value: date) -> str:
        return WEEKDAYS[value.weekday()]

    def weekday_short(self, value: date) -> str:
        return WEEKDAYS_SHORT[value.weekday()]

    def month_name(self, value: date) -> str:
        return MONTHS[value.month - 1]

    def month_short(self, value: date) -> str:
        return MONTHS_SHORT[value.month - 1]
