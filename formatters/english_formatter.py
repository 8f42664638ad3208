"""English date names."""

import calendar
from datetime import date
from typing import Tuple

from .base import BaseFormatter


class EnglishFormatter(BaseFormatter):
    """Uses the ``calendar`` module name tables."""

    @property
    def languages(self) -> Tuple[str, ...]:
        return ("en", "default")

    def weekday_name(self, value: date) -> str:
        return calendar.day_name[value.weekday()]

    def weekday_short(self, value: date) -> str:
        return calendar.day_abbr[value.weekday()]

    def month_name(self, value: date) -> str:
        return calendar.month_name[value.month]

    def month_short(self, value: date) -> str:
        return calendar.month_abbr[value.month]
