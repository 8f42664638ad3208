"""Korean date names."""

from datetime import date
from typing import Tuple

from .base import BaseFormatter

WEEKDAYS_SHORT = ["월", "화", "수", "목", "금", "토", "일"]


class KoreanFormatter(BaseFormatter):
    """Korean names are built from numerals and unit suffixes."""

    @property
    def languages(self) -> Tuple[str, ...]:
        return ("ko",)

    def weekday_name(self, value: date) -> str:
        return f"{WEEKDAYS_SHORT[value.weekday()]}요일"

    def weekday_short(self, value: date) -> str:
        return WEEKDAYS_SHORT[value.weekday()]

    def month_name(self, value: date) -> str:
        return f"{value.month}월"

    def month_short(self, value: date) -> str:
        # Korean has no abbreviated month form
        return self.month_name(value)

    def year_short(self, value: date) -> str:
        return f"{super().year_short(value)}년"
