"""Base locale formatter interface."""

from abc import ABC, abstractmethod
from datetime import date
from typing import Tuple


class BaseFormatter(ABC):
    """Abstract base class for locale-dependent date names."""

    def __init__(self, locale: str):
        """
        Initialize formatter for a locale tag.

        Args:
            locale: Requested locale, e.g. "en-US" or "ko"
        """
        self.locale = locale

    @property
    @abstractmethod
    def languages(self) -> Tuple[str, ...]:
        """Language subtags handled by this formatter."""
        pass

    @abstractmethod
    def weekday_name(self, value: date) -> str:
        """Full weekday name, e.g. "Sunday"."""
        pass

    @abstractmethod
    def weekday_short(self, value: date) -> str:
        """Abbreviated weekday name, e.g. "Sun"."""
        pass

    @abstractmethod
    def month_name(self, value: date) -> str:
        """Full month name, e.g. "March"."""
        pass

    @abstractmethod
    def month_short(self, value: date) -> str:
        """Abbreviated month name, e.g. "Mar"."""
        pass

    def year_short(self, value: date) -> str:
        """
        Two-digit year label.

        Args:
            value: Date to format

        Returns:
            Year modulo 100, zero padded
        """
        return f"{value.year % 100:02d}"
