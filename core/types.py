# core/types.py
"""Shared type definitions to avoid circular imports."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING, Callable, List, Optional

if TYPE_CHECKING:
    from core.date_info import DateInfo


DEFAULT_FORMAT = "MMM DD, YYY"
DEFAULT_LOCALE = "en"
DEFAULT_LABEL = "Select Range"

DATE_RANGE_EVENT = "date-range-event"
CLEAR_DATE_RANGE_EVENT = "clear-date-range-event"


class OutOfRangeError(IndexError):
    """Raised when a day index falls outside its month."""


class SelectionState(Enum):
    """States of the range selection machine."""
    EMPTY = "empty"
    PENDING = "pending"
    COMPLETE = "complete"


class QuickOption(Enum):
    """Today-anchored shortcut ranges."""
    LAST_24_HOURS = "24hour"
    LAST_WEEK = "week"
    LAST_30_DAYS = "30days"
    LAST_3_MONTHS = "3months"
    LAST_6_MONTHS = "6months"
    LAST_YEAR = "1year"

    @property
    def label(self) -> str:
        return _QUICK_OPTION_LABELS[self]


_QUICK_OPTION_LABELS = {
    QuickOption.LAST_24_HOURS: "Last 24 hours",
    QuickOption.LAST_WEEK: "Last week",
    QuickOption.LAST_30_DAYS: "Last 30 days",
    QuickOption.LAST_3_MONTHS: "Last 3 months",
    QuickOption.LAST_6_MONTHS: "Last 6 months",
    QuickOption.LAST_YEAR: "Last 12 months",
}


@dataclass(frozen=True)
class DateRange:
    """Range payload handed to consumers on apply and close."""
    start_date: "DateInfo"
    end_date: "DateInfo"


@dataclass(frozen=True)
class DayVisualState:
    """Flags the renderer needs for one day cell."""
    selected: bool = False
    in_range: bool = False
    disabled: bool = False


@dataclass
class PickerConfig:
    """Construction options for a PickerController."""
    locale: str = DEFAULT_LOCALE
    max_date: Optional[datetime] = None
    format: str = DEFAULT_FORMAT
    quick_options: List[QuickOption] = field(
        default_factory=lambda: list(QuickOption)
    )
    on_apply: Optional[Callable[[DateRange], None]] = None
    on_close: Optional[Callable[[Optional[DateRange]], None]] = None

    def __post_init__(self):
        """Accept raw option keys such as "week"."""
        self.quick_options = [QuickOption(option) for option in self.quick_options]
