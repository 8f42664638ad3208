"""Core date model and range selection components."""

from .types import (
    DateRange,
    DayVisualState,
    OutOfRangeError,
    PickerConfig,
    QuickOption,
    SelectionState,
)
from .date_info import DateInfo
from .month_info import MonthInfo
from .calendar_view import CalendarView
from .quick_ranges import QuickRangeCalculator
from .range_selection import RangeSelectionEngine
from .picker_controller import PickerController

__all__ = [
    'DateInfo',
    'MonthInfo',
    'CalendarView',
    'QuickRangeCalculator',
    'RangeSelectionEngine',
    'PickerController',
    'DateRange',
    'DayVisualState',
    'OutOfRangeError',
    'PickerConfig',
    'QuickOption',
    'SelectionState',
]
