"""Utility modules for the date range picker."""

from .console_reporter import ConsoleReporter
from .date_manager import DateManager
from .event_dispatcher import EventDispatcher
from .range_serializer import RangeSerializer

__all__ = [
    'ConsoleReporter',
    'DateManager',
    'EventDispatcher',
    'RangeSerializer',
]
