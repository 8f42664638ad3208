# core/picker_controller.py
"""Date range picker controller - panes, selection and apply lifecycle."""

from datetime import datetime
from typing import Callable, List, Optional, Tuple

from core.calendar_view import CalendarView
from core.date_info import DateInfo
from core.range_selection import RangeSelectionEngine
from core.types import (
    CLEAR_DATE_RANGE_EVENT,
    DATE_RANGE_EVENT,
    DEFAULT_LABEL,
    DateRange,
    DayVisualState,
    PickerConfig,
    QuickOption,
)
from logger.logger import Logger
from utils import DateManager, EventDispatcher, RangeSerializer

LEFT_PANE = "left"
RIGHT_PANE = "right"


class PickerController:
    """Orchestrates two month panes and the range selection engine."""

    def __init__(
            self,
            config: Optional[PickerConfig] = None,
            clock: Optional[Callable[[], datetime]] = None,
            events: Optional[EventDispatcher] = None
    ):
        """
        Initialize picker components.

        Args:
            config: Construction options; defaults apply when omitted
            clock: Returns the current local datetime; defaults to datetime.now
            events: Dispatcher for apply and clear notifications
        """
        self.config = config or PickerConfig()
        self.clock = clock or datetime.now
        self.events = events or EventDispatcher()

        self.locale = self.config.locale
        self.format = self.config.format
        self.quick_options: List[QuickOption] = list(self.config.quick_options)
        self.on_apply = self.config.on_apply
        self.on_close = self.config.on_close
        self.max_date = DateInfo.from_date(
            self.config.max_date or self.clock(), self.locale
        )

        self.engine = RangeSelectionEngine(
            max_date=self.max_date, locale=self.locale, clock=self.clock
        )

        # Applied range as shown on the toggle button
        self.label = DEFAULT_LABEL
        self.date_range_token = ""

        self.calendar_left: Optional[CalendarView] = None
        self.calendar_right: Optional[CalendarView] = None
        self.initialize_calendars()

    # ------------------------------------------------------------------
    # Panes
    # ------------------------------------------------------------------
    def initialize_calendars(self):
        """Put the right pane on today's month and the left pane one before."""
        today = self.clock()
        self.calendar_right = CalendarView(today.year, today.month, self.locale)
        prev_year, prev_month = DateManager.get_previous_month(
            today.year, today.month
        )
        self.calendar_left = CalendarView(prev_year, prev_month, self.locale)

    def get_calendar(self, pane: str) -> CalendarView:
        if pane == LEFT_PANE:
            return self.calendar_left
        if pane == RIGHT_PANE:
            return self.calendar_right
        raise ValueError(f"Unknown pane: {pane}")

    def move_to_previous_month(self):
        self.calendar_left.go_to_previous_month()
        self.calendar_right.go_to_previous_month()

    def move_to_next_month(self):
        self.calendar_left.go_to_next_month()
        self.calendar_right.go_to_next_month()

    @property
    def can_move_to_next_month(self) -> bool:
        """False once the max date falls inside the right pane's month."""
        last_day = self.calendar_right.month.last_day.end_of_day()
        return self.max_date.timestamp > last_day.timestamp

    # ------------------------------------------------------------------
    # Selection
    # ------------------------------------------------------------------
    @property
    def start_date(self) -> Optional[DateInfo]:
        return self.engine.start_date

    @property
    def end_date(self) -> Optional[DateInfo]:
        return self.engine.end_date

    @property
    def is_complete(self) -> bool:
        """Whether apply and clear are enabled."""
        return self.engine.is_complete

    @property
    def current_range(self) -> Optional[DateRange]:
        if not self.is_complete:
            return None
        return DateRange(start_date=self.start_date, end_date=self.end_date)

    def is_disabled(self, day: DateInfo) -> bool:
        return day.timestamp > self.max_date.timestamp

    def pick(self, day: Optional[DateInfo]) -> bool:
        """
        Handle a click on a day cell.

        Args:
            day: Clicked day; None for filler cells

        Returns:
            True if the selection changed
        """
        if day is None or self.is_disabled(day):
            return False
        return self.engine.pick(day)

    def pick_day(self, pane: str, day_of_month: int) -> bool:
        """Pick a day of the month shown in ``pane``."""
        day = self.get_calendar(pane).month.get_day(day_of_month)
        return self.pick(day)

    def select_quick_option(self, option: QuickOption):
        """Replace the selection with a quick option range."""
        option = QuickOption(option)
        if option not in self.quick_options:
            raise ValueError(f"Quick option not enabled: {option.value}")
        self.engine.apply_quick_option(option)

    def active_quick_option(self) -> Optional[QuickOption]:
        """Quick option to highlight for the current selection."""
        return self.engine.active_quick_option(self.quick_options)

    def compute_day_visual_state(self, day: Optional[DateInfo]) -> DayVisualState:
        """
        Flags for one day cell.

        Args:
            day: Day in a pane grid; None for filler cells

        Returns:
            DayVisualState with selected, in_range and disabled flags
        """
        if day is None:
            return DayVisualState()

        start, end = self.start_date, self.end_date
        selected = any(
            edge is not None and day.equals_calendar_date(edge)
            for edge in (start, end)
        )
        in_range = (
            start is not None
            and end is not None
            and start.timestamp < day.timestamp < end.timestamp
        )
        return DayVisualState(
            selected=selected,
            in_range=in_range,
            disabled=self.is_disabled(day),
        )

    def pane_states(self, pane: str) -> List[Tuple[Optional[DateInfo], DayVisualState]]:
        """Every grid cell of a pane with its visual state."""
        return [
            (day, self.compute_day_visual_state(day))
            for day in self.get_calendar(pane).month_grid()
        ]

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def format_label(self, start_date: DateInfo, end_date: DateInfo) -> str:
        return f"{start_date.format(self.format)} - {end_date.format(self.format)}"

    def apply(self) -> Optional[DateRange]:
        """
        Commit the selection.

        The emitted end date is moved to 23:59:59.999 of its day. Listeners
        of ``date-range-event`` are notified before the ``on_apply``
        callback.

        Returns:
            Emitted DateRange, or None when the selection is incomplete
        """
        if not self.is_complete:
            return None

        self.label = self.format_label(self.start_date, self.end_date)
        self.date_range_token = RangeSerializer.encode(
            self.start_date.timestamp, self.end_date.timestamp
        )

        range_data = DateRange(
            start_date=self.start_date,
            end_date=self.end_date.end_of_day(),
        )
        Logger.info(f"Applied date range: {self.label}")

        self.events.dispatch(DATE_RANGE_EVENT, range_data)
        if self.on_apply:
            self.on_apply(range_data)

        return range_data

    def clear_selection(self) -> bool:
        """
        Footer clear: drop the unapplied selection.

        Returns:
            False when there was no complete selection to clear
        """
        if not self.is_complete:
            return False
        self.engine.clear()
        return True

    def clear(self):
        """Reset the applied range and both panes, then notify listeners."""
        self.engine.clear()
        self.label = DEFAULT_LABEL
        self.date_range_token = ""
        Logger.info("Cleared date range")

        self.events.dispatch(CLEAR_DATE_RANGE_EVENT)
        self.initialize_calendars()

    def open(self, token: Optional[str] = None) -> bool:
        """
        Prefill the selection when the picker opens.

        Args:
            token: Encoded range held by the consumer; defaults to the
                token of the last apply

        Returns:
            True if a range was restored
        """
        token = self.date_range_token if token is None else token
        if not token:
            return False
        return self.restore_from_token(token)

    def close(self):
        """Report the current range to ``on_close`` and drop the selection."""
        if self.on_close:
            self.on_close(self.current_range)
        self.engine.clear()

    def restore_from_token(self, token: str) -> bool:
        """
        Re-hydrate the selection from a "start-end" timestamp token.

        Malformed tokens leave the selection untouched.

        Args:
            token: Encoded range

        Returns:
            True if the selection was replaced
        """
        timestamps = RangeSerializer.decode(token)
        if timestamps is None:
            Logger.warning(f"Ignoring malformed date range token: {token!r}")
            return False

        try:
            start_date, end_date = (
                DateInfo.from_timestamp(timestamp, self.locale)
                for timestamp in timestamps
            )
        except (OverflowError, OSError, ValueError) as e:
            Logger.warning(f"Ignoring out of range date range token {token!r}: {e}")
            return False

        self.engine.restore(start_date, end_date)
        return True
