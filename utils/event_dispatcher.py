# utils/event_dispatcher.py
"""Named event notifications for picker consumers."""

from collections import defaultdict
from typing import Any, Callable, DefaultDict, List

Listener = Callable[..., None]


class EventDispatcher:
    """Registers listeners per event name and notifies them in order."""

    def __init__(self):
        self._listeners: DefaultDict[str, List[Listener]] = defaultdict(list)

    def add_listener(self, event_name: str, listener: Listener):
        """
        Subscribe to an event.

        Args:
            event_name: Event to listen for, e.g. "date-range-event"
            listener: Called with the event payload, or with no arguments
                for events that carry none
        """
        self._listeners[event_name].append(listener)

    def remove_listener(self, event_name: str, listener: Listener):
        """Unsubscribe; unknown listeners are ignored."""
        if listener in self._listeners.get(event_name, []):
            self._listeners[event_name].remove(listener)

    def listener_count(self, event_name: str) -> int:
        return len(self._listeners.get(event_name, []))

    def dispatch(self, event_name: str, *payload: Any):
        """
        Notify every listener of an event.

        Args:
            event_name: Event being fired
            payload: Positional arguments passed to each listener
        """
        for listener in list(self._listeners.get(event_name, [])):
            listener(*payload)
