from utils import EventDispatcher


class TestEventDispatcher:

    def test_listeners_called_in_order(self):
        events = EventDispatcher()
        calls = []
        events.add_listener("date-range-event", lambda payload: calls.append(("a", payload)))
        events.add_listener("date-range-event", lambda payload: calls.append(("b", payload)))

        events.dispatch("date-range-event", 42)

        assert calls == [("a", 42), ("b", 42)]

    def test_event_without_payload(self):
        events = EventDispatcher()
        calls = []
        events.add_listener("clear-date-range-event", lambda: calls.append("cleared"))
        events.dispatch("clear-date-range-event")
        assert calls == ["cleared"]

    def test_dispatch_without_listeners(self):
        EventDispatcher().dispatch("date-range-event", object())

    def test_remove_listener(self):
        events = EventDispatcher()
        calls = []
        events.add_listener("date-range-event", calls.append)
        events.remove_listener("date-range-event", calls.append)
        events.remove_listener("unknown", calls.append)

        events.dispatch("date-range-event", 1)

        assert calls == []
        assert events.listener_count("date-range-event") == 0
