def test_event_bus_delivers_to_subscribers():
    from picdiskslimmer.core import Event, EventBus, EventType

    bus = EventBus()
    received = []
    bus.subscribe(EventType.SETTINGS_SAVED, received.append)
    # Subscribing twice does not duplicate delivery
    bus.subscribe(EventType.SETTINGS_SAVED, received.append)

    bus.publish(Event(EventType.SETTINGS_SAVED, "payload"))
    bus.publish(Event(EventType.SETTINGS_LOADED, "other"))

    assert [e.data for e in received] == ["payload"]


def test_event_bus_unsubscribe():
    from picdiskslimmer.core import Event, EventBus, EventType

    bus = EventBus()
    received = []
    bus.subscribe(EventType.SETTINGS_LOADED, received.append)
    bus.unsubscribe(EventType.SETTINGS_LOADED, received.append)
    bus.unsubscribe(EventType.SETTINGS_SAVE_FAILED, received.append)

    bus.publish(Event(EventType.SETTINGS_LOADED))
    assert received == []


def test_event_bus_failing_handler_does_not_stop_others(caplog):
    from picdiskslimmer.core import Event, EventBus, EventType

    bus = EventBus()
    received = []

    def broken(event):
        raise RuntimeError("boom")

    bus.subscribe(EventType.SETTINGS_SAVE_FAILED, broken)
    bus.subscribe(EventType.SETTINGS_SAVE_FAILED, received.append)

    bus.publish(Event(EventType.SETTINGS_SAVE_FAILED))

    assert len(received) == 1
    assert "boom" in caplog.text
