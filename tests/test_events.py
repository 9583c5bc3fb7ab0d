import asyncio
import logging

from dinorun.core.events import Event, EventBus, EventType, Key, key_event, tick_event


def test_subscribe_and_emit():
    bus = EventBus()
    received = []
    bus.subscribe(EventType.KEY_PRESSED, received.append)

    bus.emit(key_event(Key.JUMP))
    bus.emit(tick_event(16.0, 1))

    assert [e.data["key"] for e in received] == [Key.JUMP]


def test_unsubscribe():
    bus = EventBus()
    received = []
    unsubscribe = bus.subscribe(EventType.TICK, received.append)

    unsubscribe()
    bus.emit(tick_event(16.0, 1))

    assert received == []


def test_global_handler_sees_everything():
    bus = EventBus()
    received = []
    bus.subscribe_all(lambda e: received.append(e.type))

    bus.emit(key_event(Key.PLAY))
    bus.emit(Event(EventType.COLLISION))

    assert received == [EventType.KEY_PRESSED, EventType.COLLISION]


def test_handler_error_is_logged_not_raised(caplog):
    bus = EventBus()
    after = []

    def broken(event):
        raise ValueError("bad handler")

    bus.subscribe(EventType.TICK, broken)
    bus.subscribe(EventType.TICK, after.append)

    with caplog.at_level(logging.ERROR):
        bus.emit(tick_event(1.0, 0))

    assert len(after) == 1
    assert "bad handler" in caplog.text


def test_sync_emit_skips_async_handlers():
    bus = EventBus()
    received = []

    async def handler(event):
        received.append(event)

    bus.subscribe(EventType.TICK, handler)
    bus.emit(tick_event(1.0, 0))

    assert received == []


def test_emit_async_runs_both_kinds():
    bus = EventBus()
    received = []

    async def async_handler(event):
        received.append("async")

    bus.subscribe(EventType.TICK, async_handler)
    bus.subscribe(EventType.TICK, lambda e: received.append("sync"))

    asyncio.run(bus.emit_async(tick_event(1.0, 0)))

    assert sorted(received) == ["async", "sync"]


def test_queue_is_processed_in_order():
    bus = EventBus()
    received = []
    bus.subscribe(EventType.KEY_PRESSED, lambda e: received.append(e.data["key"]))

    bus.queue_event(key_event(Key.PLAY))
    bus.queue_event(key_event(Key.JUMP))
    assert received == []

    asyncio.run(bus.process_queue())

    assert received == [Key.PLAY, Key.JUMP]


def test_history_is_bounded_and_filterable():
    bus = EventBus(history_limit=5)

    for frame in range(8):
        bus.emit(tick_event(16.0, frame))
    bus.emit(key_event(Key.QUIT))

    ticks = bus.get_history(EventType.TICK, limit=10)
    assert [e.data["frame"] for e in ticks] == [4, 5, 6, 7]
    assert len(bus.get_history(limit=10)) == 5
