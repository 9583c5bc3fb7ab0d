import asyncio

import pygame

from dinorun.config.settings import SimulatorSettings
from dinorun.core.events import EventType, Key, tick_event
from dinorun.core.state import GameMode
from dinorun.simulator.window import SimulatorWindow


def keydown(key):
    return pygame.event.Event(pygame.KEYDOWN, key=key)


def make_window(controller, event_bus):
    return SimulatorWindow(
        controller=controller,
        event_bus=event_bus,
        settings=SimulatorSettings(cell_width=10, cell_height=12),
    )


def test_window_size_follows_grid(controller, event_bus):
    window = make_window(controller, event_bus)

    assert window.size == (800, 600)


def test_keys_become_key_events(controller, event_bus):
    window = make_window(controller, event_bus)

    window._handle_keydown(keydown(pygame.K_RETURN))
    window._handle_keydown(keydown(pygame.K_x))
    assert event_bus.get_history(EventType.KEY_PRESSED) == []

    asyncio.run(event_bus.process_queue())

    keys = [e.data["key"] for e in event_bus.get_history(EventType.KEY_PRESSED)]
    assert keys == [Key.PLAY]


def test_key_then_tick_drives_controller(controller, event_bus):
    window = make_window(controller, event_bus)

    window._handle_keydown(keydown(pygame.K_RETURN))
    asyncio.run(event_bus.process_queue())
    asyncio.run(event_bus.emit_async(tick_event(16.0, 0)))

    assert controller.session.mode == GameMode.PLAYING
    assert not window.console.apply(controller.last_frame.commands)
    assert window.console.row_text(1) == "Score: 0"


def test_f1_toggles_debug_overlay(controller, event_bus):
    window = make_window(controller, event_bus)

    window._handle_keydown(keydown(pygame.K_F1))
    asyncio.run(event_bus.process_queue())

    assert window._show_debug
    assert event_bus.get_history(EventType.KEY_PRESSED) == []
