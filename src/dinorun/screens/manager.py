"""Screen controller - dispatches each tick to the screen for the current mode."""

from typing import Dict, List, Optional, Type
import logging

from dinorun.core.events import Event, EventBus, EventType, Key
from dinorun.core.state import GameMode, StateContext
from dinorun.game.session import GameSession
from dinorun.graphics.commands import Frame, RenderCommand
from dinorun.screens.base import BaseScreen, ScreenContext
from dinorun.screens.ended import EndedScreen
from dinorun.screens.menu import MenuScreen
from dinorun.screens.paused import PausedScreen
from dinorun.screens.playing import PlayingScreen

logger = logging.getLogger(__name__)

DEFAULT_SCREENS: List[Type[BaseScreen]] = [
    MenuScreen,
    PlayingScreen,
    PausedScreen,
    EndedScreen,
]


class ScreenController:
    """
    Owns one screen per GameMode and runs the active one each tick.

    tick() is the whole per-frame contract: it takes the frame's key and
    elapsed time, mutates the session, and returns what to draw.
    """

    def __init__(
        self,
        session: GameSession,
        event_bus: Optional[EventBus] = None,
        screens: Optional[List[Type[BaseScreen]]] = None,
    ) -> None:
        self.session = session
        self.event_bus = event_bus
        self._context = ScreenContext(session=session, event_bus=event_bus)
        self._screens: Dict[GameMode, BaseScreen] = {}
        self._pending_key = Key.NONE
        self._last_frame = Frame()
        self._frame_count = 0

        for screen_cls in screens or DEFAULT_SCREENS:
            self.register_screen(screen_cls)

        missing = [m.name for m in GameMode if m not in self._screens]
        if missing:
            raise ValueError(f"No screen registered for: {', '.join(missing)}")

        session.state_machine.add_listener(self._on_state_change)
        self.active_screen.enter()

    def register_screen(self, screen_cls: Type[BaseScreen]) -> None:
        self._screens[screen_cls.mode] = screen_cls(self._context)
        logger.debug(f"Registered screen: {screen_cls.name} for {screen_cls.mode.name}")

    @property
    def active_screen(self) -> BaseScreen:
        return self._screens[self.session.mode]

    @property
    def last_frame(self) -> Frame:
        """Render description produced by the most recent tick."""
        return self._last_frame

    @property
    def frame_count(self) -> int:
        return self._frame_count

    def tick(self, key: Key = Key.NONE, elapsed_ms: float = 0.0) -> List[RenderCommand]:
        """Run one frame and return its render commands."""
        frame = Frame()
        self.active_screen.tick(key, elapsed_ms, frame)
        self._last_frame = frame
        self._frame_count += 1
        return frame.commands

    # Event bus wiring for the simulator loop
    def on_key_event(self, event: Event) -> None:
        """Remember the latest key; it is consumed by the next tick."""
        key = event.data.get("key", Key.NONE)
        if isinstance(key, Key):
            self._pending_key = key

    def on_tick_event(self, event: Event) -> None:
        key, self._pending_key = self._pending_key, Key.NONE
        self.tick(key, event.data.get("delta_ms", 0.0))

    def attach(self, event_bus: EventBus) -> None:
        """Subscribe to key and tick events."""
        event_bus.subscribe(EventType.KEY_PRESSED, self.on_key_event)
        event_bus.subscribe(EventType.TICK, self.on_tick_event)

    def _on_state_change(
        self, old_state: GameMode, new_state: GameMode, context: StateContext
    ) -> None:
        self._screens[old_state].exit()
        self._screens[new_state].enter()

        if self.event_bus is not None:
            self.event_bus.emit(Event(
                EventType.STATE_CHANGED,
                data={"from": old_state, "to": new_state, "score": self.session.score},
                source="screens",
            ))
