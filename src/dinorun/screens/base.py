"""Base class for the DINORUN screens."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional
import logging

from dinorun.core.events import Event, EventBus, EventType, Key
from dinorun.core.state import GameMode
from dinorun.game.session import GameSession
from dinorun.graphics.commands import Frame

logger = logging.getLogger(__name__)


@dataclass
class ScreenContext:
    """Shared context passed to screens."""

    session: GameSession
    event_bus: Optional[EventBus] = None


class BaseScreen(ABC):
    """Abstract base class for all screens.

    A screen owns the behaviour of exactly one GameMode. The controller
    calls tick() once per frame while the session is in that mode.

    Lifecycle:
        1. enter() - mode switched to this screen
        2. tick(key, elapsed_ms, frame) - once per frame while active
        3. exit() - mode switched away
    """

    # Screen metadata (override in subclasses)
    mode: GameMode = GameMode.MENU
    name: str = "base"

    def __init__(self, context: ScreenContext) -> None:
        self.context = context
        self._active = False

    @property
    def session(self) -> GameSession:
        return self.context.session

    @property
    def is_active(self) -> bool:
        return self._active

    def enter(self) -> None:
        self._active = True
        logger.debug(f"Entering screen: {self.name}")
        self.on_enter()

    def exit(self) -> None:
        logger.debug(f"Exiting screen: {self.name}")
        self.on_exit()
        self._active = False

    def tick(self, key: Key, elapsed_ms: float, frame: Frame) -> None:
        """Run one frame of this screen."""
        self.on_tick(key, elapsed_ms, frame)

    @abstractmethod
    def on_tick(self, key: Key, elapsed_ms: float, frame: Frame) -> None:
        """Per-frame behaviour: react to the key and describe the frame."""

    def on_enter(self) -> None:
        pass

    def on_exit(self) -> None:
        pass

    def request_quit(self, frame: Frame) -> None:
        """Ask the outer loop to exit."""
        frame.quit()
        if self.context.event_bus is not None:
            self.context.event_bus.emit(
                Event(EventType.QUIT_REQUESTED, source=f"screen_{self.name}")
            )


class MessageScreen(BaseScreen):
    """Static screen of centered lines that reacts to a few keys."""

    # (row, text) pairs; text may use {score}
    LINES: list[tuple[int, str]] = []

    def on_tick(self, key: Key, elapsed_ms: float, frame: Frame) -> None:
        frame.cls()
        for row, text in self.LINES:
            frame.print_centered(row, text.format(score=self.session.score))
        self.on_key(key, frame)

    @abstractmethod
    def on_key(self, key: Key, frame: Frame) -> None:
        """Handle the tick's key, if any."""
