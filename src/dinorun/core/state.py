"""
State machine for the DINORUN screen flow.

States:
    MENU: Title screen, waiting for play or quit
    PLAYING: Simulation running
    PAUSED: Simulation frozen, can resume, restart or quit
    ENDED: Player hit an obstacle, final score shown
"""

from enum import Enum, auto
from dataclasses import dataclass
from typing import Callable
import logging

logger = logging.getLogger(__name__)


class GameMode(Enum):
    """Screen/mode states."""
    MENU = auto()
    PLAYING = auto()
    PAUSED = auto()
    ENDED = auto()


@dataclass
class StateContext:
    """Context data carried across transitions."""
    restarts: int = 0
    last_score: int = 0
    ended_by_collision: bool = False


Listener = Callable[[GameMode, GameMode, StateContext], None]


class StateMachine:
    """
    Tracks the current mode and enforces valid transitions.

    Listeners are notified after every successful transition.
    """

    # Valid state transitions
    VALID_TRANSITIONS: list[tuple[GameMode, GameMode]] = [
        # From MENU
        (GameMode.MENU, GameMode.PLAYING),

        # From PLAYING
        (GameMode.PLAYING, GameMode.PAUSED),
        (GameMode.PLAYING, GameMode.ENDED),

        # From PAUSED
        (GameMode.PAUSED, GameMode.PLAYING),  # Resume or restart

        # From ENDED
        (GameMode.ENDED, GameMode.PLAYING),  # Play again
    ]

    def __init__(self, initial_state: GameMode = GameMode.MENU) -> None:
        self._initial_state = initial_state
        self._state = initial_state
        self._context = StateContext()
        self._listeners: list[Listener] = []
        self._valid_transitions = set(self.VALID_TRANSITIONS)
        logger.info(f"StateMachine initialized with state: {initial_state.name}")

    @property
    def state(self) -> GameMode:
        """Get current state."""
        return self._state

    @property
    def context(self) -> StateContext:
        """Get current context."""
        return self._context

    def can_transition(self, to_state: GameMode) -> bool:
        """Check if transition to given state is valid."""
        return (self._state, to_state) in self._valid_transitions

    def transition(self, to_state: GameMode, **context_updates) -> bool:
        """
        Attempt to transition to a new state.

        Args:
            to_state: Target state
            **context_updates: Context fields to overwrite

        Returns:
            True if transition successful, False otherwise
        """
        if not self.can_transition(to_state):
            logger.warning(
                f"Invalid transition: {self._state.name} -> {to_state.name}"
            )
            return False

        old_state = self._state
        self._state = to_state

        for key, value in context_updates.items():
            if hasattr(self._context, key):
                setattr(self._context, key, value)

        logger.info(f"State transition: {old_state.name} -> {to_state.name}")

        for listener in self._listeners:
            try:
                listener(old_state, to_state, self._context)
            except Exception as e:
                logger.error(f"Error in state listener: {e}")

        return True

    def add_listener(self, callback: Listener) -> None:
        """Add a state change listener."""
        self._listeners.append(callback)

    def remove_listener(self, callback: Listener) -> None:
        """Remove a state change listener."""
        if callback in self._listeners:
            self._listeners.remove(callback)

    def reset(self) -> None:
        """Return to the initial state without validating the move."""
        old_state = self._state
        self._state = self._initial_state
        self._context = StateContext()

        for listener in self._listeners:
            try:
                listener(old_state, self._state, self._context)
            except Exception as e:
                logger.error(f"Error in state listener during reset: {e}")

        logger.info(f"StateMachine reset to {self._state.name}")
