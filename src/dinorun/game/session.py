"""
Game session: everything one run of the game owns, and the playing step.
"""

from typing import Optional
import logging

from dinorun.core.events import Event, EventBus, EventType, Key
from dinorun.core.state import GameMode, StateMachine
from dinorun.game.constants import (
    SCREEN_WIDTH, FLOOR, FRAME_DURATION, RETIRE_MARGIN, SPAWN_THRESHOLD,
    NAVY, GREEN, GROUND_GLYPH,
)
from dinorun.game.field import ObstacleField
from dinorun.game.player import Player
from dinorun.game.rng import RandomProvider
from dinorun.graphics.commands import Frame

logger = logging.getLogger(__name__)

HUD_INSTRUCTIONS = "Press SPACE to jump, P to pause."


class GameSession:
    """
    Owns the player, the obstacle field, score, the fixed-step accumulator
    and the current mode.

    Created once in MENU mode; restart() rebuilds all per-run state.
    """

    def __init__(
        self,
        rng: Optional[RandomProvider] = None,
        state_machine: Optional[StateMachine] = None,
        event_bus: Optional[EventBus] = None,
        spawn_threshold: float = SPAWN_THRESHOLD,
        retire_margin: int = RETIRE_MARGIN,
        debug: bool = False,
    ) -> None:
        self.rng = rng or RandomProvider()
        self.state_machine = state_machine or StateMachine(GameMode.MENU)
        self.event_bus = event_bus
        self.retire_margin = retire_margin
        self.debug = debug

        self.player = Player()
        self.obstacles = ObstacleField(spawn_threshold)
        self.obstacles.reset(self.rng)
        self.score = 0
        self.frame_time = 0.0

    @property
    def mode(self) -> GameMode:
        return self.state_machine.state

    def restart(self) -> bool:
        """Reset all per-run state and enter PLAYING."""
        if not self.state_machine.transition(
            GameMode.PLAYING,
            restarts=self.state_machine.context.restarts + 1,
            ended_by_collision=False,
        ):
            return False

        self.player = Player()
        self.obstacles.reset(self.rng)
        self.score = 0
        self.frame_time = 0.0

        logger.info("Session restarted")
        self._emit(EventType.SESSION_RESTARTED)
        return True

    def pause(self) -> bool:
        return self.state_machine.transition(GameMode.PAUSED)

    def resume(self) -> bool:
        """Continue a paused run with its state intact."""
        if self.mode != GameMode.PAUSED:
            return False
        return self.state_machine.transition(GameMode.PLAYING)

    def end(self) -> bool:
        return self.state_machine.transition(
            GameMode.ENDED, last_score=self.score, ended_by_collision=True
        )

    def accumulate(self, elapsed_ms: float) -> bool:
        """Feed real time into the fixed-step accumulator.

        Runs at most one physics step per call; a long frame is absorbed as
        a single step rather than caught up.

        Returns:
            True if a physics step ran
        """
        self.frame_time += elapsed_ms
        if self.frame_time > FRAME_DURATION:
            self.frame_time = 0.0
            self.player.integrate_physics()
            return True
        return False

    def apply_input(self, key: Key) -> bool:
        """Apply a playing-screen key.

        Returns:
            True if the key asked for a pause
        """
        if key == Key.PAUSE:
            return True
        if key == Key.JUMP and self.player.is_resting:
            self.player.jump()
        return False

    def play(self, key: Key, elapsed_ms: float, frame: Frame) -> None:
        """One PLAYING tick: physics, input, draw, collide, retire, spawn."""
        frame.cls_bg(NAVY)

        self.accumulate(elapsed_ms)
        pause_requested = self.apply_input(key)

        self.render_ground(frame)
        self.player.render(frame)
        self.obstacles.advance_all(self.player.x, frame)

        # Must run against this frame's positions, before anything is retired.
        collided = self.obstacles.any_collision(self.player)
        if collided:
            logger.info(f"Collision at ({self.player.x}, {self.player.y}), score {self.score}")
            self._emit(EventType.COLLISION, x=self.player.x, y=self.player.y)

        retired = self.obstacles.retire_passed(self.player.x, self.retire_margin)
        if retired:
            self.score += retired
            self._emit(EventType.OBSTACLE_RETIRED, count=retired, score=self.score)

        # The final score includes obstacles retired on the losing tick.
        if collided:
            self.end()

        spawned = self.obstacles.maybe_spawn(self.player.x, self.score, self.rng)
        if spawned is not None:
            self._emit(
                EventType.OBSTACLE_SPAWNED,
                x=spawned.x, y=spawned.y, variant=spawned.variant.name,
            )

        self.render_hud(frame)

        # A collision this tick wins over a pause pressed in the same tick.
        if pause_requested and self.mode == GameMode.PLAYING:
            self.pause()

    def render_ground(self, frame: Frame) -> None:
        for column in range(SCREEN_WIDTH):
            frame.set(column, FLOOR + 1, GREEN, NAVY, GROUND_GLYPH)

    def render_hud(self, frame: Frame) -> None:
        frame.print(0, 0, HUD_INSTRUCTIONS)
        frame.print(0, 1, f"Score: {self.score}")
        frame.print(0, 2, f"Obstacles: {len(self.obstacles)}")
        if self.debug:
            front = self.obstacles[0]
            frame.print(
                0, 3,
                f"{self.player.x},{self.player.y} x {front.x},{front.y}",
            )

    def _emit(self, event_type: EventType, **data) -> None:
        if self.event_bus is not None:
            self.event_bus.emit(Event(event_type, data=data, source="session"))
