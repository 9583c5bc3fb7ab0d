"""Player entity: gravity, jumping and its single-cell sprite."""

from dataclasses import dataclass

from dinorun.game.constants import (
    FLOOR, PLAYER_COLUMN, GRAVITY, MAX_FALL_VELOCITY, JUMP_VELOCITY,
    YELLOW, BLACK, PLAYER_GLYPH,
)
from dinorun.graphics.commands import Frame


@dataclass
class Player:
    """The runner.

    x is world x and only ever grows; y is a grid row and is never below
    the floor (never greater than FLOOR).
    """
    x: int = PLAYER_COLUMN
    y: int = FLOOR
    velocity: float = 0.0

    @property
    def is_resting(self) -> bool:
        """True when standing on the floor."""
        return self.y == FLOOR

    def integrate_physics(self) -> None:
        """Advance one fixed physics step."""
        if self.velocity < MAX_FALL_VELOCITY and self.y < FLOOR:
            self.velocity += GRAVITY
        self.y += int(self.velocity)
        self.x += 1
        if self.y > FLOOR:
            self.y = FLOOR
            self.velocity = 0.0

    def jump(self) -> None:
        # No floor check here; the playing screen only calls this when resting.
        self.velocity = JUMP_VELOCITY

    def render(self, frame: Frame) -> None:
        frame.set(PLAYER_COLUMN, self.y, YELLOW, BLACK, PLAYER_GLYPH)
