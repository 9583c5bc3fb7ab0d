"""Obstacle entity: placement, drift toward the player and hit testing."""

from dataclasses import dataclass
from enum import Enum, auto
import logging

from dinorun.game.constants import (
    Color, SCREEN_WIDTH, FLOOR, PLAYER_COLUMN, OBSTACLE_BAND,
    MIN_OBSTACLE_VELOCITY, VELOCITY_PER_POINT,
    RED, ORANGE, BLACK, STATIC_GLYPH, MOVING_GLYPH,
)
from dinorun.game.player import Player
from dinorun.game.rng import RandomProvider
from dinorun.graphics.commands import Frame

logger = logging.getLogger(__name__)


class ObstacleVariant(Enum):
    """Visual kind of an obstacle, fixed at creation."""
    STATIC = auto()      # Sits on the floor, does not move
    MOVING = auto()      # Hovers in the band above the floor, slides left


VARIANT_STYLE: dict[ObstacleVariant, tuple[Color, str]] = {
    ObstacleVariant.STATIC: (RED, STATIC_GLYPH),
    ObstacleVariant.MOVING: (ORANGE, MOVING_GLYPH),
}


@dataclass
class Obstacle:
    """A single obstacle in world coordinates."""
    x: int
    y: int = FLOOR
    velocity: float = 0.0

    @property
    def variant(self) -> ObstacleVariant:
        if self.velocity > 0:
            return ObstacleVariant.MOVING
        return ObstacleVariant.STATIC

    @property
    def color(self) -> Color:
        return VARIANT_STYLE[self.variant][0]

    @property
    def glyph(self) -> str:
        return VARIANT_STYLE[self.variant][1]

    @classmethod
    def spawn(
        cls,
        base_x: int,
        current_score: int,
        rng: RandomProvider,
        spread: bool = True,
    ) -> "Obstacle":
        """Create an obstacle at or ahead of base_x.

        The velocity is drawn from [-1.5, score * 0.02), so at low scores
        almost every draw is negative and clamps to a static floor obstacle.
        As the score climbs, moving obstacles get both likelier and faster.

        Args:
            base_x: World x the placement offset is added to
            current_score: Score used to scale the velocity range
            rng: Shared random source
            spread: Add a random offset of up to half a screen to base_x
        """
        offset = rng.range_int(0, SCREEN_WIDTH // 2) if spread else 0
        y = rng.range_int(FLOOR - OBSTACLE_BAND, FLOOR)
        velocity = rng.range_float(
            MIN_OBSTACLE_VELOCITY, current_score * VELOCITY_PER_POINT
        )

        if velocity <= 0.0:
            velocity = 0.0
            y = FLOOR

        obstacle = cls(x=base_x + offset, y=y, velocity=velocity)
        logger.debug(
            f"Spawned {obstacle.variant.name} obstacle at "
            f"({obstacle.x}, {obstacle.y}) v={obstacle.velocity:.2f}"
        )
        return obstacle

    def screen_x(self, player_x: int) -> int:
        """Column relative to the player's world x."""
        return self.x - player_x

    def advance(self, player_x: int, frame: Frame) -> None:
        """Slide left by the truncated velocity and draw."""
        self.x -= int(self.velocity)
        frame.set(self.screen_x(player_x), self.y, self.color, BLACK, self.glyph)

    def collides_with(self, player: Player) -> bool:
        # Exact cell match; fast obstacles can step over the player unseen.
        return player.x == self.x - PLAYER_COLUMN and player.y == self.y
