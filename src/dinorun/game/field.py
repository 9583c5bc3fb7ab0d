"""Obstacle field: the ordered set of live obstacles and their lifecycle."""

from typing import Iterator, List, Optional
import logging

from dinorun.game.constants import SCREEN_WIDTH, SPAWN_THRESHOLD
from dinorun.game.obstacle import Obstacle
from dinorun.game.player import Player
from dinorun.game.rng import RandomProvider
from dinorun.graphics.commands import Frame

logger = logging.getLogger(__name__)


class ObstacleField:
    """
    Obstacles in creation order.

    Obstacles go spawned -> active -> (collided | retired). A new one is
    spawned well before the last one can be retired, so the field is never
    empty while a game is running.
    """

    def __init__(self, spawn_threshold: float = SPAWN_THRESHOLD) -> None:
        self.spawn_threshold = spawn_threshold
        self._obstacles: List[Obstacle] = []

    def __len__(self) -> int:
        return len(self._obstacles)

    def __iter__(self) -> Iterator[Obstacle]:
        return iter(self._obstacles)

    def __getitem__(self, index: int) -> Obstacle:
        return self._obstacles[index]

    @property
    def spawn_distance(self) -> float:
        """Lead distance below which a new obstacle is spawned."""
        return SCREEN_WIDTH * self.spawn_threshold

    @property
    def rightmost(self) -> Obstacle:
        return max(self._obstacles, key=lambda o: o.x)

    def reset(self, rng: RandomProvider) -> None:
        """Start over with one obstacle exactly one screen ahead."""
        self._obstacles = [Obstacle.spawn(SCREEN_WIDTH, 0, rng, spread=False)]

    def add(self, obstacle: Obstacle) -> None:
        self._obstacles.append(obstacle)

    def advance_all(self, player_x: int, frame: Frame) -> None:
        for obstacle in self._obstacles:
            obstacle.advance(player_x, frame)

    def retire_passed(self, player_x: int, margin: int) -> int:
        """Drop obstacles at or behind player_x - margin.

        Returns:
            Number of obstacles removed (one point each)
        """
        cutoff = player_x - margin
        kept = [o for o in self._obstacles if o.x > cutoff]
        retired = len(self._obstacles) - len(kept)
        self._obstacles = kept

        if retired:
            logger.debug(f"Retired {retired} obstacle(s) behind x={cutoff}")
        return retired

    def maybe_spawn(
        self,
        player_x: int,
        current_score: int,
        rng: RandomProvider,
    ) -> Optional[Obstacle]:
        """Spawn one obstacle a screen ahead if the lead has run short."""
        if self.rightmost.x - player_x >= self.spawn_distance:
            return None

        obstacle = Obstacle.spawn(player_x + SCREEN_WIDTH, current_score, rng)
        self._obstacles.append(obstacle)
        return obstacle

    def any_collision(self, player: Player) -> bool:
        return any(o.collides_with(player) for o in self._obstacles)
