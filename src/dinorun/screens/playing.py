"""The running game."""

from dinorun.core.events import Key
from dinorun.core.state import GameMode
from dinorun.graphics.commands import Frame
from dinorun.screens.base import BaseScreen


class PlayingScreen(BaseScreen):
    mode = GameMode.PLAYING
    name = "playing"

    def on_tick(self, key: Key, elapsed_ms: float, frame: Frame) -> None:
        self.session.play(key, elapsed_ms, frame)
