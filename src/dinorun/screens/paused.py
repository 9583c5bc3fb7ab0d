"""Pause screen: resume keeps the run, restart throws it away."""

from dinorun.core.events import Key
from dinorun.core.state import GameMode
from dinorun.graphics.commands import Frame
from dinorun.screens.base import MessageScreen


class PausedScreen(MessageScreen):
    mode = GameMode.PAUSED
    name = "paused"

    LINES = [
        (5, "Paused"),
        (6, "Score so far: {score}"),
        (8, "(P) Resume"),
        (9, "(R) Restart"),
        (10, "(Q) Quit Game"),
    ]

    def on_key(self, key: Key, frame: Frame) -> None:
        if key in (Key.PLAY, Key.PAUSE):
            self.session.resume()
        elif key == Key.RESTART:
            self.session.restart()
        elif key == Key.QUIT:
            self.request_quit(frame)
