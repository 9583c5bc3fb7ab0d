"""Game over screen."""

from dinorun.core.events import Key
from dinorun.core.state import GameMode
from dinorun.graphics.commands import Frame
from dinorun.screens.base import MessageScreen


class EndedScreen(MessageScreen):
    mode = GameMode.ENDED
    name = "ended"

    LINES = [
        (5, "You are dead"),
        (6, "You earned {score} points"),
        (8, "(ENTER) Play Again"),
        (9, "(Q) Quit Game"),
    ]

    def on_key(self, key: Key, frame: Frame) -> None:
        if key in (Key.PLAY, Key.RESTART):
            self.session.restart()
        elif key == Key.QUIT:
            self.request_quit(frame)
