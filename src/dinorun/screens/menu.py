"""Title screen."""

from dinorun.core.events import Key
from dinorun.core.state import GameMode
from dinorun.graphics.commands import Frame
from dinorun.screens.base import MessageScreen


class MenuScreen(MessageScreen):
    mode = GameMode.MENU
    name = "menu"

    LINES = [
        (5, "Welcome to Dinorun"),
        (8, "(ENTER) Play Game"),
        (9, "(Q) Quit Game"),
    ]

    def on_key(self, key: Key, frame: Frame) -> None:
        if key == Key.PLAY:
            self.session.restart()
        elif key == Key.QUIT:
            self.request_quit(frame)
