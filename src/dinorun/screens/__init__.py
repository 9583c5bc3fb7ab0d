"""Screens for each game mode and the controller that switches between them."""

from dinorun.screens.base import BaseScreen, ScreenContext
from dinorun.screens.manager import ScreenController

__all__ = ["BaseScreen", "ScreenContext", "ScreenController"]
