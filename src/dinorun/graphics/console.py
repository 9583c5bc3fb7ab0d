"""
Glyph console: a fixed grid of character cells.

Holds glyphs and colors in numpy buffers, replays render commands into them
and draws the result onto a pygame surface for the simulator.
"""

from typing import Iterable
import logging

import numpy as np
import pygame
from numpy.typing import NDArray

from dinorun.game.constants import Color, SCREEN_WIDTH, SCREEN_HEIGHT, BLACK, WHITE
from dinorun.graphics.commands import (
    RenderCommand, ClearScreen, ClearScreenBackground, SetGlyph,
    PrintText, PrintCentered, RequestQuit,
)

logger = logging.getLogger(__name__)


class GlyphConsole:
    """
    Simulates an 80x50 character terminal.

    Cells outside the grid are silently clipped, so entities that have
    scrolled off screen can still be drawn without bounds checks.
    """

    def __init__(self, width: int = SCREEN_WIDTH, height: int = SCREEN_HEIGHT) -> None:
        self._width = width
        self._height = height
        self._glyphs: NDArray[np.str_] = np.full((height, width), " ", dtype="<U1")
        self._fg = np.zeros((height, width, 3), dtype=np.uint8)
        self._bg = np.zeros((height, width, 3), dtype=np.uint8)
        self.quitting = False
        self.cls()

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def in_bounds(self, column: int, row: int) -> bool:
        return 0 <= column < self._width and 0 <= row < self._height

    def cls(self) -> None:
        """Clear to white-on-black spaces."""
        self._glyphs.fill(" ")
        self._fg[:, :] = WHITE
        self._bg[:, :] = BLACK

    def cls_bg(self, color: Color) -> None:
        """Clear and paint every cell's background."""
        self.cls()
        self._bg[:, :] = color

    def set(self, column: int, row: int, fg: Color, bg: Color, glyph: str) -> None:
        if self.in_bounds(column, row):
            self._glyphs[row, column] = glyph[:1]
            self._fg[row, column] = fg
            self._bg[row, column] = bg

    def print(self, column: int, row: int, text: str) -> None:
        """Write white text, keeping each cell's background."""
        for i, char in enumerate(text):
            if self.in_bounds(column + i, row):
                self._glyphs[row, column + i] = char
                self._fg[row, column + i] = WHITE

    def print_centered(self, row: int, text: str) -> None:
        self.print((self._width - len(text)) // 2, row, text)

    def apply(self, commands: Iterable[RenderCommand]) -> bool:
        """
        Replay render commands in order.

        Returns:
            True if any command asked to quit
        """
        for command in commands:
            if isinstance(command, ClearScreen):
                self.cls()
            elif isinstance(command, ClearScreenBackground):
                self.cls_bg(command.color)
            elif isinstance(command, SetGlyph):
                self.set(command.column, command.row, command.fg, command.bg, command.glyph)
            elif isinstance(command, PrintText):
                self.print(command.column, command.row, command.text)
            elif isinstance(command, PrintCentered):
                self.print_centered(command.row, command.text)
            elif isinstance(command, RequestQuit):
                if not self.quitting:
                    logger.info("Quit requested")
                self.quitting = True
        return self.quitting

    def glyph_at(self, column: int, row: int) -> str:
        return str(self._glyphs[row, column])

    def fg_at(self, column: int, row: int) -> Color:
        return tuple(int(c) for c in self._fg[row, column])

    def bg_at(self, column: int, row: int) -> Color:
        return tuple(int(c) for c in self._bg[row, column])

    def row_text(self, row: int) -> str:
        """Characters of one row, trailing blanks stripped."""
        return "".join(self._glyphs[row]).rstrip()

    def render(self, font: pygame.font.Font, cell_w: int, cell_h: int) -> pygame.Surface:
        """
        Render the grid to a pygame surface.

        Args:
            font: Monospace font used for glyphs
            cell_w: Cell width in pixels
            cell_h: Cell height in pixels

        Returns:
            pygame.Surface of size (width * cell_w, height * cell_h)
        """
        # Backgrounds in one blit, scaled up from one pixel per cell
        bg_surface = pygame.surfarray.make_surface(self._bg.swapaxes(0, 1))
        surface = pygame.transform.scale(
            bg_surface, (self._width * cell_w, self._height * cell_h)
        )

        rows, cols = np.nonzero(self._glyphs != " ")
        for row, column in zip(rows, cols):
            glyph = str(self._glyphs[row, column])
            color = tuple(int(c) for c in self._fg[row, column])
            glyph_surface = font.render(glyph, True, color)
            rect = glyph_surface.get_rect(
                center=(column * cell_w + cell_w // 2, row * cell_h + cell_h // 2)
            )
            surface.blit(glyph_surface, rect)

        return surface
