"""
Render commands issued by the simulation.

A tick never touches a display directly. It records what it wants drawn into
a Frame, and whoever owns the display replays the commands (see
GlyphConsole.apply).
"""

from dataclasses import dataclass, field
from typing import List, Union

from dinorun.game.constants import Color


@dataclass(frozen=True)
class ClearScreen:
    """Blank every cell to the default colors."""


@dataclass(frozen=True)
class ClearScreenBackground:
    """Blank every cell and paint its background."""
    color: Color


@dataclass(frozen=True)
class SetGlyph:
    """Draw one glyph into one cell."""
    column: int
    row: int
    fg: Color
    bg: Color
    glyph: str


@dataclass(frozen=True)
class PrintText:
    """Write text left-to-right starting at a cell."""
    column: int
    row: int
    text: str


@dataclass(frozen=True)
class PrintCentered:
    """Write text horizontally centered on a row."""
    row: int
    text: str


@dataclass(frozen=True)
class RequestQuit:
    """Ask the outer loop to stop."""


RenderCommand = Union[
    ClearScreen,
    ClearScreenBackground,
    SetGlyph,
    PrintText,
    PrintCentered,
    RequestQuit,
]


@dataclass
class Frame:
    """Ordered render description for one tick."""

    commands: List[RenderCommand] = field(default_factory=list)

    def cls(self) -> None:
        self.commands.append(ClearScreen())

    def cls_bg(self, color: Color) -> None:
        self.commands.append(ClearScreenBackground(color))

    def set(self, column: int, row: int, fg: Color, bg: Color, glyph: str) -> None:
        self.commands.append(SetGlyph(column, row, fg, bg, glyph))

    def print(self, column: int, row: int, text: str) -> None:
        self.commands.append(PrintText(column, row, text))

    def print_centered(self, row: int, text: str) -> None:
        self.commands.append(PrintCentered(row, text))

    def quit(self) -> None:
        self.commands.append(RequestQuit())

    @property
    def quit_requested(self) -> bool:
        return any(isinstance(c, RequestQuit) for c in self.commands)

    def glyphs(self) -> List[SetGlyph]:
        """All glyph draws in issue order."""
        return [c for c in self.commands if isinstance(c, SetGlyph)]

    def texts(self) -> List[str]:
        """All printed strings in issue order."""
        return [
            c.text for c in self.commands
            if isinstance(c, (PrintText, PrintCentered))
        ]
